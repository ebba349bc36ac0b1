from numpy import ndarray


def is_array_like(x):
    """
    Check if the input is a tuple, list, or NumPy array.
    """
    return isinstance(x, (tuple, list, ndarray))


def is_array_type(rtype):
    """
    Check if the requested return type is a NumPy array.
    """
    return rtype.lower() in ['ndarray', 'array', 'arr', 'np', 'a']


def is_local_domain(domain):
    """
    Check if the requested parameter domain is the local domain [0, 1].
    """
    return domain.lower() in ['local', 'l']
