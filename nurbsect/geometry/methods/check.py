from numpy import all as np_all
from numpy import array, diff, float64, isfinite

from nurbsect.geometry.methods.compare_floats import CompareFloats as CmpFlt


class InvalidCurveError(ValueError):
    """
    Raised when a curve definition is invalid (degree, knot vector, control
    points, or weights).
    """
    pass


def check_knot_vector(n, p, uk):
    """
    Check that a knot vector is valid for a clamped curve: non-decreasing,
    *n* + *p* + 2 values, and *p* + 1 repeated values at each end.

    :param int n: Number of control points - 1.
    :param int p: Degree.
    :param ndarray uk: Knot vector.

    :return: *True* if valid, *False* if not.
    :rtype: bool
    """
    uk = array(uk, dtype=float64)
    if uk.ndim != 1 or uk.size != n + p + 2:
        return False
    if not np_all(isfinite(uk)):
        return False
    if (diff(uk) < 0.).any():
        return False
    a, b = uk[0], uk[-1]
    for i in range(1, p + 1):
        if not CmpFlt.eq(uk[i], a) or not CmpFlt.eq(uk[-1 - i], b):
            return False
    # End knots repeated exactly p + 1 times and a non-empty domain.
    return CmpFlt.lt(uk[p], uk[p + 1]) and CmpFlt.lt(uk[n], uk[n + 1])


def check_curve_data(cp, uk, p, w):
    """
    Validate the data of a NURBS curve.

    :param ndarray cp: Control points (n + 1 x 3).
    :param ndarray uk: Knot vector.
    :param int p: Degree.
    :param ndarray w: Weights.

    :raise InvalidCurveError: If the data do not define a valid curve.
    """
    if p < 1:
        raise InvalidCurveError('Degree must be at least 1 (got '
                                '{0}).'.format(p))
    if cp.ndim != 2 or cp.shape[0] < 2:
        raise InvalidCurveError('At least two control points are required.')
    if cp.shape[1] != 3:
        raise InvalidCurveError('Control points must have 2 or 3 '
                                'coordinates.')
    if not np_all(isfinite(cp)):
        raise InvalidCurveError('Control points must be finite.')
    n = cp.shape[0] - 1
    if p > n:
        raise InvalidCurveError('Degree {0} requires at least {1} control '
                                'points.'.format(p, p + 1))
    if uk.size != n + p + 2:
        raise InvalidCurveError('Number of control points + degree + 1 must '
                                'equal the number of knots ({0} != '
                                '{1}).'.format(n + p + 2, uk.size))
    if not check_knot_vector(n, p, uk):
        raise InvalidCurveError('Invalid knot vector. It should be '
                                'non-decreasing and begin and end with '
                                'degree + 1 repeated values.')
    if w.shape != (n + 1,):
        raise InvalidCurveError('Number of weights must equal the number of '
                                'control points.')
    if (w <= 0.).any() or not np_all(isfinite(w)):
        raise InvalidCurveError('Weights must be positive.')
