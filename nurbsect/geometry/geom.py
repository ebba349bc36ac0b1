from copy import deepcopy


class Geometry(object):
    """
    Base class for geometry.

    :param str etype: Type of geometry.

    :var str etype: Type of geometry.
    """

    def __init__(self, etype):
        self._etype = etype

    @property
    def etype(self):
        return self._etype

    def copy(self):
        """
        Return a deepcopy of the geometry instance.

        :return: Copy of geometry instance.
        """
        return deepcopy(self)
