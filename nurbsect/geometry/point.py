from numpy import array, float64
from numpy.linalg import norm

from nurbsect.config import Settings
from nurbsect.geometry.geom import Geometry


class Point(Geometry):
    """
    Location in 3-D space. Given only (x, y), the point lies at z = 0.

    :param array_like xyz: Two or three coordinates.

    :raise ValueError: For any other number of coordinates.
    """

    def __init__(self, xyz):
        super(Point, self).__init__('point')
        self._xyz = None
        self.set_xyz(xyz)

    def __str__(self):
        return 'Point = ({0}, {1}, {2})'.format(*self._xyz)

    def __repr__(self):
        return 'Point(({0}, {1}, {2}))'.format(*self._xyz)

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            dtype = float64
        return array(self._xyz, dtype=dtype)

    def __iter__(self):
        for elm in self._xyz:
            yield elm

    def __len__(self):
        return len(self._xyz)

    def __getitem__(self, item):
        return self._xyz[item]

    def __eq__(self, other):
        return self.is_equal(other, 0.)

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = None

    def __add__(self, other):
        return self._xyz + array(other, dtype=float64)

    def __sub__(self, other):
        return self._xyz - array(other, dtype=float64)

    @property
    def xyz(self):
        return self._xyz

    @property
    def x(self):
        return self._xyz[0]

    @property
    def y(self):
        return self._xyz[1]

    @property
    def z(self):
        return self._xyz[2]

    def set_xyz(self, xyz):
        xyz = array(xyz, dtype=float64).ravel()
        if xyz.size == 2:
            xyz = array([xyz[0], xyz[1], 0.], dtype=float64)
        if xyz.size != 3:
            raise ValueError('A point requires 2 or 3 coordinates.')
        self._xyz = xyz

    def dist2pnt(self, p):
        return norm(array(p, dtype=float64) - self._xyz)

    def is_equal(self, p, tol=None):
        """
        Whether *p* lies within *tol* of this point (default *gtol*).

        :param p: Other point.
        :type p: :class:`.Point` or array_like

        :rtype: bool
        """
        if tol is None:
            tol = Settings.gtol
        return self.dist2pnt(p) <= tol
