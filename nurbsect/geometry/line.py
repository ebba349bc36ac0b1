from numpy import float64

from nurbsect.geometry.geom import Geometry
from nurbsect.geometry.methods.distance import point_to_line
from nurbsect.geometry.methods.misc import is_array_type
from nurbsect.geometry.methods.project import project_point_to_line
from nurbsect.geometry.point import Point
from nurbsect.geometry.vector import Vector


class Line(Geometry):
    """
    Unbounded straight line through *p0* along *v*.

    The parameter is arc length: u = 0 at *p0* and u = *length* at the tip
    of *v*. A line built from a zero vector is degenerate and never
    intersects anything.

    :param p0: Origin.
    :type p0: :class:`.Point`
    :param v: Direction.
    :type v: :class:`.Vector`

    :var p1: Tip of the direction vector.
    :type p1: :class:`.Point`
    :var float length: Magnitude of *v*.
    """

    def __init__(self, p0, v):
        super(Line, self).__init__('line')
        self._p0 = p0
        self._v = v

    def __call__(self, u, rtype='Point'):
        return self.eval(u, rtype)

    @property
    def p0(self):
        return self._p0

    @property
    def p1(self):
        return self.eval(self.length)

    @property
    def v(self):
        return self._v

    @property
    def length(self):
        return self._v.mag

    @property
    def is_degenerate(self):
        return self._v.is_zero

    def eval(self, u, rtype='Point'):
        """
        Point at distance *u* from the origin.

        :rtype: :class:`.Point` or ndarray
        """
        pnt = self._p0.xyz + u * self._v.ijk
        if is_array_type(rtype):
            return pnt
        return Point(pnt)

    def deriv(self, u, rtype='Vector'):
        # Unit direction everywhere.
        if is_array_type(rtype):
            return self._v.ijk
        return Vector(self._v.ijk, self.eval(u))

    def closest_point(self, pnt, rtype='Point'):
        """
        Foot of the perpendicular from *pnt*.

        :param pnt: Point.
        :type pnt: :class:`.Point` or array_like
        :param str rtype: 'Point' or 'ndarray'.

        :return: (u, point)
        :rtype: tuple
        """
        u, pi, _ = project_point_to_line(pnt, self)
        if is_array_type(rtype):
            return u, pi
        return u, Point(pi)

    def dist2pnt(self, pnt):
        return float64(point_to_line(self._p0.xyz, self._v.vxyz, pnt))
