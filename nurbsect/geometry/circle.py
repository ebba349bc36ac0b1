from __future__ import division

from numpy import arctan2, array, cos, dot, float64, pi, sin
from numpy.linalg import norm

from nurbsect.geometry.geom import Geometry
from nurbsect.geometry.methods.misc import is_array_type
from nurbsect.geometry.point import Point


class Circle(Geometry):
    """
    Circle.

    A circle lying in a plane, centred at the plane origin. The circle is
    parametrized by angle from the plane x-axis, 0 <= t <= 2*pi.

    :param plane: Plane of the circle.
    :type plane: :class:`.Plane`
    :param float radius: Radius (radius > 0).

    :var plane: Plane of the circle.
    :type plane: :class:`.Plane`
    :var center: Centre of the circle.
    :type center: :class:`.Point`
    :var float radius: Radius.
    """

    def __init__(self, plane, radius):
        super(Circle, self).__init__('circle')
        self._plane = plane
        self._r = float(radius)

    def __call__(self, t, rtype='Point'):
        return self.eval(t, rtype)

    @property
    def plane(self):
        return self._plane

    @property
    def center(self):
        return self._plane.p0

    @property
    def radius(self):
        return self._r

    @property
    def a(self):
        return 0.

    @property
    def b(self):
        return 2. * pi

    @property
    def length(self):
        return 2. * pi * self._r

    def eval(self, t, rtype='Point'):
        """
        Evaluate point on circle.

        :param float t: Angle in radians.
        :param str rtype: Option to return a NumPy array or :class:`.Point`
            instance (rtype = 'ndarray' or 'Point').

        :return: Point on circle.
        :rtype: :class:`.Point` or ndarray
        """
        pnt = self._plane.eval(self._r * cos(t), self._r * sin(t),
                               rtype='ndarray')
        if is_array_type(rtype):
            return pnt
        return Point(pnt)

    def closest_point(self, pnt, rtype='Point'):
        """
        Find the point on the circle closest to the given point. A point on
        the circle axis is mapped to t = 0.

        :param pnt: Point.
        :type pnt: :class:`.Point` or array_like
        :param str rtype: Option to return a NumPy array or :class:`.Point`
            instance (rtype = 'ndarray' or 'Point').

        :return: Circle point.
        :rtype: :class:`.Point` or ndarray
        """
        (u, v), _ = self._plane.closest_point(pnt, rtype='ndarray')
        if norm([u, v]) == 0.:
            return self.eval(0., rtype)
        return self.eval(self.param_at_point(pnt), rtype)

    def param_at_point(self, pnt):
        """
        Angle of the projection of a point into the circle plane.

        :param pnt: Point.
        :type pnt: :class:`.Point` or array_like

        :return: Angle in [0, 2*pi).
        :rtype: float
        """
        d = array(pnt, dtype=float64) - self.center.xyz
        u = dot(d, self._plane.vu.ijk)
        v = dot(d, self._plane.vv.ijk)
        t = float64(arctan2(v, u))
        if t < 0.:
            t += 2. * pi
        return t
