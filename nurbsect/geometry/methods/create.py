from __future__ import division

from numpy import array, cross, dot, float64

from nurbsect.geometry.circle import Circle
from nurbsect.geometry.line import Line
from nurbsect.geometry.plane import Plane
from nurbsect.geometry.point import Point
from nurbsect.geometry.vector import Vector


def vector_by_points(p0, p1, p2=None):
    """
    Vector rooted at *p0*.

    With two points this is *p1* - *p0*. With three points it is the normal
    (p1 - p0) x (p2 - p0).

    :rtype: :class:`.Vector`
    """
    if not isinstance(p0, Point):
        p0 = Point(p0)
    if not isinstance(p1, Point):
        p1 = Point(p1)
    if p2 is not None:
        if not isinstance(p2, Point):
            p2 = Point(p2)
        v10 = p1.xyz - p0.xyz
        v20 = p2.xyz - p0.xyz
        return Vector(cross(v10, v20), p0)
    return Vector(p1.xyz - p0.xyz, p0)


def line_by_points(p0, p1):
    """
    Line with origin *p0* and direction *p1* - *p0*.

    :rtype: :class:`.Line`
    """
    if not isinstance(p0, Point):
        p0 = Point(p0)
    return Line(p0, vector_by_points(p0, p1))


def plane_by_points(p0, p1, p2):
    """
    Plane through *p0*, *p1* and *p2*.

    The normal is (p1 - p0) x (p2 - p0) and the u-axis points from *p0*
    towards *p1*.

    :return: The plane, or *None* for collinear points.
    :rtype: :class:`.Plane` or None
    """
    if not isinstance(p0, Point):
        p0 = Point(p0)
    v10 = Point(p1).xyz - p0.xyz
    v20 = Point(p2).xyz - p0.xyz
    vn = cross(v10, v20)
    if dot(vn, vn) == 0.:
        return None
    vv = cross(vn, v10)
    vu = cross(vv, vn)
    return Plane(p0, Vector(vn, p0), Vector(vu, p0), Vector(vv, p0))


def plane_by_normal(p0, vn):
    """
    Plane through *p0* normal to *vn*.

    The u-axis is the first of x, y, z crossed with *vn* that gives a
    non-zero vector. The v-axis completes a right-handed frame.

    :param p0: Origin.
    :type p0: :class:`.Point` or array_like
    :param vn: Normal.
    :type vn: :class:`.Vector` or array_like

    :return: The plane, or *None* for a zero normal.
    :rtype: :class:`.Plane` or None
    """
    if not isinstance(p0, Point):
        p0 = Point(p0)
    if not isinstance(vn, Vector):
        vn = Vector(array(vn, dtype=float64), p0)
    if vn.is_zero:
        return None

    for axis in ([1., 0., 0.], [0., 1., 0.], [0., 0., 1.]):
        vu = cross(axis, vn.vxyz)
        if dot(vu, vu) > 0.:
            vv = cross(vn.vxyz, vu)
            return Plane(p0, vn, Vector(vu, p0), Vector(vv, p0))
    return None


def circle_by_normal(center, vn, radius):
    """
    Circle around *center* lying in the plane normal to *vn*. Its frame is
    the one :func:`plane_by_normal` builds.

    :return: The circle, or *None* for a zero normal or a radius that is
        not positive.
    :rtype: :class:`.Circle` or None
    """
    if radius <= 0.:
        return None
    plane = plane_by_normal(center, vn)
    if plane is None:
        return None
    return Circle(plane, radius)
