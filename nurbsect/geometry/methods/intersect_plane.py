from __future__ import division

from numpy import cross, dot
from numpy.linalg import norm

from nurbsect.config import Settings
from nurbsect.geometry.line import Line
from nurbsect.geometry.methods.intersect_line import intersect_line_circle
from nurbsect.geometry.point import Point
from nurbsect.geometry.vector import Vector


def intersect_plane_plane(plane1, plane2, eps=None):
    """
    Find the intersection of two planes.

    :param plane1: Plane 1 to intersect.
    :type plane1: :class:`.Plane`
    :param plane2: Plane 2 to intersect.
    :type plane2: :class:`.Plane`
    :param float eps: Planes are parallel if the squared length of the cross
        product of their unit normals is less than *eps*. Default *eps*.

    :return: Intersection line of the two planes with a unit direction
        vector. Returns *None* if planes are parallel.
    :rtype: :class:`.Line` or None
    """
    if eps is None:
        eps = Settings.eps
    n1 = plane1.vn.ijk
    n2 = plane2.vn.ijk
    p1 = plane1.p0.xyz
    p2 = plane2.p0.xyz

    # Cross product to find line vector.
    v = cross(n1, n2)
    if dot(v, v) < eps:
        return None
    v /= norm(v)

    # Find point along intersection vector using intersection of 3 planes.
    d1 = dot(n1, p1)
    d2 = dot(n2, p2)
    n2v = cross(n2, v)
    p0 = Point((d1 * n2v + d2 * cross(v, n1)) / dot(n1, n2v))
    return Line(p0, Vector(v, p0))


def intersect_plane_circle(plane, circle, eps=None):
    """
    Find the intersection points of a plane and a circle.

    :param plane: Plane.
    :type plane: :class:`.Plane`
    :param circle: Circle.
    :type circle: :class:`.Circle`
    :param float eps: Near-zero guard. Default *eps*.

    :return: List of 0, 1 (tangent) or 2 intersection points. Empty if the
        plane is parallel to the plane of the circle.
    :rtype: list
    """
    line = intersect_plane_plane(plane, circle.plane, eps)
    if line is None:
        return []
    return [pi for _, pi in intersect_line_circle(circle, line, eps)]
