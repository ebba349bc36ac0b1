from __future__ import division

from numpy import array, cross, dot, float64
from numpy.linalg import norm


def point_to_line(p0, v, pi):
    """
    Calculate the distance from a point to an infinite line.

    :param array_like p0: Origin of line.
    :param array_like v: Direction vector of line.
    :param array_like pi: Point to calculate distance to.

    :return: Distance from point to line. If the direction vector has zero
        length the distance to the origin is returned.
    :rtype: float
    """
    p0 = array(p0, dtype=float64)
    v = array(v, dtype=float64)
    pi = array(pi, dtype=float64)
    denom = norm(v)
    if denom == 0.:
        return norm(pi - p0)
    return norm(cross(pi - p0, v)) / denom


def point_to_plane(p0, vn, pi, signed=False):
    """
    Calculate the distance from a point to a plane.

    :param array_like p0: Origin of plane.
    :param array_like vn: Normal vector of plane.
    :param array_like pi: Point to calculate distance to.
    :param bool signed: Option to returned signed distance (*True*), or the
        absolute value (*False*).

    :return: Distance from point to plane.
    :rtype: float
    """
    vn = array(vn, dtype=float64)
    d = dot(vn / norm(vn), array(pi, dtype=float64) - array(p0, dtype=float64))
    if signed:
        return d
    return abs(d)
