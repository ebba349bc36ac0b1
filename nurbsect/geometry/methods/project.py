from __future__ import division

from numpy import array, dot, float64
from numpy.linalg import norm


def project_point_to_line(point, line):
    """
    Project a point to a line.

    :param point: Point to project.
    :type point: :class:`.Point` or array_like
    :param line: Line to project point to.
    :type line: :class:`.Line`

    :return: Line parameter, projected point and distance (u, pnt, d).
    :rtype: tuple
    """
    pxyz = array(point, dtype=float64)
    u = dot(pxyz - line.p0.xyz, line.v.ijk)
    pnt = line.eval(u, rtype='ndarray')
    return u, pnt, norm(pnt - pxyz)


def project_point_to_plane(point, plane):
    """
    Project a point to a plane.

    :param point: Point to project.
    :type point: :class:`.Point` or array_like
    :param plane: Plane to project point to.
    :type plane: :class:`.Plane`

    :return: Parameters on plane, projected point and distance
        ((u, v), pnt, d).
    :rtype: tuple
    """
    vu = plane.vu.ijk
    vv = plane.vv.ijk
    p0 = plane.p0.xyz
    pxyz = array(point, dtype=float64)
    u = dot(pxyz - p0, vu)
    v = dot(pxyz - p0, vv)
    pnt = p0 + u * vu + v * vv
    return (u, v), pnt, norm(pnt - pxyz)
