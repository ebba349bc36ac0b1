from __future__ import division

from numpy import dot, sqrt
from numpy.linalg import norm

from nurbsect.config import Settings
from nurbsect.geometry.methods.geom_utils import are_points_equal
from nurbsect.geometry.point import Point


def intersect_line_line(line1, line2, eps=None):
    """
    Find the closest points of two infinite lines.

    :param line1: Line 1.
    :type line1: :class:`.Line`
    :param line2: Line 2.
    :type line2: :class:`.Line`
    :param float eps: Lines are parallel if 1 - cos^2 of the angle between
        them is less than *eps*. Default *eps*.

    :return: Parameters and points on each line (u1, u2, p1, p2). The lines
        intersect if *p1* and *p2* coincide. Returns *None* if the lines are
        parallel or degenerate.
    :rtype: tuple or None
    """
    if eps is None:
        eps = Settings.eps
    if line1.is_degenerate or line2.is_degenerate:
        return None
    d1 = line1.v.ijk
    d2 = line2.v.ijk
    w = line1.p0.xyz - line2.p0.xyz
    b = dot(d1, d2)
    d = dot(d1, w)
    e = dot(d2, w)
    denom = 1. - b * b
    if abs(denom) < eps:
        return None
    u1 = (b * e - d) / denom
    u2 = (e - b * d) / denom
    p1 = line1.eval(u1, rtype='ndarray')
    p2 = line2.eval(u2, rtype='ndarray')
    return u1, u2, p1, p2


def intersect_line_plane(line, plane, eps=None):
    """
    Intersect a line and a plane.

    :param line: Line.
    :type line: :class:`.Line`
    :param plane: Plane.
    :type plane: :class:`.Plane`
    :param float eps: The line is parallel to the plane if the absolute dot
        product of the unit directions is less than *eps*. Default *eps*.

    :return: Line parameter and intersection point (u, pnt). Returns *None*
        if the line is parallel to or lies in the plane.
    :rtype: tuple or None
    """
    if eps is None:
        eps = Settings.eps
    if line.is_degenerate:
        return None
    pnorm = plane.vn.ijk
    vline = line.v.ijk
    denom = dot(pnorm, vline)
    if abs(denom) < eps:
        return None
    u = dot(pnorm, plane.p0.xyz - line.p0.xyz) / denom
    return u, line.eval(u, rtype='ndarray')


def intersect_polyline_plane(pnts, plane, eps=None, tol=None):
    """
    Find the points where a polyline crosses a plane.

    :param array_like pnts: Ordered polyline vertices.
    :param plane: Plane.
    :type plane: :class:`.Plane`
    :param float eps: Segments parallel to the plane within *eps* are
        skipped. Default *eps*.
    :param float tol: Consecutive points closer than *tol* are reported once.
        Default *gtol*.

    :return: List of intersection points in polyline order.
    :rtype: list
    """
    if eps is None:
        eps = Settings.eps
    if tol is None:
        tol = Settings.gtol
    pnorm = plane.vn.ijk
    p0 = plane.p0.xyz
    verts = [Point(p).xyz for p in pnts]
    results = []
    for pi, pj in zip(verts[:-1], verts[1:]):
        v = pj - pi
        length = norm(v)
        if length == 0.:
            continue
        denom = dot(pnorm, v)
        if abs(denom) / length < eps:
            continue
        s = dot(pnorm, p0 - pi) / denom
        if s < 0. or s > 1.:
            continue
        pnt = pi + s * v
        if results and are_points_equal(results[-1], pnt, tol):
            continue
        results.append(pnt)
    return results


def intersect_line_circle(circle, line, eps=None, tol=None):
    """
    Find the intersection points of a line and a circle.

    :param circle: Circle.
    :type circle: :class:`.Circle`
    :param line: Line.
    :type line: :class:`.Line`
    :param float eps: Near-zero guard for the discriminant and for the line
        direction relative to the circle plane. Default *eps*.
    :param float tol: Distance tolerance used when the line is not in the
        plane of the circle. Default *gtol*.

    :return: List of 0, 1 (tangent) or 2 line parameters and points
        [(u, pnt), ...].
    :rtype: list
    """
    if eps is None:
        eps = Settings.eps
    if tol is None:
        tol = Settings.gtol
    if line.is_degenerate:
        return []
    center = circle.center.xyz
    r = circle.radius
    vn = circle.plane.vn.ijk
    vline = line.v.ijk
    p0 = line.p0.xyz

    # A line crossing the circle plane meets the circle at most once.
    denom = dot(vn, vline)
    if abs(denom) >= eps:
        u = dot(vn, center - p0) / denom
        pnt = line.eval(u, rtype='ndarray')
        if abs(norm(pnt - center) - r) <= tol:
            return [(u, pnt)]
        return []
    if abs(dot(vn, p0 - center)) > tol:
        return []

    # Line in the circle plane.
    w = p0 - center
    b = 2. * dot(vline, w)
    c = dot(w, w) - r * r
    det = b * b - 4. * c
    if abs(det) < eps:
        u = -0.5 * b
        return [(u, line.eval(u, rtype='ndarray'))]
    if det < 0.:
        return []
    sdet = sqrt(det)
    u1 = 0.5 * (-b - sdet)
    u2 = 0.5 * (-b + sdet)
    return [(u1, line.eval(u1, rtype='ndarray')),
            (u2, line.eval(u2, rtype='ndarray'))]
