from numpy import cross, float64, hstack
from numpy.linalg import norm

from nurbsect.config import Settings


def homogenize_array1d(cp, w):
    """
    Build homogeneous control points (x*w, y*w, z*w, w).
    """
    _w = w.reshape(-1, 1)
    return hstack((cp * _w, _w)).astype(float64)


def dehomogenize_array1d(cpw):
    """
    Split homogeneous control points into control points and weights.

    :return: Control points and weights (cp, w).
    :rtype: tuple
    """
    w = cpw[:, -1]
    cp = cpw[:, :-1] / w.reshape(-1, 1)
    return cp, w


def are_points_equal(p0, p1, tol=None):
    if tol is None:
        tol = Settings.gtol
    return norm(p0 - p1) <= tol


def local_to_global_param(a, b, *args):
    """
    Convert parameter(s) from the local domain [0, 1] to [a, b]. Values
    outside [0, 1] are clamped.
    """
    if args[0] is None:
        return None
    global_u = [a + min(max(ui, 0.), 1.) * (b - a) for ui in args]
    if len(global_u) == 1:
        return global_u[0]
    return global_u


def global_to_local_param(a, b, *args):
    """
    Convert parameter(s) from [a, b] to the local domain [0, 1]. Values
    outside [a, b] are clamped.
    """
    if args[0] is None:
        return None
    local_u = [min(max((ui - a) / (b - a), 0.), 1.) for ui in args]
    if len(local_u) == 1:
        return local_u[0]
    return local_u


def is_curve_flat(n, cp, tol=None):
    """
    Check flatness of a curve by measuring the distance of each control point
    to the chord joining the first and last control points.

    :param int n: Number of control points - 1.
    :param ndarray cp: Dehomogeneous control points.
    :param float tol: Tolerance. Default *ftol*.

    :return: *True* if the curve is flat, *False* if not.
    :rtype: bool
    """
    if tol is None:
        tol = Settings.ftol

    dline = norm(cp[n] - cp[0])
    if dline <= 0.:
        # Closed control polygon. Use the distance between points.
        for i in range(1, n):
            if norm(cp[0] - cp[i]) > tol:
                return False
        return True
    for i in range(1, n):
        d = norm(cross(cp[i] - cp[0], cp[i] - cp[n])) / dline
        if d > tol:
            return False
    return True
