from __future__ import division

from numpy import diff
from numpy.linalg import norm

from nurbsect.config import Settings
from nurbsect.geometry.methods.divide import (extract_nurbs_curve,
                                              split_bezier_curve)
from nurbsect.geometry.methods.geom_utils import dehomogenize_array1d
from nurbsect.geometry.methods.modify import decompose_curve


def cp_lengths(cp):
    """
    Length of the control polygon of *cp* and of the chord joining its end
    points (lp, lc).
    """
    lp = sum(norm(diff(cp, axis=0), axis=1))
    lc = norm(cp[-1] - cp[0])
    return lp, lc


def arc_length_bezier(cpw, n, tol=None):
    """
    Arc length of a Bezier piece of degree *n*.

    Pieces are halved until the polygon length and the chord length differ
    by *tol* (default *gtol*) or less. Each accepted piece contributes the
    weighted mean (2 * lc + (n - 1) * lp) / (n + 1).

    :rtype: float
    """
    if tol is None:
        tol = Settings.gtol

    length = 0.
    stack = [cpw]
    while stack:
        qw = stack.pop()
        cp, _ = dehomogenize_array1d(qw)
        lp, lc = cp_lengths(cp)
        if abs(lp - lc) <= tol:
            length += (2. * lc + (n - 1.) * lp) / (n + 1.)
        else:
            qw1, qw2 = split_bezier_curve(qw, n, 0.5)
            stack.append(qw1)
            stack.append(qw2)
    return length


def arc_length_nurbs(n, p, uk, cpw, u0, u1, tol=None):
    """
    Arc length of the curve between *u0* and *u1*, summed over the Bezier
    pieces of the extracted segment. Equal parameters give 0.

    :rtype: float
    """
    if u0 == u1:
        return 0.
    uk, cpw = extract_nurbs_curve(n, p, uk, cpw, u0, u1)
    n = cpw.shape[0] - 1
    nb, qw, _ = decompose_curve(n, p, uk, cpw)
    return sum(arc_length_bezier(qw[i], p, tol) for i in range(nb))
