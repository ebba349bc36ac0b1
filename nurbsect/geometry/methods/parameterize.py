from __future__ import division

from numpy import array, diff, float64, linspace, zeros
from numpy.linalg import norm


def uniform(pnts, a=0., b=1.):
    """
    Evenly spaced parameters on [a, b], one per point.
    """
    return linspace(a, b, len(pnts), dtype=float64)


def _accumulate(d, a, b):
    # Map cumulative segment lengths onto [a, b].
    n = d.size + 1
    u = zeros(n, dtype=float64)
    u[0] = a
    u[-1] = b
    dtotal = d.sum()
    if dtotal <= 0.:
        return linspace(a, b, n, dtype=float64)
    for i in range(1, n - 1):
        u[i] = u[i - 1] + (b - a) * d[i - 1] / dtotal
    return u


def chord_length(pnts, a=0., b=1.):
    """
    Parameters on [a, b] spaced in proportion to the distance between
    consecutive points. Falls back to even spacing when all points coincide.

    :param array_like pnts: Points in order.

    :rtype: ndarray
    """
    pnts = array(pnts, dtype=float64)
    return _accumulate(norm(diff(pnts, axis=0), axis=1), a, b)


def centripetal(pnts, a=0., b=1.):
    """
    Like :func:`chord_length` but with the square root of each distance.
    """
    pnts = array(pnts, dtype=float64)
    return _accumulate(norm(diff(pnts, axis=0), axis=1) ** 0.5, a, b)
