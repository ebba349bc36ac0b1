from __future__ import division

from numpy import array, float64, zeros

from nurbsect.geometry.methods.compare_floats import CompareFloats as CmpFlt
from nurbsect.geometry.methods.evaluate import find_span_mult


def curve_knot_ins(n, p, uk, cpw, u, r):
    """
    Insert the knot *u* into the curve *r* times. The shape does not change.

    *r* is cut back so the multiplicity of *u* ends at *p* or less. When no
    insertion is left, copies of the input come back.

    :return: (uq, qw)
    :rtype: tuple

    *Reference:* The NURBS Book, A5.1.
    """
    k, s = find_span_mult(n, p, u, uk)
    if r + s > p:
        r = p - s
    if r <= 0:
        return array(uk, dtype=float64), array(cpw, dtype=float64)

    # New knot vector.
    nq = n + r
    uq = zeros(nq + p + 2, dtype=float64)
    uq[:k + 1] = uk[:k + 1]
    uq[k + 1:k + r + 1] = u
    uq[k + r + 1:] = uk[k + 1:]

    # Unchanged control points.
    qw = zeros((nq + 1, cpw.shape[1]), dtype=float64)
    qw[:k - p + 1] = cpw[:k - p + 1]
    qw[k - s + r:] = cpw[k - s:]
    rw = array(cpw[k - p:k - s + 1], dtype=float64)

    # Insert the knot r times.
    t = k - p
    for j in range(1, r + 1):
        t = k - p + j
        for i in range(0, p - j - s + 1):
            alpha = (u - uk[t + i]) / (uk[i + k + 1] - uk[t + i])
            rw[i] = alpha * rw[i + 1] + (1. - alpha) * rw[i]
        qw[t] = rw[0]
        qw[k + r - j - s] = rw[p - j - s]
    for i in range(t + 1, k - s):
        qw[i] = rw[i - t]
    return uq, qw


def decompose_curve(n, p, uk, cpw):
    """
    Bezier pieces of the curve, one per non-empty knot span.

    Knots are raised to full multiplicity in a single sweep. Piece *j* has
    the weighted control points qw[j] and covers [ab[j, 0], ab[j, 1]].

    :return: (nb, qw, ab)
    :rtype: tuple

    *Reference:* The NURBS Book, A5.6.
    """
    m = n + p + 1
    a = p
    b = p + 1
    nb = 0
    qw = zeros((m + 1, p + 1, cpw.shape[1]), dtype=float64)
    ab = zeros((m + 1, 2), dtype=float64)
    qw[0] = cpw[:p + 1]
    while b < m:
        i = b
        ab[nb, 0] = uk[a]
        while b < m and CmpFlt.eq(uk[b + 1], uk[b]):
            b += 1
        ab[nb, 1] = uk[b]
        mult = b - i + 1
        if mult < p:
            numer = uk[b] - uk[a]
            alphas = zeros(p + 1, dtype=float64)
            for j in range(p, mult, -1):
                alphas[j - mult - 1] = numer / (uk[a + j] - uk[a])
            for j in range(1, p - mult + 1):
                save = p - mult - j
                s = mult + j
                for k in range(p, s - 1, -1):
                    alpha = alphas[k - s]
                    qw[nb, k] = alpha * qw[nb, k] + (1. - alpha) * qw[nb,
                                                                       k - 1]
                if b < m:
                    # Control point shared with the next segment.
                    qw[nb + 1, save] = qw[nb, p]
        nb += 1
        if b < m:
            for i in range(p - mult, p + 1):
                qw[nb, i] = cpw[b - p + i]
            a = b
            b += 1
    return nb, qw[:nb], ab[:nb]


def reverse_nurbs_curve(n, p, uk, cpw):
    """
    Knots and weighted control points of the same curve run backwards. The
    knot spacing is mirrored inside [uk[p], uk[n + 1]].
    """
    a, b = uk[p], uk[n + 1]
    uq = (a + b) - array(uk, dtype=float64)[::-1]
    uq[:p + 1] = a
    uq[n + 1:] = b
    qw = array(cpw[::-1], dtype=float64)
    return uq, qw
