from __future__ import division

from numpy import array, float64, zeros

from nurbsect.geometry.methods.compare_floats import CompareFloats as CmpFlt
from nurbsect.geometry.methods.evaluate import find_span_mult
from nurbsect.geometry.methods.modify import curve_knot_ins


def split_bezier_curve(cpw, n, u):
    """
    de Casteljau subdivision of a Bezier polygon at local parameter *u* in
    [0, 1].

    :return: Weighted control points of the left and right halves
        (qw1, qw2).
    :rtype: tuple
    """
    # de Casteljau, keeping the first point of each column.
    qw1 = zeros((n + 1, cpw.shape[1]), dtype=float64)
    qw2 = array(cpw, dtype=float64)
    qw1[0] = qw2[0]
    for k in range(1, n + 1):
        for i in range(0, n - k + 1):
            qw2[i] = (1. - u) * qw2[i] + u * qw2[i + 1]
        qw1[k] = qw2[0]
    return qw1, qw2


def split_nurbs_curve(n, p, uk, cpw, u):
    """
    Cut a curve at an interior parameter *u*.

    The knot *u* is raised to multiplicity *p*. The control point shared by
    both halves is the curve point at *u*.

    :return: (uk1, qw1, uk2, qw2)
    :rtype: tuple

    :raise ValueError: If *u* is within *ptol* of an end of the domain or
        outside it.
    """
    if CmpFlt.le(u, uk[p]) or CmpFlt.ge(u, uk[n + 1]):
        raise ValueError('Split parameter {0} is not inside the curve domain '
                         '[{1}, {2}].'.format(u, uk[p], uk[n + 1]))

    # Insert knot until its multiplicity equals the degree.
    k, s = find_span_mult(n, p, u, uk)
    if s >= p:
        uq, qw = array(uk, dtype=float64), array(cpw, dtype=float64)
    else:
        uq, qw = curve_knot_ins(n, p, uk, cpw, u, p - s)

    qw1 = array(qw[:k - s + 1], dtype=float64)
    qw2 = array(qw[k - s:], dtype=float64)
    m = n + p + 1
    uk1 = zeros((k + 1) + (p - s + 1), dtype=float64)
    uk2 = zeros((m - k) + p + 1, dtype=float64)
    uk1[:-1] = uq[:k + (p - s) + 1]
    uk1[-1] = u
    uk2[1:] = uq[k - s + 1:]
    uk2[0] = u
    return uk1, qw1, uk2, qw2


def extract_nurbs_curve(n, p, uk, cpw, u0, u1):
    """
    Piece of the curve over [u0, u1]. The bounds may come in either order.
    An end that sits on the domain boundary is not cut.
    """
    if u0 > u1:
        u0, u1 = u1, u0
    uq, qw = array(uk, dtype=float64), array(cpw, dtype=float64)
    # Split at u0 keeping the right part.
    if CmpFlt.gt(u0, uq[p]):
        _, _, uq, qw = split_nurbs_curve(n, p, uq, qw, u0)
        n = qw.shape[0] - 1
    # Split at u1 keeping the left part.
    if CmpFlt.lt(u1, uq[n + 1]):
        uq, qw, _, _ = split_nurbs_curve(n, p, uq, qw, u1)
    return uq, qw
