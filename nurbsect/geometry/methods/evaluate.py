from __future__ import division

from numpy import array, dot, float64, int32, zeros

from nurbsect.geometry.methods.compare_floats import CompareFloats as CmpFlt


def bin_coeff(n, k):
    """
    Binomial coefficient *n* choose *k* as a float. Zero when *k* is outside
    [0, n].
    """
    if k < 0 or k > n:
        return 0.
    if k == 0 or k == n:
        return 1.
    k = min(k, n - k)
    c = 1.
    for i in range(k):
        c *= (n - i) / (i + 1)
    return c


def find_span(n, p, u, uk):
    """
    Index *i* of the knot span uk[i] <= u < uk[i + 1] holding *u*.

    Parameters at or past either end of the domain return the first (*p*)
    or last (*n*) non-empty span.

    :param int n: Index of the last control point.
    :param int p: Degree.
    :param float u: Parameter.
    :param ndarray uk: Knot vector.

    :rtype: int

    *Reference:* The NURBS Book, A2.1.
    """
    if CmpFlt.ge(u, uk[n + 1]):
        return n
    if CmpFlt.le(u, uk[p]):
        return p
    low = p
    high = n + 1
    mid = (low + high) // 2
    while CmpFlt.lt(u, uk[mid]) or CmpFlt.ge(u, uk[mid + 1]):
        if CmpFlt.lt(u, uk[mid]):
            high = mid
        else:
            low = mid
        mid = (low + high) // 2
    return mid


def find_span_mult(n, p, u, uk):
    """
    Span index of *u* together with how many times *u* repeats in *uk*.

    :return: (k, s)
    :rtype: tuple
    """
    k = find_span(n, p, u, uk)
    if CmpFlt.gt(u, uk[k]) and CmpFlt.lt(u, uk[k + 1]):
        return k, 0
    if CmpFlt.gt(u, uk[k]) and CmpFlt.le(u, uk[k + 1]):
        first, last, step = k + 1, n + p + 1, 1
    else:
        first, last, step = k, 0, -1
    s = 0
    for i in range(first, last + step, step):
        if not CmpFlt.eq(uk[i], u):
            break
        s += 1
    return k, s


def find_mult_knots(n, p, uk):
    """
    Collapse the knot vector into its distinct values.

    :return: Count of distinct values, their multiplicities and the values
        (nu, um, uq).
    :rtype: tuple
    """
    m = n + p + 1
    uq = zeros(m + 1, dtype=float64)
    um = zeros(m + 1, dtype=int32)
    i = 0
    nu = 0
    while i <= m:
        uq[nu] = uk[i]
        mult = 0
        while i <= m and CmpFlt.eq(uk[i], uq[nu]):
            i += 1
            mult += 1
        um[nu] = mult
        nu += 1
    return nu, um[:nu], uq[:nu]


def basis_funs(i, u, p, uk):
    """
    The *p* + 1 B-spline basis functions that can be non-zero in span *i*,
    N[i - p, p](u) through N[i, p](u).

    *Reference:* The NURBS Book, A2.2.
    """
    u = CmpFlt.check_bounds(u, uk[0], uk[-1])
    bf = zeros(p + 1, dtype=float64)
    left = zeros(p + 1, dtype=float64)
    right = zeros(p + 1, dtype=float64)
    bf[0] = 1.
    for j in range(1, p + 1):
        left[j] = u - uk[i + 1 - j]
        right[j] = uk[i + j] - u
        saved = 0.
        for r in range(0, j):
            temp = bf[r] / (right[r + 1] + left[j - r])
            bf[r] = saved + right[r + 1] * temp
            saved = left[j - r] * temp
        bf[j] = saved
    return bf


def ders_basis_funs(i, u, p, n, uk):
    """
    Basis functions of span *i* and their derivatives up to order *n*.

    :param int i: Span index.
    :param float u: Parameter.
    :param int p: Degree.
    :param int n: Highest derivative order (n <= p).
    :param ndarray uk: Knot vector.

    :return: Array of shape (n + 1, p + 1). Row *k* holds the *k* -th
        derivatives.
    :rtype: ndarray

    *Reference:* The NURBS Book, A2.3.
    """
    u = CmpFlt.check_bounds(u, uk[0], uk[-1])
    ndu = zeros((p + 1, p + 1), dtype=float64)
    left = zeros(p + 1, dtype=float64)
    right = zeros(p + 1, dtype=float64)
    ndu[0, 0] = 1.
    for j in range(1, p + 1):
        left[j] = u - uk[i + 1 - j]
        right[j] = uk[i + j] - u
        saved = 0.
        for r in range(0, j):
            # Lower triangle stores knot differences.
            ndu[j, r] = right[r + 1] + left[j - r]
            temp = ndu[r, j - 1] / ndu[j, r]
            ndu[r, j] = saved + right[r + 1] * temp
            saved = left[j - r] * temp
        ndu[j, j] = saved

    ders = zeros((n + 1, p + 1), dtype=float64)
    ders[0] = ndu[:, p]
    a = zeros((2, p + 1), dtype=float64)
    for r in range(0, p + 1):
        s1, s2 = 0, 1
        a[0, 0] = 1.
        for k in range(1, n + 1):
            d = 0.
            rk = r - k
            pk = p - k
            if r >= k:
                a[s2, 0] = a[s1, 0] / ndu[pk + 1, rk]
                d = a[s2, 0] * ndu[rk, pk]
            j1 = 1 if rk >= -1 else -rk
            j2 = k - 1 if r - 1 <= pk else p - r
            for j in range(j1, j2 + 1):
                a[s2, j] = (a[s1, j] - a[s1, j - 1]) / ndu[pk + 1, rk + j]
                d += a[s2, j] * ndu[rk + j, pk]
            if r <= pk:
                a[s2, k] = -a[s1, k - 1] / ndu[pk + 1, r]
                d += a[s2, k] * ndu[r, pk]
            ders[k, r] = d
            s1, s2 = s2, s1

    r = p
    for k in range(1, n + 1):
        ders[k] *= r
        r *= (p - k)
    return ders


def curve_point(n, p, uk, cpw, u):
    """
    Point at *u* on the curve with weighted control points *cpw*. The
    weighted sum is projected back to 3-D.

    *Reference:* The NURBS Book, A3.1 (with A4.1 projection).
    """
    span = find_span(n, p, u, uk)
    bf = basis_funs(span, u, p, uk)
    pnt = dot(bf, cpw[span - p:span + 1])
    return pnt[:-1] / pnt[-1]


def curve_points(n, p, uk, cpw, ulist):
    pnts = [curve_point(n, p, uk, cpw, u) for u in ulist]
    return array(pnts, dtype=float64)


def curve_derivs_alg1(n, p, uk, cpw, u, d):
    """
    Derivatives of the curve in homogeneous space. Orders above *p* are
    zero.

    :return: Array of shape (d + 1, 4).
    :rtype: ndarray

    *Reference:* The NURBS Book, A3.2.
    """
    du = min(d, p)
    ck = zeros((d + 1, cpw.shape[1]), dtype=float64)
    span = find_span(n, p, u, uk)
    nders = ders_basis_funs(span, u, p, du, uk)
    for k in range(0, du + 1):
        ck[k] = dot(nders[k], cpw[span - p:span + 1])
    return ck


def rat_curve_derivs(n, p, uk, cpw, u, d):
    """
    Derivatives of the rational curve at *u*, orders 0 through *d*.

    The homogeneous derivatives are split into the weighted coordinates
    A(u) and the weight w(u). Each order then follows from

        C(k) = (A(k) - sum(binom(k, i) * w(i) * C(k - i), i = 1..k)) / w

    :param int n: Index of the last control point.
    :param int p: Degree.
    :param ndarray uk: Knot vector.
    :param ndarray cpw: Weighted control points.
    :param float u: Parameter.
    :param int d: Highest order.

    :return: Array of shape (d + 1, 3). Row 0 is the curve point.
    :rtype: ndarray

    *Reference:* The NURBS Book, A4.2.
    """
    cders = curve_derivs_alg1(n, p, uk, cpw, u, d)
    aders, wders = cders[:, :-1], cders[:, -1]
    ck = zeros((d + 1, aders.shape[1]), dtype=float64)
    for k in range(0, d + 1):
        v = array(aders[k], dtype=float64)
        for i in range(1, k + 1):
            v -= bin_coeff(k, i) * wders[i] * ck[k - i]
        ck[k] = v / wders[0]
    return ck


def check_param(n, p, uk, u):
    """
    Clamp *u* into [uk[p], uk[n + 1]]. A parameter within *ptol* of a knot
    is replaced by the knot.
    """
    u = CmpFlt.check_bounds(u, uk[p], uk[n + 1])
    k = find_span(n, p, u, uk)
    if CmpFlt.le(u, uk[k]):
        return uk[k]
    if CmpFlt.ge(u, uk[k + 1]):
        return uk[k + 1]
    return u
