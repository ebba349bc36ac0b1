from __future__ import division

from numpy import array, float64, identity, zeros
from scipy.linalg import lu_factor, lu_solve

from nurbsect.geometry.methods.evaluate import basis_funs, find_span
from nurbsect.geometry.methods.parameterize import (centripetal, chord_length,
                                                    uniform)


def global_curve_interpolation(qp, p=3, method='chord'):
    """
    Control points, knots and degree of the curve through the points *qp*.

    Parameters come from *method* ('uniform', 'chord' or 'centripetal') on
    [0, 1] and the knots are averages of them. The collocation matrix is
    solved by LU factorization. The degree drops to len(qp) - 1 when there
    are too few points.

    :return: (cp, uk, p)
    :rtype: tuple

    *Reference:* The NURBS Book, 9.2.1.
    """
    qp = array(qp, dtype=float64)
    n = qp.shape[0] - 1
    if n < p:
        p = n

    # Parameters on [0, 1].
    m = n + p + 1
    if method.lower() in ['u', 'uniform']:
        u = uniform(qp, 0., 1.)
    elif method.lower() in ['ch', 'chord']:
        u = chord_length(qp, 0., 1.)
    else:
        u = centripetal(qp, 0., 1.)

    # Knot vector by averaging.
    uk = zeros(m + 1, dtype=float64)
    uk[m - p:] = 1.
    for j in range(1, n - p + 1):
        uk[j + p] = sum(u[j:j + p]) / p

    # Collocation matrix.
    if p > 1:
        a = zeros((n + 1, n + 1), dtype=float64)
        for i in range(0, n + 1):
            span = find_span(n, p, u[i], uk)
            a[i, span - p:span + 1] = basis_funs(span, u[i], p, uk)
    else:
        a = identity(n + 1, dtype=float64)

    lu, piv = lu_factor(a, overwrite_a=True, check_finite=False)
    cp = lu_solve((lu, piv), qp, trans=0, overwrite_b=True, check_finite=True)
    return cp, uk, p
