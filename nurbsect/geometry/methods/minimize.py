from __future__ import division

import logging

from numpy import array, dot, float64, hstack
from scipy.optimize import minimize

from nurbsect.config import Settings
from nurbsect.geometry.methods.evaluate import rat_curve_derivs

logger = logging.getLogger(__name__)

# Status codes of scipy.optimize.minimize(method='L-BFGS-B') that may still
# hold a usable solution. Status 2 is a line search that could not make
# progress, which happens once the distance is at round-off level.
ACCEPTED_STATUS = (0, 2)


class CurveDistanceObjective(object):
    """
    Squared distance between a point on each of two curves.

    The objective is f(u1, u2) = |C1(u1) - C2(u2)|^2 and its gradient is
    2 * (C1(u1) - C2(u2)) . (C1'(u1), -C2'(u2)).

    :param curve1: Curve 1.
    :type curve1: :class:`.NurbsCurve`
    :param curve2: Curve 2.
    :type curve2: :class:`.NurbsCurve`
    """

    def __init__(self, curve1, curve2):
        self._c1 = curve1
        self._c2 = curve2

    def value(self, x):
        """
        :param array_like x: Curve parameters (u1, u2).

        :return: Squared distance.
        :rtype: float
        """
        d = (self._c1.eval(x[0], rtype='ndarray') -
             self._c2.eval(x[1], rtype='ndarray'))
        return dot(d, d)

    def gradient(self, x):
        """
        :param array_like x: Curve parameters (u1, u2).

        :return: Gradient (df/du1, df/du2).
        :rtype: ndarray
        """
        n1, p1, uk1, cpw1 = self._c1.data
        n2, p2, uk2, cpw2 = self._c2.data
        # Rational derivatives give the point and the tangent in one pass.
        d1 = rat_curve_derivs(n1, p1, uk1, cpw1, x[0], 1)
        d2 = rat_curve_derivs(n2, p2, uk2, cpw2, x[1], 1)
        d = d1[0] - d2[0]
        return hstack((2. * dot(d, d1[1]), -2. * dot(d, d2[1])))

    def __call__(self, x):
        return self.value(x)


def minimize_curve_distance(curve1, curve2, u01, u02, tol=None, maxiter=None,
                            bounds=None):
    """
    Minimize the squared distance between two curves starting at (u01, u02).

    The iteration is bounded so both parameters stay inside their curve
    domains, or inside the narrower intervals given by *bounds*.

    :param curve1: Curve 1.
    :type curve1: :class:`.NurbsCurve`
    :param curve2: Curve 2.
    :type curve2: :class:`.NurbsCurve`
    :param float u01: Starting parameter on curve 1.
    :param float u02: Starting parameter on curve 2.
    :param float tol: Distance tolerance. The projected gradient tolerance of
        the minimizer is *tol* squared. Default *gtol*.
    :param int maxiter: Iteration budget. Default *maxiter* setting.
    :param list bounds: Parameter intervals [(a1, b1), (a2, b2)]. Default is
        the domain of each curve.

    :return: The result of :func:`scipy.optimize.minimize`. The solution is
        in *x* and the termination code in *status*.
    :rtype: :class:`scipy.optimize.OptimizeResult`
    """
    if tol is None:
        tol = Settings.gtol
    if maxiter is None:
        maxiter = Settings.maxiter
    if bounds is None:
        bounds = [(curve1.a, curve1.b), (curve2.a, curve2.b)]

    obj = CurveDistanceObjective(curve1, curve2)
    x0 = array([u01, u02], dtype=float64)
    sol = minimize(obj.value, x0, method='L-BFGS-B', jac=obj.gradient,
                   bounds=bounds,
                   options={'gtol': tol * tol, 'ftol': tol ** 4,
                            'maxiter': maxiter})
    logger.debug('Minimizer started at (%s, %s) stopped after %d iterations '
                 'with status %d: %s', u01, u02, sol.nit, sol.status,
                 sol.message)
    return sol
