from numpy import allclose, array, float64, hstack, ones, zeros

from nurbsect.config import Settings
from nurbsect.geometry.bounding_box import BoundingBox
from nurbsect.geometry.geom import Geometry
from nurbsect.geometry.methods.calculate import arc_length_nurbs
from nurbsect.geometry.methods.check import check_curve_data
from nurbsect.geometry.methods.divide import (extract_nurbs_curve,
                                              split_nurbs_curve)
from nurbsect.geometry.methods.evaluate import (check_param, curve_point,
                                                curve_points,
                                                find_mult_knots,
                                                rat_curve_derivs)
from nurbsect.geometry.methods.geom_utils import (are_points_equal,
                                                  dehomogenize_array1d,
                                                  global_to_local_param,
                                                  homogenize_array1d,
                                                  local_to_global_param)
from nurbsect.geometry.methods.misc import (is_array_like, is_array_type,
                                            is_local_domain)
from nurbsect.geometry.methods.modify import (curve_knot_ins,
                                              decompose_curve,
                                              reverse_nurbs_curve)
from nurbsect.geometry.point import Point
from nurbsect.geometry.vector import Vector


def _read_only(arr):
    arr.setflags(write=False)
    return arr


class NurbsCurve(Geometry):
    """
    Clamped NURBS curve.

    The curve data are checked when the curve is created and are stored in
    read-only arrays. Splitting, extraction, knot insertion and reversal
    return new curves instead of changing this one.

    Methods taking a parameter accept a *domain* option. With 'global' (or
    'g', the default) parameters are read in [a, b]. With 'local' (or 'l')
    they are read in [0, 1] and mapped onto [a, b] first.

    :param array_like cp: Control points (x, y, z). Points given as (x, y)
        get z = 0.
    :param array_like uk: Knot vector. Its first and last *p* + 1 values must
        repeat.
    :param int p: Degree (p >= 1).
    :param array_like w: Positive weights. Default is a weight of 1 for every
        control point.

    :raise InvalidCurveError: If the degree, knots, control points, or
        weights do not describe a valid curve.

    :var float a: Start of the parameter domain, uk[p].
    :var float b: End of the parameter domain, uk[n + 1].
    :var int p: Degree.
    :var int n: Index of the last control point.
    :var int m: Index of the last knot (n + p + 1).
    :var ndarray uk: Knot vector.
    :var ndarray cp: Control points, (n + 1) x 3.
    :var ndarray w: Weights.
    :var ndarray cpw: Weighted control points (wx, wy, wz, w).
    :var bool is_bezier: *True* when there are no interior knots.
    """

    def __init__(self, cp, uk, p, w=None):
        super(NurbsCurve, self).__init__('nurbs_curve')
        cp = array([array(pi, dtype=float64).ravel() for pi in cp],
                   dtype=float64)
        if cp.ndim == 2 and cp.shape[1] == 2:
            cp = hstack((cp, zeros((cp.shape[0], 1), dtype=float64)))
        uk = array(uk, dtype=float64).ravel()
        if w is None:
            w = ones(cp.shape[0], dtype=float64)
        else:
            w = array(w, dtype=float64)
        p = int(p)
        check_curve_data(cp, uk, p, w)

        self._p = p
        self._n = cp.shape[0] - 1
        self._m = uk.size - 1
        self._uk = _read_only(uk)
        self._cp = _read_only(cp)
        self._w = _read_only(w)
        self._cpw = _read_only(homogenize_array1d(cp, w))
        self._a = uk[p]
        self._b = uk[self._n + 1]

    @classmethod
    def from_cpw(cls, cpw, uk, p):
        """
        Build a curve from weighted control points, as returned by the
        knot insertion and subdivision methods.

        :param ndarray cpw: Weighted control points (wx, wy, wz, w).
        :param array_like uk: Knot vector.
        :param int p: Degree.

        :rtype: :class:`.NurbsCurve`
        """
        cp, w = dehomogenize_array1d(array(cpw, dtype=float64))
        return cls(cp, uk, p, w)

    def __call__(self, u, rtype='Point', domain='global'):
        return self.eval(u, rtype, domain)

    def __eq__(self, other):
        if not isinstance(other, NurbsCurve):
            return False
        if self._p != other.p or self._uk.shape != other.uk.shape:
            return False
        if self._cpw.shape != other.cpw.shape:
            return False
        tol = Settings.ptol
        return (allclose(self._uk, other.uk, rtol=0., atol=tol) and
                allclose(self._cpw, other.cpw, rtol=0., atol=tol))

    def __ne__(self, other):
        return not self.__eq__(other)

    __hash__ = None

    @property
    def a(self):
        return self._a

    @property
    def b(self):
        return self._b

    @property
    def p(self):
        return self._p

    @property
    def m(self):
        return self._m

    @property
    def n(self):
        return self._n

    @property
    def uk(self):
        return self._uk

    @property
    def knots(self):
        return self.get_mult_and_knots()[2]

    @property
    def mult(self):
        return self.get_mult_and_knots()[1]

    @property
    def cp(self):
        return self._cp

    @property
    def w(self):
        return self._w

    @property
    def cpw(self):
        return self._cpw

    @property
    def data(self):
        return self._n, self._p, self._uk, self._cpw

    @property
    def is_bezier(self):
        return self._n == self._p

    @property
    def is_closed(self):
        return are_points_equal(self._cp[0], self._cp[-1])

    @property
    def length(self):
        return self.arc_length()

    @property
    def bbox(self):
        return self.get_bbox()

    def _to_global(self, u, domain):
        if is_local_domain(domain):
            return self.local_to_global_param(u)
        return u

    def local_to_global_param(self, *args):
        """
        Map parameters in [0, 1] onto [a, b].
        """
        return local_to_global_param(self._a, self._b, *args)

    def global_to_local_param(self, *args):
        """
        Map parameters in [a, b] onto [0, 1].
        """
        return global_to_local_param(self._a, self._b, *args)

    def eval(self, u, rtype='Point', domain='global'):
        """
        Point on the curve at *u*.

        :param float u: Parameter. A parameter outside the domain evaluates
            to the nearest end point. A list of parameters is passed on to
            :meth:`eval_params`.
        :param str rtype: 'Point' for a :class:`.Point` or 'ndarray' for an
            array.
        :param str domain: Parameter domain.

        :rtype: :class:`.Point` or ndarray
        """
        if is_array_like(u):
            return self.eval_params(u, rtype, domain)
        u = self._to_global(u, domain)
        pnt = curve_point(self._n, self._p, self._uk, self._cpw, u)
        if is_array_type(rtype):
            return pnt
        return Point(pnt)

    def eval_params(self, ulist, rtype='Point', domain='global'):
        """
        Points on the curve at each parameter of *ulist*.

        :param array_like ulist: Parameters.
        :param str rtype: 'Point' for a list of :class:`.Point` or 'ndarray'
            for an (npts x 3) array.
        :param str domain: Parameter domain.

        :rtype: list or ndarray
        """
        if not is_array_like(ulist):
            return self.eval(ulist, rtype, domain)
        if is_local_domain(domain):
            ulist = [self.local_to_global_param(ui) for ui in ulist]
        pnts = curve_points(self._n, self._p, self._uk, self._cpw, ulist)
        if is_array_type(rtype):
            return pnts
        return [Point(pi) for pi in pnts]

    def deriv(self, u, k=1, d=None, rtype='Vector', domain='global'):
        """
        Derivative of order *k* at *u*.

        :param float u: Parameter.
        :param int k: Order of the returned derivative.
        :param int d: Highest order to compute (k <= d). Same as *k* when
            *None*.
        :param str rtype: 'Vector' for a :class:`.Vector` rooted at the curve
            point or 'ndarray' for an array.
        :param str domain: Parameter domain.

        :rtype: :class:`.Vector` or ndarray
        """
        if d is None:
            d = k
        u = self._to_global(u, domain)
        der = rat_curve_derivs(self._n, self._p, self._uk, self._cpw, u, d)
        if is_array_type(rtype):
            return der[k]
        return Vector(der[k], Point(der[0]))

    def tangent(self, u, rtype='Vector', domain='global'):
        """
        Unit tangent at *u*. The tangent is zero where the first derivative
        vanishes.
        """
        du = self.deriv(u, 1, rtype='Vector', domain=domain)
        if is_array_type(rtype):
            return du.ijk
        return Vector(du.ijk, du.origin)

    def split(self, u=None, domain='global'):
        """
        Cut the curve in two at *u*. The two pieces reproduce this curve
        exactly.

        :param float u: Split parameter. The middle of the domain when
            *None*.
        :param str domain: Parameter domain.

        :return: Curves on [a, u] and [u, b].
        :rtype: tuple

        :raise ValueError: If *u* is not strictly inside the domain.
        """
        if u is None:
            u = 0.5 * (self._a + self._b)
        else:
            u = self._to_global(u, domain)
        uk1, qw1, uk2, qw2 = split_nurbs_curve(self._n, self._p, self._uk,
                                               self._cpw, u)
        return (NurbsCurve.from_cpw(qw1, uk1, self._p),
                NurbsCurve.from_cpw(qw2, uk2, self._p))

    def extract(self, u0, u1, domain='global'):
        """
        Piece of the curve between *u0* and *u1*.

        :rtype: :class:`.NurbsCurve`
        """
        if is_local_domain(domain):
            u0, u1 = self.local_to_global_param(u0, u1)
        uq, qw = extract_nurbs_curve(self._n, self._p, self._uk, self._cpw,
                                     u0, u1)
        return NurbsCurve.from_cpw(qw, uq, self._p)

    def insert_knot(self, u, r=1, domain='global'):
        """
        Insert the knot *u* *r* times without changing the shape.

        :param float u: Knot.
        :param int r: Number of insertions. The resulting multiplicity must
            not exceed the degree.
        :param str domain: Parameter domain.

        :rtype: :class:`.NurbsCurve`
        """
        u = self._to_global(u, domain)
        uq, qw = curve_knot_ins(self._n, self._p, self._uk, self._cpw, u, r)
        return NurbsCurve.from_cpw(qw, uq, self._p)

    def decompose(self):
        """
        Break the curve at its interior knots into Bezier pieces. Each piece
        keeps the parameter interval it covers on this curve.

        :return: Number of pieces and the pieces (nb, curves).
        :rtype: tuple
        """
        nb, qw, ab = decompose_curve(self._n, self._p, self._uk, self._cpw)
        curves = []
        for i in range(0, nb):
            uk = [ab[i, 0]] * (self._p + 1) + [ab[i, 1]] * (self._p + 1)
            curves.append(NurbsCurve.from_cpw(qw[i], uk, self._p))
        return nb, curves

    def get_mult_and_knots(self):
        """
        :return: Number of distinct knots, their multiplicities, and the
            distinct knots (nu, um, uq).
        :rtype: tuple
        """
        return find_mult_knots(self._n, self._p, self._uk)

    def get_bbox(self):
        """
        Box around the control points. It contains the whole curve.

        :rtype: :class:`.BoundingBox`
        """
        bbox = BoundingBox()
        bbox.add_curve(self)
        return bbox

    def reverse(self):
        """
        Same curve traced from *b* to *a* over the same domain.

        :rtype: :class:`.NurbsCurve`
        """
        uq, qw = reverse_nurbs_curve(self._n, self._p, self._uk, self._cpw)
        return NurbsCurve.from_cpw(qw, uq, self._p)

    def reverse_param(self, u, domain='global'):
        """
        Parameter on the reversed curve of the point at *u* on this one.
        """
        if is_local_domain(domain):
            return 1. - u
        return self._a + self._b - u

    def check_param(self, u):
        """
        Clamp a global parameter into [a, b] and snap it to a knot within
        *ptol*.

        :param float u: Parameter.

        :rtype: float
        """
        return check_param(self._n, self._p, self._uk, u)

    def arc_length(self, u0=None, u1=None, domain='global', tol=None):
        """
        Length of the curve between *u0* and *u1*.

        :param float u0: Start parameter. Default *a*.
        :param float u1: End parameter. Default *b*.
        :param str domain: Parameter domain.
        :param float tol: Subdivision tolerance of the estimate. Default
            *gtol*.

        :rtype: float
        """
        if u0 is not None:
            u0 = self._to_global(u0, domain)
        if u1 is not None:
            u1 = self._to_global(u1, domain)
        if u0 is None:
            u0 = self._a
        if u1 is None:
            u1 = self._b
        return arc_length_nurbs(self._n, self._p, self._uk, self._cpw, u0, u1,
                                tol)
