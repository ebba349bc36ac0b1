"""Test curve-curve intersection."""

import logging
import unittest
from unittest import mock

import numpy as np
from numpy.testing import assert_allclose
from scipy.optimize import OptimizeResult

from nurbsect.geometry.creator import CreateGeom
from nurbsect.geometry.intersector import IntersectCurveCurve, IntersectGeom
from nurbsect.geometry.methods.intersect_curve import (CurveIntersection,
                                                       intersect_curve_curve,
                                                       refine_candidate)
from nurbsect.geometry.methods.minimize import (ACCEPTED_STATUS,
                                                CurveDistanceObjective,
                                                minimize_curve_distance)
from nurbsect.geometry.nurbs_curve import NurbsCurve
from nurbsect.geometry.point import Point


def interpolated_curve():
    pnts = [(0, 0, 0), (1, 1.5, 0), (2, 2, 0), (4, 3, 0), (6, 1, 0),
            (8, -2, 0)]
    return CreateGeom.interpolate_points(pnts)


def wavy_curve():
    cp = [(0, 0), (1, 2), (2, -2), (3, 2), (4, -2), (5, 2), (6, 0)]
    uk = [0, 0, 0, 0, 0.25, 0.5, 0.75, 1, 1, 1, 1]
    return NurbsCurve(cp, uk, 3)


def valley_curve():
    # Lowest point (2, -0.75) at u = 0.5 in the middle span.
    cp = [(0, 2), (1, 0), (2, -1), (3, 0), (4, 2)]
    uk = [0, 0, 0, 1. / 3., 2. / 3., 1, 1, 1]
    return NurbsCurve(cp, uk, 2)


def half_circle():
    # Unit half circle above the x-axis from (1, 0) to (-1, 0).
    cp = [(1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0)]
    w = [1, 0.5 ** 0.5, 1, 0.5 ** 0.5, 1]
    uk = [0, 0, 0, 0.5, 0.5, 1, 1, 1]
    return NurbsCurve(cp, uk, 2, w)


class TestCurveDistanceObjective(unittest.TestCase):

    def test_value_and_gradient(self):
        c1 = CreateGeom.line_curve((0, 0, 0), (10, 0, 0))
        c2 = CreateGeom.line_curve((3, -5, 0), (4, 5, 0))
        obj = CurveDistanceObjective(c1, c2)
        x = np.array([0.2, 0.1])
        # C1 = (2, 0), C2 = (3.1, -4)
        self.assertAlmostEqual(obj(x), 1.1 ** 2 + 16.)
        d = np.array([-1.1, 4., 0.])
        assert_allclose(obj.gradient(x),
                        [2. * d.dot([10, 0, 0]), -2. * d.dot([1, 10, 0])])

    def test_gradient_matches_finite_difference(self):
        c1 = interpolated_curve()
        c2 = CreateGeom.bezier_curve([(0, 3), (4, -1), (8, 2)], [1, 2, 1])
        obj = CurveDistanceObjective(c1, c2)
        x = np.array([0.4, 0.3])
        h = 1.0e-6
        fd = [(obj(x + [h, 0]) - obj(x - [h, 0])) / (2 * h),
              (obj(x + [0, h]) - obj(x - [0, h])) / (2 * h)]
        assert_allclose(obj.gradient(x), fd, rtol=1.0e-5, atol=1.0e-6)

    def test_minimize_returns_scipy_result(self):
        c1 = CreateGeom.line_curve((0, 0, 0), (10, 10, 0))
        c2 = CreateGeom.line_curve((0, 10, 0), (10, 0, 0))
        sol = minimize_curve_distance(c1, c2, 0., 0.)
        self.assertIn(sol.status, ACCEPTED_STATUS)
        assert_allclose(sol.x, [0.5, 0.5], atol=1.0e-6)

    def test_minimize_stays_in_bounds(self):
        c1 = CreateGeom.line_curve((0, 0, 0), (10, 10, 0))
        c2 = CreateGeom.line_curve((0, 10, 0), (10, 0, 0))
        sol = minimize_curve_distance(c1, c2, 0., 0.,
                                      bounds=[(0., 0.3), (0., 1.)])
        self.assertIn(sol.status, ACCEPTED_STATUS)
        # Closest approach with u1 <= 0.3 is (3, 3) to (5, 5).
        assert_allclose(sol.x, [0.3, 0.5], atol=1.0e-6)

    def test_start_outside_domain_is_pulled_back(self):
        c1 = CreateGeom.line_curve((0, 0, 0), (10, 10, 0))
        c2 = CreateGeom.line_curve((0, 10, 0), (10, 0, 0))
        sol = minimize_curve_distance(c1, c2, -2., 3.)
        self.assertIn(sol.status, ACCEPTED_STATUS)
        assert_allclose(sol.x, [0.5, 0.5], atol=1.0e-6)


class TestIntersectCurveCurve(unittest.TestCase):

    def test_disjoint_bounds(self):
        c1 = CreateGeom.line_curve((0, 0, 0), (1, 0, 0))
        c2 = CreateGeom.bezier_curve([(5, 5), (6, 7), (7, 5)])
        self.assertEqual(intersect_curve_curve(c1, c2), (0, 0, []))
        cci = IntersectCurveCurve(c1, c2)
        self.assertFalse(cci.success)
        self.assertEqual(cci.nsub, 0)
        self.assertEqual(cci.points, [])

    def test_known_crossing(self):
        c1 = CreateGeom.line_curve((0, 0, 0), (10, 10, 0))
        c2 = CreateGeom.line_curve((0, 10, 0), (10, 0, 0))
        nsub, npts, results = intersect_curve_curve(c1, c2)
        self.assertEqual(nsub, 1)
        self.assertEqual(npts, 1)
        ci = results[0]
        self.assertIsInstance(ci, CurveIntersection)
        assert_allclose(ci.point1, [5., 5., 0.], atol=1.0e-6)
        assert_allclose(ci.point2, [5., 5., 0.], atol=1.0e-6)
        self.assertAlmostEqual(ci.u1, 0.5, delta=1.0e-6)
        self.assertAlmostEqual(ci.u2, 0.5, delta=1.0e-6)
        self.assertLessEqual(ci.residual, 1.0e-12)

    def test_parallel_lines(self):
        c1 = CreateGeom.line_curve((0, 0, 0), (10, 0, 0))
        c2 = CreateGeom.line_curve((0, 1, 0), (10, 1, 0))
        self.assertEqual(intersect_curve_curve(c1, c2)[1:], (0, []))
        # A converged search that ends apart is not a failure.
        nfail = intersect_curve_curve(c1, c2, full_output=True)[3]
        self.assertEqual(nfail, 0)

    def test_tangency_gives_one_point(self):
        parabola = CreateGeom.bezier_curve([(-1, 1), (0, -1), (1, 1)])
        line = CreateGeom.line_curve((-1, 0, 0), (1, 0, 0))
        _, npts, results = intersect_curve_curve(parabola, line, 1.0e-5)
        self.assertEqual(npts, 1)
        self.assertLess(np.linalg.norm(results[0].point1), 1.0e-2)
        self.assertAlmostEqual(results[0].u1, 0.5, delta=1.0e-2)

    def test_refinement_is_a_fixed_point(self):
        c1 = CreateGeom.line_curve((0, 0, 0), (10, 10, 0))
        c2 = CreateGeom.line_curve((0, 10, 0), (10, 0, 0))
        ci = intersect_curve_curve(c1, c2)[2][0]
        ci2 = refine_candidate(c1, c2, ci.u1, ci.u2)
        self.assertIsNotNone(ci2)
        assert_allclose(ci2.point1, ci.point1, atol=1.0e-6)
        self.assertAlmostEqual(ci2.u1, ci.u1, delta=1.0e-6)
        self.assertAlmostEqual(ci2.u2, ci.u2, delta=1.0e-6)

    def test_symmetry(self):
        c = interpolated_curve()
        line = CreateGeom.line_curve((3, -5, 0), (3, 10, 0))
        _, npts1, results1 = intersect_curve_curve(c, line)
        _, npts2, results2 = intersect_curve_curve(line, c)
        self.assertEqual(npts1, 1)
        self.assertEqual(npts2, 1)
        ci1, ci2 = results1[0], results2[0]
        self.assertAlmostEqual(ci1.point1[0], 3., delta=1.0e-6)
        assert_allclose(ci1.point1, ci2.point2, atol=1.0e-6)
        self.assertAlmostEqual(ci1.u1, ci2.u2, delta=1.0e-6)
        self.assertAlmostEqual(ci1.u2, ci2.u1, delta=1.0e-6)
        assert_allclose(c.eval(ci1.u1, rtype='ndarray'), ci1.point1)

    def test_shared_end_point(self):
        c1 = CreateGeom.line_curve((0, 0, 0), (1, 0, 0))
        c2 = CreateGeom.line_curve((1, 0, 0), (2, 1, 0))
        _, npts, results = intersect_curve_curve(c1, c2)
        self.assertEqual(npts, 1)
        self.assertEqual(results[0].u1, 1.)
        self.assertEqual(results[0].u2, 0.)
        self.assertEqual(results[0].residual, 0.)

    def test_multiple_points(self):
        c = wavy_curve()
        line = CreateGeom.line_curve((-1, 0, 0), (7, 0, 0))
        _, npts, results = intersect_curve_curve(c, line)
        self.assertEqual(npts, 6)
        # Two crossings share each of the first and last Bezier segments.
        results = sorted(results, key=lambda ci: ci.u1)
        assert_allclose([ci.u1 for ci in results],
                        [0., 0.2023, 0.3690, 0.6310, 0.7977, 1.],
                        atol=1.0e-3)
        self.assertEqual(results[0].u1, 0.)
        self.assertEqual(results[-1].u1, 1.)
        for ci in results:
            self.assertLess(abs(ci.point1[1]), 1.0e-6)
            self.assertAlmostEqual(ci.u2, (ci.point2[0] + 1.) / 8.)

    def test_multi_span_tangency_default_tolerance(self):
        c = valley_curve()
        line = CreateGeom.line_curve((0, -0.75, 0), (4, -0.75, 0))
        _, npts, results = intersect_curve_curve(c, line)
        self.assertEqual(npts, 1)
        self.assertAlmostEqual(results[0].u1, 0.5, delta=1.0e-3)
        assert_allclose(results[0].point1, [2., -0.75, 0.], atol=1.0e-3)
        cci = IntersectCurveCurve(line, c)
        self.assertEqual(cci.npts, 1)

    def test_rational_half_circle(self):
        c = half_circle()
        line = CreateGeom.line_curve((-2, 0.3, 0), (2, 0.3, 0))
        _, npts, results = intersect_curve_curve(c, line)
        self.assertEqual(npts, 2)
        x = sorted(ci.point1[0] for ci in results)
        assert_allclose(x, [-0.91 ** 0.5, 0.91 ** 0.5], atol=1.0e-5)
        for ci in results:
            self.assertAlmostEqual(np.linalg.norm(ci.point1), 1.)
            self.assertAlmostEqual(ci.point2[1], 0.3)

    def test_workers_give_same_results(self):
        c = wavy_curve()
        line = CreateGeom.line_curve((-1, 0, 0), (7, 0, 0))
        serial = intersect_curve_curve(c, line)
        threaded = intersect_curve_curve(c, line, workers=4)
        self.assertEqual(serial[0], threaded[0])
        self.assertEqual(serial[1], threaded[1])
        for ci, cj in zip(serial[2], threaded[2]):
            self.assertEqual(ci.u1, cj.u1)
            self.assertEqual(ci.u2, cj.u2)

    def test_failed_refinement_is_counted(self):
        c1 = CreateGeom.line_curve((0, 0, 0), (10, 0, 0))
        c2 = CreateGeom.line_curve((3, -5, 0), (4, 5, 0))
        nsub, npts, results, nfail = intersect_curve_curve(
            c1, c2, maxiter=1, full_output=True)
        self.assertEqual(nsub, 1)
        self.assertEqual(nfail, 1)
        self.assertEqual(npts, 0)
        self.assertEqual(results, [])
        cci = IntersectCurveCurve(c1, c2)
        self.assertEqual(cci.nfail, 0)
        self.assertTrue(cci.point().is_equal((3.5, 0., 0.)))

    def test_stalled_line_search(self):
        c1 = CreateGeom.line_curve((0, 0, 0), (10, 0, 0))
        c2 = CreateGeom.line_curve((3, -5, 0), (4, 5, 0))
        target = ('nurbsect.geometry.methods.intersect_curve.'
                  'minimize_curve_distance')
        apart = OptimizeResult(x=np.array([0., 0.]), status=2)
        with mock.patch(target, return_value=apart):
            self.assertIsNone(refine_candidate(c1, c2, 0., 0.))
            nfail = intersect_curve_curve(c1, c2, full_output=True)[3]
        self.assertEqual(nfail, 1)
        # The curves meet at u1 = 0.35, u2 = 0.5.
        close = OptimizeResult(x=np.array([0.35, 0.5]), status=2)
        with mock.patch(target, return_value=close):
            ci = refine_candidate(c1, c2, 0., 0.)
        self.assertIsNotNone(ci)
        self.assertLess(ci.residual, 1.0e-12)

    def test_debug_logging(self):
        c1 = CreateGeom.line_curve((0, 0, 0), (10, 10, 0))
        c2 = CreateGeom.line_curve((0, 10, 0), (10, 0, 0))
        with self.assertLogs('nurbsect', level=logging.DEBUG) as cm:
            intersect_curve_curve(c1, c2)
        self.assertTrue(any('1 points' in msg for msg in cm.output))


class TestIntersectCurveCurveResults(unittest.TestCase):

    def setUp(self):
        self.c1 = CreateGeom.line_curve((0, 0, 0), (10, 10, 0))
        self.c2 = CreateGeom.line_curve((0, 10, 0), (10, 0, 0), 2., 4.)
        self.cci = IntersectGeom.perform(self.c1, self.c2)

    def test_dispatch(self):
        self.assertIsInstance(self.cci, IntersectCurveCurve)
        self.assertTrue(self.cci.success)
        self.assertEqual(self.cci.npts, 1)

    def test_points(self):
        self.assertIsInstance(self.cci.point(0), Point)
        self.assertTrue(self.cci.point(0).is_equal((5, 5, 0)))
        # Index past the end returns the last point.
        self.assertIs(self.cci.point(3), self.cci.point(0))

    def test_params_by_cref(self):
        u1 = self.cci.params_by_cref(self.c1)
        u2 = self.cci.params_by_cref(self.c2)
        self.assertAlmostEqual(u1[0], 0.5, delta=1.0e-6)
        self.assertAlmostEqual(u2[0], 3., delta=1.0e-6)
        self.assertEqual(self.cci.params_by_cref(None), [])
        self.assertEqual(len(self.cci.parameters), 1)
        self.assertEqual(len(self.cci.results), 1)


if __name__ == '__main__':
    unittest.main()
