from __future__ import division

import logging
from collections import namedtuple
from concurrent.futures import ThreadPoolExecutor

from numpy import dot, isfinite
from numpy.linalg import norm

from nurbsect.config import Settings
from nurbsect.geometry.bbox_tree import LazyCurveBBT
from nurbsect.geometry.methods.intersect_bbox import (bboxes_intersect,
                                                      intersect_bbox_trees)
from nurbsect.geometry.methods.minimize import (ACCEPTED_STATUS,
                                                minimize_curve_distance)

logger = logging.getLogger(__name__)

CurveIntersection = namedtuple('CurveIntersection',
                               ['point1', 'point2', 'u1', 'u2', 'residual'])
CurveIntersection.__doc__ = """
Intersection of two curves.

:var ndarray point1: Point on curve 1.
:var ndarray point2: Point on curve 2.
:var float u1: Parameter on curve 1.
:var float u2: Parameter on curve 2.
:var float residual: Squared distance between *point1* and *point2*.
"""


def _make_result(curve1, curve2, u1, u2):
    p1 = curve1.eval(u1, rtype='ndarray')
    p2 = curve2.eval(u2, rtype='ndarray')
    d = p1 - p2
    return CurveIntersection(p1, p2, u1, u2, dot(d, d))


def _is_duplicate(curve1, curve2, ci, results, itol):
    """
    Check if *ci* repeats one of *results*. Two solutions are the same
    intersection if their parameters or points are within *itol*, or if the
    curves still meet within *itol* halfway between them. The last test joins
    the scattered solutions found along a tangency.
    """
    for cj in results:
        if abs(ci.u1 - cj.u1) < itol:
            return True
        if norm(ci.point1 - cj.point1) < itol:
            return True
        um1 = 0.5 * (ci.u1 + cj.u1)
        um2 = 0.5 * (ci.u2 + cj.u2)
        d = (curve1.eval(um1, rtype='ndarray') -
             curve2.eval(um2, rtype='ndarray'))
        if norm(d) <= itol:
            return True
    return False


def _end_point_intersections(curve1, curve2, itol):
    """
    Pairs of curve end points that coincide within *itol*.
    """
    results = []
    for u1 in (curve1.a, curve1.b):
        for u2 in (curve2.a, curve2.b):
            ci = _make_result(curve1, curve2, u1, u2)
            if ci.residual <= itol * itol:
                results.append(ci)
    return results


def refine_candidate(curve1, curve2, u01, u02, itol=None, maxiter=None,
                     bounds=None):
    """
    Refine a candidate intersection starting at (u01, u02).

    A line search that stalls (status 2) only counts as converged if the
    curves are already within *itol* of each other.

    :param curve1: Curve 1.
    :type curve1: :class:`.NurbsCurve`
    :param curve2: Curve 2.
    :type curve2: :class:`.NurbsCurve`
    :param float u01: Starting parameter on curve 1.
    :param float u02: Starting parameter on curve 2.
    :param float itol: Intersection tolerance.
    :param int maxiter: Iteration budget of the minimizer.
    :param list bounds: Parameter intervals [(a1, b1), (a2, b2)] the search
        is confined to. Default is the domain of each curve.

    :return: The refined intersection or *None* if the minimizer did not
        converge.
    :rtype: :class:`.CurveIntersection` or None
    """
    if itol is None:
        itol = Settings.gtol

    sol = minimize_curve_distance(curve1, curve2, u01, u02, itol, maxiter,
                                  bounds)
    if sol.status not in ACCEPTED_STATUS or not isfinite(sol.x).all():
        return None
    u1 = curve1.check_param(sol.x[0])
    u2 = curve2.check_param(sol.x[1])
    ci = _make_result(curve1, curve2, u1, u2)
    if sol.status == 2 and ci.residual > itol * itol:
        return None
    return ci


def intersect_curve_curve(curve1, curve2, itol=None, maxiter=None,
                          workers=None, full_output=False, ftol=None):
    """
    Find the intersection points of two curves.

    Candidate regions are found by simultaneous traversal of lazy bounding
    box trees over each curve. Bezier pieces are subdivided until they are
    flat to within *ftol*. Each candidate is refined by minimizing the squared
    distance between the curves inside the domains of the candidate
    sub-curves, starting at their first knots. Solutions further apart than
    *itol* are rejected and repeats of a previous solution are merged into
    it.

    :param curve1: Curve 1 to intersect.
    :type curve1: :class:`.NurbsCurve`
    :param curve2: Curve 2 to intersect.
    :type curve2: :class:`.NurbsCurve`
    :param float itol: Intersection tolerance. Default *gtol*.
    :param int maxiter: Iteration budget of the minimizer. Default *maxiter*
        setting.
    :param int workers: Number of threads used to refine candidates. Serial
        if *None* or less than 2.
    :param bool full_output: Option to also return the number of candidates
        dropped because the minimizer failed.
    :param float ftol: Flatness tolerance of the candidate pieces. Default
        *ftol*.

    :return: Number of visited node pairs, number of intersections, and a
        list of :class:`.CurveIntersection` (nsub, npts, results). If
        *full_output* is *True* the number of failed refinements is appended
        (nsub, npts, results, nfail).
    :rtype: tuple
    """
    if itol is None:
        itol = Settings.gtol
    if maxiter is None:
        maxiter = Settings.maxiter
    if ftol is None:
        ftol = Settings.ftol

    def _output(nsub, results, nfail):
        if full_output:
            return nsub, len(results), results, nfail
        return nsub, len(results), results

    # Step 1: Check bounding boxes for possible intersection.
    if not bboxes_intersect(curve1.get_bbox(), curve2.get_bbox(), itol):
        logger.debug('Curve bounding boxes do not overlap.')
        return _output(0, [], 0)

    # Step 2: Candidate sub-curve pairs.
    nsub, candidates = intersect_bbox_trees(LazyCurveBBT(curve1, ftol),
                                            LazyCurveBBT(curve2, ftol), itol)

    # Step 3: Manually check curve end points to improve robustness.
    results = []
    for ci in _end_point_intersections(curve1, curve2, itol):
        if not _is_duplicate(curve1, curve2, ci, results, itol):
            results.append(ci)

    # Step 4: Refine each candidate inside its sub-curve domains starting at
    # their first knots.
    def _refine(pair):
        sub1, sub2 = pair
        bounds = [(sub1.a, sub1.b), (sub2.a, sub2.b)]
        return refine_candidate(curve1, curve2, sub1.a, sub2.a, itol, maxiter,
                                bounds)

    if workers is not None and workers > 1 and len(candidates) > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            refined = list(executor.map(_refine, candidates))
    else:
        refined = [_refine(pair) for pair in candidates]

    # Step 5: Filter and remove duplicates keeping the first one found.
    nfail = 0
    for ci in refined:
        if ci is None:
            nfail += 1
            continue
        if ci.residual > itol * itol:
            continue
        if _is_duplicate(curve1, curve2, ci, results, itol):
            continue
        results.append(ci)

    logger.debug('Curve intersection found %d candidates, %d failed '
                 'refinements and %d points.', len(candidates), nfail,
                 len(results))
    return _output(nsub, results, nfail)
