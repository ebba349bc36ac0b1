from nurbsect.config import Settings
from nurbsect.geometry.checker import CheckGeom
from nurbsect.geometry.methods.intersect_curve import intersect_curve_curve
from nurbsect.geometry.methods.intersect_line import (intersect_line_circle,
                                                      intersect_line_line,
                                                      intersect_line_plane,
                                                      intersect_polyline_plane)
from nurbsect.geometry.methods.intersect_plane import (intersect_plane_circle,
                                                       intersect_plane_plane)
from nurbsect.geometry.point import Point


class IntersectGeom(object):
    """
    Pick the intersector for a pair of entities.
    """

    @staticmethod
    def perform(geom1, geom2, itol=None, eps=None):
        """
        Intersect *geom1* with *geom2*. Either order of a supported pair
        works.

        :param float itol: Distance below which points coincide. Default
            *gtol*.
        :param float eps: Guard for parallel and tangent configurations.
            Default *eps*.

        :return: An intersector holding the results, or an
            :class:`.IntersectError` for an unsupported pair.
        """
        if CheckGeom.is_curve(geom1):
            if CheckGeom.is_curve(geom2):
                return IntersectCurveCurve(geom1, geom2, itol)

        if CheckGeom.is_line(geom1):
            if CheckGeom.is_line(geom2):
                return IntersectLineLine(geom1, geom2, itol, eps)
            if CheckGeom.is_plane(geom2):
                return IntersectLinePlane(geom1, geom2, eps)
            if CheckGeom.is_circle(geom2):
                return IntersectLineCircle(geom1, geom2, itol, eps)

        if CheckGeom.is_plane(geom1):
            if CheckGeom.is_line(geom2):
                return IntersectLinePlane(geom2, geom1, eps)
            if CheckGeom.is_plane(geom2):
                return IntersectPlanePlane(geom1, geom2, eps)
            if CheckGeom.is_circle(geom2):
                return IntersectPlaneCircle(geom1, geom2, eps)
            if CheckGeom.is_polyline_like(geom2):
                return IntersectPolylinePlane(geom2, geom1, eps, itol)

        if CheckGeom.is_circle(geom1):
            if CheckGeom.is_line(geom2):
                return IntersectLineCircle(geom2, geom1, itol, eps)
            if CheckGeom.is_plane(geom2):
                return IntersectPlaneCircle(geom2, geom1, eps)

        if CheckGeom.is_polyline_like(geom1):
            if CheckGeom.is_plane(geom2):
                return IntersectPolylinePlane(geom1, geom2, eps, itol)

        # Unsupported pair.
        return IntersectError()


class IntersectError(object):
    """
    Result of an unsupported pair. Always empty.
    """

    @property
    def success(self):
        return False

    @property
    def npts(self):
        return 0

    @property
    def points(self):
        return []

    @property
    def parameters(self):
        return []


class CurveIntersector(object):
    """
    Shared storage for intersections whose answer is a set of points.

    A result is kept as [(param1, param2), point], *param1* belonging to the
    first entity given and *param2* to the second.
    """

    def __init__(self, c1, c2):
        self._c1 = c1
        self._c2 = c2
        self._npts = 0
        self._results = []

    def _set_results(self, results):
        self._npts = len(results)
        self._results = [[params, Point(pi)] for params, pi in results]

    @property
    def npts(self):
        return self._npts

    @property
    def success(self):
        return self._npts > 0

    @property
    def points(self):
        return [results[1] for results in self._results]

    @property
    def parameters(self):
        return [results[0] for results in self._results]

    def point(self, indx=0):
        """
        Intersection point number *indx*. An index past the end gives the
        last point.

        :rtype: :class:`.Point`

        :raise IndexError: If nothing was found.
        """
        if indx > self._npts - 1:
            return self._results[-1][1]
        return self._results[indx][1]

    def params_by_cref(self, cref):
        """
        Parameters on the entity *cref*, which is matched by identity.

        :return: One parameter per result, or an empty list when *cref* took
            no part in this intersection.
        :rtype: list
        """
        if self._c1 is cref:
            return [results[0][0] for results in self._results]
        if self._c2 is cref:
            return [results[0][1] for results in self._results]
        return []


class IntersectCurveCurve(CurveIntersector):
    """
    Intersection points of two NURBS curves.

    Candidate piece pairs come from the bounding box trees of both curves and
    each one is refined by minimizing the squared distance between the
    curves. The reported point is the midpoint of the two curve points.

    :param curve1: First curve.
    :type curve1: :class:`.NurbsCurve`
    :param curve2: Second curve.
    :type curve2: :class:`.NurbsCurve`
    :param float itol: Distance below which points coincide. Default *gtol*.
    :param int maxiter: Iteration limit of each refinement. Default
        *maxiter*.
    :param int workers: Threads refining candidates. Serial when *None*.

    :var list parameters: (u1, u2) per point.
    :var list results: The :class:`.CurveIntersection` records.
    :var int nsub: Tree node pairs visited.
    :var int nfail: Candidates whose refinement did not converge.
    """

    def __init__(self, curve1, curve2, itol=None, maxiter=None, workers=None):
        super(IntersectCurveCurve, self).__init__(curve1, curve2)
        self._nsub = 0
        self._nfail = 0
        self._cci = []
        if CheckGeom.is_curve(curve1) and CheckGeom.is_curve(curve2):
            self._perform(curve1, curve2, itol, maxiter, workers)

    def _perform(self, curve1, curve2, itol, maxiter, workers):
        nsub, _, results, nfail = intersect_curve_curve(
            curve1, curve2, itol, maxiter, workers, full_output=True)
        self._nsub = nsub
        self._nfail = nfail
        self._cci = results
        self._set_results([[(ci.u1, ci.u2), 0.5 * (ci.point1 + ci.point2)]
                           for ci in results])

    @property
    def nsub(self):
        return self._nsub

    @property
    def nfail(self):
        return self._nfail

    @property
    def results(self):
        return list(self._cci)


class IntersectLineLine(CurveIntersector):
    """
    Line-line intersection.

    The lines intersect if their closest points are within *itol*.

    :param line1: Line 1.
    :type line1: :class:`.Line`
    :param line2: Line 2.
    :type line2: :class:`.Line`
    :param float itol: Intersection tolerance.
    :param float eps: Parallel guard.

    :var tuple closest_points: Closest points on each line (p1, p2), or
        *None* if the lines are parallel.
    """

    def __init__(self, line1, line2, itol=None, eps=None):
        super(IntersectLineLine, self).__init__(line1, line2)
        self._closest = None
        if CheckGeom.is_line(line1) and CheckGeom.is_line(line2):
            self._perform(line1, line2, itol, eps)

    def _perform(self, line1, line2, itol, eps):
        if itol is None:
            itol = Settings.gtol
        sol = intersect_line_line(line1, line2, eps)
        if sol is None:
            return
        u1, u2, p1, p2 = sol
        self._closest = (Point(p1), Point(p2))
        if Point(p1).is_equal(p2, itol):
            self._set_results([[(u1, u2), 0.5 * (p1 + p2)]])

    @property
    def closest_points(self):
        return self._closest


class IntersectLinePlane(CurveIntersector):
    """
    Line-plane intersection.

    :param line: Line.
    :type line: :class:`.Line`
    :param plane: Plane.
    :type plane: :class:`.Plane`
    :param float eps: Parallel guard.

    :var list parameters: List of line and plane parameters
        [(t, (u, v))].
    """

    def __init__(self, line, plane, eps=None):
        super(IntersectLinePlane, self).__init__(line, plane)
        if CheckGeom.is_line(line) and CheckGeom.is_plane(plane):
            self._perform(line, plane, eps)

    def _perform(self, line, plane, eps):
        sol = intersect_line_plane(line, plane, eps)
        if sol is None:
            return
        t, pi = sol
        uv, _ = plane.closest_point(pi, rtype='ndarray')
        self._set_results([[(t, uv), pi]])


class IntersectPolylinePlane(CurveIntersector):
    """
    Polyline-plane intersection.

    :param array_like pnts: Ordered polyline vertices.
    :param plane: Plane.
    :type plane: :class:`.Plane`
    :param float eps: Parallel guard.
    :param float tol: Merge tolerance for points at shared vertices.

    :var list parameters: List of plane parameters [(None, (u, v)), ...].
        The polyline carries no parameter.
    """

    def __init__(self, pnts, plane, eps=None, tol=None):
        super(IntersectPolylinePlane, self).__init__(pnts, plane)
        if CheckGeom.is_polyline_like(pnts) and CheckGeom.is_plane(plane):
            self._perform(pnts, plane, eps, tol)

    def _perform(self, pnts, plane, eps, tol):
        results = []
        for pi in intersect_polyline_plane(pnts, plane, eps, tol):
            uv, _ = plane.closest_point(pi, rtype='ndarray')
            results.append([(None, uv), pi])
        self._set_results(results)


class IntersectLineCircle(CurveIntersector):
    """
    Line-circle intersection.

    :param line: Line.
    :type line: :class:`.Line`
    :param circle: Circle.
    :type circle: :class:`.Circle`
    :param float itol: Distance tolerance for lines crossing the circle
        plane.
    :param float eps: Near-zero guard.

    :var list parameters: List of line and circle parameters
        [(t, angle), ...].
    """

    def __init__(self, line, circle, itol=None, eps=None):
        super(IntersectLineCircle, self).__init__(line, circle)
        if CheckGeom.is_line(line) and CheckGeom.is_circle(circle):
            self._perform(line, circle, itol, eps)

    def _perform(self, line, circle, itol, eps):
        results = []
        for t, pi in intersect_line_circle(circle, line, eps, itol):
            results.append([(t, circle.param_at_point(pi)), pi])
        self._set_results(results)


class IntersectPlaneCircle(CurveIntersector):
    """
    Plane-circle intersection.

    :param plane: Plane.
    :type plane: :class:`.Plane`
    :param circle: Circle.
    :type circle: :class:`.Circle`
    :param float eps: Near-zero guard.

    :var list parameters: List of plane and circle parameters
        [((u, v), angle), ...].
    """

    def __init__(self, plane, circle, eps=None):
        super(IntersectPlaneCircle, self).__init__(plane, circle)
        if CheckGeom.is_plane(plane) and CheckGeom.is_circle(circle):
            self._perform(plane, circle, eps)

    def _perform(self, plane, circle, eps):
        results = []
        for pi in intersect_plane_circle(plane, circle, eps):
            uv, _ = plane.closest_point(pi, rtype='ndarray')
            results.append([(uv, circle.param_at_point(pi)), pi])
        self._set_results(results)


class IntersectPlanePlane(object):
    """
    Plane-plane intersection.

    :param plane1: Plane 1.
    :type plane1: :class:`.Plane`
    :param plane2: Plane 2.
    :type plane2: :class:`.Plane`
    :param float eps: Parallel guard.

    :var line: Intersection line or *None* if the planes are parallel.
    :type line: :class:`.Line`
    """

    def __init__(self, plane1, plane2, eps=None):
        self._line = None
        if CheckGeom.is_plane(plane1) and CheckGeom.is_plane(plane2):
            self._line = intersect_plane_plane(plane1, plane2, eps)

    @property
    def success(self):
        return self._line is not None

    @property
    def ncrvs(self):
        if self._line is None:
            return 0
        return 1

    @property
    def line(self):
        return self._line
