from numpy import array, float64

from nurbsect.geometry.checker import CheckGeom
from nurbsect.geometry.methods.create import (circle_by_normal,
                                              line_by_points,
                                              plane_by_normal,
                                              plane_by_points,
                                              vector_by_points)
from nurbsect.geometry.methods.interpolate import global_curve_interpolation
from nurbsect.geometry.nurbs_curve import NurbsCurve
from nurbsect.geometry.point import Point


class CreateGeom(object):
    """
    Factory for the geometry types of the package.

    Points and vectors may be given as instances or as plain (x, y, z)
    sequences. Analytic entities that would be degenerate come back as
    *None*. Invalid curve data raise :class:`.InvalidCurveError`.
    """

    @staticmethod
    def point(xyz=(0., 0., 0.)):
        return Point(xyz)

    @staticmethod
    def vector_by_points(p0, p1, p2=None):
        """
        Vector *p1* - *p0*, or (p1 - p0) x (p2 - p0) when *p2* is given. The
        vector is rooted at *p0*.

        :rtype: :class:`.Vector`
        """
        return vector_by_points(p0, p1, p2)

    @staticmethod
    def line_by_points(p0, p1):
        """
        Line through *p0* towards *p1*. Its parameter is the distance from
        *p0*.

        :rtype: :class:`.Line`
        """
        return line_by_points(p0, p1)

    @staticmethod
    def plane_by_normal(p0, vn):
        """
        Plane through *p0* with normal *vn* and a right-handed (vu, vv, vn)
        frame.

        :rtype: :class:`.Plane` or None
        """
        return plane_by_normal(p0, vn)

    @staticmethod
    def plane_by_points(p0, p1, p2):
        """
        Plane through three points with its u-axis pointing at *p1*.

        :rtype: :class:`.Plane` or None
        """
        return plane_by_points(p0, p1, p2)

    @staticmethod
    def circle(center, vn=(0., 0., 1.), radius=1.):
        """
        Circle of *radius* around *center* in the plane normal to *vn*.

        :param center: Centre.
        :type center: :class:`.Point` or array_like
        :param vn: Plane normal. Default is the z-axis.
        :type vn: :class:`.Vector` or array_like
        :param float radius: Radius (> 0).

        :rtype: :class:`.Circle` or None
        """
        return circle_by_normal(center, vn, radius)

    @staticmethod
    def nurbs_curve(cp, uk, p, w=None):
        return NurbsCurve(cp, uk, p, w)

    @staticmethod
    def bezier_curve(cp, w=None, a=0., b=1.):
        """
        Bezier curve of degree len(cp) - 1 on the domain [a, b].

        :rtype: :class:`.NurbsCurve`
        """
        p = len(cp) - 1
        uk = [a] * (p + 1) + [b] * (p + 1)
        return NurbsCurve(cp, uk, p, w)

    @staticmethod
    def line_curve(p0, p1, a=0., b=1.):
        """
        Degree 1 curve from *p0* (at *a*) to *p1* (at *b*).

        :rtype: :class:`.NurbsCurve`
        """
        cp = [CheckGeom.to_point(p0).xyz, CheckGeom.to_point(p1).xyz]
        return NurbsCurve(cp, [a, a, b, b], 1)

    @staticmethod
    def interpolate_points(pnts, p=3, method='chord'):
        """
        Curve passing through every point of *pnts*, in order.

        :param array_like pnts: Points to pass through.
        :param int p: Requested degree. Lowered to len(pnts) - 1 when there
            are too few points.
        :param str method: Parameterization ('uniform', 'chord' or
            'centripetal').

        :rtype: :class:`.NurbsCurve`

        .. note::
            Repeated consecutive points make the system singular.
        """
        qp = array([Point(pi).xyz for pi in pnts], dtype=float64)
        cp, uk, p = global_curve_interpolation(qp, p, method)
        return NurbsCurve(cp, uk, p)
