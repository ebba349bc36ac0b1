from numpy import ndarray

from nurbsect.geometry.circle import Circle
from nurbsect.geometry.geom import Geometry
from nurbsect.geometry.line import Line
from nurbsect.geometry.nurbs_curve import NurbsCurve
from nurbsect.geometry.plane import Plane
from nurbsect.geometry.point import Point
from nurbsect.geometry.vector import Vector


class CheckGeom(object):
    """
    Type predicates and conversions used to dispatch on geometry.
    """

    @staticmethod
    def is_geom(geom):
        return isinstance(geom, Geometry)

    @staticmethod
    def is_point_like(geom):
        """
        *True* for a :class:`.Point` or for a tuple, list or array holding
        two or three coordinates.
        """
        if isinstance(geom, Point):
            return True
        if isinstance(geom, (tuple, list, ndarray)):
            return len(geom) in (2, 3)
        return False

    @staticmethod
    def is_point(geom):
        return isinstance(geom, Point)

    @staticmethod
    def to_point(geom):
        """
        Return *geom* itself if it is a :class:`.Point`, a new point if it is
        point-like, or *None*.

        :rtype: :class:`.Point` or None
        """
        if isinstance(geom, Point):
            return geom
        if CheckGeom.is_point_like(geom):
            return Point(geom)
        return None

    @staticmethod
    def to_points(geoms):
        return [CheckGeom.to_point(p) for p in geoms]

    @staticmethod
    def is_vector(geom):
        return isinstance(geom, Vector)

    @staticmethod
    def is_line(geom):
        return isinstance(geom, Line)

    @staticmethod
    def is_plane(geom):
        return isinstance(geom, Plane)

    @staticmethod
    def is_circle(geom):
        return isinstance(geom, Circle)

    @staticmethod
    def is_curve(geom):
        return isinstance(geom, NurbsCurve)

    @staticmethod
    def is_polyline_like(geom):
        """
        *True* for a plain sequence of two or more point-like items. Geometry
        instances never count, even a :class:`.Point`.

        :param geom: Candidate polyline.

        :rtype: bool
        """
        if isinstance(geom, Geometry):
            return False
        if not isinstance(geom, (tuple, list, ndarray)) or len(geom) < 2:
            return False
        return all(CheckGeom.is_point_like(p) for p in geom)
