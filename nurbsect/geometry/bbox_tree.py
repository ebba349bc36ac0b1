from abc import ABC, abstractmethod

from nurbsect.config import Settings
from nurbsect.geometry.methods.geom_utils import is_curve_flat


class BoundingBoxTree(ABC):
    """
    Node of a bounding box hierarchy over some payload.

    Implementations decide how a node is bounded, when it can no longer be
    divided and how it is divided. See :func:`.intersect_bbox_trees` for the
    traversal that consumes them.
    """

    @abstractmethod
    def bbox(self):
        """
        :return: Bounding box of the node.
        :rtype: :class:`.BoundingBox`
        """
        pass

    @abstractmethod
    def is_empty(self):
        """
        :return: *True* if the node covers nothing.
        :rtype: bool
        """
        pass

    @abstractmethod
    def is_indivisible(self, tol):
        """
        :param float tol: Tolerance.

        :return: *True* if the node should not be split any further.
        :rtype: bool
        """
        pass

    @abstractmethod
    def split(self):
        """
        :return: The two child nodes.
        :rtype: tuple
        """
        pass

    @abstractmethod
    def yield_(self):
        """
        :return: The payload of the node.
        """
        pass


class LazyCurveBBT(BoundingBoxTree):
    """
    Bounding box tree over a NURBS curve built by recursive subdivision of
    the curve domain. Children are computed the first time :meth:`split` is
    called and reused afterwards.

    :param curve: Curve.
    :type curve: :class:`.NurbsCurve`
    :param float flat: Flatness tolerance for Bezier nodes. If given, a
        Bezier node is only indivisible once its control points are within
        *flat* of its chord. If *None*, every Bezier node is indivisible.

    :var curve: The curve of this node.
    :type curve: :class:`.NurbsCurve`
    """

    def __init__(self, curve, flat=None):
        self._curve = curve
        self._flat = flat
        self._bbox = None
        self._children = None

    @property
    def curve(self):
        return self._curve

    def bbox(self):
        if self._bbox is None:
            self._bbox = self._curve.get_bbox()
        return self._bbox

    def is_empty(self):
        return self.bbox().is_empty

    def is_indivisible(self, tol):
        """
        A node is indivisible when its domain is too narrow to split, its
        bounding box diagonal is smaller than *tol*, or its curve is a single
        Bezier segment that passes the flatness test.
        """
        c = self._curve
        if c.b - c.a < 2. * Settings.ptol:
            return True
        if self.bbox().diagonal_length() < tol:
            return True
        if not c.is_bezier:
            return False
        if self._flat is None:
            return True
        return is_curve_flat(c.n, c.cp, self._flat)

    def split(self):
        """
        Split the curve at the middle of its domain.

        :return: Two new nodes (left, right).
        :rtype: tuple
        """
        if self._children is None:
            c1, c2 = self._curve.split()
            self._children = (LazyCurveBBT(c1, self._flat),
                              LazyCurveBBT(c2, self._flat))
        return self._children

    def yield_(self):
        return self._curve
