from numpy import array, float64, inf, isfinite
from numpy import max as np_max
from numpy import maximum, minimum
from numpy import min as np_min
from numpy.linalg import norm

from nurbsect.geometry.methods.intersect_bbox import (bbox_contains_point,
                                                      bboxes_intersect)


class BoundingBox(object):
    """
    Axis-aligned box in 3-D, used to discard pairs of curve pieces that
    cannot meet. The box starts unset and grows as points are added.

    :param array_like pnts: Points to start from.

    :var ndarray bounds: Copy of the 3 x 2 array of limits. Row *i* holds
        the (min, max) of axis *i*.
    :var ndarray min: Lower corner.
    :var ndarray max: Upper corner.
    """

    def __init__(self, pnts=None):
        self._bounds = None
        self.clear()
        if pnts is not None:
            self.add_points(pnts)

    def __str__(self):
        if self.is_empty:
            return 'BoundingBox = (unset)'
        return 'BoundingBox = ({0}, {1}, {2}) - ({3}, {4}, {5})'.format(
            self.xmin, self.ymin, self.zmin, self.xmax, self.ymax, self.zmax)

    @property
    def xmin(self):
        return self._bounds[0, 0]

    @property
    def xmax(self):
        return self._bounds[0, 1]

    @property
    def ymin(self):
        return self._bounds[1, 0]

    @property
    def ymax(self):
        return self._bounds[1, 1]

    @property
    def zmin(self):
        return self._bounds[2, 0]

    @property
    def zmax(self):
        return self._bounds[2, 1]

    @property
    def bounds(self):
        return array(self._bounds, dtype=float64)

    @property
    def min(self):
        return array(self._bounds[:, 0], dtype=float64)

    @property
    def max(self):
        return array(self._bounds[:, 1], dtype=float64)

    @property
    def is_empty(self):
        return not isfinite(self._bounds).all()

    def clear(self):
        self._bounds = array([[inf, -inf]] * 3, dtype=float64)

    def set_bounds(self, bmin, bmax):
        """
        Replace the limits. Each axis is ordered so that min <= max.
        """
        bmin = array(bmin, dtype=float64)
        bmax = array(bmax, dtype=float64)
        self._bounds[:, 0] = minimum(bmin, bmax)
        self._bounds[:, 1] = maximum(bmin, bmax)

    def add_points(self, pnts):
        """
        Enlarge the box until it holds every point of *pnts*.

        :param pnts: Points.
        :type pnts: list of :class:`.Point` or array_like
        """
        pnts = array([array(p, dtype=float64) for p in pnts], dtype=float64)
        if pnts.size == 0:
            return
        bmin = np_min(pnts, axis=0)
        bmax = np_max(pnts, axis=0)
        if not self.is_empty:
            bmin = minimum(bmin, self._bounds[:, 0])
            bmax = maximum(bmax, self._bounds[:, 1])
        self.set_bounds(bmin, bmax)

    def add_curve(self, curve):
        # Convex hull property: the control polygon bounds the curve.
        self.add_points(curve.cp)

    def union(self, bbox):
        """
        New box around this one and *bbox*. Unset boxes add nothing.

        :rtype: :class:`.BoundingBox`
        """
        result = BoundingBox()
        if not self.is_empty:
            result.add_points([self.min, self.max])
        if not bbox.is_empty:
            result.add_points([bbox.min, bbox.max])
        return result

    def diagonal_length(self):
        """
        Distance between the two corners, or 0 while the box is unset.
        """
        if self.is_empty:
            return 0.
        return norm(self._bounds[:, 1] - self._bounds[:, 0])

    def intersects(self, bbox, tol=0.):
        """
        Overlap test with both boxes grown by *tol* on every side. Touching
        boxes overlap. Neither box is changed.

        :param bbox: Other box.
        :type bbox: :class:`.BoundingBox`
        :param float tol: Growth of each box.

        :rtype: bool
        """
        return bboxes_intersect(self, bbox, tol)

    def contains(self, pnt, tol=0.):
        return bbox_contains_point(self, pnt, tol)
