from __future__ import division

from numpy import array, cross, dot, float64
from numpy.linalg import norm

from nurbsect.geometry.geom import Geometry


class Vector(Geometry):
    """
    Free vector with an optional anchor point.

    :param array_like v: Components.
    :param origin: Anchor, used when the vector is drawn or evaluated from a
        location.
    :type origin: :class:`.Point`

    :var ndarray vxyz: Components.
    :var float mag: Length.
    :var ndarray ijk: Direction of unit length, or zeros for a zero vector.
    """

    def __init__(self, v, origin=None):
        super(Vector, self).__init__('vector')
        self._vxyz = array(v, dtype=float64)
        self._p0 = origin
        self._mag = norm(self._vxyz)
        if self._mag > 0.:
            self._ijk = self._vxyz / self._mag
        else:
            self._ijk = array(self._vxyz, dtype=float64)

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            dtype = float64
        return array(self._vxyz, dtype=dtype)

    def __iter__(self):
        for elm in self._vxyz:
            yield elm

    def __len__(self):
        return len(self._vxyz)

    def __getitem__(self, item):
        return self._vxyz[item]

    @property
    def vxyz(self):
        return self._vxyz

    @property
    def mag(self):
        return self._mag

    @property
    def ijk(self):
        return self._ijk

    @property
    def origin(self):
        return self._p0

    @property
    def is_zero(self):
        return self._mag == 0.

    def dot(self, v):
        return dot(self._vxyz, array(v, dtype=float64))

    def cross(self, v):
        """
        Right-handed cross product, anchored at this vector's origin.

        :rtype: :class:`.Vector`
        """
        return Vector(cross(self._vxyz, array(v, dtype=float64)), self._p0)
