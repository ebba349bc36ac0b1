from nurbsect.geometry.geom import Geometry
from nurbsect.geometry.methods.distance import point_to_plane
from nurbsect.geometry.methods.misc import is_array_type
from nurbsect.geometry.methods.project import project_point_to_plane
from nurbsect.geometry.point import Point
from nurbsect.geometry.vector import Vector


class Plane(Geometry):
    """
    Unbounded plane with a local frame.

    A point at parameters (u, v, w) is p0 + u * vu + v * vv + w * vn using
    the unit axes of the frame.

    :param p0: Origin.
    :type p0: :class:`.Point`
    :param vn: Normal.
    :type vn: :class:`.Vector`
    :param vu: In-plane u-axis.
    :type vu: :class:`.Vector`
    :param vv: In-plane v-axis.
    :type vv: :class:`.Vector`

    .. note::
        The constructor does not check that the three axes are orthogonal.
        :class:`.CreateGeom` always builds a right-handed frame.
    """

    def __init__(self, p0, vn, vu, vv):
        super(Plane, self).__init__('plane')
        self._p0 = p0
        self._vn = vn
        self._vu = vu
        self._vv = vv

    def __call__(self, u, v, w=0., rtype='Point'):
        return self.eval(u, v, w, rtype)

    @property
    def p0(self):
        return self._p0

    @property
    def vn(self):
        return self._vn

    @property
    def vu(self):
        return self._vu

    @property
    def vv(self):
        return self._vv

    def eval(self, u=0., v=0., w=0., rtype='Point'):
        """
        Point at (u, v) in the plane, lifted *w* along the normal.

        :rtype: :class:`.Point` or ndarray
        """
        pnt = (self._p0.xyz + u * self._vu.ijk + v * self._vv.ijk +
               w * self._vn.ijk)
        if is_array_type(rtype):
            return pnt
        return Point(pnt)

    def norm(self, u=0., v=0., rtype='Vector'):
        """
        Unit normal, rooted at the point (u, v) when returned as a
        :class:`.Vector`.
        """
        vnorm = self._vn.ijk
        if is_array_type(rtype):
            return vnorm
        return Vector(vnorm, self.eval(u, v))

    def dist2pnt(self, p):
        """
        Signed distance from the plane to *p*. Positive on the side the
        normal points to.

        :param p: Point.
        :type p: :class:`.Point` or array_like

        :rtype: float
        """
        return point_to_plane(self._p0.xyz, self._vn.vxyz, p, signed=True)

    def closest_point(self, p, rtype='Point'):
        """
        Foot of the perpendicular from *p*.

        :return: In-plane parameters and the point ((u, v), pnt).
        :rtype: tuple
        """
        uv, pnt, _ = project_point_to_plane(p, self)
        if is_array_type(rtype):
            return uv, pnt
        return uv, Point(pnt)
