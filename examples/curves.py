import logging

from nurbsect.geometry.creator import CreateGeom
from nurbsect.geometry.intersector import IntersectCurveCurve
from nurbsect.geometry.point import Point

logging.basicConfig(level=logging.DEBUG)

p0 = Point((0, 0, 0))
p1 = Point((2, 2, 0))
p2 = Point((4, 3, 0))
p3 = Point((6, 1, 0))
p4 = Point((8, -2, 0))

c1 = CreateGeom.interpolate_points([p0, p1, p2, p3, p4])
print('Curve 1 length: {0}'.format(c1.length))

p0 = Point((5, -5, 0))
p1 = Point((10, 8, 0))

c2 = CreateGeom.interpolate_points([p0, p1])
print('Curve 2 length: {0}'.format(c2.length))

cci = IntersectCurveCurve(c1, c2)

print('Visited {0} node pairs.'.format(cci.nsub))
for (u1, u2), pi in zip(cci.parameters, cci.points):
    print('u1 = {0}, u2 = {1}, {2}'.format(u1, u2, pi))

# Each curve against a straight line crossing it.
c3 = CreateGeom.line_curve((3, -5, 0), (3, 10, 0))
cci = IntersectCurveCurve(c1, c3, workers=2)
print('{0} intersection(s), {1} failed refinement(s).'.format(cci.npts,
                                                             cci.nfail))
for pi in cci.points:
    print(pi)
