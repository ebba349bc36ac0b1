"""Test bounding boxes, lazy curve trees and their simultaneous traversal."""

import unittest

from numpy.testing import assert_allclose

from nurbsect.config import Settings
from nurbsect.geometry.bbox_tree import BoundingBoxTree, LazyCurveBBT
from nurbsect.geometry.bounding_box import BoundingBox
from nurbsect.geometry.creator import CreateGeom
from nurbsect.geometry.methods.geom_utils import is_curve_flat
from nurbsect.geometry.methods.intersect_bbox import (bboxes_intersect,
                                                      intersect_bbox_trees)
from nurbsect.geometry.nurbs_curve import NurbsCurve


def wavy_curve():
    cp = [(0, 0), (1, 2), (2, -2), (3, 2), (4, -2), (5, 2), (6, 0)]
    uk = [0, 0, 0, 0, 0.25, 0.5, 0.75, 1, 1, 1, 1]
    return NurbsCurve(cp, uk, 3)


class TestBoundingBox(unittest.TestCase):

    def test_empty(self):
        bbox = BoundingBox()
        self.assertTrue(bbox.is_empty)
        self.assertEqual(bbox.diagonal_length(), 0.)
        self.assertFalse(bbox.intersects(BoundingBox([(0, 0, 0)]), 1.))
        self.assertFalse(bbox.contains((0, 0, 0)))

    def test_add_points(self):
        bbox = BoundingBox([(0, 0, 0), (1, 2, 3)])
        bbox.add_points([(-1, 0.5, 0.5)])
        assert_allclose(bbox.min, [-1, 0, 0])
        assert_allclose(bbox.max, [1, 2, 3])
        self.assertAlmostEqual(bbox.diagonal_length(), (4 + 4 + 9) ** 0.5)

    def test_overlap(self):
        bbox1 = BoundingBox([(0, 0, 0), (1, 1, 1)])
        bbox2 = BoundingBox([(1, 1, 1), (2, 2, 2)])
        bbox3 = BoundingBox([(1.5, 0, 0), (2, 1, 1)])
        self.assertTrue(bbox1.intersects(bbox2))
        self.assertTrue(bboxes_intersect(bbox2, bbox1))
        self.assertFalse(bbox1.intersects(bbox3))
        self.assertFalse(bbox1.intersects(bbox3, 0.2))
        self.assertTrue(bbox1.intersects(bbox3, 0.25))

    def test_overlap_does_not_modify(self):
        bbox1 = BoundingBox([(0, 0, 0), (1, 1, 1)])
        bbox2 = BoundingBox([(2, 0, 0), (3, 1, 1)])
        bounds1 = bbox1.bounds
        bounds2 = bbox2.bounds
        self.assertTrue(bbox1.intersects(bbox2, 1.))
        assert_allclose(bbox1.bounds, bounds1)
        assert_allclose(bbox2.bounds, bounds2)

    def test_bounds_is_copy(self):
        bbox = BoundingBox([(0, 0, 0), (1, 1, 1)])
        bounds = bbox.bounds
        bounds[0, 0] = -10.
        self.assertEqual(bbox.xmin, 0.)

    def test_contains(self):
        bbox = BoundingBox([(0, 0, 0), (1, 1, 1)])
        self.assertTrue(bbox.contains((0.5, 0.5, 0.5)))
        self.assertTrue(bbox.contains((1, 1, 1)))
        self.assertFalse(bbox.contains((1.1, 0.5, 0.5)))
        self.assertTrue(bbox.contains((1.1, 0.5, 0.5), 0.1 + 1.0e-12))

    def test_union(self):
        bbox = BoundingBox([(0, 0, 0)]).union(BoundingBox([(1, 2, 3)]))
        assert_allclose(bbox.min, [0, 0, 0])
        assert_allclose(bbox.max, [1, 2, 3])
        self.assertFalse(BoundingBox().union(BoundingBox()).intersects(bbox))

    def test_flat_box(self):
        # A straight curve along x has a zero-thickness box.
        c = CreateGeom.line_curve((0, 1, 0), (4, 1, 0))
        bbox = c.get_bbox()
        self.assertFalse(bbox.is_empty)
        self.assertAlmostEqual(bbox.diagonal_length(), 4.)
        self.assertEqual(str(BoundingBox()), 'BoundingBox = (unset)')


class TestLazyCurveBBT(unittest.TestCase):

    def test_is_tree(self):
        self.assertIsInstance(LazyCurveBBT(wavy_curve()), BoundingBoxTree)
        with self.assertRaises(TypeError):
            BoundingBoxTree()

    def test_bezier_is_indivisible(self):
        c = CreateGeom.bezier_curve([(0, 0), (1, 1), (2, 0)])
        self.assertTrue(LazyCurveBBT(c).is_indivisible(0.))

    def test_small_box_is_indivisible(self):
        node = LazyCurveBBT(wavy_curve())
        self.assertFalse(node.is_indivisible(1.))
        self.assertTrue(node.is_indivisible(100.))

    def test_split_is_cached(self):
        c = wavy_curve()
        node = LazyCurveBBT(c)
        left, right = node.split()
        self.assertIs(node.split()[0], left)
        self.assertIs(node.split()[1], right)
        self.assertAlmostEqual(left.curve.b, 0.5)
        self.assertAlmostEqual(right.curve.a, 0.5)
        self.assertIs(node.yield_(), c)

    def test_split_reaches_bezier(self):
        node = LazyCurveBBT(wavy_curve())
        left, _ = node.split()
        leaf, _ = left.split()
        self.assertTrue(leaf.is_indivisible(0.))
        self.assertAlmostEqual(leaf.curve.b, 0.25)

    def test_bbox_is_cached(self):
        node = LazyCurveBBT(wavy_curve())
        self.assertIs(node.bbox(), node.bbox())
        self.assertFalse(node.is_empty())

    def test_flatness(self):
        c = CreateGeom.bezier_curve([(0, 0), (1, 1), (2, 0)])
        self.assertTrue(is_curve_flat(c.n, c.cp, 1.))
        self.assertFalse(is_curve_flat(c.n, c.cp, 0.9))
        node = LazyCurveBBT(c, 0.3)
        self.assertFalse(node.is_indivisible(0.))
        # Each half bulges 0.25 / sqrt(1.25) from its chord.
        left, right = node.split()
        self.assertTrue(left.is_indivisible(0.))
        self.assertTrue(right.is_indivisible(0.))
        self.assertFalse(LazyCurveBBT(left.curve, 0.2).is_indivisible(0.))

    def test_narrow_domain_is_indivisible(self):
        node = LazyCurveBBT(wavy_curve())
        self.assertFalse(node.is_indivisible(0.))
        Settings.set_ptol(0.6)
        self.assertTrue(node.is_indivisible(0.))
        line = CreateGeom.line_curve((-1, 0, 0), (7, 0, 0))
        nvisit, pairs = intersect_bbox_trees(LazyCurveBBT(line), node)
        self.assertEqual(nvisit, 1)
        self.assertEqual(len(pairs), 1)


class TestIntersectBoundingBoxTrees(unittest.TestCase):

    def test_disjoint_trees(self):
        c1 = wavy_curve()
        c2 = CreateGeom.line_curve((0, 5, 0), (6, 5, 0))
        nvisit, pairs = intersect_bbox_trees(LazyCurveBBT(c1),
                                             LazyCurveBBT(c2))
        self.assertEqual(nvisit, 1)
        self.assertEqual(pairs, [])

    def test_both_indivisible(self):
        c1 = CreateGeom.line_curve((0, 0, 0), (1, 1, 0))
        c2 = CreateGeom.line_curve((0, 1, 0), (1, 0, 0))
        nvisit, pairs = intersect_bbox_trees(LazyCurveBBT(c1),
                                             LazyCurveBBT(c2))
        self.assertEqual(nvisit, 1)
        self.assertEqual(len(pairs), 1)
        self.assertIs(pairs[0][0], c1)
        self.assertIs(pairs[0][1], c2)

    def test_one_side_divisible(self):
        line = CreateGeom.line_curve((-1, 0, 0), (7, 0, 0))
        nvisit, pairs = intersect_bbox_trees(LazyCurveBBT(line),
                                             LazyCurveBBT(wavy_curve()))
        self.assertEqual(nvisit, 7)
        self.assertEqual(len(pairs), 4)
        for leaf1, leaf2 in pairs:
            self.assertIs(leaf1, line)
            self.assertTrue(leaf2.is_bezier)

    def test_tolerance_expands_boxes(self):
        c1 = CreateGeom.line_curve((0, 0, 0), (1, 0, 0))
        c2 = CreateGeom.line_curve((0, 0.1, 0), (1, 0.1, 0))
        _, pairs = intersect_bbox_trees(LazyCurveBBT(c1), LazyCurveBBT(c2))
        self.assertEqual(pairs, [])
        _, pairs = intersect_bbox_trees(LazyCurveBBT(c1), LazyCurveBBT(c2),
                                        0.2)
        self.assertEqual(len(pairs), 1)

    def test_flat_leaves(self):
        c = CreateGeom.bezier_curve([(0, 0), (1, 1), (2, 0)])
        line = CreateGeom.line_curve((-1, 0.25, 0), (3, 0.25, 0))
        nvisit, pairs = intersect_bbox_trees(LazyCurveBBT(line, 0.3),
                                             LazyCurveBBT(c, 0.3))
        self.assertEqual(nvisit, 3)
        self.assertEqual(len(pairs), 2)
        assert_allclose(sorted(leaf2.a for _, leaf2 in pairs), [0., 0.5])

    def test_all_leaf_pairs_found(self):
        c1 = wavy_curve()
        c2 = CreateGeom.line_curve((-1, 0, 0), (7, 0, 0))
        nvisit, pairs = intersect_bbox_trees(LazyCurveBBT(c1),
                                             LazyCurveBBT(c2))
        # The curve decomposes into four Bezier segments that all cross
        # y = 0.
        self.assertEqual(len(pairs), 4)
        self.assertEqual(nvisit, 7)
        starts = sorted(leaf1.a for leaf1, _ in pairs)
        assert_allclose(starts, [0., 0.25, 0.5, 0.75])


if __name__ == '__main__':
    unittest.main()
