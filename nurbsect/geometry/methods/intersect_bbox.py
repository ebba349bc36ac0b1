from __future__ import division

import logging

from numpy import array, float64

logger = logging.getLogger(__name__)


def bboxes_intersect(bbox1, bbox2, tol=0.):
    """
    Test if the bounding boxes intersect.

    :param BoundingBox bbox1: Bounding box 1.
    :param BoundingBox bbox2: Bounding box 2.
    :param float tol: Tolerance each box is expanded by along every axis.

    :return: *True* if they intersect, *False* if not. An unset box never
        intersects.
    :rtype: bool
    """
    if bbox1.is_empty or bbox2.is_empty:
        return False
    # The bounds properties are copies so the boxes are not modified.
    bounds1 = bbox1.bounds
    bounds2 = bbox2.bounds
    bounds1[:, 0] -= tol
    bounds1[:, 1] += tol
    bounds2[:, 0] -= tol
    bounds2[:, 1] += tol
    for i in range(3):
        if bounds1[i, 0] > bounds2[i, 1] or bounds2[i, 0] > bounds1[i, 1]:
            return False
    return True


def bbox_contains_point(bbox, pnt, tol=0.):
    """
    Test if a point is inside a bounding box.

    :param BoundingBox bbox: Bounding box.
    :param array_like pnt: Point to test.
    :param float tol: Tolerance the box is expanded by along every axis.

    :return: *True* if the point is inside the box, *False* if not.
    :rtype: bool
    """
    if bbox.is_empty:
        return False
    pnt = array(pnt, dtype=float64)
    bounds = bbox.bounds
    for i in range(3):
        if pnt[i] < bounds[i, 0] - tol or pnt[i] > bounds[i, 1] + tol:
            return False
    return True


def intersect_bbox_trees(bbt1, bbt2, tol=0.):
    """
    Find the pairs of leaves of two bounding box trees whose bounding boxes
    overlap.

    The trees are walked simultaneously using explicit stacks. A pair is
    discarded as soon as one node is empty or the boxes do not overlap. When
    both nodes are indivisible their payloads are returned as a candidate
    pair, otherwise the divisible node(s) are split and the child pairs are
    pushed.

    :param bbt1: Tree 1.
    :type bbt1: :class:`.BoundingBoxTree`
    :param bbt2: Tree 2.
    :type bbt2: :class:`.BoundingBoxTree`
    :param float tol: Tolerance for bounding box overlap and indivisibility.

    :return: Number of node pairs visited and the list of leaf payload pairs
        (nvisit, [(leaf1, leaf2), ...]). No particular order is implied.
    :rtype: tuple
    """
    stack1 = [bbt1]
    stack2 = [bbt2]
    results = []
    nvisit = 0
    while stack1:
        a = stack1.pop()
        b = stack2.pop()
        nvisit += 1

        if a.is_empty() or b.is_empty():
            continue
        if not bboxes_intersect(a.bbox(), b.bbox(), tol):
            continue

        a_indivisible = a.is_indivisible(tol)
        b_indivisible = b.is_indivisible(tol)
        if a_indivisible and b_indivisible:
            results.append((a.yield_(), b.yield_()))
            continue

        if a_indivisible:
            b1, b2 = b.split()
            stack1.extend((a, a))
            stack2.extend((b2, b1))
            continue

        if b_indivisible:
            a1, a2 = a.split()
            stack1.extend((a2, a1))
            stack2.extend((b, b))
            continue

        a1, a2 = a.split()
        b1, b2 = b.split()
        stack1.extend((a2, a2, a1, a1))
        stack2.extend((b2, b1, b2, b1))

    logger.debug('Bounding box tree intersection visited %d node pairs and '
                 'found %d candidate pairs.', nvisit, len(results))
    return nvisit, results
