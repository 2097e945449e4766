"""
Validation of paths and rings.

The segment tree and its queries assume valid input and never raise. The
checks below are meant to run before trusting a tree: they reject malformed
coordinates, and use the tree's own candidate queries to look for
self-intersections.
"""
import logging

import numpy
import toolz

from . import errors
from .intersections import (intersect_segments, pairwise_intersections,
                            self_intersections)

logger = logging.getLogger(__name__)

MIN_RING_SIZE = 4


def check_coordinates(coords):
    """
    Convert `coords` to an ``N x 2`` float array of finite values.

    Raises:
        InvalidCoordinate: for the first non-finite coordinate.
        InvalidGeometry: if `coords` cannot be read as ``(x, y)`` pairs.
    """
    try:
        arr = numpy.asarray(coords, dtype=float)
    except (TypeError, ValueError) as exc:
        raise errors.InvalidGeometry(
            "Coordinates must be (x, y) pairs of numbers") from exc
    if arr.size == 0:
        return arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise errors.InvalidGeometry(
            "Coordinates must be (x, y) pairs, got an array of shape {}"
            .format(arr.shape))
    finite = numpy.isfinite(arr).all(axis=1)
    if not finite.all():
        raise errors.InvalidCoordinate(int(numpy.argmin(finite)))
    return arr


def validate_ring(coords):
    """
    Check the shape of a ring: enough coordinates, first equal to last.

    Raises:
        TooFewCoordinates, NotClosed
    """
    if len(coords) < MIN_RING_SIZE:
        raise errors.TooFewCoordinates(len(coords))
    if tuple(coords[0]) != tuple(coords[-1]):
        raise errors.NotClosed()


def validate_path(tree):
    """
    Check that the path indexed by `tree` is simple.

    Consecutive segments may only share their common vertex, and the last
    segment of a closed path may only touch the first one at the closing
    vertex. Any other contact between segments is an error.

    Raises:
        SinglePathCoordinate, DegenerateSegment, OverlappingSegments,
        SelfIntersection
    """
    coords = tree.coords
    if coords.shape[0] == 1:
        raise errors.SinglePathCoordinate()
    for index, (start, end) in enumerate(
            toolz.sliding_window(2, coords.tolist())):
        if start == end:
            raise errors.DegenerateSegment(index, tuple(start))
    nb_candidates = 0
    for first, second in self_intersections(tree):
        nb_candidates += 1
        check_intersection(first, second, tree)
    logger.debug("Checked %d candidate pairs over %d segments",
                 nb_candidates, len(tree))


def check_intersection(first, second, tree):
    """
    Check the contact between segments `first` < `second` of `tree`.

    Raises:
        OverlappingSegments, SelfIntersection
    """
    first_start, first_end = tree.segment_at(first)
    second_start, second_end = tree.segment_at(second)
    isxn = intersect_segments(first_start, first_end, second_start, second_end)
    if isxn is None:
        return
    start, end = isxn
    if start != end:
        raise errors.OverlappingSegments(first, second, start, end)
    if second == first + 1:
        if start == second_start:
            return
    elif first == 0 and second == len(tree) - 1:
        if start == first_start and start == second_end:
            return
    raise errors.SelfIntersection(first, second, start)


def find_ring_intersection(tree_a, tree_b):
    """
    The point where two valid rings touch, if any.

    Rings of a valid polygon may touch at a single point at most.

    Returns:
        tuple or None: the touching point.

    Raises:
        OverlappingSegments: when the rings share a stretch of boundary.
        MultipleIntersections: when they meet at more than one point.
    """
    found = None
    for index_a, index_b in pairwise_intersections(tree_a, tree_b):
        isxn = intersect_segments(*tree_a.segment_at(index_a),
                                  *tree_b.segment_at(index_b))
        if isxn is None:
            continue
        start, end = isxn
        if start != end:
            raise errors.OverlappingSegments(index_a, index_b, start, end)
        if found is None:
            found = start
        elif found != start:
            raise errors.MultipleIntersections(found, start)
    return found
