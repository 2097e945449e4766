"""
Point in ring test by winding number.

The winding number of a ring around a point is accumulated over the segment
tree. Subtrees which cannot meet the horizontal ray going right from the
point are skipped. A subtree lying entirely to the right of the point is not
explored either: its part of the ring, from ``coords[low]`` to
``coords[high]``, crosses the ray exactly as the chord between these two
coordinates does, since it cannot wind around a point it never reaches.
"""
import collections

import toolz


Containment = collections.namedtuple("Containment", "inside on_boundary")


def winding_number(point, start, end):
    """
    Contribution of the segment ``start -> end`` to the winding number.

    Crossings of the rightward ray from `point` are counted with half-open
    intervals: an upward segment counts when ``start.y <= y < end.y``, a
    downward one when ``end.y <= y < start.y``. A vertex shared by two
    segments is therefore counted once.

    Returns:
        int: 1 for an upward crossing with `point` strictly on the left, -1
        for a downward crossing with `point` strictly on the right, else 0.
    """
    x, y = point
    # Both halves of the cross product (end - start) x (point - start)
    lx = (end[0] - start[0]) * (y - start[1])
    rx = (end[1] - start[1]) * (x - start[0])
    if start[1] <= y:
        if end[1] > y and lx > rx:
            return 1
    elif end[1] <= y and lx < rx:
        return -1
    return 0


def on_segment(point, start, end):
    """True if `point` lies on the closed segment ``start -> end``."""
    x, y = point
    if not (min(start[0], end[0]) <= x <= max(start[0], end[0])
            and min(start[1], end[1]) <= y <= max(start[1], end[1])):
        return False
    return ((end[0] - start[0]) * (y - start[1])
            == (end[1] - start[1]) * (x - start[0]))


def point_in_ring(point, tree):
    """
    Locate `point` with respect to the ring indexed by `tree`.

    The ring is assumed to be valid (closed and simple); this is not checked.

    Args:
        point (tuple): ``(x, y)``.
        tree (SegmentRTree): tree over the ring's coordinates.

    Returns:
        Containment: ``inside`` is True when the winding number is non-zero,
        ``on_boundary`` when the point lies on one of the segments.
    """
    x, y = float(point[0]), float(point[1])
    point = (x, y)
    if tree.is_empty:
        return Containment(False, False)
    coords = tree.coords
    wn = 0
    on_boundary = False
    stack = [tree.root]
    while stack:
        node = stack.pop()
        envel = tree.envelope_of(node)
        if envel.y_min > y or envel.y_max < y or envel.x_max < x:
            continue
        is_leaf = tree.is_leaf(node)
        if envel.x_min > x or is_leaf:
            low, high = tree.range_of(node)
            start = tuple(coords[low].tolist())
            end = tuple(coords[high].tolist())
            if is_leaf and not on_boundary and envel.x_min <= x:
                on_boundary = on_segment(point, start, end)
            wn += winding_number(point, start, end)
        else:
            stack.extend(tree.children_of(node))
    return Containment(wn != 0, on_boundary)


def brute_force_winding_number(point, coords):
    """Winding number of `coords` around `point`, segment by segment."""
    point = (float(point[0]), float(point[1]))
    return sum(winding_number(point, tuple(start), tuple(end))
               for start, end in toolz.sliding_window(2, coords))
