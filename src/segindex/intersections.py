"""
Candidate intersecting segments, by dual traversal of segment trees.

Both queries only compare envelopes: they yield candidate pairs, to be checked
with an exact segment predicate such as :func:`intersect_segments`.
Candidates are produced lazily, and a query can be restarted by calling it
again since trees are never modified.
"""


def self_intersections(tree):
    """
    Pairs of segments of `tree` whose envelopes intersect.

    The tree is traversed against itself. Pairs of identical nodes only
    descend into ordered pairs of children, so each pair of segments is met
    once.

    Note:
        Consecutive segments share a vertex and are always yielded, as are
        the first and last segments of a closed ring. Consumers must accept
        these expected intersections.

    Yields:
        tuple: ``(i, j)`` segment indices with ``i < j``.
    """
    if tree.is_empty:
        return
    stack = [(tree.root, tree.root)]
    while stack:
        left, right = stack.pop()
        if not tree.envelope_of(left).intersects(tree.envelope_of(right)):
            continue
        if tree.is_leaf(left) and tree.is_leaf(right):
            if left.offset < right.offset:
                yield (left.offset, right.offset)
            continue
        lchildren = tree.children_of(left)
        rchildren = tree.children_of(right)
        if left == right:
            stack.extend((lc, rc) for lc in lchildren for rc in rchildren
                         if lc.offset <= rc.offset)
        else:
            stack.extend((lc, rc) for lc in lchildren for rc in rchildren)


def pairwise_intersections(tree_a, tree_b):
    """
    Pairs of segments, one in each tree, whose envelopes intersect.

    At each step the node of higher level is expanded, so that both sides of
    a pair keep a similar granularity.

    Yields:
        tuple: ``(i, j)`` with ``i`` a segment of `tree_a` and ``j`` one of
        `tree_b`.
    """
    if tree_a.is_empty or tree_b.is_empty:
        return
    stack = [(tree_a.root, tree_b.root)]
    while stack:
        left, right = stack.pop()
        if not tree_a.envelope_of(left).intersects(tree_b.envelope_of(right)):
            continue
        if left.level == 0 and right.level == 0:
            yield (left.offset, right.offset)
        elif left.level >= right.level:
            stack.extend((lc, right) for lc in tree_a.children_of(left))
        else:
            stack.extend((left, rc) for rc in tree_b.children_of(right))


def _cross(ax, ay, bx, by):
    return ax * by - ay * bx


def intersect_segments(start_a, end_a, start_b, end_b):
    """
    Intersection of the segments A and B.

    Plain floating point arithmetic is used, no robustness is guaranteed for
    nearly degenerate configurations. Envelopes are not checked beforehand.

    Returns:
        None if the segments are disjoint. Otherwise a pair of points
        ``(start, end)``: equal for a single intersection point, the ends of
        the shared part for collinear overlapping segments.
    """
    start_a = (float(start_a[0]), float(start_a[1]))
    end_a = (float(end_a[0]), float(end_a[1]))
    start_b = (float(start_b[0]), float(start_b[1]))
    end_b = (float(end_b[0]), float(end_b[1]))
    if ((start_a == start_b and end_a == end_b)
            or (start_a == end_b and end_a == start_b)):
        return (start_a, end_a)

    dax, day = end_a[0] - start_a[0], end_a[1] - start_a[1]
    dbx, dby = end_b[0] - start_b[0], end_b[1] - start_b[1]
    ox, oy = start_b[0] - start_a[0], start_b[1] - start_a[1]
    da_x_db = _cross(dax, day, dbx, dby)
    offset_x_da = _cross(ox, oy, dax, day)

    if da_x_db == 0.:
        # Parallel segments: disjoint unless they are on the same line.
        if offset_x_da != 0.:
            return None
        da_2 = dax * dax + day * day
        if da_2 == 0.:
            return _point_on_segment(start_a, start_b, end_b)
        # Positions of B's endpoints along A, in units of A's length.
        t0 = (ox * dax + oy * day) / da_2
        t1 = t0 + (dax * dbx + day * dby) / da_2
        t_min, t_max = min(t0, t1), max(t0, t1)
        if t_min > 1. or t_max < 0.:
            return None
        return (_along(start_a, end_a, max(t_min, 0.)),
                _along(start_a, end_a, min(t_max, 1.)))

    ta = _cross(ox, oy, dbx, dby) / da_x_db
    tb = offset_x_da / da_x_db
    if 0. <= ta <= 1. and 0. <= tb <= 1.:
        point = _along(start_a, end_a, ta)
        return (point, point)
    return None


def _along(start, end, t):
    if t == 0.:
        return start
    if t == 1.:
        return end
    return (start[0] + t * (end[0] - start[0]),
            start[1] + t * (end[1] - start[1]))


def _point_on_segment(point, start, end):
    # A is reduced to a point, collinear with B.
    if (min(start[0], end[0]) <= point[0] <= max(start[0], end[0])
            and min(start[1], end[1]) <= point[1] <= max(start[1], end[1])):
        return (point, point)
    return None
