"""
Clipping of a polyline by a rectangle.

Clipping happens in two phases. The segment tree is first traversed to sort
its nodes out against the rectangle: nodes entirely inside contribute their
whole range of segments, which are merged in a :class:`SegmentUnion`, while
leaves crossing the rectangle's boundary are kept on a heap. Both are then
consumed in increasing index order to rebuild the clipped pieces, copying the
inside runs of coordinates and cutting the crossing segments.
"""
import heapq
import logging

from .segment_union import SegmentUnion

logger = logging.getLogger(__name__)


class Clipper():
    """
    Clips the polyline indexed by a segment tree with a rectangle.

    A clipper is single use: build one per call to :meth:`clip`.

    Args:
        rect (Envelope): the clipping rectangle.
        tree (SegmentRTree): tree over the polyline to clip.
    """

    def __init__(self, rect, tree):
        self.rect = rect
        self.tree = tree
        self.output = []
        self._current = []
        self._last_index = None

    def clip(self):
        """
        Returns:
            list of lists of ``(x, y)`` tuples: the pieces of the polyline
            inside the rectangle, in the order of the polyline.
        """
        if self.tree.is_empty:
            return []
        contained, crossing = self.find_relevant_segments()
        self.build_output(contained, crossing)
        self.reconnect_ring()
        return self.output

    def find_relevant_segments(self):
        """
        Sort the tree's nodes out against the rectangle.

        Returns:
            tuple: ``(contained, crossing)``. ``contained`` is the
            :class:`SegmentUnion` of the index ranges inside the rectangle,
            ``crossing`` a min-heap of ``(low, high)`` for the segments
            crossing its boundary.
        """
        tree = self.tree
        contained = SegmentUnion()
        crossing = []
        stack = [tree.root]
        while stack:
            node = stack.pop()
            envel = tree.envelope_of(node)
            if not self.rect.intersects(envel):
                continue
            if self.rect.contains(envel):
                contained.add(*tree.range_of(node))
            elif tree.is_leaf(node):
                heapq.heappush(crossing, tree.range_of(node))
            else:
                stack.extend(tree.children_of(node))
        logger.debug("Clip by %s: %d contained ranges, %d crossing segments",
                     self.rect, len(contained) // 2, len(crossing))
        return contained, crossing

    def build_output(self, contained, crossing):
        while crossing or not contained.is_empty():
            if crossing and (contained.is_empty()
                             or crossing[0][0] < contained.peek()):
                self._push_crossing(heapq.heappop(crossing))
            else:
                self._push_contained(contained.pop())
        self._flush()

    def _push_contained(self, interval):
        low, high = interval
        if low == self._last_index:
            low += 1
        else:
            self._flush()
        self._current.extend(
            tuple(c) for c in self.tree.coords[low:high + 1].tolist())
        self._last_index = high

    def _push_crossing(self, interval):
        low, high = interval
        seg_start, seg_end = self.tree.segment_at(low)
        clipped = self.rect.intersect_segment(seg_start, seg_end)
        if clipped is None:
            return
        entry, exit_ = clipped
        if low != self._last_index:
            self._flush()
            self._current.append(entry)
        if exit_ != entry:
            self._current.append(exit_)
        if exit_ == seg_end:
            self._last_index = high

    def _flush(self):
        if self._current:
            self.output.append(self._current)
            self._current = []

    def reconnect_ring(self):
        """
        Join the first and last pieces of a ring cut at its closing vertex.

        A ring whose first coordinate is inside the rectangle is clipped into
        a last piece ending at that coordinate and a first piece starting
        there. They are a single piece of the ring.
        """
        output = self.output
        coords = self.tree.coords
        closed = coords.shape[0] > 1 and (coords[0] == coords[-1]).all()
        if closed and len(output) > 1 and output[0][0] == output[-1][-1]:
            last = output.pop()
            output[0] = last[:-1] + output[0]


def clip(rect, tree):
    """Clip the polyline indexed by `tree` with the rectangle `rect`."""
    return Clipper(rect, tree).clip()
