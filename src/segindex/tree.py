"""
Packed R-tree over the segments of a polyline.
"""
import collections

import numpy

from . import packing
from .envelope import Envelope


Node = collections.namedtuple("Node", "level offset")
# A node is addressed by its level (0 for leaves) and its position within the
# level. Nodes are plain handles: all data lives in the tree's arrays.


class SegmentRTree():
    """
    R-tree whose leaves are the segments of an ordered coordinate sequence.

    Leaves are never reordered, so the leaves below any node are consecutive
    segments: every node covers a contiguous range ``[low, high]`` of
    coordinate indices, which is computed from the node's level and offset
    rather than stored.

    As in a classical packed R-tree, siblings are stored in arrays instead of
    linked lists, one envelope array per level. The tree is immutable once
    built; a modified polyline needs a new tree.

    Args:
        coords: ``N x 2`` coordinates. A float ``numpy`` array is referenced,
            not copied, and must not be modified while the tree is in use.
        degree (int, optional): maximal number of children of a node.
            Defaults to 16. Values below 2 are raised to 2.

    Attributes:
        coords (array): the indexed coordinates.
        envelopes (list of arrays): ``[x_min, y_min, x_max, y_max]`` arrays
            per level, leaves first.
    """

    def __init__(self, coords, degree=packing.DEFAULT_DEGREE):
        coords = numpy.asarray(coords, dtype=float)
        if coords.ndim != 2:
            coords = coords.reshape(-1, 2)
        self.coords = coords
        self._degree = max(int(degree), 2)
        self.envelopes = packing.pack_segments(self.coords, self._degree)
        self._sizes = packing.level_sizes(len(self), self._degree)

    def __repr__(self):
        return "<{} segments={} degree={} height={}>".format(
            self.__class__.__name__, len(self), self._degree, self.height)

    def __len__(self):
        """Returns the number of segments."""
        return max(self.coords.shape[0] - 1, 0)

    @property
    def degree(self):
        return self._degree

    @property
    def is_empty(self):
        """Boolean: Is the tree empty?"""
        return not self.envelopes

    @property
    def height(self):
        """Level of the root, 0 when the root is a leaf."""
        return len(self.envelopes) - 1

    @property
    def root(self):
        if self.is_empty:
            raise ValueError("Segment tree is empty")
        return Node(self.height, 0)

    @property
    def envelope(self):
        """Envelope of the whole polyline."""
        return self.envelope_of(self.root)

    def is_leaf(self, node):
        return node.level == 0

    def children_of(self, node):
        """Ordered children of `node`, empty for a leaf."""
        if node.level == 0:
            return []
        child_level = node.level - 1
        first = self._degree * node.offset
        last = min(first + self._degree, self._sizes[child_level])
        return [Node(child_level, offset) for offset in range(first, last)]

    def range_of(self, node):
        """
        Range of coordinate indices covered by `node`.

        Returns:
            tuple: ``(low, high)``. Segment ``i`` joins coordinates ``i`` and
            ``i + 1``, so a leaf has ``high == low + 1``.
        """
        width = self._degree ** node.level
        low = width * node.offset
        return (low, min(low + width, len(self)))

    def envelope_of(self, node):
        return Envelope(*self.envelopes[node.level][node.offset].tolist())

    def coordinate(self, idx):
        return tuple(self.coords[idx].tolist())

    def segment_at(self, idx):
        return (self.coordinate(idx), self.coordinate(idx + 1))

    def depth_first(self, node=None):
        """Depth-first iterator on the nodes below `node` (root by default)."""
        if self.is_empty:
            return
        stack = [self.root if node is None else node]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(self.children_of(node)))

    def search(self, predicate):
        """
        Branch-and-bound search of the segments.

        Args:
            predicate (callable): takes an :class:`Envelope` and returns
                whether the subtree with this envelope may hold matches.

        Returns:
            list of int: indices of the matching segments, sorted.
        """
        if self.is_empty:
            return []
        result = []
        stack = [self.root]
        while stack:
            node = stack.pop()
            if not predicate(self.envelope_of(node)):
                continue
            if node.level == 0:
                result.append(node.offset)
            else:
                stack.extend(self.children_of(node))
        return sorted(result)

    def query_envelope(self, envel):
        """Segments whose envelope intersects `envel`."""
        return self.search(envel.intersects)

    def query_point(self, point):
        """Segments whose envelope contains `point`."""
        return self.search(lambda envel: envel.contains_point(point))
