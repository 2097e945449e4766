"""
Union of index intervals by boundary toggling.
"""
import heapq


class SegmentUnion():
    """
    Union of integer intervals, kept as a set of boundaries.

    Adding an interval toggles its two boundaries: a boundary present twice
    cancels out. When the added intervals only overlap on shared boundaries,
    which is the case for the disjoint ranges of a segment tree, the sorted
    boundaries read pairwise are the maximal merged intervals::

        >>> union = SegmentUnion()
        >>> union.add(3, 8); union.add(9, 11); union.add(8, 9)
        >>> union.get_all()
        [(3, 11)]

    The boundaries are held in a set, and in a min-heap for ordered access.
    Removed boundaries are dropped from the heap lazily.
    """
    __slots__ = ('_members', '_heap')

    def __init__(self):
        self._members = set()
        self._heap = []

    def __len__(self):
        """Number of boundaries, twice the number of intervals."""
        return len(self._members)

    def __repr__(self):
        return "SegmentUnion({})".format(self.get_all())

    def _toggle(self, boundary):
        if boundary in self._members:
            self._members.remove(boundary)
        else:
            self._members.add(boundary)
            heapq.heappush(self._heap, boundary)

    def add(self, low, high):
        self._toggle(low)
        self._toggle(high)

    def is_empty(self):
        return not self._members

    def peek(self):
        """Smallest boundary, or None if the union is empty."""
        heap = self._heap
        while heap and heap[0] not in self._members:
            heapq.heappop(heap)
        return heap[0] if heap else None

    def _pop_one(self):
        boundary = self.peek()
        heapq.heappop(self._heap)
        self._members.remove(boundary)
        return boundary

    def pop(self):
        """Removes and returns the first interval as a ``(low, high)`` pair."""
        if len(self._members) < 2:
            raise IndexError(
                "pop from a SegmentUnion with {} boundaries"
                .format(len(self._members))
            )
        return (self._pop_one(), self._pop_one())

    def get_all(self):
        bounds = sorted(self._members)
        return list(zip(bounds[::2], bounds[1::2]))
