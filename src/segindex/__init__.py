"""
Segment R-trees: spatial indexing of polylines.

A classical R-tree indexes an unordered collection of geometries, and has to
sort and cluster them before packing them into nodes. The segments of a
polyline are ordered, and consecutive segments are already spatially close.
A segment R-tree keeps them in their order, so that every node covers a
contiguous run of the polyline. This makes building linear, and lets queries
replace whole runs by a shortcut: the chord of a run for winding numbers, or
a plain copy of coordinates for clipping.

On top of the index are provided point in ring tests, self and pairwise
intersection candidates, and clipping by a rectangle.
"""
from .envelope import Envelope  # noqa: F401
from .tree import Node, SegmentRTree  # noqa: F401
from .segment_union import SegmentUnion  # noqa: F401
from .containment import Containment, point_in_ring  # noqa: F401
from .intersections import (  # noqa: F401
    intersect_segments, pairwise_intersections, self_intersections)
from .clip import Clipper  # noqa: F401
from .geometry import LinearRing, LineString  # noqa: F401

__version__ = "0.1.0"
