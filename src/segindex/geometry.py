# Copyright (C) 2018 DataStorm
#
# This file is part of SegIndex.
#
# SegIndex is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# SegIndex is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# A copy of the GNU General Public License is available in the LICENSE
# file or at <http://www.gnu.org/licenses/>.
'''
Indexed polylines.

:class:`LineString` and :class:`LinearRing` pair a coordinate array with the
:class:`SegmentRTree` built over it, and expose the tree's queries as methods.
Coordinates may be given as a sequence of ``(x, y)`` pairs, an ``N x 2``
array, or a shapely geometry.
'''
import shapely.geometry

from . import containment, intersections, packing, validation
from .clip import Clipper
from .envelope import Envelope
from .tree import SegmentRTree


def _extract_coords(obj):
    # Duck typing on shapely's interface: polygons by their exterior ring,
    # lines by their coordinates.
    if hasattr(obj, "exterior"):
        return obj.exterior.coords
    if hasattr(obj, "coords"):
        return obj.coords
    return obj


def as_envelope(rect):
    '''An :class:`Envelope` from an envelope, a shapely geometry or bounds.'''
    if isinstance(rect, Envelope):
        return rect
    if hasattr(rect, "bounds"):
        return Envelope(*rect.bounds)
    return Envelope(*rect)


class LineString():
    """
    Polyline with a segment index.

    Parameters
    ----------
    coords: sequence of (x, y), array or shapely geometry
        The vertices of the line.
    degree: int
        Branching factor of the segment tree.
    validate: bool (default True)
        Whether to check that the line is simple on construction.
        Coordinates are always checked to be finite.

    Attributes
    ----------
    coords: numpy array
        ``N x 2`` array of the vertices.
    tree: SegmentRTree
        The index over the line's segments.
    """
    __slots__ = ('coords', 'tree')

    def __init__(self, coords, degree=packing.DEFAULT_DEGREE, validate=True):
        self.coords = validation.check_coordinates(_extract_coords(coords))
        self.tree = SegmentRTree(self.coords, degree=degree)
        if validate:
            self.validate()

    def __repr__(self):
        return "<{} with {} coordinates>".format(
            self.__class__.__name__, len(self))

    def __len__(self):
        return self.coords.shape[0]

    @property
    def envelope(self):
        return self.tree.envelope

    @property
    def is_closed(self):
        if len(self) < 2:
            return False
        return bool((self.coords[0] == self.coords[-1]).all())

    def validate(self):
        """Raises a ValidationError if the line is not simple."""
        validation.validate_path(self.tree)

    def self_intersections(self):
        """Candidate pairs of intersecting segments of the line."""
        return intersections.self_intersections(self.tree)

    def intersections(self, other):
        """Candidate pairs of intersecting segments of `self` and `other`."""
        return intersections.pairwise_intersections(self.tree, other.tree)

    def clip(self, rect):
        """
        Parts of the line inside the rectangle `rect`.

        Parameters
        ----------
        rect: Envelope, shapely geometry, or (x_min, y_min, x_max, y_max)

        Returns
        -------
        list
            List of lists of ``(x, y)`` tuples.
        """
        return Clipper(as_envelope(rect), self.tree).clip()

    def clip_to_shapely(self, rect):
        """Same as :meth:`clip`, as a shapely MultiLineString."""
        pieces = [p if len(p) > 1 else p * 2 for p in self.clip(rect)]
        return shapely.geometry.MultiLineString(pieces)

    def to_shapely(self):
        return shapely.geometry.LineString(self.coords)


class LinearRing(LineString):
    """
    Closed simple polyline, with at least 3 distinct vertices.

    The ring shape (closure, number of coordinates) is always checked, the
    absence of self-intersections only if `validate` is True.
    """
    __slots__ = ()

    def __init__(self, coords, degree=packing.DEFAULT_DEGREE, validate=True):
        coords = validation.check_coordinates(_extract_coords(coords))
        validation.validate_ring(coords)
        super().__init__(coords, degree=degree, validate=validate)

    def locate(self, point):
        """
        Position of `point` relative to the ring.

        Returns
        -------
        Containment
            Named tuple ``(inside, on_boundary)``.
        """
        return containment.point_in_ring(point, self.tree)

    def contains(self, point):
        """True if `point` is inside the ring or on its boundary."""
        located = self.locate(point)
        return located.inside or located.on_boundary

    def touching_point(self, other):
        """
        The single point where `self` and the ring `other` touch, or None.

        Raises a ValidationError if they meet more than once.
        """
        if not self.envelope.intersects(other.envelope):
            return None
        return validation.find_ring_intersection(self.tree, other.tree)

    def to_shapely(self):
        return shapely.geometry.LinearRing(self.coords)
