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
Axis-aligned bounding rectangles.

Two flavours are provided. :class:`Envelope` is a scalar value type used while
walking the tree, one node at a time. :func:`segment_envelopes` and
:func:`merge_groups` work on ``N x 4`` arrays ``[x_min, y_min, x_max, y_max]``
and are used when packing a whole level at once.
'''
import collections

import numpy


class Envelope(collections.namedtuple(
        "Envelope", "x_min y_min x_max y_max")):
    '''Axis-aligned minimum bounding rectangle.

    All comparisons are on closed intervals: touching envelopes intersect.
    '''
    __slots__ = ()

    @classmethod
    def of_segment(cls, start, end):
        return cls(min(start[0], end[0]), min(start[1], end[1]),
                   max(start[0], end[0]), max(start[1], end[1]))

    @classmethod
    def of_points(cls, points):
        arr = numpy.asarray(points, dtype=float).reshape(-1, 2)
        mins = arr.min(0)
        maxs = arr.max(0)
        return cls(*mins.tolist(), *maxs.tolist())

    @staticmethod
    def merge(collection):
        arr = numpy.array([tuple(e) for e in collection], dtype=float)
        mins = arr[:, :2].min(0)
        maxs = arr[:, 2:].max(0)
        return Envelope(*mins.tolist(), *maxs.tolist())

    def __repr__(self):
        return ("Envelope(x_min={}, y_min={}, x_max={}, y_max={})"
                .format(*self))

    @property
    def width(self):
        return self.x_max - self.x_min

    @property
    def height(self):
        return self.y_max - self.y_min

    def center(self):
        return (0.5 * (self.x_min + self.x_max),
                0.5 * (self.y_min + self.y_max))

    def intersects(self, other):
        return (self.x_min <= other.x_max
                and self.x_max >= other.x_min
                and self.y_min <= other.y_max
                and self.y_max >= other.y_min)

    def contains(self, other):
        return (self.x_min <= other.x_min
                and self.x_max >= other.x_max
                and self.y_min <= other.y_min
                and self.y_max >= other.y_max)

    def contains_point(self, point):
        x, y = point
        return (self.x_min <= x <= self.x_max
                and self.y_min <= y <= self.y_max)

    def union(self, other):
        return Envelope(min(self.x_min, other.x_min),
                        min(self.y_min, other.y_min),
                        max(self.x_max, other.x_max),
                        max(self.y_max, other.y_max))

    def intersect_segment(self, start, end):
        """
        Clip the segment ``start -> end`` to the envelope.

        Uses the Liang-Barsky parametrisation: each side restricts the
        parameter interval ``[t0, t1]`` of the segment, and the segment misses
        the envelope as soon as the interval becomes empty.

        Args:
            start (tuple): first endpoint ``(x, y)``.
            end (tuple): second endpoint ``(x, y)``.

        Returns:
            A pair ``(entry, exit)`` of points, in the direction of the
            segment, or None if the segment misses the envelope. Both points
            are equal when the segment only touches it.
        """
        start = (float(start[0]), float(start[1]))
        end = (float(end[0]), float(end[1]))
        if self.contains_point(start) and self.contains_point(end):
            return (start, end)
        if start == end:
            return None

        t0, t1 = 0., 1.
        dx = end[0] - start[0]
        dy = end[1] - start[1]
        sides = (
            (-dx, start[0] - self.x_min),
            (dx, self.x_max - start[0]),
            (-dy, start[1] - self.y_min),
            (dy, self.y_max - start[1]),
        )
        for p, q in sides:
            if p == 0.:
                # Parallel to this side: outside it means no intersection.
                if q < 0.:
                    return None
                continue
            r = q / p
            if p < 0.:
                if r > t1:
                    return None
                if r > t0:
                    t0 = r
            else:
                if r < t0:
                    return None
                if r < t1:
                    t1 = r
        entry = start if t0 == 0. else (start[0] + t0 * dx,
                                         start[1] + t0 * dy)
        exit_ = end if t1 == 1. else (start[0] + t1 * dx,
                                      start[1] + t1 * dy)
        return (entry, exit_)


def segment_envelopes(coords):
    """
    Envelopes of the consecutive segments of a coordinate array.

    Args:
        coords (array): ``N x 2`` array of coordinates.

    Returns:
        array: ``(N-1) x 4`` array of ``[x_min, y_min, x_max, y_max]``.
    """
    starts = coords[:-1]
    ends = coords[1:]
    return numpy.concatenate(
        [numpy.minimum(starts, ends), numpy.maximum(starts, ends)], axis=1)


def merge_groups(envelopes, group_size):
    """
    Merge consecutive runs of ``group_size`` envelopes.

    The last group may be partial. It is padded with neutral envelopes
    (``+inf`` mins and ``-inf`` maxs) that vanish in the reduction.

    Args:
        envelopes (array): ``M x 4`` envelope array.
        group_size (int): number of envelopes per group.

    Returns:
        array: ``ceil(M / group_size) x 4`` envelope array.
    """
    count = envelopes.shape[0]
    nb_groups = -(-count // group_size)
    padding = nb_groups * group_size - count
    mins = envelopes[:, :2]
    maxs = envelopes[:, 2:]
    if padding:
        mins = numpy.concatenate([mins, numpy.full((padding, 2), numpy.inf)])
        maxs = numpy.concatenate([maxs, numpy.full((padding, 2), -numpy.inf)])
    return numpy.concatenate([
        mins.reshape(nb_groups, group_size, 2).min(axis=1),
        maxs.reshape(nb_groups, group_size, 2).max(axis=1),
    ], axis=1)
