"""
Validation errors.

Errors are raised when geometries are checked before or while being wrapped
(see :mod:`segindex.validation`), never by the index or its queries.
"""


class ValidationError(ValueError):
    """Base class for invalid input geometries."""


class InvalidCoordinate(ValidationError):
    def __init__(self, index=None):
        self.index = index
        super().__init__(
            "Coordinate {} has a non-finite component".format(index))


class InvalidGeometry(ValidationError):
    """The coordinates do not describe a valid path or ring."""


class SinglePathCoordinate(InvalidGeometry):
    def __init__(self):
        super().__init__("Path has only 1 coordinate")


class TooFewCoordinates(InvalidGeometry):
    def __init__(self, count):
        self.count = count
        super().__init__(
            "Rings must have at least 4 coordinates, got {}".format(count))


class NotClosed(InvalidGeometry):
    def __init__(self):
        super().__init__(
            "Rings must have their first and last coordinate equal")


class DegenerateSegment(InvalidGeometry):
    def __init__(self, index, position):
        self.index = index
        self.position = position
        super().__init__(
            "Degenerate segment {} at {}".format(index, position))


class OverlappingSegments(InvalidGeometry):
    def __init__(self, first_index, second_index, start, end):
        self.first_index = first_index
        self.second_index = second_index
        self.start = start
        self.end = end
        super().__init__(
            "Overlapping segments {} {} between {} and {}"
            .format(first_index, second_index, start, end))


class SelfIntersection(InvalidGeometry):
    def __init__(self, first_index, second_index, position):
        self.first_index = first_index
        self.second_index = second_index
        self.position = position
        super().__init__(
            "Self-intersection for segments {} {} at {}"
            .format(first_index, second_index, position))


class MultipleIntersections(InvalidGeometry):
    def __init__(self, first, second):
        self.positions = (first, second)
        super().__init__(
            "Rings intersect more than once, at {} and {}"
            .format(first, second))
