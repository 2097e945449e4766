import numpy
import pytest
import shapely.geometry

from segindex.containment import (Containment, brute_force_winding_number,
                                  on_segment, point_in_ring, winding_number)
from segindex.tree import SegmentRTree


@pytest.fixture
def square_tree(square):
    return SegmentRTree(square)


@pytest.mark.parametrize("point, expected", [
    ((2., 2.), Containment(True, False)),
    ((5., 5.), Containment(False, False)),
    ((-1., 2.), Containment(False, False)),
    ((2., 4.5), Containment(False, False)),
])
def test_square(square_tree, point, expected):
    assert point_in_ring(point, square_tree) == expected


@pytest.mark.parametrize("point", [
    (4., 2.), (0., 2.), (2., 0.), (2., 4.), (0., 0.), (4., 4.), (4., 0.),
])
def test_square_boundary(square_tree, point):
    assert point_in_ring(point, square_tree).on_boundary


def test_winding_number_half_open():
    # Upward segment right of the point
    assert winding_number((0., 0.5), (1., 0.), (1., 1.)) == 1
    # Downward segment right of the point
    assert winding_number((0., 0.5), (1., 1.), (1., 0.)) == -1
    # Segment on the left
    assert winding_number((2., 0.5), (1., 0.), (1., 1.)) == 0
    # The ray through a vertex counts the upper segment only
    assert winding_number((0., 1.), (1., 0.), (1., 1.)) == 0
    assert winding_number((0., 1.), (1., 1.), (1., 2.)) == 1
    # Horizontal segments never count
    assert winding_number((0., 1.), (1., 1.), (2., 1.)) == 0


def test_on_segment():
    assert on_segment((1., 1.), (0., 0.), (2., 2.))
    assert on_segment((2., 2.), (0., 0.), (2., 2.))
    assert not on_segment((3., 3.), (0., 0.), (2., 2.))
    assert not on_segment((1., 1.1), (0., 0.), (2., 2.))


def test_empty_tree():
    assert point_in_ring((0., 0.), SegmentRTree([])) == (False, False)


def test_orientation_does_not_matter(square):
    tree = SegmentRTree(square[::-1])
    assert point_in_ring((2., 2.), tree).inside
    assert not point_in_ring((5., 2.), tree).inside


@pytest.mark.parametrize("degree", [2, 4, 16])
def test_random_rings_against_shapely(star_ring, rng, degree):
    for _ in range(10):
        coords = star_ring(int(rng.integers(3, 300)))
        tree = SegmentRTree(coords, degree=degree)
        polygon = shapely.geometry.Polygon(coords)
        for x, y in rng.uniform(-1.6, 1.6, (50, 2)):
            located = point_in_ring((x, y), tree)
            assert located.inside == polygon.contains(
                shapely.geometry.Point(x, y))
            assert not located.on_boundary


@pytest.mark.parametrize("degree", [2, 3, 16])
def test_random_rings_against_brute_force(star_ring, rng, degree):
    for _ in range(10):
        coords = star_ring(int(rng.integers(3, 500)))
        tree = SegmentRTree(coords, degree=degree)
        # Points on vertices and on rows of vertices are included.
        points = numpy.concatenate([
            rng.uniform(-1.6, 1.6, (30, 2)),
            coords[:10],
            numpy.stack([rng.uniform(-1.6, 1.6, 10), coords[:10, 1]], axis=1),
        ])
        for point in points.tolist():
            expected = brute_force_winding_number(point, coords) != 0
            assert point_in_ring(point, tree).inside == expected


@pytest.mark.parametrize("degree", [2, 16])
def test_horizontal_run(comb, degree):
    tree = SegmentRTree(comb, degree=degree)
    xs = numpy.arange(-1., 42., 0.5)
    for y in (-0.5, 0., 0.5, 1., 2., 3., 3.5):
        for x in xs:
            expected = brute_force_winding_number((x, y), comb) != 0
            assert point_in_ring((x, y), tree).inside == expected


def test_horizontal_run_boundary(comb):
    tree = SegmentRTree(comb)
    assert point_in_ring((12.5, 0.), tree).on_boundary
    assert point_in_ring((12., 0.), tree).on_boundary
    assert point_in_ring((38.5, 1.), tree).on_boundary
    assert not point_in_ring((39.5, 1.), tree).on_boundary
    assert point_in_ring((39.5, 1.), tree).inside
    assert not point_in_ring((38.5, 2.), tree).inside
