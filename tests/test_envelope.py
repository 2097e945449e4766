import numpy
import pytest

from segindex.envelope import Envelope, merge_groups, segment_envelopes


@pytest.fixture
def unit():
    return Envelope(0., 0., 1., 1.)


def test_intersects_is_closed(unit):
    assert unit.intersects(Envelope(1., 1., 2., 2.))
    assert unit.intersects(Envelope(0.2, 0.2, 0.4, 0.4))
    assert unit.intersects(Envelope(-1., 0.5, 2., 0.5))
    assert not unit.intersects(Envelope(1.1, 0., 2., 1.))
    assert not unit.intersects(Envelope(0., -2., 1., -0.1))


def test_contains(unit):
    assert unit.contains(unit)
    assert unit.contains(Envelope(0., 0.5, 0.5, 0.5))
    assert not unit.contains(Envelope(0., 0., 1.1, 1.))
    assert unit.contains_point((1., 0.))
    assert not unit.contains_point((1., 1.01))


def test_union_and_merge(unit):
    other = Envelope(-1., 0.5, 0.5, 3.)
    assert unit.union(other) == Envelope(-1., 0., 1., 3.)
    assert Envelope.merge([unit, other]) == Envelope(-1., 0., 1., 3.)
    assert Envelope.of_segment((3., -1.), (2., 5.)) == (2., -1., 3., 5.)
    assert Envelope.of_points([(0, 0), (2, -1), (1, 3)]) == (0., -1., 2., 3.)


@pytest.mark.parametrize("start, end, expected", [
    ((0.2, -0.2), (0.1, -0.1), None),
    ((0.2, -0.2), (0.2, 0.2), ((0.2, 0.0), (0.2, 0.2))),
    ((-0.2, -0.2), (1.2, 1.2), ((0.0, 0.0), (1.0, 1.0))),
    ((0.2, 0.2), (0.8, 0.8), ((0.2, 0.2), (0.8, 0.8))),
    ((0.0, -1.0), (0.0, 0.0), ((0.0, 0.0), (0.0, 0.0))),
    ((-1.0, 0.5), (3.0, 0.5), ((0.0, 0.5), (1.0, 0.5))),
    ((2.0, 0.5), (2.0, 0.5), None),
    ((-1.0, 2.0), (2.0, 2.0), None),
])
def test_intersect_segment(unit, start, end, expected):
    assert unit.intersect_segment(start, end) == expected


def test_intersect_segment_keeps_direction(unit):
    entry, exit_ = unit.intersect_segment((1.5, 0.5), (0.5, 0.5))
    assert entry == (1.0, 0.5)
    assert exit_ == (0.5, 0.5)


def test_segment_envelopes():
    coords = numpy.array([(0., 0.), (2., 1.), (1., -1.)])
    expected = numpy.array([[0., 0., 2., 1.], [1., -1., 2., 1.]])
    numpy.testing.assert_array_equal(segment_envelopes(coords), expected)


def test_merge_groups_with_partial_group():
    envelopes = numpy.array([
        [0., 0., 1., 1.],
        [1., 0., 2., 3.],
        [5., 5., 6., 6.],
    ])
    merged = merge_groups(envelopes, 2)
    numpy.testing.assert_array_equal(
        merged, numpy.array([[0., 0., 2., 3.], [5., 5., 6., 6.]]))
