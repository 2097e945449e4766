import numpy
import pytest


@pytest.fixture
def square():
    return [(0., 0.), (4., 0.), (4., 4.), (0., 4.), (0., 0.)]


@pytest.fixture
def rng():
    return numpy.random.default_rng(177)


@pytest.fixture
def star_ring(rng):
    """Factory of random star-shaped, hence simple, rings."""
    def make(size, center=(0., 0.)):
        # One vertex per angular sector keeps consecutive angles within pi.
        angles = ((numpy.arange(size) + rng.uniform(0., 0.9, size))
                  * 2 * numpy.pi / size)
        radii = rng.uniform(0.5, 1.5, size)
        coords = numpy.stack([center[0] + radii * numpy.cos(angles),
                              center[1] + radii * numpy.sin(angles)], axis=1)
        return numpy.concatenate([coords, coords[:1]])
    return make


@pytest.fixture
def random_walk(rng):
    """Factory of random, usually self-crossing, polylines."""
    def make(size, closed=False):
        coords = rng.uniform(0., 10., (size, 2))
        if closed:
            coords = numpy.concatenate([coords, coords[:1]])
        return coords
    return make


@pytest.fixture
def comb():
    """
    Ring with a long horizontal run of collinear vertices along y = 0, and
    teeth going up from it.
    """
    bottom = [(float(x), 0.) for x in range(0, 41)]
    teeth = []
    for x in range(40, 0, -4):
        teeth.extend([(x, 3.), (x - 1., 3.), (x - 1., 1.), (x - 2., 1.),
                      (x - 2., 3.), (x - 3., 3.), (x - 3., 1.)])
    return numpy.array(bottom + teeth + [(0., 1.), (0., 0.)])
