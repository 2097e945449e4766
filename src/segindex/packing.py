"""
Packing of segment envelopes into tree levels.

A general R-tree bulk loader (e.g. sort-tile-recurse) first has to sort and
tile its inputs into spatially coherent pages. The segments of a polyline come
already ordered along the line, and consecutive segments are close to each
other, so this module packs them as they come: ``degree`` consecutive
envelopes form a parent, level after level, until a single root remains.
Without any sorting, building is linear in the number of segments.
"""
import logging

from . import envelope

logger = logging.getLogger(__name__)

DEFAULT_DEGREE = 16


def level_sizes(nb_items, degree=DEFAULT_DEGREE):
    """
    Number of nodes per level, from the leaves up to the root.

    Args:
        nb_items (int): number of leaves.
        degree (int): maximal number of children of a node.

    Returns:
        list of int: sizes, the first one being ``nb_items`` and the last one
        being 1. Empty when there are no leaves.
    """
    if nb_items <= 0:
        return []
    sizes = [nb_items]
    while sizes[-1] > 1:
        sizes.append(-(-sizes[-1] // degree))
    return sizes


def pack_segments(coords, degree=DEFAULT_DEGREE):
    """
    Build the envelope levels of a segment tree.

    Parameters:
        coords (array): ``N x 2`` float array of coordinates.
        degree (int): number of children merged into each parent.

    Returns:
        list of arrays: envelope arrays ``[x_min, y_min, x_max, y_max]`` per
        level, ``levels[0]`` being the leaves (one per segment) and
        ``levels[-1]`` the root.
    """
    if coords.shape[0] < 2:
        return []
    levels = [envelope.segment_envelopes(coords)]
    while levels[-1].shape[0] > 1:
        levels.append(envelope.merge_groups(levels[-1], degree))
    logger.debug("Packed %d segments into %d levels with degree %d",
                 levels[0].shape[0], len(levels), degree)
    return levels

