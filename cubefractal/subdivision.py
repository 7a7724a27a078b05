import logging

from . import util

logger = logging.getLogger(__name__)

# Random draws at or above this value turn a kept cell into a leaf.
EARLY_TERMINATION_THRESHOLD = 0.5

# Full expansion larger than this is logged as a warning before starting.
LARGE_LEAF_COUNT = 2**22


def full_leaf_count(rule_set, depth, invert=False):
    """ Number of leaves a run without early termination produces. """
    return len(rule_set.offsets(invert)) ** depth


def anisotropic_size(size, offset):
    return util.Vector(*(s / 2 if o < 0 else s / 4 for s, o in zip(size, offset)))


def subdivide(box, depth, config, emit, random_source=None):
    """
    Recursively subdivide box according to config and call `emit` with every
    leaf box.

    On each level all offsets kept by the rule set (or all offsets it rejects,
    if config is inverted) become child boxes, shrunk by `rule_set.parts` and
    moved by offset times their own size. Children of the last level, and
    children that were randomly terminated early, are leaves.

    :param box: Starting `util.Box`.
    :param depth: Number of subdivision levels, zero emits `box` itself.
    :param config: `GenerationConfig`, its depth is ignored in favor of the
        `depth` parameter.
    :param emit: Callable receiving leaf boxes.
    :param random_source: Object with a `random()` method returning floats in
        [0, 1), eg. `numpy.random.Generator` or `random.Random`.
        Only used (and required) if config has the randomize option.
    """

    if depth < 0:
        raise ValueError("Depth must be positive or zero, got {}".format(depth))
    if config.randomize:
        if random_source is None:
            raise ValueError("Randomized generation needs a random source")
    else:
        random_source = None

    offsets = config.rule_set.offsets(config.invert)

    leaf_count = len(offsets) ** depth
    if leaf_count > LARGE_LEAF_COUNT:
        logger.warning("Subdividing to depth %i may produce up to %i boxes", depth, leaf_count)
    logger.debug("Subdividing %s with rule set %s to depth %i, %i of %i cells kept",
                 box, config.rule_set.name, depth, len(offsets), config.rule_set.neighborhood_size())

    offsets = [util.Vector(*offset) for offset in offsets]
    _subdivide(box, depth, offsets, config.rule_set.parts, config.anisotropic, random_source, emit)


def _subdivide(box, depth, offsets, parts, anisotropic, random_source, emit):
    if depth == 0:
        emit(box)
        return

    size = box.size.elementwise_div(parts)

    for offset in offsets:
        if anisotropic:
            size = anisotropic_size(box.size, offset)

        child = util.Box(box.center + offset.elementwise_mul(size), size)

        if random_source is not None and random_source.random() >= EARLY_TERMINATION_THRESHOLD:
            emit(child)
        else:
            _subdivide(child, depth - 1, offsets, parts, anisotropic, random_source, emit)


def leaf_boxes(box, depth, config, random_source=None):
    """ Return a list of all leaf boxes of the subdivision. """
    boxes = []
    subdivide(box, depth, config, boxes.append, random_source)
    return boxes
