import collections.abc
import logging
import numbers
import time

import numpy

from . import util
from . import rules
from . import config as _config
from . import guard
from . import mesh
from . import subdivision

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 40
DEFAULT_BOX = util.Box(util.Vector(0, 0, 0), util.Vector.splat(DEFAULT_SIZE))


def configure(rule_set, depth, invert=False, randomize=False, anisotropic=False):
    """ Create a generation config.

    :param rule_set: `rules.RuleSet` or name of one of `rules.RULE_SETS`.
    :param depth: Number of subdivision levels, non-negative integer.
    :param invert: Keep the cells the rule set would remove and vice versa.
    :param randomize: Let every kept cell stop subdividing with probability 1/2.
    :param anisotropic: Use the asymmetric child sizing (size / 2 for negative
        offsets, size / 4 otherwise) instead of dividing by `rule_set.parts`.
    """
    options = _config.GenerationOptions.no_flags
    if invert:
        options |= _config.GenerationOptions.invert
    if randomize:
        options |= _config.GenerationOptions.randomize
    if anisotropic:
        options |= _config.GenerationOptions.anisotropic

    return _config.GenerationConfig(rules.rule_set(rule_set), depth, options)


def make_initial_box(value=None):
    """ Turn a box specification into `util.Box`.
    Accepts a box, None (default box), a size of a cube centered at origin
    or a vector-like of three edge lengths of a cuboid centered at origin. """
    if value is None:
        return DEFAULT_BOX
    elif isinstance(value, util.Box):
        return value
    elif isinstance(value, numbers.Real):
        return util.Box(util.Vector(0, 0, 0), value)
    elif isinstance(value, collections.abc.Iterable) and not isinstance(value, str):
        size = tuple(value)
        if len(size) != 3:
            raise ValueError("Initial box size must have three components, got {!r}".format(value))
        return util.Box(util.Vector(0, 0, 0), size)
    else:
        raise TypeError("Initial box must be a Box, a number, a size vector or None, got {!r}".format(value))


class FractalGenerator:
    """ Owns the state shared by consecutive generation runs: the random source
    and the guard that keeps runs from overlapping. """

    def __init__(self, random_source=None, seed=None):
        if random_source is None:
            random_source = numpy.random.default_rng(seed)
        self.random_source = random_source
        self.guard = guard.GenerationGuard()

    def regenerate(self, config, initial_box=None):
        """ Generate a new mesh for config.

        Returns the `mesh.GeneratedMesh`, or None if another run of this generator
        is still in progress and the request was dropped. """
        box = make_initial_box(initial_box)
        result = []

        def run(config):
            start = time.perf_counter()
            accumulator = mesh.MeshAccumulator()
            subdivision.subdivide(box, config.depth, config, accumulator.add, self.random_source)
            generated = accumulator.finish()
            logger.debug("Generated %i boxes (%i triangles) in %.3f s",
                         generated.box_count, generated.triangle_count,
                         time.perf_counter() - start)
            result.append(generated)

        if not self.guard.try_run(config, run):
            return None

        return result[0]


def regenerate(config, initial_box=None, random_source=None):
    """ Generate a single mesh without keeping a generator around. """
    return FractalGenerator(random_source).regenerate(config, initial_box)
