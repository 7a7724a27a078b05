""" Rules deciding which cells of a box's neighborhood survive one subdivision step.

A rule set divides a box into a grid of (2 * range + 1)**3 cells indexed by
integer offsets (i, j, k) from the center cell and keeps the cells whose
metric (i*i + j*j) * (i*i + k*k) * (j*j + k*k) satisfies its predicate.
The metric is zero exactly when at least two offset coordinates are zero,
which is what carves the cross shaped tunnels of a Menger sponge. """

import collections
import functools
import itertools
import math
import numbers

from . import util


def metric(i, j, k):
    ii = i * i
    jj = j * j
    kk = k * k
    return (ii + jj) * (ii + kk) * (jj + kk)


def menger_predicate(value):
    return value > 0


def jeruzalem_predicate(value):
    return value > 20 or value == 8


def neighborhood(r):
    """ All offsets of the cube [-r, r]**3, i changing slowest. """
    return itertools.product(range(-r, r + 1), repeat=3)


class RuleSet(collections.namedtuple("RuleSet", "name range parts predicate")):
    """ Description of one fractal family.

    `parts` is the divisor applied to box size when descending a level, either
    a single number or one number per axis. `predicate` gets the metric of an
    offset and returns whether the cell is kept. """
    __slots__ = ()

    def __new__(cls, name, range, parts, predicate):
        if isinstance(range, bool) or not isinstance(range, numbers.Integral):
            raise TypeError("Rule set range must be an integer, got {!r}".format(range))
        if range < 1:
            raise ValueError("Rule set range must be at least 1, got {}".format(range))

        if isinstance(parts, numbers.Real):
            parts = util.Vector.splat(parts)
        else:
            parts = util.Vector(*parts)
        if not all(math.isfinite(p) and p > 0 for p in parts):
            raise ValueError("Rule set parts must be finite and positive, got {}".format(parts))

        if not callable(predicate):
            raise TypeError("Rule set predicate must be callable")

        return super().__new__(cls, name, int(range), parts, predicate)

    def _replace(self, **kwargs):
        return self.__class__(**dict(self._asdict(), **kwargs))

    def includes(self, offset, invert=False):
        """ Return True if the cell at offset survives subdivision. """
        return bool(self.predicate(metric(*offset))) != bool(invert)

    def offsets(self, invert=False):
        """ Return a tuple of all surviving offsets of the neighborhood. """
        return _included_offsets(self, bool(invert))

    def neighborhood_size(self):
        return (2 * self.range + 1) ** 3


@functools.lru_cache(maxsize=64)
def _included_offsets(rule_set, invert):
    return tuple(offset for offset in neighborhood(rule_set.range)
                 if rule_set.includes(offset, invert))


def custom(name, range, parts, predicate):
    """ Create a rule set for a fractal family not provided by this module. """
    return RuleSet(name, range, parts, predicate)


MENGER = RuleSet("menger", 1, 3, menger_predicate)
JERUZALEM = RuleSet("jeruzalem", 2, 5, jeruzalem_predicate)

RULE_SETS = collections.OrderedDict((rs.name, rs) for rs in [MENGER, JERUZALEM])


def rule_set(value):
    """ Return a rule set either passed directly or looked up by its name. """
    if isinstance(value, RuleSet):
        return value

    try:
        return RULE_SETS[str(value).lower()]
    except KeyError:
        raise ValueError("Unknown rule set {!r}, available: {}".format(value, ", ".join(RULE_SETS)))
