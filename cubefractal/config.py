import collections
import numbers

import flags

from . import rules


class GenerationOptions(flags.Flags):
    """ Switches changing how a rule set is applied during subdivision """
    invert = ()  # Keep exactly the cells the predicate rejects
    randomize = ()  # Each kept cell may randomly stop subdividing early
    anisotropic = ()  # Child size is size / 2 for negative offsets, size / 4 otherwise


class GenerationConfig(collections.namedtuple("GenerationConfig", "rule_set depth options")):
    """ Immutable input of a single generation run. """
    __slots__ = ()

    def __new__(cls, rule_set, depth, options=GenerationOptions.no_flags):
        if not isinstance(rule_set, rules.RuleSet):
            raise TypeError("Rule set must be a RuleSet instance, got {!r}".format(rule_set))
        if isinstance(depth, bool) or not isinstance(depth, numbers.Integral):
            raise TypeError("Depth must be an integer, got {!r}".format(depth))
        if depth < 0:
            raise ValueError("Depth must be positive or zero, got {}".format(depth))
        if not isinstance(options, GenerationOptions):
            raise TypeError("Options must be GenerationOptions, got {!r}".format(options))

        return super().__new__(cls, rule_set, int(depth), options)

    def _replace(self, **kwargs):
        # namedtuple's own _replace goes through _make and skips __new__
        return self.__class__(**dict(self._asdict(), **kwargs))

    @property
    def invert(self):
        return GenerationOptions.invert in self.options

    @property
    def randomize(self):
        return GenerationOptions.randomize in self.options

    @property
    def anisotropic(self):
        return GenerationOptions.anisotropic in self.options

    def with_rule_set(self, rule_set):
        return self._replace(rule_set=rules.rule_set(rule_set))

    def with_depth(self, depth):
        return self._replace(depth=depth)

    def with_options(self, options):
        return self._replace(options=options)
