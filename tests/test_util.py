import math

import hypothesis
import hypothesis.strategies
from pytest import approx

import cubefractal


def test_kahan_sum_keeps_small_volumes():
    """ Volumes of deep level boxes are tiny compared to the running total """
    values = [1e8] + [1e-9] * 10000

    assert sum(values) == 1e8, "Plain summation is expected to lose the small values"
    assert cubefractal.util.KahanSummation.sum(values) == approx(1e8 + 1e-5, rel=1e-15)


def test_kahan_accumulator():
    s = cubefractal.util.KahanSummation()
    for _ in range(1000):
        s += 0.1
    assert s.result == approx(100, rel=1e-15)


@hypothesis.given(hypothesis.strategies.lists(
    hypothesis.strategies.floats(min_value=0, max_value=1e6)))
def test_kahan_sum_matches_fsum(values):
    assert cubefractal.util.KahanSummation.sum(values) == approx(math.fsum(values), rel=1e-12, abs=1e-9)


def test_kahan_sum_empty():
    assert cubefractal.util.KahanSummation.sum([]) == 0


def test_status_block(capsys):
    with cubefractal.util.status_block("counting"):
        pass

    out = capsys.readouterr().out
    assert out.startswith("counting...")
    assert out.rstrip().endswith(" s")
