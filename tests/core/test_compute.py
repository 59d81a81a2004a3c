"""
Tests for shared compute infrastructure: Timer and tolerance tiers.
"""

from fractions import Fraction

import pytest

from recmatrix.core.compute import (
    EXACT,
    FP64,
    FP64_LOOSE,
    MAX_EXPANSION_ORDER,
    Timer,
    select_tolerance,
    timed,
)


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_recorded(self):
        timer = Timer()
        timer.start()
        with timer.section('determinant'):
            pass
        with timer.section('adjugate'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'determinant', 'adjugate'}
        assert all(v >= 0.0 for v in result.values())

    def test_repeated_section_accumulates(self):
        timer = Timer()
        timer.start()
        for _ in range(3):
            with timer.section('loop'):
                pass
        timer.stop()
        assert 'loop' in timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_section_recorded_on_exception(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ValueError):
            with timer.section('failing'):
                raise ValueError("boom")
        timer.stop()
        assert 'failing' in timer.result()

    def test_timed_context(self):
        with timed() as timer:
            pass
        assert timer.result()['total_seconds'] >= 0.0


# ═══════════════════════════════════════════════════════════════════════
# Tolerance tiers
# ═══════════════════════════════════════════════════════════════════════


class TestSelectTolerance:

    def test_ints_are_exact(self):
        assert select_tolerance([1, 2, -3]) is EXACT

    def test_fractions_are_exact(self):
        assert select_tolerance([Fraction(1, 3), 2]) is EXACT

    def test_empty_is_exact(self):
        assert select_tolerance([]) is EXACT

    def test_floats_small_order(self):
        assert select_tolerance([1.0, 2], order=3) is FP64

    def test_floats_large_order(self):
        assert select_tolerance([1.0], order=7) is FP64_LOOSE

    def test_tiers_ordered(self):
        assert EXACT.rtol < FP64.rtol < FP64_LOOSE.rtol
        assert EXACT.atol < FP64.atol < FP64_LOOSE.atol


def test_default_expansion_bound():
    assert MAX_EXPANSION_ORDER == 10
