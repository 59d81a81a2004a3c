"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings and has_warning()
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from recmatrix.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _make(**kwargs):
    defaults = dict(
        params=FakeParams(value=42.0),
        info={"method": "test"},
        timing={"total_seconds": 0.01},
        backend_name="cpu",
    )
    defaults.update(kwargs)
    return Result(**defaults)


class TestResultConstruction:

    def test_fields(self):
        result = _make()
        assert result.params.value == 42.0
        assert result.info["method"] == "test"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu"

    def test_timing_optional(self):
        assert _make(timing=None).timing is None

    def test_default_warnings_empty(self):
        assert _make().warnings == ()


class TestResultImmutability:

    def test_cannot_reassign_params(self):
        result = _make()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=0.0)


class TestHasWarning:

    def test_substring_match(self):
        result = _make(warnings=("Matrix is nearly singular: |det| = 1e-13",))
        assert result.has_warning("nearly singular")

    def test_no_match(self):
        result = _make(warnings=("something else",))
        assert not result.has_warning("singular")

    def test_no_warnings(self):
        assert not _make().has_warning("anything")
