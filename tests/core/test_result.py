"""
Tests for the Result[P] envelope.

Validates:
    - Generic payload access
    - Frozen immutability
    - Default factories (warnings, provenance)
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pyols.core.result import Result, _default_provenance


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _make(**kwargs):
    defaults = dict(
        params=FakeParams(value=1.0),
        info={"method": "test"},
        timing=None,
        backend_name="cpu",
    )
    defaults.update(kwargs)
    return Result(**defaults)


# ═══════════════════════════════════════════════════════════════════════
# Construction and defaults
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:

    def test_basic_creation(self):
        result = _make(timing={"total_seconds": 0.01})
        assert result.params.value == 1.0
        assert result.info["method"] == "test"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu"

    def test_warnings_default_empty(self):
        assert _make().warnings == ()

    def test_provenance_auto_generated(self):
        result = _make()
        assert "pyols_version" in result.provenance
        assert "numpy_version" in result.provenance
        assert "scipy_version" in result.provenance

    def test_provenance_explicit_override(self):
        result = _make(provenance={"custom": "metadata"})
        assert result.provenance == {"custom": "metadata"}


class TestResultImmutability:

    def test_cannot_set_params(self):
        result = _make()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_warnings(self):
        result = _make()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new",)


class TestDefaultProvenance:

    def test_independent_copies(self):
        a = _default_provenance()
        b = _default_provenance()
        a["extra"] = 1
        assert "extra" not in b
