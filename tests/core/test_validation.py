"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d / check_2d: dimensionality checks
    - check_consistent_length: multi-array length matching
    - check_degrees_of_freedom: n > p
"""

import numpy as np
import pytest

from pyols.core.exceptions import DimensionError, InsufficientDataError, InvalidInputError
from pyols.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_degrees_of_freedom,
    check_finite,
    check_ndim,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "X")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_promoted(self):
        result = check_array(np.array([1.0, 2.0], dtype=np.float32), "X")
        assert result.dtype == np.float64

    def test_returns_copy(self):
        arr = np.array([1.0, 2.0, 3.0])
        result = check_array(arr, "X")
        result[0] = 99.0
        assert arr[0] == 1.0

    def test_rejects_mixed_types(self):
        with pytest.raises(InvalidInputError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_strings(self):
        with pytest.raises(InvalidInputError, match="non-numeric dtype"):
            check_array(["a", "b", "c"], "X")

    def test_rejects_booleans(self):
        with pytest.raises(InvalidInputError, match="non-numeric dtype"):
            check_array([True, False], "X")

    def test_rejects_complex(self):
        with pytest.raises(InvalidInputError, match="complex"):
            check_array([1 + 2j, 3.0], "X")

    def test_error_message_includes_name(self):
        with pytest.raises(InvalidInputError, match="my_var"):
            check_array(["a", "b"], "my_var")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "y")

    def test_nan_rejected(self):
        with pytest.raises(InvalidInputError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "y")

    def test_inf_rejected(self):
        with pytest.raises(InvalidInputError, match="2 Inf"):
            check_finite(np.array([np.inf, -np.inf, 0.0]), "y")


# ═══════════════════════════════════════════════════════════════════════
# Dimensionality
# ═══════════════════════════════════════════════════════════════════════


class TestDimensions:

    def test_check_ndim_passes(self):
        check_ndim(np.zeros((2, 3, 4)), 3, "T")

    def test_check_1d_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "y")

    def test_check_2d_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "X")

    def test_dimension_error_is_invalid_input(self):
        with pytest.raises(InvalidInputError):
            check_2d(np.zeros(3), "X")


class TestCheckConsistentLength:

    def test_matching_lengths(self):
        check_consistent_length(np.zeros(5), np.zeros((5, 2)), names=("a", "b"))

    def test_mismatch_lists_lengths(self):
        with pytest.raises(DimensionError, match="a=5, b=4"):
            check_consistent_length(np.zeros(5), np.zeros(4), names=("a", "b"))

    def test_names_count_mismatch(self):
        with pytest.raises(ValueError, match="must match number of names"):
            check_consistent_length(np.zeros(5), np.zeros(5), names=("a",))

    def test_single_array_passes(self):
        check_consistent_length(np.zeros(5), names=("a",))


# ═══════════════════════════════════════════════════════════════════════
# check_degrees_of_freedom
# ═══════════════════════════════════════════════════════════════════════


class TestCheckDegreesOfFreedom:

    def test_positive_df_passes(self):
        check_degrees_of_freedom(4, 3)

    def test_zero_df_rejected(self):
        with pytest.raises(InsufficientDataError, match="df=0"):
            check_degrees_of_freedom(3, 3)

    def test_negative_df_carries_counts(self):
        with pytest.raises(InsufficientDataError) as excinfo:
            check_degrees_of_freedom(2, 3)
        assert excinfo.value.n_observations == 2
        assert excinfo.value.n_parameters == 3
