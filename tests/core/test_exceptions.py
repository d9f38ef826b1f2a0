"""
Tests for the pyols exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyOLSError)
    - Diagnostic attributes on SingularMatrixError and InsufficientDataError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pyols.core.exceptions import (
    DimensionError,
    InsufficientDataError,
    InvalidInputError,
    NumericError,
    PyOLSError,
    SingularMatrixError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyOLSError."""

    def test_invalid_input_is_pyols_error(self):
        with pytest.raises(PyOLSError):
            raise InvalidInputError("bad input")

    def test_dimension_error_is_invalid_input(self):
        with pytest.raises(InvalidInputError):
            raise DimensionError("wrong shape")

    def test_insufficient_data_is_pyols_error(self):
        with pytest.raises(PyOLSError):
            raise InsufficientDataError("too few rows")

    def test_insufficient_data_is_not_invalid_input(self):
        err = InsufficientDataError("too few rows")
        assert not isinstance(err, InvalidInputError)

    def test_singular_matrix_error_is_numeric_error(self):
        with pytest.raises(NumericError):
            raise SingularMatrixError("singular")

    def test_numeric_error_is_not_invalid_input(self):
        assert not isinstance(NumericError("x"), InvalidInputError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:
    """SingularMatrixError carries matrix diagnostic attributes."""

    def test_all_attributes(self):
        err = SingularMatrixError(
            "X is rank-deficient",
            matrix_name="X",
            condition_number=1e18,
            rank=2,
            expected_rank=3,
        )
        assert str(err) == "X is rank-deficient"
        assert err.matrix_name == "X"
        assert err.condition_number == 1e18
        assert err.rank == 2
        assert err.expected_rank == 3

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.condition_number is None
        assert err.rank is None
        assert err.expected_rank is None


class TestInsufficientDataError:

    def test_attributes_and_df(self):
        err = InsufficientDataError("n <= p", n_observations=2, n_parameters=3)
        assert err.n_observations == 2
        assert err.n_parameters == 3
        assert err.df_residual == -1

    def test_df_none_without_counts(self):
        err = InsufficientDataError("n <= p")
        assert err.df_residual is None
