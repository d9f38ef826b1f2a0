"""
Regression configuration.

RegressionConfig is the immutable record of what to fit: the predictor
columns, the response and whether to estimate an intercept. It replaces
a mutable builder: every change produces a new record.

    config = RegressionConfig.build([x1, x2], y)
    no_intercept = config.with_intercept(False)
    refit = RegressionConfig.from_solution(solution).with_response(y_new)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyols.core.exceptions import InvalidInputError
from pyols.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_2d,
    check_consistent_length,
)

if TYPE_CHECKING:
    from pyols.regression.solution import LinearSolution


@dataclass(frozen=True, eq=False)
class RegressionConfig:
    """
    Predictor columns, response and intercept flag for one fit.

    Construct via build() or from_solution(), not directly. Arrays are
    copied on construction and stored read-only, so later changes to
    the caller's arrays never reach a fit.
    """
    _predictors: NDArray[np.floating[Any]]
    _response: NDArray[np.floating[Any]]
    _has_intercept: bool = True

    @classmethod
    def build(
        cls,
        predictors: ArrayLike,
        response: ArrayLike,
        has_intercept: bool = True,
    ) -> RegressionConfig:
        """
        Validate inputs and build a configuration.

        Args:
            predictors: Predictor columns. A sequence of columns, a 2D array
                with one row per predictor column (k x n), or a single 1D column.
            response: Response vector (n,)
            has_intercept: Prepend a column of ones to the design matrix

        Raises:
            InvalidInputError: No predictors, non-numeric or non-finite values
            DimensionError: Columns and response differ in length
        """
        columns = as_predictor_columns(predictors)

        y = check_array(response, 'response')
        if y.ndim == 2 and y.shape[1] == 1:
            y = y.ravel()
        check_1d(y, 'response')
        check_finite(y, 'response')

        check_consistent_length(columns.T, y, names=('predictors', 'response'))

        columns.setflags(write=False)
        y.setflags(write=False)
        return cls(_predictors=columns, _response=y, _has_intercept=bool(has_intercept))

    @classmethod
    def from_solution(cls, solution: LinearSolution) -> RegressionConfig:
        """Configuration that reproduces an existing fit."""
        return cls.build(
            solution.predictors,
            solution.response,
            has_intercept=solution.has_intercept,
        )

    # === Derived configurations ===

    def with_predictors(self, predictors: ArrayLike) -> RegressionConfig:
        return RegressionConfig.build(predictors, self._response, self._has_intercept)

    def with_predictor(self, predictor: ArrayLike) -> RegressionConfig:
        """Replace all predictors with a single column."""
        column = check_array(predictor, 'predictor')
        check_1d(column, 'predictor')
        return RegressionConfig.build([column], self._response, self._has_intercept)

    def with_response(self, response: ArrayLike) -> RegressionConfig:
        return RegressionConfig.build(self._predictors, response, self._has_intercept)

    def with_intercept(self, has_intercept: bool) -> RegressionConfig:
        return RegressionConfig.build(self._predictors, self._response, has_intercept)

    # === Properties ===

    @property
    def predictors(self) -> NDArray[np.floating[Any]]:
        """Predictor columns (k x n), as a copy."""
        return self._predictors.copy()

    @property
    def response(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,), as a copy."""
        return self._response.copy()

    @property
    def has_intercept(self) -> bool:
        return self._has_intercept

    @property
    def n_observations(self) -> int:
        return self._response.shape[0]

    @property
    def n_predictors(self) -> int:
        return self._predictors.shape[0]

    @property
    def n_coefficients(self) -> int:
        """Number of estimated coefficients, intercept included."""
        return self.n_predictors + (1 if self._has_intercept else 0)

    def fit(self, **kwargs: Any) -> LinearSolution:
        """Fit this configuration. Keyword arguments go to pyols.regression.fit()."""
        from pyols.regression.solvers import fit
        return fit(self, **kwargs)

    def __repr__(self) -> str:
        return (
            f"RegressionConfig(n={self.n_observations}, k={self.n_predictors}, "
            f"has_intercept={self._has_intercept})"
        )


def as_predictor_columns(predictors: ArrayLike, name: str = 'predictors') -> NDArray[np.floating[Any]]:
    """
    Normalize predictor input to a fresh float64 array of shape (k, n).

    Raises:
        InvalidInputError: If there are no predictor columns or values are
            non-numeric / non-finite
        DimensionError: If columns have different lengths or wrong dimensionality
    """
    if isinstance(predictors, np.ndarray):
        columns = check_array(predictors, name)
        if columns.ndim == 1:
            if columns.size == 0:
                raise InvalidInputError(f"{name}: at least one predictor column is required")
            columns = columns.reshape(1, -1)
    else:
        try:
            items = list(predictors)
        except TypeError as e:
            raise InvalidInputError(f"{name}: expected a sequence of columns: {e}") from e

        if not items:
            raise InvalidInputError(f"{name}: at least one predictor column is required")

        if all(np.ndim(item) == 0 for item in items):
            # A single column given as a flat sequence
            columns = check_array(items, name).reshape(1, -1)
        else:
            arrays = [check_array(item, f"{name}[{j}]") for j, item in enumerate(items)]
            for j, arr in enumerate(arrays):
                check_1d(arr, f"{name}[{j}]")
            check_consistent_length(
                *arrays, names=tuple(f"{name}[{j}]" for j in range(len(arrays)))
            )
            columns = np.vstack(arrays)

    check_2d(columns, name)
    if columns.shape[0] == 0:
        raise InvalidInputError(f"{name}: at least one predictor column is required")
    check_finite(columns, name)
    return np.ascontiguousarray(columns)
