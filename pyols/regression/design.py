"""
Regression Design.

Design takes a RegressionConfig and builds the design matrix A (n x p)
and response y the backends solve. The config holds raw columns; the
design knows it is building a regression: the intercept column goes
first, then the predictors in input order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyols.core.validation import check_degrees_of_freedom
from pyols.regression.config import RegressionConfig


@dataclass(frozen=True, eq=False)
class RegressionDesign:
    """
    Regression design matrix specification.

    Immutable after construction; X and y are read-only arrays.

    Construction:
        RegressionDesign.from_config(config)
        RegressionDesign.build(predictors, response, has_intercept=True)
    """
    _X: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _n: int
    _p: int
    _config: RegressionConfig

    @classmethod
    def from_config(cls, config: RegressionConfig) -> RegressionDesign:
        """
        Assemble the design matrix for a configuration.

        Raises:
            InsufficientDataError: If n <= p (no residual degrees of freedom)
        """
        X = design_matrix(config._predictors, config.has_intercept)
        n, p = X.shape
        check_degrees_of_freedom(n, p)

        X.setflags(write=False)
        return cls(_X=X, _y=config._response, _n=n, _p=p, _config=config)

    @classmethod
    def build(
        cls,
        predictors: ArrayLike,
        response: ArrayLike,
        has_intercept: bool = True,
    ) -> RegressionDesign:
        """Validate raw inputs and assemble the design in one step."""
        config = RegressionConfig.build(predictors, response, has_intercept)
        return cls.from_config(config)

    # === Properties ===

    @property
    def X(self) -> NDArray[np.floating[Any]]:
        """Design matrix (n x p), read-only."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,), read-only."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def p(self) -> int:
        """Number of coefficients, intercept included."""
        return self._p

    @property
    def has_intercept(self) -> bool:
        return self._config.has_intercept

    @property
    def config(self) -> RegressionConfig:
        """The configuration this design was built from."""
        return self._config

    @property
    def column_names(self) -> tuple[str, ...]:
        """'(Intercept)' then x1..xk, matching the columns of X."""
        names = tuple(f"x{j + 1}" for j in range(self._config.n_predictors))
        if self.has_intercept:
            return ('(Intercept)',) + names
        return names

    def __repr__(self) -> str:
        return (
            f"RegressionDesign(n={self._n}, p={self._p}, "
            f"has_intercept={self.has_intercept})"
        )


def design_matrix(
    columns: NDArray[np.floating[Any]],
    has_intercept: bool,
) -> NDArray[np.floating[Any]]:
    """
    Build the n x p design matrix from predictor columns (k x n).

    The intercept column of ones, when requested, is column 0.
    """
    n = columns.shape[1]
    if has_intercept:
        columns = np.vstack([np.ones((1, n), dtype=np.float64), columns])
    return np.array(columns.T, dtype=np.float64, order='C')
