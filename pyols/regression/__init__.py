"""
Ordinary least squares multiple linear regression.

Public API:
    fit(predictors, response, has_intercept=True, ...) -> LinearSolution

The fit() function is the only entry point. It handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Example:
    >>> from pyols.regression import fit
    >>> result = fit([x1, x2], y)
    >>> print(result.coefficients)
    >>> print(result.summary())
"""

from pyols.regression.config import RegressionConfig
from pyols.regression.design import RegressionDesign
from pyols.regression.solution import LinearSolution, LinearParams
from pyols.regression.solvers import fit

__all__ = [
    "fit",
    "RegressionConfig",
    "RegressionDesign",
    "LinearSolution",
    "LinearParams",
]
