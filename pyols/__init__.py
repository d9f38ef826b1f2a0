"""
pyols: QR-based ordinary least squares regression for Python.

Coefficients, standard errors, fitted values, residuals and residual
variance for multiple linear regression, computed from a single QR
decomposition of the design matrix.

Submodules:
    regression: OLS fit, configuration, design and solution types
    core: Exceptions, validation, result envelope, linear algebra kernels
"""

__version__ = "0.1.0"

from pyols import regression
from pyols.regression import fit, RegressionConfig, LinearSolution
from pyols.core.exceptions import (
    PyOLSError,
    InvalidInputError,
    DimensionError,
    InsufficientDataError,
    NumericError,
    SingularMatrixError,
)

__all__ = [
    "__version__",
    "regression",
    "fit",
    "RegressionConfig",
    "LinearSolution",
    "PyOLSError",
    "InvalidInputError",
    "DimensionError",
    "InsufficientDataError",
    "NumericError",
    "SingularMatrixError",
]
