"""
Solver dispatch for regression.

This module provides the fit() function (public API) and backend selection.
"""

from typing import Literal
from numpy.typing import ArrayLike

from pyols.core.exceptions import InvalidInputError
from pyols.core.protocols import LinearAlgebra
from pyols.regression.config import RegressionConfig
from pyols.regression.design import RegressionDesign
from pyols.regression.solution import LinearSolution
from pyols.regression.backends.cpu import CPUQRBackend


# Type alias for backend selection
BackendChoice = Literal['auto', 'cpu', 'cpu_qr']


def fit(
    predictors: ArrayLike | RegressionConfig | RegressionDesign,
    response: ArrayLike | None = None,
    has_intercept: bool | None = None,
    *,
    backend: BackendChoice = 'auto',
    linalg: LinearAlgebra | None = None,
) -> LinearSolution:
    """
    Fit a multiple linear regression model by ordinary least squares.

    Solves:
        min_β ||y - Aβ||²
    where A holds a column of ones (if has_intercept) followed by the
    predictor columns.

    This is the primary public API. All input validation, design
    construction, backend selection, and result wrapping happens here.

    Args:
        predictors: Predictor columns (a sequence of columns, a k x n array,
            or a single column). May also be a RegressionConfig or a
            RegressionDesign, in which case response must be omitted and
            the intercept flag stored there is used.
        response: Response vector (n,)
        has_intercept: Estimate an intercept (default True). With a
            RegressionConfig or RegressionDesign it must be omitted or
            match the stored flag.
        backend: Computational backend:
            - 'auto' / 'cpu' / 'cpu_qr': CPU QR decomposition
        linalg: Dense linear algebra kernels to inject into the backend
            (default LapackLinearAlgebra)

    Returns:
        LinearSolution with coefficients, standard errors, fitted values,
        residuals, residual variance and summary methods

    Raises:
        InvalidInputError: If inputs are invalid, no predictors are given,
            or has_intercept conflicts with a RegressionConfig/RegressionDesign
        DimensionError: If columns and response have inconsistent lengths
        InsufficientDataError: If n <= p
        SingularMatrixError: If the design matrix is rank-deficient
        NumericError: If the covariance matrix violates positivity

    Example:
        >>> from pyols import fit
        >>> result = fit([[1, 2, 3, 4]], [2, 4, 6, 8])
        >>> print(result.coefficients)
        >>> print(result.summary())
    """
    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    if isinstance(predictors, (RegressionConfig, RegressionDesign)):
        if response is not None:
            raise InvalidInputError(
                f"response must be omitted when fitting a {type(predictors).__name__}"
            )
        if has_intercept is not None and has_intercept != predictors.has_intercept:
            raise InvalidInputError(
                f"has_intercept={has_intercept} conflicts with the "
                f"{type(predictors).__name__} (has_intercept={predictors.has_intercept})"
            )
        if isinstance(predictors, RegressionConfig):
            design = RegressionDesign.from_config(predictors)
        else:
            design = predictors
    else:
        if response is None:
            raise InvalidInputError("response required when fitting from arrays")
        if has_intercept is None:
            has_intercept = True
        design = RegressionDesign.build(predictors, response, has_intercept)

    # === Select Backend ===
    backend_impl = _get_backend(backend, linalg)

    # === Solve ===
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    return LinearSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice, linalg: LinearAlgebra | None) -> CPUQRBackend:
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_qr'):
        return CPUQRBackend(linalg=linalg)

    raise ValueError(f"Unknown backend: {choice!r}")
