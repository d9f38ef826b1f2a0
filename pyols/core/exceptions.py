"""
Exception hierarchy for pyols.

All exceptions inherit from PyOLSError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyOLSError(Exception):
    """Base exception for all pyols errors."""
    pass


class InvalidInputError(PyOLSError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: empty
    predictor set, non-numeric or non-finite values.
    """
    pass


class DimensionError(InvalidInputError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when predictor columns and response have inconsistent lengths.
    """
    pass


class InsufficientDataError(PyOLSError):
    """
    Too few observations for the number of estimated parameters.

    OLS needs strictly positive residual degrees of freedom (n - p > 0)
    to estimate the residual variance.

    Attributes:
        n_observations: Number of observations supplied
        n_parameters: Number of coefficients to estimate
    """

    def __init__(
        self,
        message: str,
        n_observations: int | None = None,
        n_parameters: int | None = None,
    ):
        super().__init__(message)
        self.n_observations = n_observations
        self.n_parameters = n_parameters

    @property
    def df_residual(self) -> int | None:
        if self.n_observations is None or self.n_parameters is None:
            return None
        return self.n_observations - self.n_parameters


class NumericError(PyOLSError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation,
    and raised directly for invariant violations such as a negative
    variance on the covariance diagonal.
    """
    pass


class SingularMatrixError(NumericError):
    """
    Matrix is singular or nearly singular.

    Raised when the design matrix is numerically rank-deficient
    (coincident or collinear predictors) or when the decomposition fails.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (number of coefficients)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank
