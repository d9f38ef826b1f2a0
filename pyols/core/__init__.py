"""
Core infrastructure for pyols.

Shared abstractions and utilities used by the regression domain.

Key components:
    protocols: LinearAlgebra protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, linear algebra kernels
"""

from pyols.core.protocols import LinearAlgebra
from pyols.core.result import Result
from pyols.core.exceptions import (
    PyOLSError,
    InvalidInputError,
    DimensionError,
    InsufficientDataError,
    NumericError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "LinearAlgebra",
    # Result
    "Result",
    # Exceptions
    "PyOLSError",
    "InvalidInputError",
    "DimensionError",
    "InsufficientDataError",
    "NumericError",
    "SingularMatrixError",
]
