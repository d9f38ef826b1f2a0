"""
Triangular solves and inverses.

Everything here works on the upper triangular R factor of a QR
decomposition, so no general-purpose inverse is ever formed.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular

from pyols.core.exceptions import SingularMatrixError


def solve_upper_triangular(
    R: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Solve R x = b by back substitution.

    Args:
        R: Upper triangular matrix (p x p)
        b: Right-hand side (p,) or (p, k)

    Raises:
        SingularMatrixError: If R has a zero on its diagonal
    """
    try:
        return solve_triangular(R, b, lower=False)
    except np.linalg.LinAlgError as e:
        raise SingularMatrixError(
            f"Triangular solve failed: {e}",
            matrix_name='R',
            expected_rank=R.shape[0],
        ) from e


def invert_upper_triangular(R: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Invert an upper triangular matrix by solving R X = I.

    The result is itself upper triangular.
    """
    p = R.shape[0]
    return solve_upper_triangular(R, np.eye(p, dtype=R.dtype))


def unscaled_covariance(R_inv: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    (X'X)⁻¹ from the inverse of the R factor of X.

    With X = QR, X'X = R'R and therefore (X'X)⁻¹ = R⁻¹ (R⁻¹)'.
    The product is symmetrized to remove rounding asymmetry.
    """
    XtX_inv = R_inv @ R_inv.T
    return (XtX_inv + XtX_inv.T) / 2.0
