"""
QR decomposition.

Reduced Householder QR through LAPACK (via NumPy) with numerical rank
detection from the diagonal of R.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyols.core.exceptions import SingularMatrixError


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Matrix with orthonormal columns (n x k where k = min(n, p))
        R: Upper triangular matrix (k x p)
        rank: Numerical rank determined from R diagonal
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int


def numerical_rank(
    R: NDArray[np.floating[Any]],
    X: NDArray[np.floating[Any]],
) -> int:
    """
    Numerical rank from the diagonal of R.

    |R[j, j]| is the distance of column j of X from the span of the
    columns before it. Column j counts as independent only when that
    distance exceeds max(n, p) * eps times the norm of column j, so the
    test does not depend on how the columns are scaled. Zero columns
    never count.
    """
    diag_R = np.abs(np.diag(R))
    norms = np.linalg.norm(X[:, :len(diag_R)], axis=0)
    tol = max(X.shape) * np.finfo(R.dtype).eps
    return int(np.sum((norms > 0) & (diag_R > tol * norms)))


def qr_cpu(X: NDArray[np.floating[Any]]) -> QRResult:
    """
    Reduced QR decomposition using LAPACK (via NumPy).

    Computes X = QR where Q has orthonormal columns and R is upper triangular.

    Args:
        X: Matrix to decompose (n x p)

    Returns:
        QRResult with Q, R, and numerical rank

    Raises:
        SingularMatrixError: If LAPACK fails to decompose X
    """
    try:
        Q, R = np.linalg.qr(X, mode='reduced')
    except np.linalg.LinAlgError as e:
        raise SingularMatrixError(
            f"QR decomposition failed: {e}",
            matrix_name='X',
            expected_rank=X.shape[1],
        ) from e

    return QRResult(Q=Q, R=R, rank=numerical_rank(R, X))
