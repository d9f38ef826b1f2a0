"""
Linear algebra kernels for pyols.

All functions follow these conventions:
    - CPU functions use NumPy/SciPy (LAPACK under the hood)
    - Decompositions return a structured result dataclass
    - LAPACK failures are raised immediately as SingularMatrixError

Submodules:
    qr: QR decomposition and numerical rank
    triangular: Triangular solve, inverse and (X'X)⁻¹ reconstruction
    lapack: LapackLinearAlgebra, the default injectable kernel set
"""

from pyols.core.compute.linalg.qr import (
    QRResult,
    numerical_rank,
    qr_cpu,
)
from pyols.core.compute.linalg.triangular import (
    solve_upper_triangular,
    invert_upper_triangular,
    unscaled_covariance,
)
from pyols.core.compute.linalg.lapack import LapackLinearAlgebra

__all__ = [
    # QR decomposition
    "QRResult",
    "numerical_rank",
    "qr_cpu",
    # Triangular
    "solve_upper_triangular",
    "invert_upper_triangular",
    "unscaled_covariance",
    # Kernels
    "LapackLinearAlgebra",
]
