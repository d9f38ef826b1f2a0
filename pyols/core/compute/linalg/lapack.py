"""
Default LinearAlgebra implementation backed by LAPACK (NumPy/SciPy).
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pyols.core.compute.linalg.qr import QRResult, qr_cpu
from pyols.core.compute.linalg.triangular import (
    solve_upper_triangular,
    invert_upper_triangular,
)


class LapackLinearAlgebra:
    """
    Dense kernels on the CPU.

    Implements the LinearAlgebra protocol by delegating to the module
    level functions in pyols.core.compute.linalg.
    """

    @property
    def name(self) -> str:
        return 'lapack'

    def qr(self, X: NDArray[np.floating[Any]]) -> QRResult:
        return qr_cpu(X)

    def solve_upper_triangular(
        self,
        R: NDArray[np.floating[Any]],
        b: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        return solve_upper_triangular(R, b)

    def invert_upper_triangular(
        self,
        R: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        return invert_upper_triangular(R)

    def __repr__(self) -> str:
        return "LapackLinearAlgebra()"
