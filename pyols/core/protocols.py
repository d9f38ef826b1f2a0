"""
Core protocols for pyols.

These define structural interfaces that implementations must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that any object with the right methods can be injected.

Seam:
    LinearAlgebra: dense kernels (QR, triangular solve/inverse)
"""

from typing import Protocol, Any, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class LinearAlgebra(Protocol):
    """
    Dense linear algebra capability consumed by the regression backends.

    Implementations are assumed correct and numerically stable; the
    backends only sequence these operations and apply the statistical
    formulas on top. Failures must surface as SingularMatrixError.
    """

    @property
    def name(self) -> str:
        """Kernel identifier, e.g. 'lapack'."""
        ...

    def qr(self, X: NDArray[np.floating[Any]]) -> Any:
        """
        Reduced QR decomposition of X (n x p, n >= p).

        Returns:
            Object with Q (n x p), R (p x p upper triangular) and rank attributes
        """
        ...

    def solve_upper_triangular(
        self,
        R: NDArray[np.floating[Any]],
        b: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        """Solve R x = b by back substitution."""
        ...

    def invert_upper_triangular(
        self,
        R: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        """Return R⁻¹ (upper triangular) without a general inverse."""
        ...
