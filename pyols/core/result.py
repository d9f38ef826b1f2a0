"""
Generic result container for pyols computations.

The Result class provides a standardized envelope around the parameter
payload a backend produces. It carries timing, diagnostics and
reproducibility metadata alongside the payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, rank, condition number)
    - timing is optional (don't burden unit tests)
    - provenance for reproducibility (library versions, algorithm)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, Any]:
    """Generate minimal provenance metadata."""
    import numpy as np
    import scipy
    import pyols
    return {
        'pyols_version': pyols.__version__,
        'numpy_version': np.__version__,
        'scipy_version': scipy.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (coefficients, covariance, etc.)
        info: Structured metadata (method, rank, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Reproducibility metadata (versions)

    Examples:
        >>> Result(
        ...     params=LinearParams(...),
        ...     info={'method': 'qr', 'rank': 3},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_qr'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, Any] = field(default_factory=_default_provenance)
