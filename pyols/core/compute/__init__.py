"""
Shared compute infrastructure for pyols.

This module provides timing utilities, tolerance tiers and linear algebra
kernels shared by the domain backends.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Section timer for fits
    tolerances: Tolerance tiers and condition thresholds
    linalg: Linear algebra kernels (QR, triangular solve/inverse)
"""

from pyols.core.compute.timing import Timer
from pyols.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    ILL_CONDITIONED_THRESHOLD,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "ILL_CONDITIONED_THRESHOLD",
    "select_tolerance",
]
