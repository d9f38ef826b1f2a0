"""
Tolerance tiers and numerical thresholds.

Defines precision expectations for the CPU double-precision path:
- well-conditioned problems: machine-precision agreement
- ill-conditioned problems: relaxed agreement

Used by the test suite and by the regression backend's condition check.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# CPU reference: machine precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision',
)

# CPU reference, ill-conditioned problems (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)

# Condition number of R (equal to cond(X)) above which a fit is flagged.
# cond(X'X) = cond(X)^2, so at 1e10 the implied (X'X)⁻¹ has lost most of
# its significant digits even though the QR solve itself succeeded.
ILL_CONDITIONED_THRESHOLD = 1e10


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier for a problem."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
