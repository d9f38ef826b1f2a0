"""
CPU reference backend for linear regression.

Uses a single QR decomposition of the design matrix both to solve the
least squares problem and to build the coefficient covariance matrix,
so X'X is never formed or inverted directly.
"""

from typing import Any
import warnings

import numpy as np
from numpy.typing import NDArray

from pyols.core.exceptions import NumericError, SingularMatrixError
from pyols.core.protocols import LinearAlgebra
from pyols.core.result import Result
from pyols.core.compute.timing import Timer
from pyols.core.compute.tolerances import ILL_CONDITIONED_THRESHOLD
from pyols.core.compute.linalg import LapackLinearAlgebra, unscaled_covariance
from pyols.regression.design import RegressionDesign
from pyols.regression.solution import LinearParams


class CPUQRBackend:
    """
    CPU backend using QR decomposition.

    Turns a RegressionDesign into a Result[LinearParams].
    The dense kernels are injected; LapackLinearAlgebra is the default.
    """

    def __init__(self, linalg: LinearAlgebra | None = None):
        self._linalg = linalg if linalg is not None else LapackLinearAlgebra()

    @property
    def name(self) -> str:
        return 'cpu_qr'

    @property
    def linalg(self) -> LinearAlgebra:
        return self._linalg

    def solve(self, design: RegressionDesign) -> Result[LinearParams]:
        """
        Solve OLS via QR decomposition.

        Algorithm:
            1. X = QR (reduced), rank from diag(R)
            2. β = R⁻¹ Q'y by back substitution
            3. fitted = Xβ, residuals = y - fitted
            4. σ² = RSS / (n - p)
            5. (X'X)⁻¹ = R⁻¹ (R⁻¹)', Cov(β) = σ² (X'X)⁻¹
            6. SE(β) = sqrt(diag(Cov(β)))

        Args:
            design: Validated regression design (n > p guaranteed)

        Returns:
            Result containing LinearParams

        Raises:
            SingularMatrixError: If X is rank-deficient or the decomposition fails
            NumericError: If the covariance diagonal has a negative entry
        """
        timer = Timer()
        timer.start()

        X = design.X
        y = design.y
        n, p = design.n, design.p

        # === QR Decomposition ===
        with timer.section('qr_decomposition'):
            qr_result = self._linalg.qr(X)

        if qr_result.rank < p:
            raise SingularMatrixError(
                f"Design matrix is rank-deficient: rank={qr_result.rank}, expected={p}. "
                f"This indicates coincident or perfectly collinear predictors.",
                matrix_name='X',
                rank=qr_result.rank,
                expected_rank=p,
            )

        R = qr_result.R[:p, :p]

        # === Solve R β = Q'y ===
        with timer.section('solve'):
            Qty = qr_result.Q.T @ y
            coefficients = self._linalg.solve_upper_triangular(R, Qty[:p])

        # === Fitted Values and Residuals ===
        with timer.section('residuals'):
            fitted_values = X @ coefficients
            residuals = y - fitted_values

        # === Residual Variance and Covariance ===
        with timer.section('covariance'):
            df_residual = n - p
            rss = float(residuals @ residuals)
            residual_variance = rss / df_residual

            R_inv = self._linalg.invert_upper_triangular(R)
            covariance = residual_variance * unscaled_covariance(R_inv)
            standard_errors = _standard_errors(covariance)

        tss = _total_sum_of_squares(y, design.has_intercept)
        condition_number = float(np.linalg.cond(R))

        timer.stop()

        warn_list = []
        if condition_number > ILL_CONDITIONED_THRESHOLD:
            msg = (
                f"Design matrix is ill-conditioned (condition number {condition_number:.2e} "
                f"> {ILL_CONDITIONED_THRESHOLD:.0e}); standard errors may be inaccurate."
            )
            warnings.warn(msg, RuntimeWarning, stacklevel=3)
            warn_list.append(msg)

        # === Construct Result ===
        params = LinearParams(
            coefficients=np.array(coefficients, dtype=np.float64),
            standard_errors=standard_errors,
            covariance=covariance,
            fitted_values=fitted_values,
            residuals=residuals,
            residual_variance=residual_variance,
            rss=rss,
            tss=tss,
            rank=qr_result.rank,
            df_residual=df_residual,
        )

        info: dict[str, Any] = {
            'method': 'qr',
            'rank': qr_result.rank,
            'condition_number': condition_number,
            'linalg': self._linalg.name,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warn_list),
        )


def _standard_errors(covariance: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Square roots of the covariance diagonal; a negative variance is an invariant violation."""
    variances = np.diag(covariance).copy()
    negative = np.where(variances < 0)[0]
    if len(negative) > 0:
        raise NumericError(
            f"Covariance matrix has negative diagonal entries at indices "
            f"{negative.tolist()}: {variances[negative].tolist()}"
        )
    return np.sqrt(variances)


def _total_sum_of_squares(y: NDArray[np.floating[Any]], has_intercept: bool) -> float:
    """Centered TSS with an intercept, uncentered without (as R's summary.lm)."""
    if has_intercept:
        return float(np.sum((y - np.mean(y)) ** 2))
    return float(y @ y)
