"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass, fields
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats

from pyols.core.exceptions import DimensionError, InvalidInputError
from pyols.core.result import Result
from pyols.regression.config import as_predictor_columns
from pyols.regression.design import RegressionDesign, design_matrix


@dataclass(frozen=True)
class LinearParams:
    """
    Parameter payload for linear regression.

    This is the immutable data computed by backends. Array fields are
    made read-only on construction.
    """
    coefficients: NDArray[np.floating[Any]]
    standard_errors: NDArray[np.floating[Any]]
    covariance: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    residual_variance: float
    rss: float
    tss: float
    rank: int
    df_residual: int

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, np.ndarray):
                value.setflags(write=False)


@dataclass(frozen=True, eq=False)
class LinearSolution:
    """
    User-facing regression results.

    Wraps the backend Result and provides accessors for all regression
    outputs. Every array accessor returns a fresh copy, so callers can
    modify what they get back without touching the fit.
    """
    _result: Result[LinearParams]
    _design: RegressionDesign

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Coefficient estimates (p,), intercept first if present."""
        return self._result.params.coefficients.copy()

    @property
    def standard_errors(self) -> NDArray[np.floating[Any]]:
        """
        Standard errors of coefficients.

        Computed as SE(β) = sqrt(diag(σ² (X'X)⁻¹)), same order as coefficients.
        """
        return self._result.params.standard_errors.copy()

    @property
    def covariance(self) -> NDArray[np.floating[Any]]:
        """Variance-covariance matrix of the coefficients (p x p)."""
        return self._result.params.covariance.copy()

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values.copy()

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        return self._result.params.residuals.copy()

    @property
    def residual_variance(self) -> float:
        """σ² = RSS / (n - p)."""
        return self._result.params.residual_variance

    @property
    def has_intercept(self) -> bool:
        return self._design.has_intercept

    @property
    def predictors(self) -> NDArray[np.floating[Any]]:
        """Predictor columns the model was fitted on (k x n)."""
        return self._design.config.predictors

    @property
    def response(self) -> NDArray[np.floating[Any]]:
        """Response the model was fitted on (n,)."""
        return self._design.config.response

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def tss(self) -> float:
        """Total sum of squares; centered with an intercept, uncentered without."""
        return self._result.params.tss

    @property
    def r_squared(self) -> float:
        if self.tss == 0:
            return 1.0 if self.rss == 0 else 0.0
        return 1.0 - (self.rss / self.tss)

    @property
    def adjusted_r_squared(self) -> float:
        n = self._design.n
        df_int = 1 if self.has_intercept else 0
        if self.tss == 0:
            return self.r_squared
        return 1.0 - (1.0 - self.r_squared) * (n - df_int) / self.df_residual

    @property
    def residual_std_error(self) -> float:
        return float(np.sqrt(self.residual_variance))

    @property
    def t_statistics(self) -> NDArray[np.floating[Any]]:
        """t-statistics for coefficients; NaN where the standard error is zero."""
        params = self._result.params
        with np.errstate(divide='ignore', invalid='ignore'):
            t = params.coefficients / params.standard_errors
        return np.where(np.isfinite(t), t, np.nan)

    @property
    def p_values(self) -> NDArray[np.floating[Any]]:
        """Two-sided p-values from the Student t distribution on df_residual."""
        t = self.t_statistics
        return 2.0 * stats.t.sf(np.abs(t), self.df_residual)

    def conf_int(self, level: float = 0.95) -> NDArray[np.floating[Any]]:
        """
        Confidence intervals for coefficients.

        Args:
            level: Confidence level in (0, 1)

        Returns:
            Array (p, 2) with lower and upper bounds per coefficient
        """
        if not 0.0 < level < 1.0:
            raise InvalidInputError(f"level: must be in (0, 1), got {level}")
        params = self._result.params
        t_crit = stats.t.ppf((1.0 + level) / 2.0, self.df_residual)
        half_width = t_crit * params.standard_errors
        return np.column_stack([
            params.coefficients - half_width,
            params.coefficients + half_width,
        ])

    def predict(self, predictors: ArrayLike) -> NDArray[np.floating[Any]]:
        """
        Predict the response for new predictor columns.

        Args:
            predictors: New columns in the same layout as the fit input,
                one column per predictor (k columns of any common length)

        Returns:
            Predicted values
        """
        columns = as_predictor_columns(predictors)
        k = self._design.config.n_predictors
        if columns.shape[0] != k:
            raise DimensionError(
                f"predictors: model has {k} predictor columns, got {columns.shape[0]}"
            )
        A = design_matrix(columns, self.has_intercept)
        return A @ self._result.params.coefficients

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def n_observations(self) -> int:
        return self._design.n

    @property
    def design(self) -> RegressionDesign:
        return self._design

    @property
    def info(self) -> dict[str, Any]:
        return dict(self._result.info)

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> dict[str, Any]:
        return dict(self._result.provenance)

    def summary(self) -> str:
        """Generate R-style summary output."""
        lines = [
            "Linear Regression Results",
            "=" * 72,
            f"Observations: {self._design.n}",
            f"Coefficients: {self._design.p}"
            f" ({'with' if self.has_intercept else 'no'} intercept)",
            f"R-squared: {self.r_squared:.6f}",
            f"Adj. R-squared: {self.adjusted_r_squared:.6f}",
            f"Residual Std. Error: {self.residual_std_error:.6f} on {self.df_residual} DF",
            "",
            "Coefficients:",
            "-" * 72,
            f"{'':<14} {'Estimate':>14} {'Std.Error':>12} {'t value':>10} {'Pr(>|t|)':>12}",
            "-" * 72,
        ]

        for name, coef, se, t, pv in zip(
            self._design.column_names, self._result.params.coefficients,
            self._result.params.standard_errors, self.t_statistics, self.p_values,
        ):
            t_str = f"{t:10.3f}" if not np.isnan(t) else "        NA"
            if np.isnan(pv):
                p_str = "          NA"
            elif pv < 2e-16:
                p_str = f"{'<2e-16':>12}"
            else:
                p_str = f"{pv:12.4g}"
            lines.append(f"{name:<14} {coef:14.6f} {se:12.6f} {t_str} {p_str}")

        lines.append("-" * 72)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSolution(n={self._design.n}, p={self._design.p}, "
            f"has_intercept={self.has_intercept}, r_squared={self.r_squared:.4f})"
        )
