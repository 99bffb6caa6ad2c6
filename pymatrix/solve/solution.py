"""
Least-squares solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any

from pymatrix.core.result import Result
from pymatrix.matrix import Matrix, format_matrix


@dataclass(frozen=True)
class LeastSquaresParams:
    """
    Parameter payload for a least-squares solve.

    This is the immutable data computed by lstsq().
    """
    x: Matrix
    residuals: Matrix
    fitted_values: Matrix
    rss: float
    rank: int
    df_residual: int


@dataclass
class LeastSquaresSolution:
    """
    User-facing least-squares results.

    Wraps the solver Result and provides convenient accessors.
    """
    _result: Result[LeastSquaresParams]
    _shape: tuple[int, int]

    @property
    def x(self) -> Matrix:
        return self._result.params.x

    @property
    def residuals(self) -> Matrix:
        return self._result.params.residuals

    @property
    def fitted_values(self) -> Matrix:
        return self._result.params.fitted_values

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def residual_norm(self) -> float:
        return self.rss ** 0.5

    @property
    def rank(self) -> int:
        return self._result.params.rank

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Plain-text report of the solve."""
        rows, cols = self._shape
        lines = [
            "Least Squares Solution",
            "=" * 60,
            f"System: {rows} equations, {cols} unknowns",
            f"Rank: {self.rank}",
            f"Residual sum of squares: {self.rss:.6g} on {self.df_residual} DF",
            f"Residual norm: {self.residual_norm:.6g}",
            "",
            "Solution:",
            format_matrix(self.x),
        ]
        if self.warnings:
            lines.append("")
            lines.append("Warnings:")
            lines.extend(f"  {w}" for w in self.warnings)
        if self.timing is not None:
            lines.append("")
            lines.append(f"Computed in {self.timing['total_seconds']:.6f}s ({self.backend_name})")
        return "\n".join(lines)
