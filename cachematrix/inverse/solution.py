"""
Inversion solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from cachematrix.core.result import Result

if TYPE_CHECKING:
    from cachematrix.inverse.design import InverseDesign


@dataclass(frozen=True)
class InverseParams:
    """
    Parameter payload for solve()/invert().

    Attributes:
        x: Solution of a @ x = b, shape (n, k); the inverse when b is None
        rcond: 1-norm reciprocal condition estimate of a
        n: Order of a
        is_inverse: True when x is the inverse of a
    """
    x: NDArray[np.floating[Any]]
    rcond: float
    n: int
    is_inverse: bool


@dataclass
class InverseSolution:
    """
    User-facing inversion result.

    Wraps Result[InverseParams] and provides convenient accessors.
    """
    _result: Result[InverseParams]
    _design: 'InverseDesign'

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """
        Solution array.

        The inverse (n, n) when no right-hand side was given. When ``b`` was
        1D the solution is 1D, otherwise (n, k).
        """
        x = self._result.params.x
        if self._design.b_is_vector:
            return x[:, 0]
        return x

    @property
    def inverse(self) -> NDArray[np.floating[Any]]:
        """
        The inverse of ``a``.

        Raises:
            AttributeError: If a right-hand side was supplied
        """
        if not self.is_inverse:
            raise AttributeError(
                "solution was computed against a right-hand side b; use .x"
            )
        return self._result.params.x

    @property
    def rcond(self) -> float:
        """1-norm reciprocal condition number estimate of ``a``."""
        return self._result.params.rcond

    @property
    def condition_number(self) -> float:
        """1-norm condition number estimate (inf for rcond == 0)."""
        rcond = self.rcond
        return np.inf if rcond == 0 else 1.0 / rcond

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def is_inverse(self) -> bool:
        return self._result.params.is_inverse

    @property
    def design(self) -> 'InverseDesign':
        """The validated input this solution was computed from."""
        return self._design

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

    def residual_norm(self) -> float:
        """
        Relative Frobenius residual ||a x - b|| / ||b||.

        b is the identity when inverting.
        """
        rhs = self._design.rhs
        residual = self._design.a @ self._result.params.x - rhs
        return float(np.linalg.norm(residual) / np.linalg.norm(rhs))

    def summary(self) -> str:
        """Short text report in the style of R's print methods."""
        what = "Inverse" if self.is_inverse else "Solution"
        lines = [
            f"{what} of {self.n} x {self.n} system",
            f"Backend: {self.backend_name}",
            f"Reciprocal condition number: {self.rcond:.6g}",
            f"Relative residual: {self.residual_norm():.3e}",
        ]
        if self.timing is not None:
            lines.append(f"Time: {self.timing['total_seconds'] * 1e3:.3f} ms")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"InverseSolution(n={self.n}, is_inverse={self.is_inverse}, "
            f"rcond={self.rcond:.3g}, backend={self.backend_name!r})"
        )
