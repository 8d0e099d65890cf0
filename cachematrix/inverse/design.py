"""
InverseDesign: validated input for the inversion pipeline.

Wraps the coefficient matrix ``a`` and optional right-hand side ``b`` after
coercion and validation, so backends never see malformed input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from cachematrix.core.validation import (
    check_array,
    as_matrix,
    check_nonempty,
    check_finite,
    check_square,
    check_conformable,
)


@dataclass(frozen=True)
class InverseDesign:
    """
    Design for solve()/invert().

    Holds a square float64 matrix ``a`` (n x n) and a right-hand side
    ``b`` (n x k). When no right-hand side was given, ``b`` is None and the
    backends solve against the identity, producing the inverse.

    Construction:
        InverseDesign.from_arrays(a)
        InverseDesign.from_arrays(a, b)
    """
    _a: NDArray[np.floating[Any]]
    _b: NDArray[np.floating[Any]] | None
    _b_is_vector: bool
    _row_labels: Any = None
    _col_labels: Any = None

    @classmethod
    def from_arrays(cls, a: ArrayLike, b: ArrayLike | None = None) -> InverseDesign:
        """
        Build an InverseDesign, coercing inputs like R's as.matrix().

        Parameters
        ----------
        a : array-like
            Square numeric matrix. Scalars are treated as 1x1, 1D arrays as
            a single column. pandas DataFrames keep their labels.
        b : array-like, optional
            Right-hand side with one row per row of ``a``. A 1D ``b`` is a
            single column and yields a 1D solution.

        Raises
        ------
        MalformedMatrixError
            Non-numeric, empty, >2D, or non-finite input.
        NonSquareMatrixError
            ``a`` is not square.
        ConformabilityError
            ``b`` rows do not match ``a``.
        """
        row_labels = col_labels = None
        if hasattr(a, 'columns') and hasattr(a, 'index'):
            row_labels, col_labels = a.index, a.columns

        a_arr = as_matrix(check_array(a, 'a'), 'a')
        check_nonempty(a_arr, 'a')
        check_square(a_arr, 'a')
        check_finite(a_arr, 'a')

        b_arr = None
        b_is_vector = False
        if b is not None:
            b_raw = check_array(b, 'b')
            b_is_vector = b_raw.ndim <= 1
            b_arr = as_matrix(b_raw, 'b')
            check_conformable(b_arr, a_arr.shape[0], 'b')
            check_finite(b_arr, 'b')

        return cls(
            _a=a_arr,
            _b=b_arr,
            _b_is_vector=b_is_vector,
            _row_labels=row_labels,
            _col_labels=col_labels,
        )

    @property
    def a(self) -> NDArray[np.floating[Any]]:
        """Coefficient matrix, shape (n, n)."""
        return self._a

    @property
    def b(self) -> NDArray[np.floating[Any]] | None:
        """Right-hand side, shape (n, k), or None when inverting."""
        return self._b

    @property
    def rhs(self) -> NDArray[np.floating[Any]]:
        """Right-hand side actually solved against (identity when inverting)."""
        if self._b is None:
            return np.eye(self.n)
        return self._b

    @property
    def n(self) -> int:
        """Order of ``a``."""
        return self._a.shape[0]

    @property
    def is_inverse(self) -> bool:
        """True when no right-hand side was supplied."""
        return self._b is None

    @property
    def b_is_vector(self) -> bool:
        return self._b_is_vector

    @property
    def row_labels(self) -> Any:
        """Row labels of ``a`` (pandas Index) or None."""
        return self._row_labels

    @property
    def col_labels(self) -> Any:
        """Column labels of ``a`` (pandas Index) or None."""
        return self._col_labels

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            'n': self.n,
            'n_rhs': self.rhs.shape[1],
            'is_inverse': self.is_inverse,
        }
