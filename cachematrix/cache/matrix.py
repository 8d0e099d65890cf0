"""
CacheMatrix: a matrix together with its lazily computed inverse.

The container does no validation and no computation. It stores whatever
matrix it is given, and whatever inverse cache_solve() hands back to it.
Replacing the matrix always discards the stored inverse, so a stale inverse
is never observable.
"""

from __future__ import annotations

from typing import Any
import numpy as np


class CacheMatrix:
    """
    Holds a matrix and, once computed, its inverse.

    Construction:
        CacheMatrix(m)
        make_cache_matrix(m)

    The inverse starts out absent (None). It is populated by cache_solve()
    through set_inverse() and cleared by every call to set_matrix(), even
    when the new matrix equals the old one.

    Example:
        >>> cm = CacheMatrix(np.array([[1.0, 0.0], [1.0, 2.0]]))
        >>> cm.get_inverse() is None
        True
    """

    def __init__(self, matrix: Any = None):
        """
        Args:
            matrix: The matrix to hold. Defaults to a 1x1 matrix holding NaN,
                    like R's ``matrix()``. Not validated.
        """
        if matrix is None:
            matrix = np.full((1, 1), np.nan)
        self._matrix = matrix
        self._inverse = None

    def set_matrix(self, matrix: Any) -> None:
        """Replace the matrix and discard any cached inverse."""
        self._matrix = matrix
        self._inverse = None

    def get_matrix(self) -> Any:
        """The current matrix, exactly as it was stored."""
        return self._matrix

    def set_inverse(self, inverse: Any) -> None:
        """
        Store the inverse of the current matrix.

        The value is trusted as-is; callers must derive it from get_matrix().
        """
        self._inverse = inverse

    def get_inverse(self) -> Any:
        """The cached inverse, or None if it has not been computed."""
        return self._inverse

    @property
    def has_inverse(self) -> bool:
        return self._inverse is not None

    def __repr__(self) -> str:
        shape = getattr(self._matrix, 'shape', None)
        state = 'cached' if self.has_inverse else 'empty'
        return f"CacheMatrix(shape={shape}, inverse={state})"


def make_cache_matrix(matrix: Any = None) -> CacheMatrix:
    """Create a CacheMatrix holding ``matrix``. See CacheMatrix."""
    return CacheMatrix(matrix)
