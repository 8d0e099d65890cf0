"""
Input validation utilities for cachematrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from cachematrix.core.exceptions import (
    ValidationError,
    MalformedMatrixError,
    NonSquareMatrixError,
    ConformabilityError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like (including objects exposing ``.to_numpy()`` such
    as pandas DataFrames). Rejects inputs that result in object dtype or any
    other non-numeric dtype. Booleans are promoted to 0/1.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        MalformedMatrixError: If input cannot be converted to numeric array
    """
    if hasattr(array, 'to_numpy'):
        array = array.to_numpy()

    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise MalformedMatrixError(
            f"{name}: cannot convert to array: {e}", matrix_name=name
        ) from e

    if result.dtype == object:
        raise MalformedMatrixError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data",
            matrix_name=name,
        )

    if result.dtype == np.bool_:
        return result.astype(np.float64)

    if not np.issubdtype(result.dtype, np.number):
        raise MalformedMatrixError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data",
            matrix_name=name,
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise MalformedMatrixError(
            f"{name}: complex dtype {result.dtype} is not supported",
            matrix_name=name,
        )

    return result.astype(np.float64, copy=False)


def as_matrix(array: NDArray[np.floating[Any]], name: str) -> NDArray[np.floating[Any]]:
    """
    Promote an array to 2D the way R's as.matrix() does.

    Scalars become 1x1, 1D arrays become a single column. Arrays with more
    than two dimensions are rejected.

    Args:
        array: Array to promote
        name: Parameter name for error messages

    Returns:
        2D view of the array

    Raises:
        MalformedMatrixError: If array has more than 2 dimensions
    """
    if array.ndim == 0:
        return array.reshape(1, 1)
    if array.ndim == 1:
        return array.reshape(-1, 1)
    if array.ndim != 2:
        raise MalformedMatrixError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}",
            matrix_name=name,
        )
    return array


def check_nonempty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element.

    Raises:
        MalformedMatrixError: If array is empty
    """
    if array.size == 0:
        raise MalformedMatrixError(
            f"{name}: empty matrix with shape {array.shape}", matrix_name=name
        )


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        MalformedMatrixError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise MalformedMatrixError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
            matrix_name=name,
        )


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array is square.

    Raises:
        NonSquareMatrixError: If rows != columns
    """
    n_rows, n_cols = array.shape
    if n_rows != n_cols:
        raise NonSquareMatrixError(
            f"'{name}' ({n_rows} x {n_cols}) must be square",
            matrix_name=name,
            shape=array.shape,
        )


def check_conformable(
    b: NDArray[np.floating[Any]],
    n: int,
    name: str,
    a_name: str = 'a',
) -> None:
    """
    Verify a right-hand side has one row per row of the coefficient matrix.

    Args:
        b: 2D right-hand side
        n: Order of the (square) coefficient matrix
        name: Parameter name of b for error messages
        a_name: Parameter name of the coefficient matrix

    Raises:
        ConformabilityError: If b.shape[0] != n
    """
    if b.shape[0] != n:
        raise ConformabilityError(
            f"'{name}' ({b.shape[0]} x {b.shape[1]}) must be compatible with "
            f"'{a_name}' ({n} x {n})",
            matrix_name=name,
            shape=b.shape,
            expected_rows=n,
        )


def check_tolerance(tol: Any, name: str = 'tol') -> float:
    """
    Verify a tolerance is a real finite number.

    Zero and negative values are legal; they disable the condition check.

    Returns:
        The tolerance as a float

    Raises:
        ValidationError: If tol is not a real number or is not finite
    """
    if isinstance(tol, bool) or not isinstance(tol, numbers.Real):
        raise ValidationError(f"{name}: expected a real number, got {type(tol).__name__}")
    tol = float(tol)
    if not np.isfinite(tol):
        raise ValidationError(f"{name}: must be finite, got {tol}")
    return tol
