"""
LAPACK helpers shared by the CPU and GPU backends.

Both backends produce a packed LU factor in LAPACK getrf layout (unit lower
triangle below the diagonal, U on and above it), so singularity detection
and the condition estimate work on either.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import get_lapack_funcs

from cachematrix.core.exceptions import SingularMatrixError


def zero_pivot(lu: NDArray[np.floating[Any]]) -> int | None:
    """1-based index of the first exactly-zero diagonal entry of U, or None."""
    zeros = np.flatnonzero(np.diag(lu) == 0.0)
    if zeros.size == 0:
        return None
    return int(zeros[0]) + 1


def reciprocal_condition(
    lu: NDArray[np.floating[Any]],
    a_norm: float,
) -> float:
    """
    Estimate the 1-norm reciprocal condition number from an LU factor.

    Uses LAPACK gecon, which is what R's solve() consults.

    Args:
        lu: Packed LU factor of a, getrf layout, float64
        a_norm: 1-norm of the original matrix

    Returns:
        rcond in [0, 1]
    """
    lu = np.asarray(lu, dtype=np.float64)
    gecon, = get_lapack_funcs(('gecon',), (lu,))
    rcond, info = gecon(lu, a_norm, norm='1')
    if info < 0:
        raise ValueError(f"gecon: illegal value in argument {-info}")
    return float(rcond)


def exactly_singular_error(pivot: int) -> SingularMatrixError:
    return SingularMatrixError(
        f"Lapack routine dgesv: system is exactly singular: U[{pivot},{pivot}] = 0",
        matrix_name='a',
        rcond=0.0,
        pivot=pivot,
    )


def check_condition(rcond: float, tol: float) -> None:
    """
    Reject numerically singular systems.

    Raises:
        SingularMatrixError: If tol > 0 and rcond < tol
    """
    if tol > 0 and rcond < tol:
        raise SingularMatrixError(
            f"system is computationally singular: reciprocal condition number = {rcond:g}",
            matrix_name='a',
            rcond=rcond,
            tol=tol,
        )
