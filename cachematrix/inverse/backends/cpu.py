"""
CPU reference backend for matrix inversion.

Uses LU decomposition with partial pivoting via LAPACK (through SciPy),
followed by the same 1-norm condition estimate R's solve() performs.
This is the reference implementation.
"""

import warnings
from typing import Any
import numpy as np
from scipy.linalg import lu_factor, lu_solve, LinAlgWarning

from cachematrix.core.result import Result
from cachematrix.core.compute.timing import Timer
from cachematrix.inverse.design import InverseDesign
from cachematrix.inverse.solution import InverseParams
from cachematrix.inverse._common import (
    zero_pivot,
    reciprocal_condition,
    exactly_singular_error,
    check_condition,
)


class CPULUBackend:
    """
    CPU backend using LU decomposition.

    Implements the Backend protocol for InverseDesign -> InverseParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_lu'

    def solve(self, design: InverseDesign, *, tol: float) -> Result[InverseParams]:
        """
        Solve a @ x = b (b = I for inversion).

        Algorithm:
            1. Factor a = P L U (LAPACK getrf)
            2. Reject an exactly zero pivot
            3. If tol > 0, estimate rcond (LAPACK gecon) and reject rcond < tol
            4. Back-substitute against b (LAPACK getrs)

        Raises:
            SingularMatrixError: If a is exactly or numerically singular
        """
        timer = Timer()
        timer.start()

        a = design.a

        with timer.section('factorization'):
            # scipy warns instead of raising on a zero pivot; we raise below
            with warnings.catch_warnings():
                warnings.simplefilter('ignore', LinAlgWarning)
                lu, piv = lu_factor(a, check_finite=False)

        pivot = zero_pivot(lu)
        if pivot is not None:
            raise exactly_singular_error(pivot)

        with timer.section('condition'):
            rcond = reciprocal_condition(lu, float(np.linalg.norm(a, 1)))
        check_condition(rcond, tol)

        with timer.section('solve'):
            x = lu_solve((lu, piv), design.rhs, check_finite=False)

        timer.stop()

        params = InverseParams(
            x=x,
            rcond=rcond,
            n=design.n,
            is_inverse=design.is_inverse,
        )

        info: dict[str, Any] = {
            'method': 'lu',
            'tol': tol,
            **design.metadata,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
