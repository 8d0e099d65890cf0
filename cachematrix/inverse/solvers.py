"""
Solver dispatch for matrix inversion.

solve() mirrors R's solve(): it returns the inverse of ``a`` (or the
solution of ``a @ x = b``) as a plain array. invert() runs the same
computation and returns the full InverseSolution with diagnostics.
"""

from __future__ import annotations

from typing import Any, Literal
from numpy.typing import ArrayLike

from cachematrix.core.compute.device import select_device
from cachematrix.core.compute.tolerances import DEFAULT_TOL
from cachematrix.core.exceptions import ValidationError
from cachematrix.core.validation import check_tolerance
from cachematrix.inverse.design import InverseDesign
from cachematrix.inverse.solution import InverseSolution
from cachematrix.inverse.backends.cpu import CPULUBackend


BackendChoice = Literal['auto', 'cpu', 'gpu']


def _get_backend(backend: BackendChoice):
    """Select backend based on preference."""
    if backend == 'cpu':
        return CPULUBackend()

    if backend == 'auto':
        device = select_device('auto')
        if device.is_gpu:
            from cachematrix.inverse.backends.gpu import GPULUBackend
            return GPULUBackend(device=device)
        return CPULUBackend()

    if backend == 'gpu':
        device = select_device('gpu')
        from cachematrix.inverse.backends.gpu import GPULUBackend
        return GPULUBackend(device=device)

    raise ValidationError(f"Unknown backend: {backend!r}")


def invert(
    a: ArrayLike | InverseDesign,
    b: ArrayLike | None = None,
    *,
    tol: float | None = None,
    backend: BackendChoice = 'cpu',
) -> InverseSolution:
    """
    Invert a square matrix, or solve a @ x = b, with diagnostics.

    Parameters
    ----------
    a : array-like or InverseDesign
        Square numeric matrix.
    b : array-like, optional
        Right-hand side. Omit to compute the inverse of ``a``. Must be
        omitted when ``a`` is already an InverseDesign.
    tol : float, optional
        Reject ``a`` when its reciprocal condition number is below this.
        Defaults to float64 machine epsilon; ``tol <= 0`` disables the
        check, leaving only exact singularity as an error.
    backend : str
        'cpu' (default, LAPACK reference), 'gpu', or 'auto'.

    Returns
    -------
    InverseSolution

    Raises
    ------
    InversionError
        Malformed, non-square, non-conformable or singular input.
    ValidationError
        Bad ``tol`` or ``backend``.
    """
    tol = DEFAULT_TOL if tol is None else check_tolerance(tol)

    if isinstance(a, InverseDesign):
        if b is not None:
            raise ValidationError("b must be None when a is an InverseDesign")
        design = a
    else:
        design = InverseDesign.from_arrays(a, b)

    be = _get_backend(backend)
    result = be.solve(design, tol=tol)
    return InverseSolution(_result=result, _design=design)


def solve(
    a: ArrayLike,
    b: ArrayLike | None = None,
    *,
    tol: float | None = None,
    backend: BackendChoice = 'cpu',
) -> Any:
    """
    Inverse of ``a``, or the solution of ``a @ x = b``. Matches R solve().

    This is the default inverter used by cache_solve().

    Parameters
    ----------
    a : array-like
        Square numeric matrix. A pandas DataFrame is accepted; its inverse
        comes back as a DataFrame indexed by ``a.columns`` with columns
        ``a.index``.
    b : array-like, optional
        Right-hand side. 1D ``b`` gives a 1D result.
    tol : float, optional
        Reciprocal condition number threshold, see invert().
    backend : str
        'cpu' (default), 'gpu', or 'auto'.

    Returns
    -------
    ndarray (float64), or DataFrame for labelled inversion.

    Raises
    ------
    SingularMatrixError
        ``a`` is exactly singular, or rcond(a) < tol.
    NonSquareMatrixError, ConformabilityError, MalformedMatrixError
        Unusable input.

    Examples
    --------
    >>> solve([[1, 0], [1, 2]])
    array([[ 1. ,  0. ],
           [-0.5,  0.5]])
    """
    solution = invert(a, b, tol=tol, backend=backend)
    x = solution.x

    design = solution.design
    if design.is_inverse and design.col_labels is not None and design.row_labels is not None:
        import pandas as pd
        return pd.DataFrame(x, index=design.col_labels, columns=design.row_labels)

    return x
