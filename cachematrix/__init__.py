"""
cachematrix: memoized matrix inversion for Python.

Wrap a matrix in a CacheMatrix and ask cache_solve() for its inverse; the
inverse is computed once with an R-compatible LU solver and reused until
the matrix is replaced.

Submodules:
    cache: CacheMatrix container and cache_solve()
    inverse: solve()/invert() with CPU (LAPACK) and GPU (PyTorch) backends
    core: Exceptions, Result envelope, validation, compute utilities
"""

import logging

__version__ = "0.1.0"

from cachematrix.cache import CacheMatrix, make_cache_matrix, cache_solve
from cachematrix.inverse import solve, invert
from cachematrix.core.exceptions import (
    CacheMatrixError,
    ValidationError,
    InversionError,
    MalformedMatrixError,
    NonSquareMatrixError,
    ConformabilityError,
    SingularMatrixError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "CacheMatrix",
    "make_cache_matrix",
    "cache_solve",
    "solve",
    "invert",
    "CacheMatrixError",
    "ValidationError",
    "InversionError",
    "MalformedMatrixError",
    "NonSquareMatrixError",
    "ConformabilityError",
    "SingularMatrixError",
]
