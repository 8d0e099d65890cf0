"""
Inverse caching module.

Public API:
    CacheMatrix          - Matrix container with a memoized inverse
    make_cache_matrix(m) - Factory for CacheMatrix
    cache_solve(cm)      - Inverse of cm's matrix, computed at most once
"""

from cachematrix.cache.matrix import CacheMatrix, make_cache_matrix
from cachematrix.cache.solve import cache_solve, CACHE_HIT_MESSAGE

__all__ = [
    "CacheMatrix",
    "make_cache_matrix",
    "cache_solve",
    "CACHE_HIT_MESSAGE",
]
