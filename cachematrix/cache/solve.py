"""
cache_solve: inverse of a CacheMatrix, computed at most once per matrix.
"""

from __future__ import annotations

import logging
from typing import Any

from cachematrix.core.protocols import Inverter
from cachematrix.cache.matrix import CacheMatrix
from cachematrix.inverse.solvers import solve

logger = logging.getLogger(__name__)

CACHE_HIT_MESSAGE = "getting cached data"


def cache_solve(
    x: CacheMatrix,
    *args: Any,
    inverter: Inverter = solve,
    **kwargs: Any,
) -> Any:
    """
    Return the inverse of the matrix held by ``x``.

    On the first call the matrix is inverted with ``inverter`` and the result
    is stored in ``x``. Later calls return the stored object and log
    "getting cached data" at INFO level, until ``x.set_matrix()`` clears
    the cache.

    Parameters
    ----------
    x : CacheMatrix
        Container holding the matrix.
    *args, **kwargs
        Passed unchanged to ``inverter`` on a cache miss (e.g. ``tol=1e-10``
        or a right-hand side ``b``). Ignored on a cache hit.
    inverter : callable
        ``inverter(matrix, *args, **kwargs)`` returning the inverse.
        Defaults to cachematrix.solve.

    Returns
    -------
    The inverse, as returned by ``inverter``.

    Raises
    ------
    Whatever ``inverter`` raises (InversionError for the default), unchanged.
    Nothing is cached on failure, so the next call tries again.

    Notes
    -----
    The check-compute-store sequence is not atomic. Threads sharing a
    container should hold a common lock around the call.
    """
    cached = x.get_inverse()
    if cached is not None:
        logger.info(CACHE_HIT_MESSAGE)
        return cached

    data = x.get_matrix()
    logger.debug("computing inverse of matrix with shape %s", getattr(data, 'shape', None))
    inverse = inverter(data, *args, **kwargs)
    x.set_inverse(inverse)
    return inverse
