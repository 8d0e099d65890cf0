"""
Core infrastructure for cachematrix.

Shared abstractions, utilities, and compute infrastructure used by the
inversion routines and the caching layer.

Key components:
    protocols: Inverter, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Hardware detection, timing, tolerances
"""

from cachematrix.core.protocols import Inverter, Backend
from cachematrix.core.result import Result
from cachematrix.core.exceptions import (
    CacheMatrixError,
    ValidationError,
    InversionError,
    MalformedMatrixError,
    NonSquareMatrixError,
    ConformabilityError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Inverter",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "CacheMatrixError",
    "ValidationError",
    "InversionError",
    "MalformedMatrixError",
    "NonSquareMatrixError",
    "ConformabilityError",
    "SingularMatrixError",
]
