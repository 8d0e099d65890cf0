"""
Matrix inversion module.

LU-based inversion and linear solves matching R's solve(), with an
optional PyTorch GPU backend.

Public API:
    solve(a, b=None)   - Inverse of a (or solution of a @ x = b) as an array
    invert(a, b=None)  - Same computation, returns InverseSolution
"""

from cachematrix.inverse.design import InverseDesign
from cachematrix.inverse.solution import InverseParams, InverseSolution
from cachematrix.inverse.solvers import solve, invert

__all__ = [
    "solve",
    "invert",
    "InverseDesign",
    "InverseParams",
    "InverseSolution",
]
