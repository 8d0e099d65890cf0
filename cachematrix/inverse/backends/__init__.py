"""
Inversion backends.

Available backends:
    CPULUBackend: CPU reference implementation using LAPACK LU
    GPULUBackend: PyTorch implementation (import from .gpu; needs torch)
"""

from cachematrix.inverse.backends.cpu import CPULUBackend

__all__ = [
    "CPULUBackend",
]
