"""
Numerical tolerances for inversion.

DEFAULT_TOL is the default singularity threshold for solve(): a matrix whose
reciprocal condition number (1-norm) falls below it is rejected, matching
R's solve() default of .Machine$double.eps.

The tolerance tiers describe how closely each compute path is expected to
reproduce the CPU reference. Used by the test suite and by the GPU backend
to annotate its results.
"""

from dataclasses import dataclass

import numpy as np


DEFAULT_TOL: float = float(np.finfo(np.float64).eps)


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision LAPACK: reference',
)

GPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='gpu_fp64',
    description='GPU double precision: matches CPU reference',
)

# Single precision loses roughly cond(a) * 1e-7 relative accuracy
GPU_FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='gpu_fp32',
    description='GPU single precision (MPS): well-conditioned input only',
)

# Above this condition number a float32 inverse has no correct digits left
FP32_CONDITION_LIMIT = 1e6


def select_tolerance(backend_name: str) -> ToleranceTier:
    """Select the tolerance tier for a given backend name."""
    if 'gpu' in backend_name:
        if 'fp64' in backend_name:
            return GPU_FP64
        return GPU_FP32
    return CPU_FP64
