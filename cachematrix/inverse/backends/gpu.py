"""
GPU backend for matrix inversion using PyTorch.

Factors on the device with torch.linalg.lu_factor_ex and solves with
torch.linalg.lu_solve. FP64 on CUDA, FP32 on MPS (no float64 support).
The condition estimate runs through LAPACK on the host using the packed
factor copied back from the device, so the singularity threshold is
identical to the CPU reference.
"""

from __future__ import annotations

from typing import Any
import numpy as np

from cachematrix.core.result import Result
from cachematrix.core.compute.timing import Timer
from cachematrix.core.compute.device import DeviceInfo
from cachematrix.core.compute.tolerances import FP32_CONDITION_LIMIT
from cachematrix.inverse.design import InverseDesign
from cachematrix.inverse.solution import InverseParams
from cachematrix.inverse._common import (
    reciprocal_condition,
    exactly_singular_error,
    check_condition,
)


class GPULUBackend:
    """
    GPU backend using LU decomposition.

    Returns FP64 numpy arrays regardless of the device precision, for
    consistency with the CPU reference backend.
    """

    def __init__(self, device: DeviceInfo):
        """
        Parameters
        ----------
        device : DeviceInfo
            GPU device from select_device().
        """
        import torch

        if device.device_type == 'cuda':
            self.device = torch.device(f'cuda:{device.device_index or 0}')
        elif device.device_type == 'mps':
            self.device = torch.device('mps')
        else:
            raise ValueError(f"GPULUBackend requires GPU device, got {device.device_type}")

        self.device_type = device.device_type
        self.dtype = torch.float64 if device.supports_fp64 else torch.float32
        self.device_name = device.name

    @property
    def name(self) -> str:
        import torch
        precision = 'fp64' if self.dtype == torch.float64 else 'fp32'
        return f'gpu_lu_{precision}'

    def solve(self, design: InverseDesign, *, tol: float) -> Result[InverseParams]:
        """
        Solve a @ x = b on the GPU (b = I for inversion).

        Raises:
            SingularMatrixError: If a is exactly or numerically singular
        """
        import torch

        timer = Timer(device_type=self.device_type)
        timer.start()

        with timer.section('transfer'):
            a_t = torch.as_tensor(design.a, dtype=self.dtype, device=self.device)
            b_t = torch.as_tensor(design.rhs, dtype=self.dtype, device=self.device)

        with timer.section('factorization'):
            lu, pivots, info = torch.linalg.lu_factor_ex(a_t)

        # info > 0 is the 1-based index of the zero pivot
        pivot = int(info.item())
        if pivot > 0:
            raise exactly_singular_error(pivot)

        with timer.section('condition'):
            rcond = reciprocal_condition(
                lu.cpu().numpy(), float(np.linalg.norm(design.a, 1))
            )
        check_condition(rcond, tol)

        with timer.section('solve'):
            x_t = torch.linalg.lu_solve(lu, pivots, b_t)
            x = x_t.cpu().numpy().astype(np.float64)

        timer.stop()

        warnings: list[str] = []
        if self.dtype == torch.float32 and rcond * FP32_CONDITION_LIMIT < 1.0:
            warnings.append(
                f"condition number {1.0 / rcond:.3g} exceeds {FP32_CONDITION_LIMIT:.0e}; "
                f"single-precision result is unreliable, use backend='cpu'"
            )

        params = InverseParams(
            x=x,
            rcond=rcond,
            n=design.n,
            is_inverse=design.is_inverse,
        )

        info_dict: dict[str, Any] = {
            'method': 'lu',
            'tol': tol,
            'device': self.device_name,
            **design.metadata,
        }

        return Result(
            params=params,
            info=info_dict,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings),
        )
