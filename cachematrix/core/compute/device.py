"""
Hardware detection and device selection.

torch is imported lazily; without it only the CPU is ever reported.
"""

from dataclasses import dataclass
from typing import Literal
import platform


@dataclass(frozen=True)
class DeviceInfo:
    """
    Information about a compute device.

    Attributes:
        device_type: Type of device ('cpu', 'cuda', 'mps')
        device_index: Device index (None for CPU)
        name: Human-readable device name
        supports_fp64: Whether the device can factor in double precision
    """
    device_type: Literal['cpu', 'cuda', 'mps']
    device_index: int | None
    name: str
    supports_fp64: bool

    def __str__(self) -> str:
        if self.device_type == 'cpu':
            return f"CPU ({self.name})"
        return f"{self.device_type.upper()}:{self.device_index} ({self.name})"

    @property
    def is_gpu(self) -> bool:
        """True if this is a GPU device."""
        return self.device_type in ('cuda', 'mps')


def detect_gpu() -> DeviceInfo | None:
    """
    Detect the best available GPU.

    Priority: CUDA > MPS (Apple Silicon). MPS has no float64 support.

    Returns:
        DeviceInfo for the GPU, or None if torch is missing or no GPU exists.
    """
    try:
        import torch
    except ImportError:
        return None

    if torch.cuda.is_available():
        idx = torch.cuda.current_device()
        return DeviceInfo(
            device_type='cuda',
            device_index=idx,
            name=torch.cuda.get_device_name(idx),
            supports_fp64=True,
        )

    if hasattr(torch.backends, 'mps') and torch.backends.mps.is_available():
        return DeviceInfo(
            device_type='mps',
            device_index=0,
            name='Apple Silicon GPU',
            supports_fp64=False,
        )

    return None


def get_cpu_info() -> DeviceInfo:
    """DeviceInfo for the host CPU."""
    name = platform.processor() or platform.machine() or "Unknown CPU"
    return DeviceInfo(
        device_type='cpu',
        device_index=None,
        name=name,
        supports_fp64=True,
    )


def select_device(prefer: Literal['cpu', 'gpu', 'auto'] = 'auto') -> DeviceInfo:
    """
    Select compute device based on preference and availability.

    Args:
        prefer: 'cpu' always uses the CPU, 'gpu' requires a GPU,
                'auto' uses a GPU if one is available

    Raises:
        RuntimeError: If 'gpu' requested but no GPU available
    """
    if prefer == 'cpu':
        return get_cpu_info()

    gpu = detect_gpu()

    if prefer == 'gpu' and gpu is None:
        raise RuntimeError(
            "GPU requested but no GPU available. "
            "Install PyTorch with CUDA/MPS support or use backend='cpu'."
        )

    return gpu if gpu is not None else get_cpu_info()
