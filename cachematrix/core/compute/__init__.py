"""
Shared compute infrastructure for cachematrix.

Hardware detection, timing utilities and numerical tolerances used by the
inversion backends.

Submodules:
    device: Hardware detection and device selection
    timing: Execution timing utilities
    tolerances: Singularity threshold and precision tiers
"""

from cachematrix.core.compute.device import (
    DeviceInfo,
    detect_gpu,
    get_cpu_info,
    select_device,
)
from cachematrix.core.compute.timing import Timer, timed
from cachematrix.core.compute.tolerances import (
    DEFAULT_TOL,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    # Device detection
    "DeviceInfo",
    "detect_gpu",
    "get_cpu_info",
    "select_device",
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "DEFAULT_TOL",
    "ToleranceTier",
    "select_tolerance",
]
