"""
Tests for core/compute: timing, tolerances, device selection.
"""

import numpy as np
import pytest

from cachematrix.core.compute import (
    DEFAULT_TOL,
    Timer,
    get_cpu_info,
    select_device,
    select_tolerance,
    timed,
)
from cachematrix.core.compute.tolerances import CPU_FP64, GPU_FP32, GPU_FP64


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section("factorization"):
            pass
        with timer.section("factorization"):
            pass
        with timer.section("solve"):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {"total_seconds", "factorization", "solve"}
        assert all(v >= 0.0 for v in result.values())

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_timed_context(self):
        with timed() as timer:
            np.linalg.inv(np.eye(3))
        assert timer.result()["total_seconds"] >= 0.0


class TestTolerances:

    def test_default_tol_is_machine_epsilon(self):
        assert DEFAULT_TOL == np.finfo(np.float64).eps

    @pytest.mark.parametrize("name, tier", [
        ("cpu_lu", CPU_FP64),
        ("gpu_lu_fp64", GPU_FP64),
        ("gpu_lu_fp32", GPU_FP32),
    ])
    def test_select_tolerance(self, name, tier):
        assert select_tolerance(name) is tier


class TestDevice:

    def test_cpu_info(self):
        info = get_cpu_info()
        assert info.device_type == "cpu"
        assert info.device_index is None
        assert info.supports_fp64
        assert not info.is_gpu
        assert str(info).startswith("CPU (")

    def test_select_cpu(self):
        assert select_device("cpu").device_type == "cpu"

    def test_select_auto_returns_device(self):
        assert select_device("auto").device_type in ("cpu", "cuda", "mps")
