"""
Execution timing utilities.

Backends time their factorization, condition estimate and solve steps
separately. On GPU devices the timer synchronizes the device before each
reading so queued kernels are counted.
"""

import time
from contextlib import contextmanager
from typing import Iterator, Literal


DeviceType = Literal['cpu', 'cuda', 'mps']


def _synchronize(device_type: DeviceType) -> None:
    """Block until queued work on the device has finished."""
    if device_type == 'cpu':
        return
    import torch
    if device_type == 'cuda':
        torch.cuda.synchronize()
    elif device_type == 'mps':
        torch.mps.synchronize()


class Timer:
    """
    Accumulating section timer.

    Usage:
        timer = Timer()
        timer.start()

        with timer.section('factorization'):
            lu, piv = lu_factor(a)

        with timer.section('solve'):
            x = lu_solve((lu, piv), b)

        timer.stop()
        timer.result()
        # {'total_seconds': 0.0002, 'factorization': 0.00012, 'solve': 0.00005}
    """

    def __init__(self, device_type: DeviceType = 'cpu'):
        """
        Args:
            device_type: Device whose queue must drain before each reading.
                         'cpu' never synchronizes.
        """
        self._device_type = device_type
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        """Start the overall timer."""
        _synchronize(self._device_type)
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        """Stop the overall timer."""
        _synchronize(self._device_type)
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time a named section. Repeated sections accumulate.

        Args:
            name: Section identifier (used as key in result dict)
        """
        _synchronize(self._device_type)
        start = time.perf_counter()
        try:
            yield
        finally:
            _synchronize(self._device_type)
            elapsed = time.perf_counter() - start
            self._sections[name] = self._sections.get(name, 0.0) + elapsed

    def result(self) -> dict[str, float]:
        """
        Get timing results.

        Returns:
            Dictionary with 'total_seconds' and all section timings

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")

        result = {'total_seconds': self._total}
        result.update(self._sections)
        return result


@contextmanager
def timed(device_type: DeviceType = 'cpu') -> Iterator[Timer]:
    """
    Context manager for one-off timing.

    Usage:
        with timed() as timer:
            inv = solve(a)
        timer.result()['total_seconds']
    """
    timer = Timer(device_type=device_type)
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
