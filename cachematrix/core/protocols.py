"""
Core protocols for cachematrix.

These define structural interfaces that collaborators must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that any function or backend with the right shape plugs in.

Design Principles:
    - Minimal contracts: prescribe only what the caller actually uses
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class Inverter(Protocol):
    """
    Anything cache_solve can delegate inversion to.

    Called as ``inverter(matrix, *args, **kwargs)`` and expected to return
    the inverse of ``matrix`` (or whatever the extra arguments ask for, e.g.
    the solution of ``matrix @ x = b``). Failures are signalled by raising;
    the caller does not inspect the return value.

    cachematrix.solve is the default implementation; numpy.linalg.inv and
    scipy.linalg.inv also satisfy this protocol.
    """

    def __call__(self, matrix: Any, *args: Any, **kwargs: Any) -> Any:
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated design and produces a Result wrapping
    a parameter payload. The backend handles all hardware-specific
    computation (CPU/GPU, precision).

    Backends are stateless apart from device selection made at
    construction time. This makes them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_lu', 'gpu_lu_fp64', 'gpu_lu_fp32'
        """
        ...

    def solve(self, design: D, *, tol: float) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated input container
            tol: Reciprocal condition number threshold (<= 0 disables)

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            SingularMatrixError: If the matrix is exactly or numerically singular
        """
        ...
