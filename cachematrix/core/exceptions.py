"""
Exception hierarchy for cachematrix.

All exceptions inherit from CacheMatrixError to allow catching any
library-specific error. Failures of the inversion routine are grouped
under InversionError, the only error class the caching layer lets through.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class CacheMatrixError(Exception):
    """Base exception for all cachematrix errors."""
    pass


class ValidationError(CacheMatrixError):
    """
    Argument validation failed.

    Raised when a package function receives an argument it cannot use
    (unknown backend name, non-numeric tolerance). Problems with the
    matrix itself are InversionErrors.
    """
    pass


class InversionError(CacheMatrixError):
    """
    The inversion routine rejected the matrix.

    Attributes:
        matrix_name: Name/description of the problematic matrix
    """

    def __init__(self, message: str, matrix_name: str | None = None):
        super().__init__(message)
        self.matrix_name = matrix_name


class MalformedMatrixError(InversionError):
    """
    Input is not a usable numeric matrix.

    Raised for non-numeric data, more than two dimensions, empty input,
    or NaN/Inf entries.
    """
    pass


class NonSquareMatrixError(InversionError):
    """
    Matrix is not square.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        shape: Actual (rows, cols) of the matrix
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message, matrix_name=matrix_name)
        self.shape = shape


class ConformabilityError(InversionError):
    """
    Right-hand side does not match the coefficient matrix.

    Attributes:
        matrix_name: Name of the offending right-hand side
        shape: Shape of the right-hand side
        expected_rows: Number of rows of the coefficient matrix
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        shape: tuple[int, ...] | None = None,
        expected_rows: int | None = None,
    ):
        super().__init__(message, matrix_name=matrix_name)
        self.shape = shape
        self.expected_rows = expected_rows


class SingularMatrixError(InversionError):
    """
    Matrix is singular or numerically singular.

    Raised when the LU factorization hits an exact zero pivot, or when the
    reciprocal condition number falls below the requested tolerance.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rcond: Reciprocal condition number estimate (1-norm), if computed
        condition_number: 1 / rcond, if rcond was computed and nonzero
        tol: Tolerance the estimate was compared against
        pivot: 1-based index of the zero pivot for exact singularity
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rcond: float | None = None,
        tol: float | None = None,
        pivot: int | None = None,
    ):
        super().__init__(message, matrix_name=matrix_name)
        self.rcond = rcond
        self.tol = tol
        self.pivot = pivot
        if rcond is not None and rcond > 0:
            self.condition_number = 1.0 / rcond
        else:
            self.condition_number = None
