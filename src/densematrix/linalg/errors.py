from typing import Any


def _shapeof(x: Any) -> tuple[int, ...] | None:
    if isinstance(x, tuple):
        return x

    return getattr(x, "shape", None)


class MatrixError(ValueError):
    """Error raised by :mod:`densematrix.linalg` functions."""


class InvalidDimensionError(MatrixError):
    """Matrix created with a negative number of rows or columns.

    Attributes
    ----------
    rows : int
    cols : int
    """

    def __init__(self, rows: int, cols: int):
        super().__init__(f"invalid matrix dimensions: {rows}x{cols}")
        self.rows = rows
        self.cols = cols


class DimensionMismatchError(MatrixError):
    """Operands of an elementwise operation have different shapes.

    Attributes
    ----------
    lhs : Any
        Left operand, or the requested shape when constructing a :class:`Matrix`.
    rhs : Any
        Right operand, or the data given to the constructor.
    """

    def __init__(self, lhs: Any, rhs: Any):
        super().__init__(f"dimension mismatch: {_shapeof(lhs)} and {_shapeof(rhs)}")
        self.lhs = lhs
        self.rhs = rhs


class IncompatibleDimensionsError(MatrixError):
    """Number of columns of the left factor differs from the rows of the right one.

    Attributes
    ----------
    lhs : Matrix
    rhs : Matrix
    """

    def __init__(self, lhs: Any, rhs: Any):
        super().__init__(
            f"incompatible dimensions for product: {lhs.shape} and {rhs.shape}"
        )
        self.lhs = lhs
        self.rhs = rhs


class NotInvertibleError(MatrixError):
    """Matrix is not square or elimination met a zero pivot.

    Attributes
    ----------
    matrix : Matrix | None
        Matrix whose inversion failed, if known.
    column : int | None
        Pivot column that had no nonzero candidate.
    """

    def __init__(
        self,
        message: str = "the matrix is not invertible",
        matrix: Any = None,
        column: int | None = None,
    ):
        super().__init__(message)
        self.matrix = matrix
        self.column = column


class IndexOutOfRangeError(MatrixError, IndexError):
    """Row or column index outside of the matrix.

    Attributes
    ----------
    index : int
    size : int
        Length of the indexed axis.
    """

    def __init__(self, index: int, size: int):
        super().__init__(f"index {index} is out of range for axis of size {size}")
        self.index = index
        self.size = size
