import itertools
import numbers
from collections.abc import Iterator, Sequence
from typing import Any, ClassVar, Self

import numpy as np
import numpy.typing as npt

from densematrix import function as dmf
from densematrix.linalg.elimination import gauss_jordan
from densematrix.linalg.errors import (
    DimensionMismatchError,
    IncompatibleDimensionsError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    MatrixError,
    NotInvertibleError,
)
from densematrix.typing import ComparableScalar


class rowiter(Iterator[list]):
    __slots__ = ("_iter", "_matrix")
    _iter: Iterator[int]
    _matrix: "Matrix"

    def __init__(self, a: "Matrix", /):
        self._iter = iter(range(a.rows))
        self._matrix = a

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> list:
        return self._matrix._data[next(self._iter)].tolist()


class Matrix[T1: ComparableScalar = Any]:
    """Dense matrix over an arbitrary scalar type.

    Parameters
    ----------
    rows : int
        Number of rows.
    cols : int
        Number of columns.
    data : ndarray | Sequence, optional
        Entries given row by row. The matrix is filled with zeros if omitted.
    scalar : type, optional
        Element type. Each entry of `data` is converted with ``scalar(x)`` when it is
        given; otherwise the type of the first entry is used, or float for empty and
        zero-filled matrices. ``scalar(0)`` and ``scalar(1)`` must be the additive and
        multiplicative identities.

    Raises
    ------
    InvalidDimensionError
        If `rows` or `cols` is negative.
    DimensionMismatchError
        If the shape of `data` is not ``(rows, cols)``.

    Examples
    --------
    >>> from fractions import Fraction
    >>> a = Matrix(2, 2, [[2, 1], [1, 1]], scalar=Fraction)
    >>> print(inv(a))
    Rows=2, Cols=2
    1 -1
    -1 2
    <BLANKLINE>
    """

    __slots__ = ("_data", "_scalar", "_issquare")
    __array_ufunc__ = None
    scalartype: ClassVar[type | None] = None
    _data: npt.NDArray
    _scalar: type[T1]
    _issquare: bool

    def __init__(
        self,
        rows: int,
        cols: int,
        data: npt.NDArray | Sequence[Sequence[Any]] | None = None,
        *,
        scalar: type[T1] | None = None,
        **kwargs,
    ):
        if kwargs.get("_skipcheck"):
            self._data = data  # type: ignore
            self._scalar = scalar  # type: ignore
            self._issquare = rows == cols
            return

        if not (isinstance(rows, int) and isinstance(cols, int)):
            raise TypeError

        if rows < 0 or cols < 0:
            raise InvalidDimensionError(rows, cols)

        fixed = type(self).scalartype

        if fixed is not None:
            if scalar is not None and scalar is not fixed:
                raise TypeError

            scalar = fixed

        self._issquare = rows == cols
        self._data = self._emptyarray((rows, cols))

        if data is None:
            self._scalar = float if scalar is None else scalar
            self._data[...] = self._scalar(0)
            return

        tmp = np.array(data, np.object_)

        if tmp.size == 0 and rows * cols == 0:
            tmp = tmp.reshape((rows, cols))

        if tmp.shape != (rows, cols):
            raise DimensionMismatchError((rows, cols), tmp)

        if scalar is None:
            self._scalar = type(tmp.flat[0]) if tmp.size else float
            self._data[...] = tmp
            return

        self._scalar = scalar

        for key in itertools.product(range(rows), range(cols)):
            self._data[key] = scalar(tmp[key])

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def issquare(self) -> bool:
        return self._issquare

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def scalar(self) -> type[T1]:
        """Element type, which also supplies the identities ``scalar(0)`` and
        ``scalar(1)``."""
        return self._scalar

    @property
    def shape(self) -> tuple[int, int]:
        """Tuple ``(rows, cols)``.

        Examples
        --------
        >>> Matrix(2, 3).shape
        (2, 3)
        """
        return self._data.shape  # type: ignore

    @property
    def T(self) -> Self:
        """Shorthand for :meth:`transpose`."""
        return self.transpose()

    @classmethod
    def eye(cls, n: int, *, scalar: type[T1] | None = None) -> Self:
        """Return an ``n x n`` matrix with ones on the diagonal and zeros elsewhere."""
        result = cls.zeros(n, n, scalar=scalar)
        ONE = result._scalar(1)

        for i in range(n):
            result._data[i, i] = ONE

        return result

    @classmethod
    def fromrows(
        cls, data: npt.NDArray | Sequence[Sequence[Any]], *, scalar: type[T1] | None = None
    ) -> Self:
        """Return a matrix whose shape is taken from a nested sequence of rows.

        Examples
        --------
        >>> Matrix.fromrows([[1, 2, 3], [4, 5, 6]]).shape
        (2, 3)
        """
        tmp = np.array(data, np.object_)

        if tmp.size == 0:
            tmp = tmp.reshape((0, 0) if tmp.ndim < 2 else tmp.shape)

        if tmp.ndim != 2:
            raise MatrixError("expected a nested sequence of rows of equal length")

        return cls(tmp.shape[0], tmp.shape[1], tmp, scalar=scalar)

    @classmethod
    def zeros(cls, rows: int, cols: int, *, scalar: type[T1] | None = None) -> Self:
        """Return a new matrix of given shape, filled with zeros."""
        return cls(rows, cols, scalar=scalar)

    @classmethod
    def _emptyarray(cls, shape: tuple[int, int]) -> npt.NDArray:
        return np.empty(shape, np.object_)

    def _fromarray(self, data: npt.NDArray) -> Self:
        result = self._emptyarray(data.shape)
        result[...] = data
        cls, (rows, cols) = type(self), data.shape
        return cls(rows, cols, result, scalar=self._scalar, _skipcheck=True)

    def copy(self) -> Self:
        """Return a copy of the matrix."""
        return self._fromarray(self._data)

    def inv(self) -> Self:
        """Shorthand for :func:`inv`."""
        return inv(self)

    def norm(self) -> Any:
        """Shorthand for :func:`norm`."""
        return norm(self)

    def swaprows(self, i: int, j: int) -> None:
        """Exchange rows `i` and `j` in place.

        Raises
        ------
        IndexOutOfRangeError
            If `i` or `j` is not in ``range(rows)``.
        """
        i = self._checkindex(i, self.rows)
        j = self._checkindex(j, self.rows)

        if i != j:
            self._data[(i, j),] = self._data[(j, i),]

    def toarray(self) -> npt.NDArray:
        """Return a copy of the entries as a two-dimensional ndarray."""
        return self._data.copy()

    def tolist(self) -> list[list[T1]]:
        """Return a copy of the entries as a list of rows."""
        return self._data.tolist()

    def transpose(self) -> Self:
        """Return the transposed matrix."""
        return self._fromarray(self._data.T)

    def _densematrix_overload_(self, fun, *args):
        cls = type(self)

        if fun is inv:
            return cls.__inv(*args)

        if fun is norm:
            return cls.__norm(*args)

        if fun is solve:
            return cls.__solve(*args)

        return NotImplemented

    @staticmethod
    def _checkindex(index: int, size: int) -> int:
        if not isinstance(index, numbers.Integral):
            raise TypeError

        if not 0 <= index < size:
            raise IndexOutOfRangeError(int(index), size)

        return int(index)

    def _render(self, fun) -> str:
        result = f"Rows={self.rows}, Cols={self.cols}\n"

        for row in self._data:
            result += " ".join(fun(x) for x in row) + "\n"

        return result

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented

        if self.shape != other.shape:
            return False

        return all(bool(x == y) for x, y in zip(self._data.flat, other._data.flat))

    def __len__(self) -> int:
        return self.rows

    def __getitem__(self, key: tuple[int, int]) -> T1:
        match key:
            case (i, j):
                i = self._checkindex(i, self.rows)
                j = self._checkindex(j, self.cols)
                return self._data[i, j]

            case _:
                raise TypeError

    def __setitem__(self, key: tuple[int, int], value: T1) -> None:
        match key:
            case (i, j):
                i = self._checkindex(i, self.rows)
                j = self._checkindex(j, self.cols)
                self._data[i, j] = value

            case _:
                raise TypeError

    def __iter__(self) -> rowiter:
        return rowiter(self)

    def __str__(self):
        return self._render(str)

    def __format__(self, format_spec: str) -> str:
        return self._render(lambda x: format(x, format_spec))

    def __repr__(self):
        return f"{type(self).__name__}({self.rows}, {self.cols}, {self.tolist()!r})"

    def __add__(self, rhs: Self) -> Self:
        if not isinstance(rhs, Matrix):
            return NotImplemented

        if self.shape != rhs.shape:
            raise DimensionMismatchError(self, rhs)

        return self._fromarray(self._data + rhs._data)

    def __sub__(self, rhs: Self) -> Self:
        if not isinstance(rhs, Matrix):
            return NotImplemented

        if self.shape != rhs.shape:
            raise DimensionMismatchError(self, rhs)

        return self._fromarray(self._data - rhs._data)

    def __mul__(self, rhs: T1 | float | int) -> Self:
        if isinstance(rhs, (Matrix, np.ndarray, Sequence)):
            return NotImplemented

        return self._fromarray(self._data * rhs)

    def __truediv__(self, rhs: T1 | float | int) -> Self:
        if isinstance(rhs, (Matrix, np.ndarray, Sequence)):
            return NotImplemented

        return self._fromarray(self._data / rhs)

    def __matmul__(self, rhs: Self) -> Self:
        if not isinstance(rhs, Matrix):
            return NotImplemented

        if self.cols != rhs.rows:
            raise IncompatibleDimensionsError(self, rhs)

        ZERO = self._scalar(0)
        lhs, rhs_ = self._data, rhs._data
        result = self._emptyarray((self.rows, rhs.cols))

        for i in range(self.rows):
            for j in range(rhs.cols):
                tmp = ZERO

                for k in range(self.cols):
                    tmp = tmp + lhs[i, k] * rhs_[k, j]

                result[i, j] = tmp

        return self._fromarray(result)

    def __rmul__(self, lhs: T1 | float | int) -> Self:
        return self.__mul__(lhs)

    def __rtruediv__(self, lhs: T1 | float | int) -> Self:
        if isinstance(lhs, (Matrix, np.ndarray, Sequence)):
            return NotImplemented

        result = self._emptyarray(self.shape)

        for key in itertools.product(*(range(n) for n in self.shape)):
            result[key] = lhs / self._data[key]

        return self._fromarray(result)

    def __neg__(self) -> Self:
        return self._fromarray(-self._data)

    def __pos__(self) -> Self:
        return self.copy()

    def __copy__(self) -> Self:
        return self.copy()

    def __reduce(self, b: npt.NDArray) -> npt.NDArray:
        n = self.rows
        work = self._emptyarray((n, n + b.shape[1]))
        work[:, :n] = self._data
        work[:, n:] = b

        try:
            gauss_jordan(work, self._scalar(0))
        except NotInvertibleError as exc:
            exc.matrix = self
            raise

        return work[:, n:]

    def __inv(self):
        if not self._issquare:
            raise NotInvertibleError("non-square matrix", matrix=self)

        eye = self.eye(self.rows, scalar=self._scalar)
        return self._fromarray(self.__reduce(eye._data))

    def __norm(self):
        result = self._scalar(0)

        for x in self._data.flat:
            result = result + x * x

        return dmf.sqrt(result)

    def __solve(self, b):
        if not self._issquare:
            raise NotInvertibleError("non-square matrix", matrix=self)

        if not isinstance(b, Matrix):
            raise TypeError

        if b.rows != self.rows:
            raise DimensionMismatchError(self, b)

        return self._fromarray(self.__reduce(b._data))


def inv[T: Matrix](a: T) -> T:
    """Compute the inverse of a matrix by Gauss-Jordan elimination.

    The matrix is augmented with the identity and reduced by partial pivoting (see
    :func:`~densematrix.linalg.elimination.forward_eliminate`); the right half of the
    working buffer is the inverse.

    Parameters
    ----------
    a : Matrix
        Matrix to be inverted.

    Returns
    -------
    Matrix

    Raises
    ------
    NotInvertibleError
        If `a` is not square or elimination meets a zero pivot.
    """
    if (res := a._densematrix_overload_(inv, a)) is not NotImplemented:
        return res

    raise RuntimeError


def norm(a: Matrix) -> Any:
    """Compute the Frobenius norm, i.e., the square root of the sum of squares.

    Raises
    ------
    TypeError
        If the scalar type has no square root of its own type.
    """
    if (res := a._densematrix_overload_(norm, a)) is not NotImplemented:
        return res

    raise RuntimeError


def solve[T: Matrix](a: T, b: Matrix) -> T:
    """Solve a linear equation ``a @ x = b``.

    Parameters
    ----------
    a : Matrix
        Square coefficient matrix.
    b : Matrix
        Right-hand side with as many rows as `a`; each column is solved for.

    Returns
    -------
    Matrix

    Raises
    ------
    NotInvertibleError
        If `a` is not square or singular.
    DimensionMismatchError
        If `b` does not have as many rows as `a`.
    """
    if (res := a._densematrix_overload_(solve, a, b)) is not NotImplemented:
        return res

    raise RuntimeError
