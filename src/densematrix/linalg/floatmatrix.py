import itertools
from collections.abc import Sequence

import numpy as np

from densematrix.linalg.matrix import Matrix, norm


class FloatMatrix(Matrix[float]):
    """Double-precision matrix backed by a float64 array.

    Division is carried out on Python floats, so that dividing by zero raises
    :class:`ZeroDivisionError` as it does for a generic matrix of floats.
    """

    __slots__ = ()
    scalartype = float

    @classmethod
    def _emptyarray(cls, shape):
        return np.empty(shape, np.float64)

    def _densematrix_overload_(self, fun, *args):
        if fun is norm:
            return float(np.linalg.norm(self._data, "fro"))

        return super()._densematrix_overload_(fun, *args)

    def __truediv__(self, rhs):
        if isinstance(rhs, (Matrix, np.ndarray, Sequence)):
            return NotImplemented

        rhs = float(rhs)
        result = self._emptyarray(self.shape)

        for key in itertools.product(*(range(n) for n in self.shape)):
            result[key] = float(self._data[key]) / rhs

        return self._fromarray(result)

    def __rtruediv__(self, lhs):
        if isinstance(lhs, (Matrix, np.ndarray, Sequence)):
            return NotImplemented

        lhs = float(lhs)
        result = self._emptyarray(self.shape)

        for key in itertools.product(*(range(n) for n in self.shape)):
            result[key] = lhs / float(self._data[key])

        return self._fromarray(result)
