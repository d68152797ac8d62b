"""
####################################################
Mathematical functions (:mod:`densematrix.function`)
####################################################

.. currentmodule:: densematrix.function

This module provides mathematical functions that work on every supported scalar
type.

.. autosummary::
    :toctree: generated/

    sqrt

"""

import decimal
import math
from typing import Any, overload

import mpmath
import mpmath.ctx_mp_python
import numpy as np


@overload
def sqrt(x: float | int, /) -> float: ...


@overload
def sqrt(x: decimal.Decimal, /) -> decimal.Decimal: ...


@overload
def sqrt(x: Any, /) -> Any: ...


def sqrt(x, /):
    """Square root.

    The result has the same type as `x`, except for integers, which are promoted to
    float as :func:`math.sqrt` does. Types may take over by defining
    ``_densematrix_overload_(fun, *args)``.

    Raises
    ------
    TypeError
        If `x` has no square root of its own type, e.g. :class:`fractions.Fraction`.

    Examples
    --------
    >>> print(format(sqrt(2.0), ".6f"))
    1.414214
    >>> sqrt(decimal.Decimal(16))
    Decimal('4')
    """
    if fun := getattr(type(x), "_densematrix_overload_", None):
        if (res := fun(x, sqrt, x)) is not NotImplemented:
            return res

        raise TypeError

    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return mpmath.sqrt(x)

        case decimal.Decimal():
            return x.sqrt()

        case np.floating():
            return np.sqrt(x)

        case bool():
            raise TypeError

        case float() | int() | np.integer():
            return math.sqrt(x)

        case _:
            raise TypeError
