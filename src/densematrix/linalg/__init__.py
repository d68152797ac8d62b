"""
################################################
Dense linear algebra (:mod:`densematrix.linalg`)
################################################

.. currentmodule:: densematrix.linalg

This module provides dense matrices over arbitrary scalar types and their inversion
by Gaussian elimination with partial pivoting.

Matrices
========

.. autosummary::
    :toctree: generated/

    Matrix
    FloatMatrix

Operations
==========

.. autosummary::
    :toctree: generated/

    inv
    norm
    solve

Context
=======

.. autosummary::
    :toctree: generated/

    Context
    getcontext
    localcontext
    setcontext

Errors
======

.. autosummary::
    :toctree: generated/

    MatrixError
    DimensionMismatchError
    IncompatibleDimensionsError
    IndexOutOfRangeError
    InvalidDimensionError
    NotInvertibleError

"""

from .elimination import Context, getcontext, localcontext, setcontext
from .errors import (
    DimensionMismatchError,
    IncompatibleDimensionsError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    MatrixError,
    NotInvertibleError,
)
from .floatmatrix import FloatMatrix
from .matrix import Matrix, inv, norm, solve

__all__ = [
    "Context",
    "DimensionMismatchError",
    "FloatMatrix",
    "IncompatibleDimensionsError",
    "IndexOutOfRangeError",
    "InvalidDimensionError",
    "Matrix",
    "MatrixError",
    "NotInvertibleError",
    "getcontext",
    "inv",
    "localcontext",
    "norm",
    "setcontext",
    "solve",
]
