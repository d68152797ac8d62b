"""
############################################################
Gaussian elimination (:mod:`densematrix.linalg.elimination`)
############################################################

.. currentmodule:: densematrix.linalg.elimination

Every routine in this module works in place on a working buffer, i.e., a
two-dimensional ndarray with at least as many columns as rows. Matrices never hand
their own storage to these routines; they copy it first.

Routines
========

.. autosummary::
    :toctree: generated/

    back_substitute
    forward_eliminate
    gauss_jordan

Context
=======

.. autosummary::
    :toctree: generated/

    Context
    getcontext
    localcontext
    setcontext

"""

import contextlib
import contextvars
import logging
from typing import Any, Literal, Self

import numpy.typing as npt

from densematrix.linalg.errors import NotInvertibleError

_logger = logging.getLogger(__name__)


class Context:
    """Create a new context.

    Parameters
    ----------
    pivoting : Literal["VALUE", "MAGNITUDE"], default="VALUE"
        How pivot candidates are compared. With ``"VALUE"`` the greatest candidate
        under the ordering of the scalar type is chosen, and a zero choice falls back
        to the first nonzero candidate below it. With ``"MAGNITUDE"`` candidates are compared by their absolute values.
    """

    __slots__ = ("_pivoting",)
    _pivoting: Literal["VALUE", "MAGNITUDE"]

    def __init__(self, pivoting: Literal["VALUE", "MAGNITUDE"] = "VALUE"):
        if pivoting not in ("VALUE", "MAGNITUDE"):
            raise ValueError(f"unknown pivoting: {pivoting!r}")

        self._pivoting = pivoting

    @property
    def pivoting(self) -> Literal["VALUE", "MAGNITUDE"]:
        return self._pivoting

    def copy(self) -> Self:
        return self.__class__(self._pivoting)

    def __str__(self):
        return f"{type(self).__name__}({self._pivoting!r})"

    def __copy__(self) -> Self:
        return self.copy()


_var: contextvars.ContextVar[Context] = contextvars.ContextVar("elimination")


def getcontext() -> Context:
    """Return the current context for the active thread."""
    if context := _var.get(None):
        return context

    context = Context()
    _var.set(context)
    return context


def setcontext(ctx: Context) -> None:
    """Set the current context for the active thread to `ctx`."""
    _var.set(ctx)


@contextlib.contextmanager
def localcontext(
    ctx: Context | None = None,
    *,
    pivoting: Literal["VALUE", "MAGNITUDE"] | None = None,
):
    """Return a context manager that will set the current context for the active thread
    to a copy of `ctx` on entry to the with-statement and restore the previous context
    when exiting the with-statement.

    Examples
    --------
    >>> with localcontext(pivoting="MAGNITUDE") as ctx:
    ...     print(ctx)
    Context('MAGNITUDE')
    """
    if ctx is None:
        ctx = getcontext()

    if pivoting is None:
        pivoting = ctx._pivoting

    ctx = Context(pivoting)
    token = _var.set(ctx)

    try:
        yield ctx
    finally:
        _var.reset(token)


def _findpivot(a: npt.NDArray, k: int, n: int, zero: Any, magnitude: bool) -> int:
    p = k

    for i in range(k + 1, n):
        if magnitude:
            if abs(a[p, k]) < abs(a[i, k]):
                p = i
        elif a[p, k] < a[i, k]:
            p = i

    if a[p, k] == zero:
        for i in range(k + 1, n):
            if not a[i, k] == zero:
                return i

    return p


def forward_eliminate(a: npt.NDArray, zero: Any, /) -> None:
    """Reduce the leading square block of `a` to upper-triangular form in place.

    For each column ``k``, the row with the greatest entry in that column (ties are
    resolved in favor of the upper row) is swapped into row ``k``. If that entry is
    zero, the first nonzero entry below row ``k`` is taken instead. The entries below
    the pivot are then eliminated from left to right.

    Parameters
    ----------
    a : ndarray
        Working buffer of shape ``(n, m)`` with ``m >= n``.
    zero
        Additive identity of the scalar type.

    Raises
    ------
    NotInvertibleError
        If no candidate in a pivot column differs from `zero`.
    """
    n, m = a.shape
    magnitude = getcontext().pivoting == "MAGNITUDE"

    for k in range(n):
        p = _findpivot(a, k, n, zero, magnitude)

        if a[p, k] == zero:
            _logger.debug("zero pivot in column %d", k)
            raise NotInvertibleError(f"zero pivot in column {k}", column=k)

        if p != k:
            _logger.debug("swapping rows %d and %d", k, p)
            a[(k, p),] = a[(p, k),]

        for i in range(k + 1, n):
            factor = a[i, k] / a[k, k]

            for j in range(k + 1, m):
                a[i, j] = a[i, j] - a[k, j] * factor

            a[i, k] = zero


def back_substitute(a: npt.NDArray, zero: Any, /) -> None:
    """Turn the upper-triangular leading block of `a` into the identity in place.

    Rows are processed from the bottom up: each row is divided by its pivot and then
    subtracted from the rows above it to clear the pivot column.

    Parameters
    ----------
    a : ndarray
        Working buffer whose leading square block is upper-triangular with nonzero
        diagonal, as left by :func:`forward_eliminate`.
    zero
        Additive identity of the scalar type.
    """
    n, m = a.shape

    for r in reversed(range(n)):
        pivot = a[r, r]

        for j in range(m):
            a[r, j] = a[r, j] / pivot

        for i in range(r):
            factor = a[i, r]

            for j in range(r + 1, m):
                a[i, j] = a[i, j] - a[r, j] * factor

            a[i, r] = zero


def gauss_jordan(a: npt.NDArray, zero: Any, /) -> None:
    """Reduce the working buffer ``[A | B]`` to ``[I | inv(A) @ B]`` in place.

    Raises
    ------
    NotInvertibleError
        If `A` is singular along the elimination path.
    """
    forward_eliminate(a, zero)
    back_substitute(a, zero)
