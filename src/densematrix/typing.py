"""
##################################
Typing (:mod:`densematrix.typing`)
##################################

This module provides the capabilities a matrix element must have.

.. autoclass:: Scalar
    :show-inheritance:
    :no-members:

.. autoclass:: ComparableScalar
    :show-inheritance:
    :no-members:

"""

from abc import abstractmethod
from typing import Protocol, Self, SupportsAbs


class Scalar(Protocol):
    """Protocol that ensures scalar-like behavior.

    Objects implementing this protocol must have four arithmetic operations and
    equality defined, and their type must accept the integers 0 and 1, which give the
    additive and multiplicative identities.
    """

    __slots__ = ()

    @abstractmethod
    def __add__(self, rhs: Self) -> Self: ...

    @abstractmethod
    def __sub__(self, rhs: Self) -> Self: ...

    @abstractmethod
    def __mul__(self, rhs: Self) -> Self: ...

    @abstractmethod
    def __truediv__(self, rhs: Self) -> Self: ...

    @abstractmethod
    def __neg__(self) -> Self: ...

    @abstractmethod
    def __eq__(self, rhs: object) -> bool: ...


class ComparableScalar(Scalar, SupportsAbs, Protocol):
    """Protocol for ordered :class:`Scalar`, like a real number.

    Pivot search only uses ``<``; ``abs`` is required when pivoting by magnitude.
    """

    __slots__ = ()

    @abstractmethod
    def __lt__(self, rhs: Self) -> bool: ...
