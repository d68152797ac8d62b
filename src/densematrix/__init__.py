import logging

from .function import sqrt
from .linalg import FloatMatrix, Matrix, inv, norm, solve

__all__ = [
    "sqrt",
    "FloatMatrix",
    "Matrix",
    "inv",
    "norm",
    "solve",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
