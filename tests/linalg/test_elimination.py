import logging
from fractions import Fraction as F

import numpy as np
import pytest

from densematrix.linalg import NotInvertibleError, localcontext
from densematrix.linalg.elimination import (
    back_substitute,
    forward_eliminate,
    gauss_jordan,
)

ZERO = F(0)


def fracarray(rows):
    return np.array([[F(x) for x in row] for row in rows], np.object_)


def test_forward_eliminate():
    a = fracarray([[1, 2], [3, 4]])
    forward_eliminate(a, ZERO)
    assert a.tolist() == [[3, 4], [0, F(2, 3)]]


def test_pivot_tie_keeps_upper_row(caplog):
    caplog.set_level(logging.DEBUG, logger="densematrix.linalg.elimination")
    a = fracarray([[1, 2], [1, 3]])
    forward_eliminate(a, ZERO)
    assert a.tolist() == [[1, 2], [0, 1]]
    assert not any("swapping" in r.getMessage() for r in caplog.records)


def test_pivot_swap_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="densematrix.linalg.elimination")
    a = fracarray([[1, 2], [3, 4]])
    forward_eliminate(a, ZERO)
    assert "swapping rows 0 and 1" in caplog.messages


def test_pivot_compares_values():
    a = fracarray([[-3, 1], [1, 1]])
    forward_eliminate(a, ZERO)
    assert a[0].tolist() == [1, 1]

    with localcontext(pivoting="MAGNITUDE"):
        b = fracarray([[-3, 1], [1, 1]])
        forward_eliminate(b, ZERO)
        assert b[0].tolist() == [-3, 1]


def test_eliminated_entries_are_zero():
    a = np.array([[3.0, 1.0, 1.0], [1.0, 2.0, 1.0]], np.object_)
    zero = 0.0
    forward_eliminate(a, zero)
    assert a[1, 0] is zero


def test_zero_pivot(caplog):
    caplog.set_level(logging.DEBUG, logger="densematrix.linalg.elimination")
    a = fracarray([[1, 2, 1, 0], [2, 4, 0, 1]])

    with pytest.raises(NotInvertibleError) as excinfo:
        forward_eliminate(a, ZERO)

    assert excinfo.value.column == 1
    assert excinfo.value.matrix is None
    assert "zero pivot in column 1" in caplog.messages


def test_back_substitute():
    a = fracarray([[2, 4, 1, 0], [0, 1, 0, 1]])
    back_substitute(a, ZERO)
    assert a.tolist() == [[1, 0, F(1, 2), -2], [0, 1, 0, 1]]


def test_gauss_jordan():
    a = fracarray([[2, 1, 1, 0], [1, 1, 0, 1]])
    gauss_jordan(a, ZERO)
    assert a.tolist() == [[1, 0, 1, -1], [0, 1, -1, 2]]


def test_zero_pivot_falls_back_to_nonzero_row():
    a = fracarray([[0, 1, 1, 0], [-2, 3, 0, 1]])
    forward_eliminate(a, ZERO)
    assert a[0].tolist() == [-2, 3, 0, 1]
    assert a[1].tolist() == [0, 1, 1, 0]
