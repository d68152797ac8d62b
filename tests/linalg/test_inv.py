from fractions import Fraction as F

import numpy as np
import pytest

from densematrix.linalg import (
    Context,
    DimensionMismatchError,
    FloatMatrix,
    Matrix,
    NotInvertibleError,
    getcontext,
    inv,
    localcontext,
    setcontext,
    solve,
)


def test_inv():
    a = Matrix.fromrows([[2, 1], [1, 1]], scalar=F)
    assert inv(a) == Matrix.fromrows([[1, -1], [-1, 2]])
    assert a @ inv(a) == Matrix.eye(2, scalar=F)
    assert a.inv() == inv(a)


def test_inv_round_trip():
    a = Matrix.fromrows([[2, -1, 0], [-1, 2, -1], [0, -1, 2]], scalar=F)
    assert a @ inv(a) == Matrix.eye(3, scalar=F)
    assert inv(a) @ a == Matrix.eye(3, scalar=F)
    assert inv(inv(a)) == a


def test_inv_integer_entries():
    a = Matrix.fromrows([[4, 7], [2, 6]])
    result = a @ inv(a)

    for row, expected in zip(result.tolist(), [[1, 0], [0, 1]]):
        assert row == pytest.approx(expected)


def test_inv_float():
    a = FloatMatrix(3, 3, [[4.0, -2.0, 1.0], [-2.0, 4.0, -2.0], [1.0, -2.0, 4.0]])
    assert (a @ inv(a)).toarray() == pytest.approx(np.eye(3))
    assert inv(a).toarray() == pytest.approx(np.linalg.inv(a.toarray()))


def test_inv_does_not_modify_argument():
    a = Matrix.fromrows([[1, 2], [3, 4]], scalar=F)
    b = a.copy()
    inv(a)
    assert a == b


def test_inv_empty():
    assert inv(Matrix(0, 0)).shape == (0, 0)


def test_singular():
    a = Matrix.fromrows([[1, 2], [2, 4]], scalar=F)

    with pytest.raises(NotInvertibleError) as excinfo:
        inv(a)

    assert excinfo.value.matrix is a
    assert excinfo.value.column == 1

    with pytest.raises(NotInvertibleError):
        inv(Matrix.fromrows([[1.0, 2.0], [2.0, 4.0]]))

    with pytest.raises(NotInvertibleError):
        inv(Matrix.fromrows([[1, 2], [0, 0]]))

    with pytest.raises(NotInvertibleError) as excinfo:
        inv(Matrix.fromrows([[0, 1], [0, 2]]))

    assert excinfo.value.column == 0

    with pytest.raises(NotInvertibleError) as excinfo:
        inv(Matrix.fromrows([[1, 2, 3], [4, 5, 6], [7, 8, 9]], scalar=F))

    assert excinfo.value.column == 2


def test_non_square():
    a = Matrix(2, 3)

    with pytest.raises(NotInvertibleError) as excinfo:
        inv(a)

    assert excinfo.value.matrix is a
    assert excinfo.value.column is None


def test_pivoting_by_value():
    a = Matrix.fromrows([[0, 1], [-1, 0]], scalar=F)
    assert inv(a) == Matrix.fromrows([[0, -1], [1, 0]])
    assert a @ inv(a) == Matrix.eye(2, scalar=F)

    b = Matrix.fromrows([[0, 1, 0], [-2, 0, 0], [0, 0, -3]], scalar=F)
    assert b @ inv(b) == Matrix.eye(3, scalar=F)

    with localcontext(pivoting="MAGNITUDE"):
        assert inv(a) == Matrix.fromrows([[0, -1], [1, 0]])


def test_context():
    assert getcontext().pivoting == "VALUE"

    with localcontext(pivoting="MAGNITUDE") as ctx:
        assert getcontext() is ctx
        assert str(ctx) == "Context('MAGNITUDE')"

        with localcontext():
            assert getcontext().pivoting == "MAGNITUDE"

    assert getcontext().pivoting == "VALUE"

    with pytest.raises(ValueError):
        Context("ABS")  # type: ignore

    previous = getcontext()

    try:
        setcontext(Context("MAGNITUDE"))
        assert getcontext().pivoting == "MAGNITUDE"
    finally:
        setcontext(previous)


def test_solve():
    a = Matrix.fromrows([[2, 1], [1, 1]], scalar=F)
    b = Matrix.fromrows([[3, 1], [2, 0]], scalar=F)
    x = solve(a, b)
    assert x.tolist() == [[1, 1], [1, -1]]
    assert a @ x == b

    with pytest.raises(DimensionMismatchError):
        solve(a, Matrix(3, 1, scalar=F))

    with pytest.raises(NotInvertibleError):
        solve(Matrix(2, 3), Matrix(2, 1))

    with pytest.raises(NotInvertibleError):
        solve(Matrix.fromrows([[1, 2], [2, 4]]), Matrix(2, 1))
