"""Test the sequential cursor."""
import pytest
import rotmatrix as rm
from rotmatrix import Rotation, ContractViolation, MatrixCursor


def test_row_major_walk(dims):
    width, height = dims
    matrix = rm.Matrix.from_elements(width, height, list(range(width * height)))
    cells = list(matrix)
    assert len(cells) == width * height
    assert [(c.x, c.y) for c in cells] == [(x, y) for y in range(height) for x in range(width)]
    assert [c.element for c in cells] == list(range(width * height))


def test_exhausted_is_sticky(matrix_4x3):
    cursor = iter(matrix_4x3)
    assert isinstance(cursor, MatrixCursor)
    assert len(list(cursor)) == 12
    for _ in range(3):
        assert cursor.next_cell() is None
        with pytest.raises(StopIteration):
            next(cursor)


def test_cell_fields(matrix_4x3):
    cursor = MatrixCursor(matrix_4x3)
    assert cursor.next_cell() == (0, 0, 0)
    cell = cursor.next_cell()
    assert (cell.x, cell.y, cell.element) == (1, 0, 1)


def test_independent_cursors(matrix_4x3):
    first = iter(matrix_4x3)
    second = iter(matrix_4x3)
    next(first)
    next(first)
    assert next(second) == (0, 0, 0)
    assert next(first) == (2, 0, 2)


def test_reflects_updates(matrix_4x3):
    cursor = iter(matrix_4x3)
    next(cursor)
    matrix_4x3[1, 0] = "x"
    assert next(cursor).element == "x"


def test_declared_order_with_fallback_rotation(matrix_4x3):
    matrix_4x3.rotate(Rotation.N180)
    with rm.DisableLogger():
        cells = list(matrix_4x3)
    assert [c.element for c in cells] == list(range(12))


def test_declared_order_with_rotated_non_square(matrix_4x3):
    matrix_4x3.rotate(Rotation.N90)
    cursor = iter(matrix_4x3)
    # walk starts at (0, 0), which the 90° lookup maps outside of the storage
    with pytest.raises(ContractViolation):
        next(cursor)


def test_declared_order_leaves_logical_bounds():
    matrix = rm.Matrix.from_elements(4, 3, list(range(12)))
    matrix.rotate(Rotation.N270)
    cursor = iter(matrix)
    with rm.DisableLogger():
        assert [next(cursor).element for _ in range(3)] == [0, 1, 2]
        # x = 3 lies outside of the logical width of 3
        with pytest.raises(ContractViolation):
            next(cursor)
