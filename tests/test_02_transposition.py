"""Test the index transposition algorithms and their verification helpers."""
import logging
import numpy as np
import pytest
import rotmatrix as rm
from rotmatrix import Rotation


def test_n0_is_row_major(dims):
    width, height = dims
    for y in range(height):
        for x in range(width):
            assert rm.transpose(x, y, Rotation.N0, width, height) == x + y * width


def test_n90_formula():
    # (4 - (3 - (3 - 1))) + ((3 - (4 - (2 - 1))) * 4)
    assert rm.transpose(2, 3, Rotation.N90, 4, 3) == 3
    assert rm.transpose(2, 0, Rotation.N90, 4, 3) == 0
    # coordinates outside the covered column resolve to invalid indices
    assert rm.transpose(0, 0, Rotation.N90, 4, 3) == -8
    assert rm.transpose(1, 3, Rotation.N90, 4, 3) == -1


def test_n90_square():
    assert rm.transpose(1, 1, Rotation.N90, 3, 3) == 0
    assert rm.transpose(2, 0, Rotation.N90, 3, 3) == 2
    assert rm.transpose(2, 2, Rotation.N90, 3, 3) == 4


def test_unsupported_falls_back_to_n0(unsupported_rotation, caplog):
    with caplog.at_level(logging.WARNING):
        assert rm.transpose(3, 2, unsupported_rotation, 4, 3) == 11
    assert len(caplog.records) == 1
    assert "not implemented" in caplog.records[0].getMessage()


def test_supported_lookups_do_not_warn(caplog):
    with caplog.at_level(logging.WARNING):
        rm.transpose(1, 1, Rotation.N0, 4, 3)
        rm.transpose(2, 1, Rotation.N90, 4, 3)
    assert not caplog.records


def test_is_supported():
    assert rm.is_supported(Rotation.N0)
    assert rm.is_supported(Rotation.N90)
    assert not rm.is_supported(Rotation.N180)
    assert not rm.is_supported(Rotation.N270)


def test_get_transposition_accepts_degrees():
    fn = rm.get_transposition(90)
    assert fn(2, 3, 4, 3) == 3


def test_index_map():
    assert np.array_equal(rm.index_map(4, 3, Rotation.N0), np.arange(12).reshape(3, 4))
    rotated = rm.index_map(4, 3, Rotation.N90)
    assert rotated.shape == (4, 3)
    assert rotated[3, 2] == 3
    assert list(rotated[:, 2]) == [0, 1, 2, 3]


def test_is_bijective():
    assert rm.is_bijective(4, 3, Rotation.N0)
    assert not rm.is_bijective(4, 3, Rotation.N90)
    assert not rm.is_bijective(3, 3, Rotation.N90)
    with rm.DisableLogger():
        assert rm.is_bijective(4, 3, Rotation.N180)
        assert not rm.is_bijective(4, 3, Rotation.N270)
        assert rm.is_bijective(3, 3, Rotation.N270)


def test_is_bijective_empty():
    assert rm.is_bijective(0, 0, Rotation.N0)
    assert rm.is_bijective(0, 0, Rotation.N90)
