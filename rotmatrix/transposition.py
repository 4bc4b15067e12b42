#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Index transposition for rotated matrix views.

A Matrix keeps its elements in a single row-major list. Rotating the
matrix does not touch this list, instead every coordinate lookup is
rewritten by a transposition function that belongs to the active
rotation. This module holds these functions together with some helpers
that verify a transposition over a whole grid.

Only 0° and 90° have an actual lookup algorithm. 180° and 270° fall back
to the 0° lookup and log a warning each time they are used.

Example:
    >>> transpose(3, 0, Rotation.N0, 4, 3)
    3
    >>> transpose(2, 3, Rotation.N90, 4, 3)
    3
"""

import logging
from typing import Callable, Dict

import numpy as np

from .orientation import Rotation

__all__ = [
    'Transposition', 'SUPPORTED_ROTATIONS', 'get_transposition', 'transpose', 'is_supported', 'index_map',
    'is_bijective'
]

LOG = logging.getLogger(__name__)

# (x, y, width, height) -> flat index
Transposition = Callable[[int, int, int, int], int]


def _transpose_n0(x: int, y: int, width: int, height: int) -> int:
    # e[x + (y * w)]
    return x + (y * width)


def _transpose_n90(x: int, y: int, width: int, height: int) -> int:
    # e[(w - (h - (y - 1))) + ((h - (w - (x - 1))) * w)]
    return (width - (height - (y - 1))) + ((height - (width - (x - 1))) * width)


def _unsupported(rotation: Rotation) -> Transposition:

    def fallback(x: int, y: int, width: int, height: int) -> int:
        LOG.warning(f"Lookup algorithm for rotation {rotation} not implemented, defaulting to {Rotation.N0} "
                    f"rotation lookup. Result is incorrect.")
        return _transpose_n0(x, y, width, height)

    return fallback


_TRANSPOSITIONS: Dict[Rotation, Transposition] = {
    Rotation.N0: _transpose_n0,
    Rotation.N90: _transpose_n90,
    Rotation.N180: _unsupported(Rotation.N180),
    Rotation.N270: _unsupported(Rotation.N270),
}

SUPPORTED_ROTATIONS = (Rotation.N0, Rotation.N90)


def is_supported(rotation: Rotation) -> bool:
    """Check whether a rotation has its own lookup algorithm"""
    return rotation in SUPPORTED_ROTATIONS


def get_transposition(rotation: Rotation) -> Transposition:
    """Get the lookup function (x, y, width, height) -> index of a rotation

    Args:
        rotation (Rotation):
            The view angle.

    Returns:
        (Callable):
            The transposition. For unsupported rotations this is the 0° lookup,
            which logs a warning every time it is called.
    """
    return _TRANSPOSITIONS[Rotation(rotation)]


def transpose(x: int, y: int, rotation: Rotation, width: int, height: int) -> int:
    """Map logical coordinates to an index of the flat element list

    The engine performs no bounds checks. width and height are always the
    declared (unrotated) dimensions of the matrix, width is used as stride.

    Args:
        x (int): Logical column.
        y (int): Logical row.
        rotation (Rotation): Active view angle.
        width (int): Declared width.
        height (int): Declared height.

    Returns:
        (int):
            The flat index. May lie outside of [0, width*height) for
            coordinates the rotated lookup does not cover.
    """
    return get_transposition(rotation)(x, y, width, height)


def index_map(width: int, height: int, rotation: Rotation) -> np.ndarray:
    """Raw flat indices of all logical coordinates of a rotated view

    Entry [y, x] holds the index that (x, y) resolves to. The array has the
    logical shape, i.e. (width, height) rows and columns swap for 90° and 270°.
    Values are not bounds checked.
    """
    rotation = Rotation(rotation)
    if rotation.should_invert():
        log_width, log_height = height, width
    else:
        log_width, log_height = width, height
    fn = get_transposition(rotation)
    indices = np.empty((log_height, log_width), dtype=np.int64)
    for y in range(log_height):
        for x in range(log_width):
            indices[y, x] = fn(x, y, width, height)
    return indices


def is_bijective(width: int, height: int, rotation: Rotation) -> bool:
    """Check if a rotated view addresses every stored element exactly once"""
    indices = index_map(width, height, rotation).ravel()
    if indices.size != width * height:
        return False
    return bool(np.array_equal(np.sort(indices), np.arange(width * height)))
