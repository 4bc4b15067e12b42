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
"""Sequential walk over the cells of a Matrix"""

from collections import namedtuple

__all__ = ['Cell', 'MatrixCursor']

Cell = namedtuple('Cell', ['x', 'y', 'element'])


class MatrixCursor:
    """Single pass iterator that yields a Cell(x, y, element) for every coordinate.

    The walk is row-major over the declared width and height of the matrix,
    independent of its rotation. Elements are read through the matrix'
    coordinate accessor, so they do reflect the active rotation. On a rotated
    non-square matrix the walk can therefore leave the logical bounds, which
    raises a ContractViolation from the accessor.

    Once exhausted, the cursor stays exhausted. Create a new one (iter(matrix))
    to walk the matrix again.
    """

    def __init__(self, matrix):
        self.matrix = matrix
        self.x = 0
        self.y = 0

    def __iter__(self):
        return self

    def __next__(self) -> Cell:
        cell = self.next_cell()
        if cell is None:
            raise StopIteration
        return cell

    def next_cell(self):
        """Advance the cursor, returns the next Cell or None when exhausted"""
        if self.x >= self.matrix.width:
            return None
        if self.y >= self.matrix.height:
            return None

        cell = Cell(self.x, self.y, self.matrix[self.x, self.y])

        self.x += 1
        if self.x >= self.matrix.width:
            self.x = 0
            self.y += 1
        return cell

    def __repr__(self):
        return f"MatrixCursor(x={self.x}, y={self.y}, matrix={self.matrix!r})"
