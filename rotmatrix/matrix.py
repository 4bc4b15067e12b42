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
"""Flat-storage matrix with rotated views

The Matrix stores width*height elements in one row-major list that never
changes its arrangement. Setting a rotation only swaps the lookup algorithm
that turns (x, y) into a list index (see rotmatrix.transposition), so a
rotated matrix merely appears to be rotated.

Example:
    >>> m = Matrix.from_elements(4, 3, list(range(12)))
    >>> m[3, 0]
    3
    >>> m.rotate(Rotation.N90)
    >>> m[2, 3]
    3
"""

import io
import logging
from typing import Any, Callable, Generic, List, Optional, Sequence, Tuple, TypeVar

import numpy as np
import matplotlib.pyplot as plt
from matplotlib import use as set_matplotlib_backend
from scipy import sparse

from .names import *
from .exceptions import ContractViolation
from .orientation import Rotation
from .transposition import get_transposition
from .cursor import MatrixCursor

__all__ = ['Matrix']

LOG = logging.getLogger(__name__)

T = TypeVar('T')


def _check_dimensions(width, height):
    if not isinstance(width, (int, np.integer)) or isinstance(width, bool):
        raise ContractViolation(f"Matrix critical error, width must be an integer, got {width!r}")
    if not isinstance(height, (int, np.integer)) or isinstance(height, bool):
        raise ContractViolation(f"Matrix critical error, height must be an integer, got {height!r}")
    if width < 0:
        raise ContractViolation(f"Matrix critical error, width >= 0 (got {width})")
    if height < 0:
        raise ContractViolation(f"Matrix critical error, height >= 0 (got {height})")


class Matrix(Generic[T]):
    """Two-dimensional container on top of a flat element list.

    Args:
        width (int):
            Declared number of columns. Fixed for the lifetime of the matrix.

        height (int):
            Declared number of rows. Fixed for the lifetime of the matrix.

        repeated_value:
            Value all width*height cells are initialized with. Use
            Matrix.from_elements to start from a list of elements instead.

    Coordinates are (x, y) = (column, row). Access is bounds checked against the
    logical dimensions (width and height swapped for 90° and 270°), while the
    lookup itself always uses the declared width as stride.
    """

    def __init__(self, width: int, height: int, repeated_value: T):
        _check_dimensions(width, height)
        self._init_elements(width, height, [repeated_value] * (int(width) * int(height)))

    def _init_elements(self, width: int, height: int, elements: List[T]):
        """Take ownership of a flat element list of length width*height"""
        self._width = int(width)
        self._height = int(height)
        self._elements: List[T] = elements
        self._rotation = Rotation.N0

    @classmethod
    def from_elements(cls, width: int, height: int, elements: Sequence[T], **kwargs) -> 'Matrix[T]':
        """Create a matrix from a flat, row-major list of elements

        The elements are copied, later changes to the input do not affect the matrix.

        Args:
            width (int):
                Declared number of columns.

            height (int):
                Declared number of rows.

            elements (list):
                The flat element list. Should have exactly width*height entries.
                Shorter lists are padded with default values, a warning is
                logged for every appended value. The padded cells carry no
                meaningful data.

            oversize (optional (str)): (Default: 'reject')
                What to do with lists longer than width*height. 'reject' raises a
                ContractViolation, 'truncate' drops the trailing elements and logs
                a warning for each of them.

            default_factory (optional (callable)):
                Zero-argument callable that produces the padding value. By default
                the type of the first element is called (int() -> 0, str() -> ''),
                or int if no elements are given.

        Returns:
            (Matrix):
                A new matrix in 0° rotation.
        """
        _check_dimensions(width, height)
        oversize = kwargs.get(OVERSIZE, REJECT)
        if oversize not in OVERSIZE_POLICIES:
            raise ContractViolation(f"Unknown {OVERSIZE} policy '{oversize}'. Use one of {OVERSIZE_POLICIES}.")

        elements = list(elements)
        size = width * height
        difference = size - len(elements)
        if difference > 0:
            default_factory = kwargs.get(DEFAULT_FACTORY)
            if default_factory is None:
                element_type = type(elements[0]) if elements else int
                try:
                    element_type()
                except TypeError as e:
                    raise ContractViolation(f"Matrix critical error, {element_type.__name__} has no default value to "
                                            f"pad {len(elements)} elements to {width}x{height}. Pass "
                                            f"{DEFAULT_FACTORY}.") from e
                default_factory = element_type
            for _ in range(difference):
                value = default_factory()
                elements.append(value)
                LOG.warning(f"Appending {value!r} to input elements to satisfy width/height requirements "
                            f"({width}x{height}).")
        elif difference < 0:
            if oversize == REJECT:
                raise ContractViolation(f"Matrix critical error, {len(elements)} elements given for a "
                                        f"{width}x{height} matrix (expected {size}).")
            for value in elements[size:]:
                LOG.warning(f"Dropping surplus element {value!r} from input elements ({width}x{height}).")
            del elements[size:]

        matrix = cls(width, height, None)
        matrix._init_elements(width, height, elements)
        return matrix

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> 'Matrix':
        """Create a matrix from a 2-D numpy array (rows become y, columns become x)"""
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(f"Expected a 2-D array, got {array.ndim} dimension(s).")
        height, width = array.shape
        return cls.from_elements(width, height, array.ravel(order='C').tolist())

    @classmethod
    def from_sparse(cls, sparse_matrix, default: Any = 0) -> 'Matrix':
        """
        Create a matrix from a scipy sparse matrix.

        Args:
            sparse_matrix: Scipy sparse matrix or array
            default: Value of the cells that are not stored in the sparse matrix

        Returns:
            Matrix of the same shape
        """
        if not sparse.issparse(sparse_matrix):
            raise ValueError(f"Expected a scipy sparse matrix, got {type(sparse_matrix).__name__}.")
        height, width = sparse_matrix.shape
        matrix = cls(width, height, default)
        # csr conversion sums duplicate entries
        coo = sparse.csr_matrix(sparse_matrix).tocoo()
        for row, col, value in zip(coo.row, coo.col, coo.data):
            matrix._elements[int(row) * width + int(col)] = value.item()
        return matrix

    # dimensions and rotation

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def rotation(self) -> Rotation:
        return self._rotation

    def get_dimensions(self) -> Tuple[int, int]:
        """Width and height as seen through the current rotation"""
        if self._rotation.should_invert():
            return self._height, self._width
        return self._width, self._height

    def rotate(self, degrees: Rotation) -> None:
        """Set the rotation the matrix is viewed through. Elements are not moved.

        Accepts a Rotation or its value in degrees (0, 90, 180, 270).
        """
        self._rotation = Rotation(degrees)

    def __len__(self) -> int:
        return len(self._elements)

    # element access

    def _index(self, x: int, y: int) -> int:
        log_width, log_height = self.get_dimensions()
        if not 0 <= x < log_width:
            raise ContractViolation(f"Matrix critical error, x >= 0 && x < width ({log_width}), got x = {x}")
        if not 0 <= y < log_height:
            raise ContractViolation(f"Matrix critical error, y >= 0 && y < height ({log_height}), got y = {y}")
        index = get_transposition(self._rotation)(x, y, self._width, self._height)
        if not 0 <= index < len(self._elements):
            raise ContractViolation(f"Matrix critical error, ({x}, {y}) resolves to index {index} in rotation "
                                    f"{self._rotation}, outside of the {len(self._elements)} stored elements")
        return index

    def get_value_at(self, x: int, y: int) -> T:
        """Get the element at logical position (x, y)"""
        return self._elements[self._index(x, y)]

    def set_value_at(self, x: int, y: int, value: T) -> None:
        """Replace the element at logical position (x, y)"""
        self._elements[self._index(x, y)] = value

    def __getitem__(self, key: Tuple[int, int]) -> T:
        x, y = key
        return self.get_value_at(x, y)

    def __setitem__(self, key: Tuple[int, int], value: T) -> None:
        x, y = key
        self.set_value_at(x, y, value)

    def generate_population(self, element_generator: Callable[[], Optional[T]]) -> None:
        """Fill the matrix from a generator function

        The generator is called once per declared coordinate, for each x all y are
        visited before x increases. Returned values are written with
        set_value_at, None leaves the cell untouched.
        """
        for x in range(self._width):
            for y in range(self._height):
                value = element_generator()
                if value is not None:
                    self[x, y] = value

    def __iter__(self) -> MatrixCursor:
        return MatrixCursor(self)

    # output

    def construct_matrix(self) -> List[List[T]]:
        """Nested list of the logical rows, top row first"""
        log_width, log_height = self.get_dimensions()
        return [[self[x, y] for x in range(log_width)] for y in range(log_height)]

    def to_numpy(self) -> np.ndarray:
        """Logical view as 2-D numpy array of shape (height, width)"""
        log_width, log_height = self.get_dimensions()
        rows = self.construct_matrix()
        if not rows or not log_width:
            return np.empty((log_height, log_width))
        return np.array(rows)

    def to_multiline_string(self) -> str:
        out = io.StringIO()
        for row in self.construct_matrix():
            out.write(str(row))
            out.write("\n")
        return out.getvalue()

    def print_matrix(self) -> None:
        print(self.to_multiline_string(), end='')

    def plot(self, **kwargs):
        """Plot the logical view of the matrix as an image

        Args:
            plt_backend (optional (str)):
                The matplotlib backend that should be used for plotting,
                e.g. 'TkAgg', 'QtAgg' or the non-interactive 'agg', 'template'.

            show (optional (bool)): (Default: True)
                Should matplotlib show the plot or should it stop after plot generation.

        Returns:
            (matplotlib.image.AxesImage):
                The image object.
        """
        if PLT_BACKEND in kwargs:
            set_matplotlib_backend(kwargs[PLT_BACKEND])
        show = kwargs.get(SHOW, True)

        _, ax = plt.subplots()
        image = ax.imshow(self.to_numpy(), interpolation='nearest')
        ax.set_title(f"{self._width}x{self._height} matrix, rotation {self._rotation}")
        ax.set_xlabel('x')
        ax.set_ylabel('y')
        if show:
            plt.show()
        return image

    def __str__(self) -> str:
        return self.to_multiline_string()

    def __repr__(self) -> str:
        return f"Matrix(width={self._width}, height={self._height}, rotation={self._rotation!r})"
