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
"""Orientations a Matrix can be viewed through"""

from enum import Enum

__all__ = ['Rotation']


class Rotation(Enum):
    """Clockwise view angle in degrees.

    The rotation only changes how (x, y) coordinates are resolved, the
    stored elements are never moved.
    """
    N0 = 0
    N90 = 90
    N180 = 180
    N270 = 270

    def should_invert(self) -> bool:
        """True if width and height swap when viewed through this rotation"""
        return self in (Rotation.N90, Rotation.N270)

    def __str__(self) -> str:
        return f"{self.value}°"

    def __repr__(self) -> str:
        return f"Rotation.{self.name}"
