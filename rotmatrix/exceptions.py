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
"""Exceptions raised by rotmatrix"""

__all__ = ['ContractViolation']


class ContractViolation(AssertionError):
    """A caller broke the matrix contract (negative size, out-of-bounds access, ...).

    This is a programming error and is not meant to be caught and recovered from.
    Subclassing AssertionError keeps it in line with plain assert statements.
    """
