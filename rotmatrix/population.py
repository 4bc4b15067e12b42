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
"""Element generators for Matrix.generate_population"""

import logging
from typing import Callable, Iterable, Optional, Sequence

import numpy as np

from .names import *

__all__ = ['random_generator', 'sequence_generator']

LOG = logging.getLogger(__name__)


def random_generator(values: Sequence, **kwargs) -> Callable[[], Optional[object]]:
    """Draw random elements from a list of values

    Example:
        matrix.generate_population(random_generator([0, 1], seed=42, fill_ratio=0.5))

    Args:
        values (list):
            Candidate elements, drawn uniformly with replacement.

        seed (optional (int)):
            Seed for the numpy random number generator. A random seed is
            picked (and logged) when none is given.

        fill_ratio (optional (float)): (Default: 1.0)
            Probability that a value is produced. Otherwise the generator
            returns None and the cell keeps its value.

    Returns:
        (Callable):
            A function without arguments to be passed to generate_population.
    """
    values = list(values)
    if not values:
        raise ValueError("Provide at least one value to draw from.")
    fill_ratio = kwargs.get(FILL_RATIO, 1.0)
    if not 0.0 <= fill_ratio <= 1.0:
        raise ValueError(f"{FILL_RATIO} must lie within [0, 1], got {fill_ratio}.")
    if kwargs.get(SEED) is None:
        seed = int(np.random.default_rng().integers(1, 2**16 - 1))
        LOG.info("Using random seed " + str(seed))
    else:
        seed = kwargs[SEED]
        LOG.info("Using seed " + str(seed))
    rng = np.random.default_rng(seed)

    def generate():
        if fill_ratio < 1.0 and rng.random() >= fill_ratio:
            return None
        return values[int(rng.integers(len(values)))]

    return generate


def sequence_generator(iterable: Iterable) -> Callable[[], Optional[object]]:
    """Hand out the items of an iterable one per call, then None"""
    iterator = iter(iterable)

    def generate():
        return next(iterator, None)

    return generate
