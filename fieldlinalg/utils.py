# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from typing import Optional

import numpy as np

from .types import Matrix


def random_matrix(
    m: int,
    n: int,
    low: int = -100,
    high: int = 100,
    seed: Optional[int] = None,
    el: type = float,
) -> Matrix:
    """
    Build an m by n Matrix of random integer values in [low, high).

    Integer values survive conversion to any element type that accepts an
    int (float, Fraction, ...), so the same draw can be compared across
    exact and floating point fields.
    """
    rng = np.random.default_rng(seed)
    A = rng.integers(low, high, size=(m, n))
    return Matrix([[el(int(x)) for x in row] for row in A], el=el)


def random_nonsingular_upper(n, low=-100, high=100, seed=None, el=float) -> Matrix:
    """
    Build a matrix U that is upper-triangular with random entries
    everywhere and put only non-zero values on its diagonal
    """
    rng = np.random.default_rng(seed)
    U = np.triu(rng.integers(low, high, size=(n, n)))
    # replace any accidental zeros on the diagonal
    diag = rng.integers(1, max(high, 2), size=n) * rng.choice([-1, 1], size=n)
    U[np.diag_indices(n)] = diag
    return Matrix([[el(int(x)) for x in row] for row in U], el=el)
