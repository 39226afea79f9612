# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging
from typing import Type

from .floats import FloatingPointAddition, FloatingPointMultiplication
from .markers import Field, Op
from .types import Matrix

logger = logging.getLogger(__name__)


def eliminate(
    matrix: Matrix,
    add: Type[Op] = FloatingPointAddition,
    mul: Type[Op] = FloatingPointMultiplication,
) -> Matrix:
    """
    Forward elimination of an m by n matrix over any field.

    Parameters
    ----------
    matrix : Matrix              (m, n)
        Input matrix, left untouched.
    add, mul : Op
        Operation tags under which ``matrix.el`` is a Field. Default to
        ordinary floating point addition and multiplication.

    Returns
    -------
    U : Matrix                   (m, n)
        A new matrix with the entries below each non-zero pivot cleared.

    Notes
    -----
    There is no pivoting and no row interchange. When the pivot U[j][j] is
    zero, every row below it is left as is for column j, so U need not be in
    row-echelon form.

    Only the four field primitives are used: a - b is computed as
    add(a, additive_inverse(b)) and a / b as mul(a, multiplicative_inverse(b)).
    The loop order (column j, then row i, then column k) fixes the order of
    the floating point operations and must not be rearranged.
    """
    if not isinstance(matrix, Matrix):
        raise TypeError("matrix must be a fieldlinalg Matrix")

    field = Field(matrix.el, add, mul)
    U = matrix.copy()
    m, n = U.shape

    for j in range(n):
        for i in range(j + 1, m):
            if U[j][j] == field.ZERO:
                logger.debug(f"zero pivot in column {j}, leaving row {i} unreduced")
                continue
            factor = field.mul(U[i][j], field.multiplicative_inverse(U[j][j]))
            for k in range(n):
                U[i][k] = field.add(
                    U[i][k], field.additive_inverse(field.mul(factor, U[j][k]))
                )

    return U
