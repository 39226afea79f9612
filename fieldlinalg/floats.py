# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Floating point numbers as a field.

Python ``float`` and the NumPy scalars ``float32``/``float64`` are wired to
ordinary ``+`` and ``*``, with 0 and 1 as neutral elements, negation as the
additive inverse and the reciprocal as the multiplicative inverse. Only the
primitives are declared here; Monoid through Field follow from
`fieldlinalg.blankets`.

IEEE arithmetic is neither associative nor distributive. Those laws are
declared anyway, the same way every numerical code pretends they hold.
"""

import numpy as np

from .markers import (
    AssociativeOp,
    CommutativeOp,
    DistributiveOp,
    El,
    HasInverse,
    HasNeutralElement,
    NonzeroMultiplicativeUnit,
    NoZerodivisors,
    Op,
)

FLOAT_TYPES = (float, np.float32, np.float64)


class FloatingPointAddition(Op):
    @staticmethod
    def apply(lhs, rhs):
        return lhs + rhs


class FloatingPointMultiplication(Op):
    @staticmethod
    def apply(lhs, rhs):
        return lhs * rhs


def _declare_float(t: type):
    add, mul = FloatingPointAddition, FloatingPointMultiplication
    zero, one = t(0.0), t(1.0)

    El.declare(t)

    HasNeutralElement.declare(t, add, value=zero)
    AssociativeOp.declare(t, add)
    HasInverse.declare(t, add, inverse=lambda x: -x)
    CommutativeOp.declare(t, add)

    HasNeutralElement.declare(t, mul, value=one)
    AssociativeOp.declare(t, mul)
    DistributiveOp.declare(t, mul, add)
    CommutativeOp.declare(t, mul)

    NoZerodivisors.declare(t, add, mul)
    NonzeroMultiplicativeUnit.declare(t, add, mul, inverse=lambda x: one / x)


for _t in FLOAT_TYPES:
    _declare_float(_t)
