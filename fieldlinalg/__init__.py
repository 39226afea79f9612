# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
fieldlinalg
===========

A small algebra-typed linear–algebra toolkit: element types declare a
handful of primitive algebraic contracts once, and every structure from
monoid up to field is derived from them. Algorithms are written once
against those structures.

Public API
~~~~~~~~~~
- Capability lattice
    - `Op`, `El`, `AssociativeOp`, `CommutativeOp`, `DistributiveOp`,
      `HasNeutralElement`, `HasInverse`, `NoZerodivisors`,
      `NonzeroMultiplicativeUnit`, `FiniteGroup`
    - derived: `Monoid`, `Group`, `AbelianGroup`, `Ring`,
      `CommutativeRing`, `IntegralDomain`, `Field`
- Containers
    - `Vector`, `Matrix`
- Floating point field
    - `FloatingPointAddition`, `FloatingPointMultiplication`
- Algorithms
    - `eliminate`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> import fieldlinalg as fl
>>> A = fl.Matrix([[2.0, -1.0, 1.0], [1.0, 1.0, 5.0]])
>>> fl.eliminate(A)
Matrix([[2.0, -1.0, 1.0], [0.0, 1.5, 4.5]])
"""

from importlib.metadata import version as _pkg_version

# ---------------------------------------------------------------------
# Importing blankets registers the derivation rules; it must come before
# anything that asks whether a composite capability holds.
# ---------------------------------------------------------------------
from .blankets import derived
from .elimination import eliminate
from .exceptions import CapabilityError, DimensionError, FieldLinalgError
from .floats import FloatingPointAddition, FloatingPointMultiplication
from .markers import (
    AbelianGroup,
    AssociativeOp,
    Capability,
    CommutativeOp,
    CommutativeRing,
    DistributiveOp,
    El,
    Field,
    FiniteGroup,
    Group,
    HasInverse,
    HasNeutralElement,
    IntegralDomain,
    Monoid,
    NonzeroMultiplicativeUnit,
    NoZerodivisors,
    Op,
    Ring,
)
from .types import Matrix, Vector

__all__ = [
    "Op",
    "Capability",
    "El",
    "AssociativeOp",
    "CommutativeOp",
    "DistributiveOp",
    "HasNeutralElement",
    "HasInverse",
    "NoZerodivisors",
    "NonzeroMultiplicativeUnit",
    "FiniteGroup",
    "Monoid",
    "Group",
    "AbelianGroup",
    "Ring",
    "CommutativeRing",
    "IntegralDomain",
    "Field",
    "derived",
    "Vector",
    "Matrix",
    "FloatingPointAddition",
    "FloatingPointMultiplication",
    "eliminate",
    "FieldLinalgError",
    "CapabilityError",
    "DimensionError",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show fieldlinalg”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Optional: lightweight default logging config so users see warnings
# only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
