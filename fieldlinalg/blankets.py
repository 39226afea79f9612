# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Blanket derivation rules.

Each row grants a composite capability to any element type that already
satisfies the listed prerequisites. Operation positions refer to the
provider's own operations: for ``Ring(add, mul)`` position 0 is ``add`` and
position 1 is ``mul``, so ``(DistributiveOp, (1, 0))`` reads "mul
distributes over add".
"""

import logging
from typing import List, Tuple

from . import registry
from .markers import (
    AbelianGroup,
    AssociativeOp,
    CommutativeOp,
    CommutativeRing,
    DistributiveOp,
    Field,
    Group,
    HasInverse,
    HasNeutralElement,
    IntegralDomain,
    Monoid,
    NonzeroMultiplicativeUnit,
    NoZerodivisors,
    Ring,
)

logger = logging.getLogger(__name__)

RULES: Tuple[Tuple[type, Tuple[Tuple[type, Tuple[int, ...]], ...]], ...] = (
    (Monoid, ((HasNeutralElement, (0,)), (AssociativeOp, (0,)))),
    (Group, ((Monoid, (0,)), (HasInverse, (0,)))),
    (AbelianGroup, ((Group, (0,)), (CommutativeOp, (0,)))),
    (Ring, ((AbelianGroup, (0,)), (Monoid, (1,)), (DistributiveOp, (1, 0)))),
    (CommutativeRing, ((Ring, (0, 1)), (CommutativeOp, (1,)))),
    (IntegralDomain, ((CommutativeRing, (0, 1)), (NoZerodivisors, (0, 1)))),
    (Field, ((IntegralDomain, (0, 1)), (NonzeroMultiplicativeUnit, (0, 1)))),
)

for _provides, _requires in RULES:
    registry.add_rule(_provides, _requires)


def derived(el: type, *ops: type) -> List[type]:
    """
    List every composite capability `el` satisfies for `ops`, in lattice
    order.

    With a single operation only the single-operation structures are
    considered. With an ``(add, mul)`` pair the single-operation structures
    of each operation are reported as well, e.g. ``Monoid`` for ``mul``.
    """
    found = []
    for provides, _ in RULES:
        if provides.arity == len(ops):
            if registry.satisfies(provides, el, ops):
                found.append(provides)
        elif provides.arity == 1:
            if any(registry.satisfies(provides, el, (op,)) for op in ops):
                found.append(provides)
    logger.debug(f"{el.__name__} derives {[c.__name__ for c in found]}")
    return found
