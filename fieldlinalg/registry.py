# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Fact store and derivation engine behind the capability lattice.

A *fact* is a primitive capability declared for an element type and a tuple
of operation tags, optionally carrying a payload (a neutral element, an
inverse function, a group order). A *rule* says which capabilities a derived
capability requires, and on which of its operations. Nothing in here knows
about concrete capabilities; `markers` and `blankets` feed it.
"""

import logging
from typing import Any, Dict, Iterable, Sequence, Tuple

logger = logging.getLogger(__name__)

# (capability, positions of the provider's ops handed to that capability)
Requirement = Tuple[type, Tuple[int, ...]]

_FACTS: Dict[Tuple[type, type, Tuple[type, ...]], Any] = {}
_RULES: Dict[type, Tuple[Requirement, ...]] = {}


def record(capability: type, el: type, ops: Sequence[type], payload: Any = True):
    """Store a primitive fact. Re-declaring overwrites the old payload."""
    key = (capability, el, tuple(ops))
    if key in _FACTS:
        logger.debug(f"re-declaring {_describe(*key)}")
    _FACTS[key] = payload


def payload(capability: type, el: type, ops: Sequence[type]) -> Any:
    """Return the payload of a declared fact (KeyError if never declared)."""
    return _FACTS[(capability, el, tuple(ops))]


def add_rule(provides: type, requires: Iterable[Requirement]):
    _RULES[provides] = tuple((cap, tuple(pos)) for cap, pos in requires)


def is_derived(capability: type) -> bool:
    return capability in _RULES


def satisfies(capability: type, el: type, ops: Sequence[type]) -> bool:
    """
    Decide whether `el` satisfies `capability` for `ops`.

    Derived capabilities hold when every requirement of their rule holds.
    Primitive capabilities hold when they were declared *and* their own
    prerequisites (the class attribute ``requires``) hold, so declarations
    can be made in any order.
    """
    ops = tuple(ops)
    if capability in _RULES:
        requires = _RULES[capability]
    else:
        if (capability, el, ops) not in _FACTS:
            return False
        requires = getattr(capability, "requires", ())
    return all(
        satisfies(req, el, tuple(ops[p] for p in positions))
        for req, positions in requires
    )


def _describe(capability, el, ops) -> str:
    op_names = ", ".join(op.__name__ for op in ops)
    return f"{capability.__name__}[{el.__name__}]({op_names})"
