# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Exception hierarchy for fieldlinalg.

Algebraic laws are never checked, so nothing here reports a law violation.
These errors only cover contracts that can be observed: a capability that
was never declared, or containers whose shapes do not line up.
"""


class FieldLinalgError(Exception):
    """Base exception for all fieldlinalg errors."""

    pass


class CapabilityError(FieldLinalgError, TypeError):
    """
    An element type does not satisfy a required capability, or a
    capability was declared with invalid arguments.
    """

    def __init__(self, capability, el=None, ops=(), reason=None):
        self.capability = capability
        self.el = el
        self.ops = tuple(ops)
        name = getattr(capability, "__name__", str(capability))
        el_name = getattr(el, "__name__", repr(el))
        op_names = ", ".join(getattr(op, "__name__", repr(op)) for op in self.ops)
        msg = f"{el_name} does not satisfy {name}({op_names})"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class DimensionError(FieldLinalgError, ValueError):
    """Container dimensions are inconsistent (ragged rows, wrong row length)."""

    pass
