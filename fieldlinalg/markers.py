# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Capability lattice
==================

Every class below is a contract over an element type ``S`` (any Python class)
and an ordered tuple of operation tags (subclasses of `Op`). Laws such as
associativity are *promises* made by whoever declares them; they are never
checked at runtime.

Primitive capabilities are declared once per element type:

>>> AssociativeOp.declare(float, FloatingPointAddition)

Composite capabilities (`Monoid` up to `Field`) are never declared, they are
derived by the rules in `fieldlinalg.blankets`. Instantiating any capability
returns a *view* exposing its executable members and raises
`CapabilityError` if the capability does not hold:

>>> F = Field(float, FloatingPointAddition, FloatingPointMultiplication)
>>> F.ZERO, F.ONE
(0.0, 1.0)
"""

import logging
from typing import Any, Optional, Tuple

from . import registry
from .exceptions import CapabilityError

logger = logging.getLogger(__name__)


class Op:
    """
    Marker for an operation op : S^2 -> S on a set S.

    Subclasses are tags, never instantiated; ``apply`` is the operation body.
    Two tags with identical bodies are still two distinct operations to the
    lattice, which is what lets one element type carry both an addition and
    a multiplication.
    """

    @staticmethod
    def apply(lhs, rhs):
        raise NotImplementedError


class Capability:
    """
    Base class of every named contract in the lattice.

    Class attributes
    ----------------
    arity : int
        Number of operation tags the contract is keyed on.
    requires : tuple[(Capability, tuple[int, ...]), ...]
        Prerequisites of a *primitive* capability (the analogue of
        supertraits). Each entry names a capability and which of this
        capability's operations it applies to.
    payload_name : str | None
        Keyword carrying the declared value (neutral element, inverse
        function, ...), or None for pure law markers.
    """

    arity: int = 1
    requires: Tuple[Tuple[type, Tuple[int, ...]], ...] = ()
    payload_name: Optional[str] = None

    def __init__(self, el: type, *ops: type):
        self._check_arity(ops)
        if not registry.satisfies(type(self), el, ops):
            raise CapabilityError(type(self), el, ops)
        self.el = el
        self.ops = ops

    @classmethod
    def _check_arity(cls, ops):
        if len(ops) != cls.arity:
            raise TypeError(
                f"{cls.__name__} takes {cls.arity} operation(s), got {len(ops)}"
            )

    @classmethod
    def holds(cls, el: type, *ops: type) -> bool:
        """True if `el` satisfies this capability for `ops`."""
        cls._check_arity(ops)
        return registry.satisfies(cls, el, ops)

    @classmethod
    def declare(cls, el: type, *ops: type, **payload: Any):
        """Declare a primitive capability for `el`."""
        if registry.is_derived(cls):
            raise CapabilityError(
                cls, el, ops, reason="derived capabilities cannot be declared"
            )
        cls._check_arity(ops)
        if not isinstance(el, type):
            raise CapabilityError(cls, el, ops, reason="element type must be a class")
        for op in ops:
            if not (isinstance(op, type) and issubclass(op, Op)):
                raise CapabilityError(cls, el, ops, reason=f"{op!r} is not an Op")

        value: Any = True
        if cls.payload_name is None:
            if payload:
                raise TypeError(f"{cls.__name__}.declare() takes no payload")
        else:
            if set(payload) != {cls.payload_name}:
                raise TypeError(
                    f"{cls.__name__}.declare() requires exactly the "
                    f"keyword argument '{cls.payload_name}'"
                )
            value = payload[cls.payload_name]

        registry.record(cls, el, ops, value)
        op_names = ", ".join(op.__name__ for op in ops)
        logger.debug(f"declared {cls.__name__} for {el.__name__} ({op_names})")

    def _payload(self, capability: type) -> Any:
        return registry.payload(capability, self.el, self.ops)

    def __repr__(self) -> str:
        op_names = ", ".join(op.__name__ for op in self.ops)
        return f"{type(self).__name__}[{self.el.__name__}]({op_names})"


# ---------------------------------------------------------------------
# Primitive contracts
# ---------------------------------------------------------------------


class El(Capability):
    """
    Marker for a set element e in S. Declare it for a type whose every
    instance belongs to the set of interest. Equality, copying and display
    are assumed (every Python object has them).
    """

    arity = 0


class AssociativeOp(Capability):
    """op(op(x, y), z) = op(x, op(y, z)) for all x, y, z in S."""

    requires = ((El, ()),)


class CommutativeOp(Capability):
    """op(x, y) = op(y, x) for all x, y in S."""

    requires = ((El, ()),)


class DistributiveOp(Capability):
    """
    ``DistributiveOp(mul, add)``: mul(x, add(y, z)) = add(mul(x, y), mul(x, z)).
    """

    arity = 2
    requires = ((El, ()),)


class HasNeutralElement(Capability):
    """
    A unique e in S with op(x, e) = op(e, x) = x. Declared with ``value=e``.
    """

    payload_name = "value"
    requires = ((El, ()),)

    def __init__(self, el, op):
        super().__init__(el, op)
        self.value = self._payload(HasNeutralElement)


class HasInverse(Capability):
    """
    Every a in S has a unique a' with op(a, a') = op(a', a) = e. Declared
    with ``inverse=callable``.
    """

    payload_name = "inverse"
    requires = ((HasNeutralElement, (0,)),)

    def __init__(self, el, op):
        super().__init__(el, op)
        self._inverse = self._payload(HasInverse)

    def inverse(self, x):
        return self._inverse(x)


# ---------------------------------------------------------------------
# Single-operation structures
# ---------------------------------------------------------------------


class Monoid(Capability):
    """<S; op, e>: op is associative and has a neutral element."""

    def __init__(self, el, op):
        super().__init__(el, op)
        self.op = op
        self.neutral = self._payload(HasNeutralElement)

    def combine(self, lhs, rhs):
        return self.op.apply(lhs, rhs)


class Group(Monoid):
    """<S; op, ^-1, e>: a monoid in which every element is invertible."""

    def __init__(self, el, op):
        super().__init__(el, op)
        self._inverse = self._payload(HasInverse)

    def inverse(self, x):
        return self._inverse(x)


class FiniteGroup(Group):
    """
    A group over a finite set. Declared with ``group_order=n``; the group
    itself must already hold.
    """

    payload_name = "group_order"
    requires = ((Group, (0,)),)

    def __init__(self, el, op):
        super().__init__(el, op)
        self.GROUP_ORDER = self._payload(FiniteGroup)

    def order(self, x) -> int:
        # No algorithm has been settled on for the order of an element.
        raise NotImplementedError("FiniteGroup.order() is not implemented")


class AbelianGroup(Group):
    """A group whose operation commutes."""


# ---------------------------------------------------------------------
# Two-operation structures, keyed on (add, mul)
# ---------------------------------------------------------------------


class Ring(Capability):
    """
    <S; add, ^-1, 0, mul, 1>: add forms an abelian group, mul a monoid, and
    mul distributes over add.
    """

    arity = 2

    def __init__(self, el, add, mul):
        super().__init__(el, add, mul)
        self.additive = AbelianGroup(el, add)
        self.multiplicative = Monoid(el, mul)
        self.ZERO = self.additive.neutral
        self.ONE = self.multiplicative.neutral

    def add(self, lhs, rhs):
        return self.additive.combine(lhs, rhs)

    def mul(self, lhs, rhs):
        return self.multiplicative.combine(lhs, rhs)

    def additive_inverse(self, x):
        return self.additive.inverse(x)


class CommutativeRing(Ring):
    """A ring in which mul commutes."""


class NoZerodivisors(Capability):
    """
    mul(x, y) = 0 implies x = 0 or y = 0. Only meaningful on a commutative
    ring, which is required.
    """

    arity = 2
    requires = ((CommutativeRing, (0, 1)),)


class IntegralDomain(CommutativeRing):
    """A commutative ring without zero divisors."""


class NonzeroMultiplicativeUnit(Capability):
    """
    Every x != 0 has a multiplicative inverse. Declared with
    ``inverse=callable``; calling it on 0 is the caller's mistake and is not
    guarded.
    """

    arity = 2
    payload_name = "inverse"
    requires = ((IntegralDomain, (0, 1)),)

    def __init__(self, el, add, mul):
        super().__init__(el, add, mul)
        self._inverse = self._payload(NonzeroMultiplicativeUnit)

    def inverse(self, x):
        return self._inverse(x)


class Field(IntegralDomain):
    """An integral domain in which every non-zero element is a unit."""

    def __init__(self, el, add, mul):
        super().__init__(el, add, mul)
        self._reciprocal = self._payload(NonzeroMultiplicativeUnit)

    def multiplicative_inverse(self, x):
        return self._reciprocal(x)
