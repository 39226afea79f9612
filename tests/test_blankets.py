# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import pytest

from fieldlinalg.blankets import RULES, derived
from fieldlinalg.elimination import eliminate
from fieldlinalg.exceptions import CapabilityError
from fieldlinalg.markers import (
    AbelianGroup,
    AssociativeOp,
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
from fieldlinalg.types import Matrix

P = 7


class GF7:
    """Integers modulo 7."""

    __slots__ = ("value",)

    def __init__(self, value):
        self.value = int(value) % P

    def __eq__(self, other):
        return isinstance(other, GF7) and self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"GF7({self.value})"


class GF7Add(Op):
    @staticmethod
    def apply(lhs, rhs):
        return GF7(lhs.value + rhs.value)


class GF7Mul(Op):
    @staticmethod
    def apply(lhs, rhs):
        return GF7(lhs.value * rhs.value)


# Primitives only; nothing composite is declared for GF7.
El.declare(GF7)
AssociativeOp.declare(GF7, GF7Add)
CommutativeOp.declare(GF7, GF7Add)
HasNeutralElement.declare(GF7, GF7Add, value=GF7(0))
HasInverse.declare(GF7, GF7Add, inverse=lambda x: GF7(-x.value))
AssociativeOp.declare(GF7, GF7Mul)
CommutativeOp.declare(GF7, GF7Mul)
HasNeutralElement.declare(GF7, GF7Mul, value=GF7(1))
DistributiveOp.declare(GF7, GF7Mul, GF7Add)
NoZerodivisors.declare(GF7, GF7Add, GF7Mul)
NonzeroMultiplicativeUnit.declare(
    GF7, GF7Add, GF7Mul, inverse=lambda x: GF7(pow(x.value, P - 2, P))
)

LATTICE = [Monoid, Group, AbelianGroup, Ring, CommutativeRing, IntegralDomain, Field]


def test_rules_cover_every_composite():
    assert [provides for provides, _ in RULES] == LATTICE


def test_every_composite_is_derived():
    for cap in (Monoid, Group, AbelianGroup):
        assert cap.holds(GF7, GF7Add)
    assert Monoid.holds(GF7, GF7Mul)
    for cap in (Ring, CommutativeRing, IntegralDomain, Field):
        assert cap.holds(GF7, GF7Add, GF7Mul)
    assert derived(GF7, GF7Add, GF7Mul) == LATTICE
    assert derived(GF7, GF7Mul) == [Monoid]


def test_operation_order_matters():
    # (mul, add) is not a ring: add does not distribute over mul
    assert not Ring.holds(GF7, GF7Mul, GF7Add)
    assert not Field.holds(GF7, GF7Mul, GF7Add)


def test_derived_field_view():
    F = Field(GF7, GF7Add, GF7Mul)
    assert F.ZERO == GF7(0)
    assert F.ONE == GF7(1)
    assert F.add(GF7(5), GF7(4)) == GF7(2)
    assert F.mul(GF7(5), GF7(4)) == GF7(6)
    assert F.additive_inverse(GF7(3)) == GF7(4)
    for x in range(1, P):
        assert F.mul(GF7(x), F.multiplicative_inverse(GF7(x))) == F.ONE


def test_elimination_over_derived_field():
    A = Matrix([[2, 3], [4, 5]], el=GF7)
    U = eliminate(A, GF7Add, GF7Mul)
    assert U == Matrix([[2, 3], [0, 6]], el=GF7)
    assert A == Matrix([[2, 3], [4, 5]], el=GF7)


def test_declaration_order_does_not_matter():
    class Mod2:
        pass

    class Xor(Op):
        pass

    # declared top-down: nothing holds until El arrives
    HasInverse.declare(Mod2, Xor, inverse=lambda x: x)
    AssociativeOp.declare(Mod2, Xor)
    CommutativeOp.declare(Mod2, Xor)
    assert not HasInverse.holds(Mod2, Xor)
    assert not Monoid.holds(Mod2, Xor)

    HasNeutralElement.declare(Mod2, Xor, value=0)
    assert not Monoid.holds(Mod2, Xor)

    El.declare(Mod2)
    assert AbelianGroup.holds(Mod2, Xor)
    assert derived(Mod2, Xor) == [Monoid, Group, AbelianGroup]


def test_integers_stop_at_integral_domain():
    class Z:
        pass

    class ZAdd(Op):
        pass

    class ZMul(Op):
        pass

    El.declare(Z)
    for op in (ZAdd, ZMul):
        AssociativeOp.declare(Z, op)
        CommutativeOp.declare(Z, op)
    HasNeutralElement.declare(Z, ZAdd, value=0)
    HasNeutralElement.declare(Z, ZMul, value=1)
    HasInverse.declare(Z, ZAdd, inverse=lambda x: -x)
    DistributiveOp.declare(Z, ZMul, ZAdd)
    NoZerodivisors.declare(Z, ZAdd, ZMul)

    assert IntegralDomain.holds(Z, ZAdd, ZMul)
    assert not Field.holds(Z, ZAdd, ZMul)
    assert derived(Z, ZAdd, ZMul) == LATTICE[:-1]
    with pytest.raises(CapabilityError):
        Field(Z, ZAdd, ZMul)


def test_finite_group_order_is_not_implemented():
    class C3:
        pass

    class C3Add(Op):
        pass

    El.declare(C3)
    AssociativeOp.declare(C3, C3Add)
    HasNeutralElement.declare(C3, C3Add, value=0)
    HasInverse.declare(C3, C3Add, inverse=lambda x: -x % 3)
    assert not FiniteGroup.holds(C3, C3Add)

    FiniteGroup.declare(C3, C3Add, group_order=3)
    G = FiniteGroup(C3, C3Add)
    assert G.GROUP_ORDER == 3
    assert isinstance(G, Group)
    assert G.inverse(1) == 2
    with pytest.raises(NotImplementedError):
        G.order(1)


def test_finite_group_needs_a_group():
    FiniteGroup.declare(GF7, GF7Mul, group_order=7)
    assert not FiniteGroup.holds(GF7, GF7Mul)
    FiniteGroup.declare(GF7, GF7Add, group_order=7)
    assert FiniteGroup(GF7, GF7Add).GROUP_ORDER == 7
