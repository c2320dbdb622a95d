#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""The capabilities a curve family must provide.

Code shared by all curve families (e.g. scalar multiplication)
is written against CurveFamily only.
Each equation form (so far only short-Weierstrass, see ecgroup.ec.curve)
implements the group law on its own,
without inheriting from any common base class.
"""

from typing import Protocol, runtime_checkable

from ecgroup.ec.point import AffinePoint, Point


@runtime_checkable
class CurveFamily(Protocol):
    "Cyclic subgroup of an elliptic curve group, generated by G of order n."

    @property
    def n(self) -> int:
        ...

    @property
    def G(self) -> AffinePoint:  # pylint: disable=invalid-name
        ...

    def is_on_curve(self, Q: Point) -> bool:
        ...

    def negate(self, Q: Point) -> Point:
        ...

    def add(self, Q1: Point, Q2: Point) -> Point:
        ...

    def double(self, Q: Point) -> Point:
        ...
