#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve in short-Weierstrass form.

The elliptic curve is the set of points (x, y)
that are solutions to the equation y^2 = x^3 + a*x + b (mod p),
with x, y, a, and b in Fp (p being a prime),
together with a point at infinity INF.

The parameters are trusted: p is assumed to be a prime and
n the exact order of the subgroup generated by G.
Use Curve.assert_valid (or check_validity=True)
to verify them explicitly.
"""

from dataclasses import InitVar, dataclass

from dataclasses_json import DataClassJsonMixin

from ecgroup.ec.curve_group import mult_aff
from ecgroup.ec.number_theory import is_probable_prime, mod_inv
from ecgroup.ec.point import INF, AffinePoint, Infinity, Point, int_field
from ecgroup.exceptions import ECGroupTypeError, ECGroupValueError
from ecgroup.utils import HEX_THRESHOLD, hex_string, int_from_integer, int_repr


@dataclass(frozen=True)
class Curve(DataClassJsonMixin):
    """Cyclic subgroup of the points of a short-Weierstrass curve over Fp.

    - a, b are the curve equation coefficients
    - p is the field prime
    - G is the subgroup generator (base point)
    - n is the order of G

    a, b, p, and n can be given as any Integer:
    they are stored as int.

    All operations return new points and never modify their inputs.
    The input points are not checked to be on the curve:
    garbage in, garbage out.
    """

    a: int = int_field()
    b: int = int_field()
    p: int = int_field()
    G: AffinePoint  # pylint: disable=invalid-name
    n: int = int_field()
    check_validity: InitVar[bool] = False

    def __post_init__(self, check_validity: bool) -> None:
        for name in ("a", "b", "p", "n"):
            object.__setattr__(self, name, int_from_integer(getattr(self, name)))
        if check_validity:
            self.assert_valid()

    def __str__(self) -> str:
        result = "Curve"
        for name in ("p", "a", "b"):
            value = getattr(self, name)
            value = hex_string(value) if value > HEX_THRESHOLD else value
            result += f"\n {name}   = {value}"
        if isinstance(self.G, AffinePoint) and self.p > HEX_THRESHOLD:
            result += f"\n x_G = {hex_string(self.G.x)}"
            result += f"\n y_G = {hex_string(self.G.y)}"
        else:
            result += f"\n G   = {self.G}"
        value = hex_string(self.n) if self.n > HEX_THRESHOLD else self.n
        result += f"\n n   = {value}"
        return result

    @property
    def order(self) -> int:
        "Return the order n of the base point."
        return self.n

    @property
    def base_point(self) -> AffinePoint:
        "Return the base point G."
        return self.G

    def assert_valid(self) -> None:
        """Check the curve parameters.

        Parameters are checked according to SEC 1 v.2 3.1.1.2.1,
        except that a and b are not required to be in [0, p-1].
        An Error is raised if the curve is not valid.
        """

        if not is_probable_prime(self.p):
            raise ECGroupValueError(f"p is not prime: {int_repr(self.p)}")

        # 4*a^3 + 27*b^2 ≠ 0 (mod p), i.e. the curve is not singular
        d = 4 * self.a * self.a * self.a + 27 * self.b * self.b
        if d % self.p == 0:
            raise ECGroupValueError("zero discriminant")

        if isinstance(self.G, Infinity):
            raise ECGroupValueError("INF point cannot be a generator")
        if not self.is_on_curve(self.G):
            raise ECGroupValueError("Generator is not on the curve")

        # a prime n with n*G == INF is the exact order of G
        if not is_probable_prime(self.n):
            raise ECGroupValueError(f"n is not prime: {int_repr(self.n)}")
        if mult_aff(self.n, self.G, self) != INF:
            raise ECGroupValueError(
                f"n is not the generator order: {int_repr(self.n)}"
            )

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve.

        INF is on the curve by convention.
        """
        if isinstance(Q, Infinity):
            return True
        if not isinstance(Q, AffinePoint):
            raise ECGroupTypeError("not a point")
        lhs = Q.y * Q.y % self.p
        rhs = ((Q.x * Q.x + self.a) * Q.x + self.b) % self.p
        return lhs == rhs

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if isinstance(Q, Infinity):
            return INF
        if not isinstance(Q, AffinePoint):
            raise ECGroupTypeError("not a point")
        return AffinePoint(Q.x, (self.p - Q.y) % self.p)

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points are not checked to be on the curve.
        A non-prime p could make this fail
        with an ECGroupArithmeticError.
        """

        if isinstance(Q1, Infinity):
            return Q2
        if isinstance(Q2, Infinity):
            return Q1

        if Q1.x == Q2.x:
            if Q1.y == Q2.y:  # point doubling
                return self.double(Q1)
            # opposite points
            return INF

        lam = (Q2.y - Q1.y) * mod_inv(Q2.x - Q1.x, self.p)
        return self._third_point(lam, Q1, Q2)

    def double(self, Q: Point) -> Point:
        "Return the sum of a point with itself."

        if isinstance(Q, Infinity):
            return INF
        # vertical tangent
        if Q.y == 0:
            return INF

        lam = (3 * Q.x * Q.x + self.a) * mod_inv(2 * Q.y, self.p)
        return self._third_point(lam, Q, Q)

    def _third_point(self, lam: int, Q1: AffinePoint, Q2: AffinePoint) -> Point:
        # the line of slope lam through Q1 and Q2 meets the curve again
        # in the opposite of their sum
        x = lam * lam - Q1.x - Q2.x
        y = lam * (Q1.x - x) - Q1.y
        return AffinePoint(x % self.p, y % self.p)
