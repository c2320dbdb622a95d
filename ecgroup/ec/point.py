#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve points.

A point is either an affine coordinate pair or the point at infinity:

* AffinePoint(x, y): a value type, equal to any other AffinePoint
  with the same coordinates
* INF: the only instance needed of Infinity,
  the neutral element of the group law

The point at infinity is a distinct type, not a sentinel coordinate pair:
AffinePoint(0, 0) is a genuine curve point whenever b = 0 (mod p)
and it is never confused with INF.
"""

from dataclasses import dataclass, field
from typing import Any, Union

from dataclasses_json import DataClassJsonMixin, config

from ecgroup.utils import HEX_THRESHOLD, int_from_integer


def encode_int(i: int) -> Union[int, str]:
    "Encode large integers as '0x' hex-strings, small ones as they are."
    return hex(i) if abs(i) > HEX_THRESHOLD else i


def int_field() -> Any:
    "Return a dataclass int field (de)serialized with encode_int."
    return field(metadata=config(encoder=encode_int, decoder=int_from_integer))


@dataclass(frozen=True)
class AffinePoint(DataClassJsonMixin):
    """Elliptic curve point in affine coordinates.

    Coordinates are not checked to be on any curve:
    use Curve.is_on_curve for that.
    """

    x: int = int_field()
    y: int = int_field()

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class Infinity:
    "The point at infinity."

    def __repr__(self) -> str:
        return "INF"


INF = Infinity()

Point = Union[AffinePoint, Infinity]
