#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Elliptic curve scalar multiplication."

from typing import Optional

from ecgroup.alias import Integer
from ecgroup.ec.curve_family import CurveFamily
from ecgroup.ec.curve_group import mult_aff
from ecgroup.ec.curves import secp256k1
from ecgroup.ec.point import Point
from ecgroup.utils import int_from_integer


def mult(m: Integer, Q: Optional[Point] = None, ec: CurveFamily = secp256k1) -> Point:
    """Return the scalar multiplication m*Q.

    Q defaults to the generator ec.G;
    m can be any integer, also negative or larger than ec.n.
    m*Q is computed as (-m)*(-Q) when m is negative,
    then |m| is reduced mod ec.n, i.e. (-m)*Q == -(m*Q) for any m.

    The input point is not checked to be on the curve.
    """

    m = int_from_integer(m)
    if Q is None:
        Q = ec.G
    if m < 0:
        m, Q = -m, ec.negate(Q)
    return mult_aff(m % ec.n, Q, ec)
