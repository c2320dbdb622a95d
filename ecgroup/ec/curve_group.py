#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Unreduced scalar multiplication for any CurveFamily.

Only the group law (add, double) is used here:
reduction mod n and sign handling are left to ecgroup.ec.curve_mult.
"""

from ecgroup.ec.curve_family import CurveFamily
from ecgroup.ec.point import INF, Point
from ecgroup.exceptions import ECGroupValueError


def mult_aff(m: int, Q: Point, ec: CurveFamily) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses 'double & add' algorithm,
    'right-to-left' binary decomposition of m,
    affine coordinates.
    It is not constant-time.

    m is not reduced mod n: this is up to the caller.
    """

    if m < 0:
        raise ECGroupValueError(f"negative m: {hex(m)}")

    R = INF
    while m > 0:
        if m & 1:
            R = ec.add(R, Q)
        Q = ec.double(Q)
        m >>= 1
    return R
