#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module ecgroup.ec."""

from ecgroup.ec.curve import Curve
from ecgroup.ec.curve_family import CurveFamily
from ecgroup.ec.curve_group import mult_aff
from ecgroup.ec.curve_group_f import find_all_points, find_subgroup_points
from ecgroup.ec.curve_mult import mult
from ecgroup.ec.curves import CURVES, secp256k1
from ecgroup.ec.number_theory import is_probable_prime, mod_inv, xgcd
from ecgroup.ec.point import INF, AffinePoint, Infinity, Point

__all__ = [
    "Curve",
    "CurveFamily",
    "mult",
    "mult_aff",
    "find_all_points",
    "find_subgroup_points",
    "CURVES",
    "secp256k1",
    "is_probable_prime",
    "mod_inv",
    "xgcd",
    "INF",
    "AffinePoint",
    "Infinity",
    "Point",
]
