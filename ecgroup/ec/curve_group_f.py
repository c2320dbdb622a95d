#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Curve explorer functions.

These functions are meant to explore low-cardinality curves,
for didactical (and fun) reason only.
"""

from typing import Dict, List

from ecgroup.ec.curve import Curve
from ecgroup.ec.point import INF, AffinePoint, Point
from ecgroup.exceptions import ECGroupValueError

MAX_P = 10000


def find_all_points(ec: Curve) -> List[Point]:
    """Find all the points of the curve group, if p is low.

    Very unsophisticated walk-through approach,
    for didactical sake only:
    square roots are looked up in a table of all the squares mod p.
    """
    if ec.p > MAX_P:
        err_msg = f"p is too big to count all group points: {ec.p}"
        raise ECGroupValueError(err_msg)

    # the smaller of the two roots of each square
    roots: Dict[int, int] = {}
    for y in range(ec.p - 1, -1, -1):
        roots[y * y % ec.p] = y

    points: List[Point] = [INF]
    for x in range(ec.p):
        y2 = ((x * x + ec.a) * x + ec.b) % ec.p
        if y2 not in roots:
            continue
        y = roots[y2]
        points.append(AffinePoint(x, y))
        if y != 0:
            points.append(AffinePoint(x, ec.p - y))
    return points


def find_subgroup_points(ec: Curve, G: AffinePoint) -> List[Point]:
    """Find all the points of the subgroup generated by G, if p is low.

    The list is G, 2G, 3G, ..., INF: its length is the order of G.
    """
    if ec.p > MAX_P:
        err_msg = f"p is too big to count all subgroup points: {ec.p}"
        raise ECGroupValueError(err_msg)

    points: List[Point] = [G]
    while points[-1] != INF:
        points.append(ec.add(points[-1], G))
    return points
