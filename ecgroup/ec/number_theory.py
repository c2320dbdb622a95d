#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Number theory and modular arithmetic functions.

Extended Euclidean algorithm based on
https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm

Miller-Rabin test with the deterministic bases of
https://oeis.org/A014233
"""

import secrets
from typing import Tuple

from ecgroup.exceptions import ECGroupArithmeticError
from ecgroup.utils import int_repr

# the first 13 primes are Miller-Rabin witnesses for any n below this bound
_MR_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)
_MR_DETERMINISTIC_BOUND = 3317044064679887385961981


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(a, b).

    based on Extended Euclidean Algorithm, see
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    x0, x1, y0, y1 = 1, 0, 0, 1
    while b != 0:
        q, r = divmod(a, b)
        a, b = b, r
        x0, x1 = x1, x0 - q * x1
        y0, y1 = y1, y0 - q * y1
    return a, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m), in [0, m-1].

    m does not have to be a prime: the inverse exists
    if and only if gcd(a, m) == 1.
    Based on Extended Euclidean Algorithm.
    """

    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    err_msg = f"No inverse for {int_repr(a)} mod {int_repr(m)}"
    raise ECGroupArithmeticError(err_msg)


def is_probable_prime(n: int, rounds: int = 16) -> bool:
    """Return True if n is prime, according to the Miller-Rabin test.

    The answer is certain for n < 3317044064679887385961981;
    above that, 'rounds' random witnesses are tested too,
    leaving a probability of error below 4**-rounds.
    """

    if n < 2:
        return False
    for q in _MR_BASES:
        if n % q == 0:
            return n == q

    # n - 1 = d * 2**s, with d odd
    d, s = n - 1, 0
    while d & 1 == 0:
        d >>= 1
        s += 1

    witnesses = list(_MR_BASES)
    if n >= _MR_DETERMINISTIC_BOUND:
        witnesses += [2 + secrets.randbelow(n - 3) for _ in range(rounds)]

    for w in witnesses:
        x = pow(w, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True
