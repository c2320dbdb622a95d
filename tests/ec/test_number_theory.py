#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecgroup.ec.number_theory` module."

import pytest

from ecgroup.ec.number_theory import is_probable_prime, mod_inv, xgcd
from ecgroup.exceptions import ECGroupArithmeticError

primes = [
    2,
    3,
    5,
    7,
    11,
    13,
    17,
    19,
    23,
    29,
    31,
    37,
    41,
    43,
    47,
    53,
    59,
    61,
    67,
    71,
    73,
    79,
    83,
    89,
    97,
    101,
    103,
    107,
    109,
    113,
    2 ** 127 - 1,
    2 ** 192 - 2 ** 64 - 1,
    2 ** 224 - 2 ** 96 + 1,
    2 ** 256 - 2 ** 32 - 977,
    2 ** 256 - 2 ** 224 + 2 ** 192 + 2 ** 96 - 1,
    2 ** 384 - 2 ** 128 - 2 ** 96 + 2 ** 32 - 1,
    2 ** 521 - 1,
]


def test_xgcd() -> None:
    assert xgcd(3, 7) == (1, -2, 1)
    assert xgcd(240, 46)[0] == 2
    assert xgcd(0, 5) == (5, 0, 1)
    assert xgcd(5, 0) == (5, 1, 0)

    for a in range(1, 60):
        for b in range(1, 60):
            g, x, y = xgcd(a, b)
            assert a * x + b * y == g
            assert a % g == 0
            assert b % g == 0


def test_mod_inv_prime() -> None:
    for p in primes:
        with pytest.raises(ECGroupArithmeticError, match="No inverse for 0 mod"):
            mod_inv(0, p)
        for a in range(1, min(p, 500)):  # exhausted only for small p
            inv = mod_inv(a, p)
            assert 0 <= inv < p
            assert a * inv % p == 1
            inv = mod_inv(a + p, p)
            assert a * inv % p == 1
            # negative values, e.g. differences of coordinates
            inv = mod_inv(-a, p)
            assert 0 <= inv < p
            assert -a * inv % p == 1


def test_mod_inv() -> None:
    max_m = 100
    for m in range(2, max_m):
        nums = list(range(m))
        for a in nums:
            mult = [a * i % m for i in nums]
            if 1 in mult:
                inv = mod_inv(a, m)
                assert a * inv % m == 1
                inv = mod_inv(a + m, m)
                assert a * inv % m == 1
            else:
                err_msg = "No inverse for "
                with pytest.raises(ECGroupArithmeticError, match=err_msg):
                    mod_inv(a, m)


def test_mod_inv_error_message() -> None:
    with pytest.raises(ArithmeticError, match="No inverse for 3 mod 15"):
        mod_inv(3, 15)
    with pytest.raises(ArithmeticError, match="No inverse for 10 mod 15"):
        mod_inv(-5, 15)

    # large values are rendered as hex-strings
    err_msg = "No inverse for '01 00000000 00000000' mod '02 00000000 00000000'"
    with pytest.raises(ECGroupArithmeticError, match=err_msg):
        mod_inv(2 ** 64, 2 ** 65)


def test_is_probable_prime() -> None:
    max_n = 2000
    sieve = [True] * max_n
    sieve[0] = sieve[1] = False
    for i in range(2, max_n):
        if sieve[i]:
            for j in range(i * i, max_n, i):
                sieve[j] = False
    for n in range(-5, max_n):
        assert is_probable_prime(n) == (n >= 0 and sieve[n]), n

    for p in primes:
        assert is_probable_prime(p)

    # Carmichael numbers
    for n in (561, 1105, 41041, 825265, 321197185):
        assert not is_probable_prime(n)
    # strong pseudoprime to bases 2, 3, 5, and 7
    assert not is_probable_prime(3215031751)
    # strong pseudoprime to the first 12 primes
    assert not is_probable_prime(318665857834031151167461)

    # above the deterministic bound, random witnesses are used too
    for i, p in enumerate(primes[-6:]):
        q = primes[-1 - i]
        assert not is_probable_prime(p * q)
        assert not is_probable_prime(p * p)
