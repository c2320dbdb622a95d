#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.


"""Integer conversion utilities."""

from ecgroup.alias import Integer
from ecgroup.exceptions import ECGroupValueError

# integers above this are rendered as hex-strings
HEX_THRESHOLD = 0xFFFFFFFF


def int_from_integer(i: Integer) -> int:
    """Return an int from a scalar or a curve parameter.

    Besides int, the accepted representations are
    big-endian bytes and hex-strings:
    "0x" prefixed or not, possibly negative,
    possibly blank-separated as returned by hex_string
    (e.g. "-0x11", "0xfffffc2f", "01 DEADBEEF 00000000").
    """

    if isinstance(i, int):
        return i
    if isinstance(i, bytes):
        return int.from_bytes(i, byteorder="big", signed=False)
    return int("".join(i.split()), 16)


def hex_string(i: int) -> str:
    """Return the upper-case hex-string of a non-negative int.

    Hex-digits are an even number, grouped eight by eight
    from the least significant one (e.g. "01 DEADBEEF 00000000").
    """

    if i < 0:
        raise ECGroupValueError(f"negative integer: {i}")
    digits = f"{i:X}"
    digits = digits.zfill(len(digits) + len(digits) % 2)
    head = len(digits) % 8
    groups = [digits[:head]] if head else []
    groups += [digits[j : j + 8] for j in range(head, len(digits), 8)]
    return " ".join(groups)


def int_repr(i: int) -> str:
    "Return i for an error message: as hex-string if large and positive."
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"
