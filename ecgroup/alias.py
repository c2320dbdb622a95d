#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.

Point types live in ecgroup.ec.point, as they are actual classes.
"""

from typing import Union

# hex-string or bytes representation of an int, or the int itself
#
# e.g.:
# 3735928559
# -3735928559
# "0xdeadbeef"
# "-0xdeadbeef"
# "deadbeef"
# "DEADBEEF 00000000"
# b'\xde\xad\xbe\xef'
#
# use ecgroup.utils.int_from_integer to convert Integer to int
Integer = Union[bytes, str, int]
