#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Named elliptic curves.

* secp256k1, from SEC 2 v.2
  http://www.secg.org/sec2-v2.pdf
* ec17_11, a toy curve for didactical purposes:
  y^2 = x^3 + 2x + 3 (mod 17), whose 22 points include
  the generator G = (3, 6) of order 11

Parameters are read from the json files in the data directory
and are not validated at load time.
"""

import json
from os import path
from typing import Dict

from ecgroup.ec.curve import Curve

datadir = path.join(path.dirname(__file__), "data")


def curves_from_json(filename: str) -> Dict[str, Curve]:
    "Return the named curves defined in a json file."

    with open(filename, "r", encoding="ascii") as file_:
        params = json.load(file_)
    return {ec_name: Curve.from_dict(params[ec_name]) for ec_name in params}


CURVES = curves_from_json(path.join(datadir, "curves.json"))

secp256k1 = CURVES["secp256k1"]
