#!/usr/bin/env python3

# Copyright (C) 2024 The ecgroup developers
#
# This file is part of ecgroup. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecgroup including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecgroup.ec.curves` module."

import json
from os import path
from pathlib import Path

import pytest

import ecgroup.ec
from ecgroup.ec.curve import Curve
from ecgroup.ec.curves import CURVES, curves_from_json, datadir, secp256k1
from ecgroup.ec.point import AffinePoint


def test_registry() -> None:
    assert set(CURVES) == {"secp256k1", "ec17_11"}
    assert CURVES["secp256k1"] is secp256k1
    assert ecgroup.ec.secp256k1 is secp256k1

    assert secp256k1.a == 0
    assert secp256k1.b == 7
    assert secp256k1.p == 2 ** 256 - 2 ** 32 - 977
    assert secp256k1.n == (
        0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
    )
    assert secp256k1.G == AffinePoint(
        0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
        0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
    )

    assert CURVES["ec17_11"] == Curve(2, 3, 17, AffinePoint(3, 6), 11)


def test_curves_are_valid() -> None:
    for ec in CURVES.values():
        ec.assert_valid()


def test_curves_from_json(tmp_path: Path) -> None:
    params = {name: ec.to_dict() for name, ec in CURVES.items()}
    params["ec23_2"] = {"a": 1, "b": 0, "p": 23, "G": {"x": 0, "y": 0}, "n": 2}
    filename = tmp_path / "curves.json"
    filename.write_text(json.dumps(params), encoding="ascii")

    curves = curves_from_json(str(filename))
    assert curves["ec23_2"] == Curve(1, 0, 23, AffinePoint(0, 0), 2)
    for name, ec in CURVES.items():
        assert curves[name] == ec

    with pytest.raises(FileNotFoundError):
        curves_from_json(path.join(datadir, "missing.json"))
