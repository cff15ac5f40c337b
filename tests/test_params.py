import logging
from dataclasses import FrozenInstanceError

import pytest

from revrandom.config import DEFAULTS, PRESETS
from revrandom.errors import InvalidInverseError, InvalidParameterError, NotCoprimeError
from revrandom.params import ParameterSet, params_for

def test_default_triple():
    p = ParameterSet.default()
    assert (p.a, p.c, p.m) == (48271, 0, 2147483647)
    assert p.inv_a == 1899818559
    assert p.max_random == 2147483646

def test_inverse_is_computed_when_omitted():
    p = ParameterSet(5, 3, 11)
    assert p.inv_a == 9

def test_supplied_inverse_accepted():
    p = ParameterSet(5, 3, 11, inv_a=9)
    assert p.inv_a == 9

def test_supplied_inverse_is_reduced():
    p = ParameterSet(5, 3, 11, inv_a=20)   # 20 = 9 + 11
    assert p.inv_a == 9

def test_not_coprime():
    with pytest.raises(NotCoprimeError):
        ParameterSet(4, 0, 8)

def test_wrong_inverse():
    # 3 * 5 % 7 == 1, so 4 is wrong
    with pytest.raises(InvalidInverseError) as exc:
        ParameterSet(3, 0, 7, inv_a=4)
    assert exc.value.inv_a == 4

def test_modulus_one_has_no_inverse():
    with pytest.raises(NotCoprimeError):
        ParameterSet(3, 0, 1)

def test_non_positive_modulus():
    with pytest.raises(InvalidParameterError):
        ParameterSet(3, 0, 0)
    with pytest.raises(InvalidParameterError):
        ParameterSet(3, 0, -11)

def test_params_are_immutable():
    p = ParameterSet(5, 3, 11)
    with pytest.raises(FrozenInstanceError):
        p.a = 7

def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        ParameterSet(4, 0, 8)

def test_fits_int64():
    assert ParameterSet.default().fits_int64()
    assert not ParameterSet(3, 0, 2**61 - 1).fits_int64()

def test_overflow_warning_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="revrandom.params"):
        ParameterSet(3, 0, 2**61 - 1)
    assert any("64-bit" in r.getMessage() for r in caplog.records)

def test_dict_round_trip_revalidates():
    p = ParameterSet(5, 3, 11)
    assert ParameterSet.from_dict(p.to_dict()) == p
    with pytest.raises(InvalidInverseError):
        ParameterSet.from_dict({"a": 5, "c": 3, "m": 11, "inv_a": 4})

def test_presets():
    assert params_for("minstd") == ParameterSet(DEFAULTS.a, DEFAULTS.c, DEFAULTS.m)
    assert params_for("park-miller").inv_a == 1407677000
    inv = params_for("minstd-inv")
    assert inv.a == ParameterSet.default().inv_a
    for name in PRESETS:
        p = params_for(name)
        assert (p.a * p.inv_a) % p.m == 1

def test_unknown_preset():
    with pytest.raises(KeyError, match="minstd"):
        params_for("randu")
