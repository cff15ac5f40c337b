import pytest

from revrandom.errors import InvalidParameterError, NotCoprimeError
from revrandom.modinv import euclid_quotients, inverse

def test_small_inverses():
    assert inverse(3, 7) == 5
    assert inverse(5, 11) == 9
    assert inverse(10, 7) == 5   # a larger than n

def test_known_park_miller_inverses():
    assert inverse(16807, 0x7FFFFFFF) == 1407677000
    assert inverse(48271, 0x7FFFFFFF) == 1899818559

def test_result_is_reduced_and_correct():
    for a, n in [(1664525, 2**32), (17, 3120), (2, 9), (7, 1000003)]:
        x = inverse(a, n)
        assert 0 <= x < n
        assert (a * x) % n == 1

def test_quotients_and_gcd():
    g, q = euclid_quotients(3, 7)
    assert g == 1
    assert q == [0, 2, 3]
    g, _ = euclid_quotients(4, 8)
    assert g == 4

def test_not_coprime_raises():
    with pytest.raises(NotCoprimeError) as exc:
        inverse(4, 8)
    assert exc.value.gcd == 4

def test_bad_inputs_rejected_before_loop():
    with pytest.raises(InvalidParameterError):
        inverse(3, 0)
    with pytest.raises(InvalidParameterError):
        inverse(3, -7)
    with pytest.raises(InvalidParameterError):
        inverse(-3, 7)
