from revrandom.engine import advance, advance_by, regress, regress_by
from revrandom.params import ParameterSet

def test_known_trace_5_3_11():
    p = ParameterSet(5, 3, 11, inv_a=9)
    s = advance(2, p)
    assert s == 2          # (2*5 + 3) % 11
    assert regress(s, p) == 2
    assert advance(4, p) == 1    # 23 % 11
    assert regress(1, p) == 4

def test_round_trip_every_state_small_modulus():
    for p in (ParameterSet(5, 3, 11), ParameterSet(137, 187, 256), ParameterSet(7, 0, 10)):
        for s in range(p.m):
            assert regress(advance(s, p), p) == s
            assert advance(regress(s, p), p) == s

def test_round_trip_default_params():
    p = ParameterSet.default()
    for s in (0, 1, 2, 12345, p.m - 2, p.m - 1):
        assert regress(advance(s, p), p) == s
        assert advance(regress(s, p), p) == s

def test_increment_larger_than_modulus():
    p = ParameterSet(5, 25, 11)   # c reduces to 3
    for s in range(11):
        assert advance(s, p) == (5 * s + 3) % 11
        assert regress(advance(s, p), p) == s

def test_states_stay_in_range():
    p = ParameterSet(137, 187, 256)
    s = 0
    for _ in range(600):
        s = advance(s, p)
        assert 0 <= s < p.m
    for _ in range(600):
        s = regress(s, p)
        assert 0 <= s < p.m
    assert s == 0

def test_full_period_default_multiplier_first_values():
    # minstd from seed 1: 48271, 48271^2 mod m
    p = ParameterSet.default()
    assert advance(1, p) == 48271
    assert advance(48271, p) == 182605794

def test_multi_step():
    p = ParameterSet(5, 3, 11)
    s = 7
    walked = s
    for _ in range(4):
        walked = advance(walked, p)
    assert advance_by(s, p, 4) == walked
    assert regress_by(walked, p, 4) == s
    assert advance_by(walked, p, -4) == s
    assert regress_by(s, p, -4) == walked
    assert advance_by(s, p, 0) == s
