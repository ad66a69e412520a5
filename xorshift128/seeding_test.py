import threading

from xorshift128 import seeding
from xorshift128.seeding import default_seed
from xorshift128.prng import XorShift128Plus


def _pin(monkeypatch, clock, ident, obj_id):
    monkeypatch.setattr(seeding.time, "perf_counter_ns", lambda: clock)
    monkeypatch.setattr(seeding.threading, "get_ident", lambda: ident)
    monkeypatch.setattr(seeding, "id", lambda o: obj_id, raising=False)


def test_mixes_clock_thread_and_identity(monkeypatch):
    _pin(monkeypatch, clock=1000, ident=3, obj_id=5)
    assert default_seed() == 1000 ^ (3 << 7) ^ (5 << 13)


def test_result_is_signed_64_bit(monkeypatch):
    _pin(monkeypatch, clock=(1 << 63) | 1, ident=0, obj_id=0)
    assert default_seed() == -(2**63) + 1


def test_clock_change_changes_seed(monkeypatch):
    _pin(monkeypatch, clock=1000, ident=3, obj_id=5)
    first = default_seed()
    _pin(monkeypatch, clock=1001, ident=3, obj_id=5)
    assert default_seed() != first


def test_thread_identity_changes_seed(monkeypatch):
    _pin(monkeypatch, clock=1000, ident=3, obj_id=5)
    first = default_seed()
    _pin(monkeypatch, clock=1000, ident=4, obj_id=5)
    assert default_seed() != first


def test_unpinned_seed_in_range():
    seed = default_seed()
    assert -(2**63) <= seed < 2**63


def test_from_default_seed_uses_default_seed(monkeypatch):
    _pin(monkeypatch, clock=1000, ident=3, obj_id=5)
    rng = XorShift128Plus.from_default_seed()
    expected = XorShift128Plus(1000 ^ (3 << 7) ^ (5 << 13))
    assert rng.next_int64() == expected.next_int64()


def test_from_default_seed_per_thread():
    states = []

    def worker():
        states.append(XorShift128Plus.from_default_seed().state)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(states) == 4
    for state in states:
        assert not state.is_zero()


def test_package_exports_seeding_function():
    import xorshift128

    assert xorshift128.default_seed is seeding.default_seed
    assert callable(xorshift128.default_seed)
