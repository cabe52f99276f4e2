from datetime import timedelta

import pytest

from gdkit.localcache import LocalCache, LocalCacheConfiguration


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def make(max_cost=100, clock=None):
    config = LocalCacheConfiguration(num_counters=1000, max_cost=max_cost, buffer_items=64)
    return LocalCache(config, clock=clock) if clock else LocalCache(config)


def test_set_and_get():
    cache = make()
    assert cache.set("k", {"v": 1}) is True
    assert cache.get("k") == {"v": 1}


def test_missing_key_gives_none():
    assert make().get("absent") is None


def test_none_value_counts_as_missing():
    cache = make()
    cache.set("k", None)
    assert cache.get("k") is None


def test_delete():
    cache = make()
    cache.set("k", "v")
    cache.delete("k")
    cache.delete("never")
    assert cache.get("k") is None


def test_clear():
    cache = make()
    cache.set("a", 1)
    cache.set("b", 2)
    cache.clear()
    assert cache.get("a") is None
    assert len(cache) == 0


def test_negative_ttl_discards():
    cache = make()
    assert cache.set_ex("k", "v", -1) is False
    assert cache.get("k") is None


def test_zero_ttl_never_expires():
    clock = FakeClock()
    cache = make(clock=clock)
    assert cache.set_ex("k", "v", 0) is True
    clock.now += 10**9
    assert cache.get("k") == "v"


def test_ttl_expires():
    clock = FakeClock()
    cache = make(clock=clock)
    cache.set_ex("k", "v", timedelta(seconds=5))
    clock.now += 4
    assert cache.get("k") == "v"
    clock.now += 1
    assert cache.get("k") is None


def test_least_recently_used_is_evicted():
    cache = make(max_cost=2)
    cache.set("a", 1)
    cache.set("b", 2)
    assert cache.get("a") == 1
    cache.set("c", 3)
    assert cache.get("b") is None
    assert cache.get("a") == 1
    assert cache.get("c") == 3
    assert len(cache) == 2


def test_expired_items_make_room_first():
    clock = FakeClock()
    cache = make(max_cost=2, clock=clock)
    cache.set("keep", 1)
    cache.set_ex("short", 2, 1)
    clock.now += 2
    cache.set("new", 3)
    assert cache.get("keep") == 1
    assert cache.get("new") == 3


def test_close_refuses_writes():
    cache = make()
    cache.set("k", "v")
    cache.close()
    cache.close()
    assert cache.get("k") is None
    assert cache.set("k", "v") is False


@pytest.mark.parametrize(
    "config",
    [
        LocalCacheConfiguration(num_counters=0, max_cost=10, buffer_items=64),
        LocalCacheConfiguration(num_counters=10, max_cost=0, buffer_items=64),
        LocalCacheConfiguration(num_counters=10, max_cost=10, buffer_items=0),
    ],
)
def test_invalid_configuration(config):
    with pytest.raises(ValueError):
        LocalCache(config)