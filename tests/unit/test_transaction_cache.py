"""Unit tests for the transaction explanation cache."""

from stellar_explain.services.transaction_cache import CacheKey, TransactionCache


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


KEY = CacheKey(tx_hash="a" * 64, network="public")


def _cache(**kwargs) -> tuple[TransactionCache, FakeClock]:
    clock = FakeClock()
    return TransactionCache(clock=clock, **kwargs), clock


def test_get_after_set():
    cache, _ = _cache()
    cache.set(KEY, "value")
    assert cache.get(KEY) == "value"
    assert KEY in cache
    assert cache.stats().hits == 1


def test_miss_counts():
    cache, _ = _cache()
    assert cache.get(KEY) is None
    assert cache.stats().misses == 1


def test_entry_expires():
    cache, clock = _cache(ttl_seconds=10)
    cache.set(KEY, "value")
    clock.now = 10.0
    assert KEY not in cache
    assert cache.get(KEY) is None
    assert len(cache) == 0


def test_per_entry_ttl_override():
    cache, clock = _cache(ttl_seconds=10)
    cache.set(KEY, "value", ttl_seconds=100)
    clock.now = 50.0
    assert cache.get(KEY) == "value"


def test_network_is_part_of_key():
    cache, _ = _cache()
    cache.set(KEY, "public")
    assert cache.get(CacheKey(tx_hash=KEY.tx_hash, network="testnet")) is None


def test_oldest_entry_evicted():
    cache, _ = _cache(max_entries=2)
    keys = [CacheKey(tx_hash=str(i), network="public") for i in range(3)]
    for key in keys:
        cache.set(key, key.tx_hash)
    assert len(cache) == 2
    assert cache.get(keys[0]) is None
    assert cache.get(keys[2]) == "2"


def test_evict_expired_and_clear():
    cache, clock = _cache(ttl_seconds=5)
    cache.set(KEY, "old")
    clock.now = 3.0
    fresh = CacheKey(tx_hash="b" * 64, network="public")
    cache.set(fresh, "fresh")
    clock.now = 6.0
    assert cache.evict_expired() == 1
    assert cache.remove(fresh) == "fresh"
    cache.get(KEY)
    cache.clear()
    assert cache.stats().misses == 0
    assert len(cache) == 0
