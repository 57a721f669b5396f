import pytest

from algonotes.lru import LRUCache


def test_order_after_inserts():
    cache = LRUCache(2)
    cache.put(1, 101)
    cache.put(2, 102)
    assert cache.items() == [(2, 102), (1, 101)]


def test_get_refreshes_recency():
    cache = LRUCache(2)
    cache.put(1, 101)
    cache.put(2, 102)
    assert cache.get(1) == 101
    assert cache.items() == [(1, 101), (2, 102)]


def test_eviction_sequence():
    cache = LRUCache(2)
    cache.put(1, 101)
    cache.put(2, 102)
    cache.get(1)
    cache.put(3, 103)
    assert 2 not in cache
    assert cache.get(3) == 103
    cache.put(4, 104)
    assert cache.get(1) == -1
    assert cache.get(3) == 103
    assert cache.get(4) == 104
    assert len(cache) == 2


def test_update_existing_keeps_size():
    cache = LRUCache(2)
    cache.put(1, 101)
    cache.put(2, 102)
    cache.put(1, 5)
    assert len(cache) == 2
    assert cache.get(1) == 5
    cache.put(3, 103)
    assert 2 not in cache
    assert 1 in cache


def test_custom_default():
    cache = LRUCache(1)
    assert cache.get("missing", None) is None


def test_contains_does_not_refresh():
    cache = LRUCache(2)
    cache.put("a", 1)
    cache.put("b", 2)
    assert "a" in cache
    cache.put("c", 3)
    assert "a" not in cache
    assert [k for k, _ in cache.items()] == ["c", "b"]


def test_size_never_exceeds_capacity():
    cache = LRUCache(3)
    for i in range(10):
        cache.put(i, i * 10)
        assert len(cache) <= 3
    assert [k for k, _ in cache.items()] == [9, 8, 7]


@pytest.mark.parametrize("capacity", [0, -1])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        LRUCache(capacity)