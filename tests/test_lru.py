import pytest

from framer.lru import LRUCache, NotFoundError


def test_lru_sequence():
    lru = LRUCache(2)
    lru.put(1, 1)
    lru.put(2, 2)
    assert str(lru) == "[2:2,1:1]"
    assert lru.get(1) == 1
    assert str(lru) == "[1:1,2:2]"
    lru.put(3, 3)
    assert str(lru) == "[3:3,1:1]"
    with pytest.raises(NotFoundError):
        lru.get(2)
    lru.put(4, 4)
    assert str(lru) == "[4:4,3:3]"
    with pytest.raises(NotFoundError):
        lru.get(1)
    assert lru.get(3) == 3
    assert str(lru) == "[3:3,4:4]"
    assert lru.get(4) == 4
    assert str(lru) == "[4:4,3:3]"


def test_put_updates():
    lru = LRUCache(2)
    lru.put(1, 1)
    lru.put(2, 2)
    lru.put(1, 3)
    assert str(lru) == "[1:3,2:2]"
    assert len(lru) == 2


@pytest.mark.parametrize("capacity", [0, -1])
def test_wrong_capacity(capacity):
    with pytest.raises(ValueError):
        LRUCache(capacity)


def test_empty_string():
    assert str(LRUCache(3)) == "[]"


def test_not_found_is_lookup_error():
    lru = LRUCache(1)
    with pytest.raises(LookupError):
        lru.get("missing")


def test_len_never_exceeds_capacity():
    lru = LRUCache(3)
    for n in range(10):
        lru.put(n, n * n)
    assert len(lru) == 3
    assert str(lru) == "[9:81,8:64,7:49]"