from dataclasses import dataclass

import pytest

from waterdrop.lru import LRUCache


@dataclass(frozen=True)
class SimpleStruct:
    number: int
    text: str


@dataclass(frozen=True)
class ComplexStruct:
    number: int
    inner: SimpleStruct


MISSING = object()


@pytest.mark.parametrize(
    "key_to_add, key_to_get, expected_ok",
    [
        ("myKey", "myKey", True),
        ("myKey", "nonsense", False),
        (SimpleStruct(1, "two"), SimpleStruct(1, "two"), True),
        (SimpleStruct(1, "two"), SimpleStruct(0, "noway"), False),
        (ComplexStruct(1, SimpleStruct(2, "three")), ComplexStruct(1, SimpleStruct(2, "three")), True),
    ],
)
def test_get(key_to_add, key_to_get, expected_ok):
    lru = LRUCache(0)
    lru.add(key_to_add, 1234)
    found = lru.get(key_to_get, MISSING) is not MISSING
    assert found == expected_ok


def test_remove():
    lru = LRUCache(0)
    lru.add("myKey", 1234)
    assert lru.get("myKey") == 1234
    lru.remove("myKey")
    assert lru.get("myKey", MISSING) is MISSING


def test_evict():
    evicted = []
    lru = LRUCache(20, on_evicted=lambda k, v: evicted.append(k))
    for i in range(22):
        lru.add(f"myKey{i}", 1234)
    assert evicted == ["myKey0", "myKey1"]


def test_get_refreshes_recency():
    evicted = []
    lru = LRUCache(2, on_evicted=lambda k, v: evicted.append(k))
    lru.add("a", 1)
    lru.add("b", 2)
    assert lru.get("a") == 1
    lru.add("c", 3)
    assert evicted == ["b"]
    assert "a" in lru


def test_add_existing_updates_value():
    lru = LRUCache(0)
    lru.add("k", 1)
    lru.add("k", 2)
    assert lru.get("k") == 2
    assert len(lru) == 1


def test_remove_oldest():
    lru = LRUCache(0)
    lru.add("first", 1)
    lru.add("second", 2)
    lru.remove_oldest()
    assert "first" not in lru
    assert lru.get("second") == 2


def test_clear():
    evicted = []
    lru = LRUCache(20, on_evicted=lambda k, v: evicted.append(k))
    for i in range(22):
        lru.add(f"myKey{i}", 1234)
    lru.clear()
    assert len(lru) == 0
    assert len(evicted) == 22


def test_len():
    lru = LRUCache(20)
    for i in range(22):
        lru.add(f"myKey{i}", 1234)
    assert len(lru) == 20