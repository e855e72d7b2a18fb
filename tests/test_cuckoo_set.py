import pytest

from dsgo.cuckoo_set import CuckooSet

TEMPLATE = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


@pytest.fixture
def keys():
    return [TEMPLATE[i : i + k + 1] for k in range(25) for i in range(52)]


def test_hash_set(keys):
    s = CuckooSet()
    for key in keys:
        assert s.insert(key)
    assert len(s) == len(keys)
    assert not s.insert(keys[0])
    for key in keys:
        assert s.search(key)
    for key in keys:
        assert s.remove(key)
    assert s.is_empty()
    assert not s.search(keys[0])
    assert not s.remove(keys[0])


def test_contains(keys):
    s = CuckooSet()
    for key in keys[:100]:
        s.insert(key)
    assert keys[5] in s
    assert keys[500] not in s
    assert 42 not in s


def test_clear(keys):
    s = CuckooSet()
    for key in keys[:50]:
        s.insert(key)
    assert len(s) == 50
    s.clear()
    assert s.is_empty()
    assert len(s) == 0
    assert not s.search(keys[0])
    assert s.insert(keys[0])
    assert len(s) == 1


def test_remove_only_target(keys):
    s = CuckooSet()
    for key in keys[:200]:
        s.insert(key)
    assert s.remove(keys[10])
    assert not s.search(keys[10])
    assert all(s.search(key) for key in keys[:200] if key != keys[10])
    assert len(s) == 199


def test_reinsert_after_remove():
    s = CuckooSet()
    assert s.insert("alpha")
    assert s.remove("alpha")
    assert s.insert("alpha")
    assert s.search("alpha")
    assert len(s) == 1


def test_empty_string_key():
    s = CuckooSet()
    assert s.insert("")
    assert "" in s
    assert not s.insert("")