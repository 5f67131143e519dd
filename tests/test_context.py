import threading

import pytest

from xutilkit.context import ContextNotFound, ContextTable


def test_save_and_find():
    table = ContextTable()
    table.save(10, 1, "data")
    assert table.find(10, 1) == "data"


def test_find_missing_raises():
    table = ContextTable()
    with pytest.raises(ContextNotFound):
        table.find(10, 1)


def test_not_found_is_key_error():
    table = ContextTable()
    with pytest.raises(KeyError):
        table.find(1, 2)


def test_save_replaces_existing():
    table = ContextTable()
    table.save(5, 2, "first")
    table.save(5, 2, "second")
    assert table.find(5, 2) == "second"
    assert len(table) == 1


def test_keys_distinguish_rid_and_context():
    table = ContextTable()
    table.save(1, 2, "a")
    table.save(2, 1, "b")
    assert table.find(1, 2) == "a"
    assert table.find(2, 1) == "b"
    assert len(table) == 2


def test_delete_removes_entry():
    table = ContextTable()
    table.save(3, 4, "x")
    table.delete(3, 4)
    assert (3, 4) not in table
    assert len(table) == 0
    with pytest.raises(ContextNotFound):
        table.find(3, 4)


def test_delete_missing_raises():
    table = ContextTable()
    with pytest.raises(ContextNotFound):
        table.delete(3, 4)


def test_contains():
    table = ContextTable()
    table.save(7, 8, None)
    assert (7, 8) in table
    assert (8, 7) not in table


def test_many_entries_survive_growth_and_shrink():
    table = ContextTable()
    for rid in range(1000):
        table.save(rid, rid % 5, rid * 2)
    assert len(table) == 1000
    assert all(table.find(rid, rid % 5) == rid * 2 for rid in range(1000))
    for rid in range(0, 1000, 2):
        table.delete(rid, rid % 5)
    assert len(table) == 500
    assert all(table.find(rid, rid % 5) == rid * 2 for rid in range(1, 1000, 2))


def test_concurrent_saves():
    table = ContextTable()

    def worker(offset):
        for i in range(200):
            table.save(offset * 1000 + i, 0, i)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(table) == 800
    assert table.find(3199 - 2000, 0) == 199