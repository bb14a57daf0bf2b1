# tests/test_store.py
"""Tests for the embedded key-value store."""

import pytest

from dictionary.core.errors import (
    NotFoundError,
    StorageOpenError,
    StorageReadError,
    StorageWriteError,
)
from dictionary.core.store import DB_FILENAME, KVStore


@pytest.fixture
def store(tmp_path):
    s = KVStore.open(tmp_path / "db")
    yield s
    s.close()


# === Open / close ===

def test_open_creates_directory(tmp_path):
    path = tmp_path / "a" / "b"
    with KVStore.open(path) as s:
        assert not s.closed
    assert (path / DB_FILENAME).exists()


def test_second_open_fails_while_first_is_live(tmp_path):
    first = KVStore.open(tmp_path)
    try:
        with pytest.raises(StorageOpenError):
            KVStore.open(tmp_path)
    finally:
        first.close()


def test_reopen_after_close(tmp_path):
    first = KVStore.open(tmp_path)
    first.close()
    second = KVStore.open(tmp_path)
    second.close()


def test_open_corrupt_file(tmp_path):
    (tmp_path / DB_FILENAME).write_bytes(b"this is not a database " * 64)
    with pytest.raises(StorageOpenError):
        KVStore.open(tmp_path)


def test_open_on_a_file_path(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    with pytest.raises(StorageOpenError):
        KVStore.open(blocker)


def test_close_is_idempotent(store):
    store.close()
    store.close()
    assert store.closed


def test_closed_store_rejects_transactions(store):
    store.close()
    with pytest.raises(StorageReadError):
        with store.view():
            pass
    with pytest.raises(StorageWriteError):
        with store.update():
            pass


# === Transactions ===

def test_set_get(store):
    with store.update() as txn:
        txn.set(b"k", b"v")
    with store.view() as txn:
        assert txn.get(b"k") == b"v"


def test_set_overwrites(store):
    with store.update() as txn:
        txn.set(b"k", b"one")
    with store.update() as txn:
        txn.set(b"k", b"two")
    with store.view() as txn:
        assert txn.get(b"k") == b"two"


def test_get_missing(store):
    with store.view() as txn:
        with pytest.raises(NotFoundError) as exc:
            txn.get(b"nope")
    assert exc.value.key == "nope"


def test_delete_missing_is_noop(store):
    with store.update() as txn:
        txn.delete(b"nope")


def test_view_is_read_only(store):
    with pytest.raises(StorageWriteError):
        with store.view() as txn:
            txn.set(b"k", b"v")


def test_update_rolls_back_on_error(store):
    with pytest.raises(RuntimeError):
        with store.update() as txn:
            txn.set(b"k", b"v")
            raise RuntimeError("boom")

    with store.view() as txn:
        with pytest.raises(NotFoundError):
            txn.get(b"k")


def test_data_survives_reopen(tmp_path):
    with KVStore.open(tmp_path) as s:
        with s.update() as txn:
            txn.set(b"k", b"v")
    with KVStore.open(tmp_path) as s:
        with s.view() as txn:
            assert txn.get(b"k") == b"v"


# === Iteration ===

def test_iterate_in_key_order(store):
    keys = [b"pear", b"Zebra", b"apple", "éclair".encode(), b"fig"]
    with store.update() as txn:
        for k in keys:
            txn.set(k, k.upper())

    with store.view() as txn:
        items = list(txn.iterate(prefetch_size=2))

    assert [k for k, _ in items] == sorted(keys)
    assert items[0] == (b"Zebra", b"ZEBRA")


def test_iterate_empty(store):
    with store.view() as txn:
        assert list(txn.iterate()) == []
