"""
Dictionary - words, definitions and tags on top of the key-value store.

Keys are the raw words as given (UTF-8, case-sensitive). Values are
encoded entries whose `word` is the title-cased display form, so "hello"
and "Hello" are two entries that share the display word "Hello".
"""

from __future__ import annotations

import logging
from contextlib import closing
from datetime import datetime
from typing import Callable

from dictionary.core.entry import Entry, decode_entry, encode_entry, local_now
from dictionary.core.store import DEFAULT_PREFETCH_SIZE, KVStore
from dictionary.core.tag import Tag, is_valid_tag

logger = logging.getLogger(__name__)


def _key(word: str) -> bytes:
    return word.encode("utf-8")


def sorted_keys(entries: dict[str, Entry]) -> list[str]:
    """Keys of `entries` in plain code point order."""
    return sorted(entries)


class Dictionary:
    def __init__(
        self,
        store: KVStore,
        prefetch_size: int = DEFAULT_PREFETCH_SIZE,
        clock: Callable[[], datetime] | None = None,
    ):
        self.store = store
        self.prefetch_size = prefetch_size
        self.clock = clock or local_now

    @classmethod
    def open(
        cls,
        directory,
        *,
        prefetch_size: int = DEFAULT_PREFETCH_SIZE,
        lock_timeout: float = 0.0,
        clock: Callable[[], datetime] | None = None,
    ) -> Dictionary:
        store = KVStore.open(directory, lock_timeout=lock_timeout)
        return cls(store, prefetch_size=prefetch_size, clock=clock)

    def close(self):
        self.store.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def add(self, word: str, definition: str, tag: Tag | str) -> Entry:
        """Store an entry under `word`, replacing any previous one."""
        entry = Entry.create(word, definition, tag, now=self.clock())
        value = encode_entry(entry)

        with self.store.update() as txn:
            txn.set(_key(word), value)

        logger.debug("Added %r (%s)", word, entry.tag)
        return entry

    def get(self, word: str) -> Entry:
        with self.store.view() as txn:
            return decode_entry(txn.get(_key(word)))

    def list(self) -> tuple[list[str], dict[str, Entry]]:
        """All entries keyed by display word, plus the sorted display words."""
        entries = self._scan(lambda entry: True)
        return sorted_keys(entries), entries

    def list_tag(self, tag: Tag | str) -> tuple[list[str], dict[str, Entry]]:
        """Like list(), restricted to valid entries carrying `tag`."""
        entries = self._scan(lambda entry: is_valid_tag(entry.tag) and entry.tag == tag)
        return sorted_keys(entries), entries

    def remove(self, word: str) -> None:
        with self.store.update() as txn:
            txn.delete(_key(word))
        logger.debug("Removed %r", word)

    def _scan(self, keep: Callable[[Entry], bool]) -> dict[str, Entry]:
        # a decode failure aborts the whole scan
        entries = {}
        with self.store.view() as txn:
            with closing(txn.iterate(self.prefetch_size)) as items:
                for _key_bytes, value in items:
                    entry = decode_entry(value)
                    if keep(entry):
                        entries[entry.word] = entry
        return entries
