from dictionary.core.dictionary import Dictionary, sorted_keys
from dictionary.core.entry import Entry, decode_entry, encode_entry
from dictionary.core.errors import (
    DeserializationError,
    DictionaryError,
    InvalidTagError,
    NotFoundError,
    SerializationError,
    StorageOpenError,
    StorageReadError,
    StorageWriteError,
)
from dictionary.core.store import KVStore
from dictionary.core.tag import ALL_TAGS, Tag, is_valid_tag, parse_tag

__all__ = [
    "ALL_TAGS",
    "DeserializationError",
    "Dictionary",
    "DictionaryError",
    "Entry",
    "InvalidTagError",
    "KVStore",
    "NotFoundError",
    "SerializationError",
    "StorageOpenError",
    "StorageReadError",
    "StorageWriteError",
    "Tag",
    "decode_entry",
    "encode_entry",
    "is_valid_tag",
    "parse_tag",
    "sorted_keys",
]
