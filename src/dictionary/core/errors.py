"""
Errors raised by the dictionary core.
"""


class DictionaryError(Exception):
    """Base class for every dictionary failure."""


class StorageOpenError(DictionaryError):
    pass


class StorageReadError(DictionaryError):
    pass


class StorageWriteError(DictionaryError):
    pass


class NotFoundError(StorageReadError):
    def __init__(self, key: str):
        super().__init__(f"Key not found: {key}")
        self.key = key


class SerializationError(DictionaryError):
    pass


class DeserializationError(DictionaryError):
    pass


class InvalidTagError(DictionaryError):
    def __init__(self, tag):
        super().__init__(f"Invalid tag: {tag}")
        self.tag = tag
