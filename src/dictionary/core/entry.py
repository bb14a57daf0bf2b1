"""
Entry - one word/definition/tag record and its stored encoding.

Stored values are UTF-8 JSON objects:

    {"word": "Hello", "definition": "a greeting", "tag": "philo",
     "created_at": "2026-10-19T09:30:00.123456+02:00"}
"""

import json
from dataclasses import dataclass
from datetime import datetime

from dictionary.core.errors import DeserializationError, SerializationError
from dictionary.core.tag import Tag, is_valid_tag
from dictionary.core.textcase import title_case

_FIELDS = ("word", "definition", "tag", "created_at")


def _coerce_tag(tag) -> Tag | str:
    """Valid tags become Tag members, anything else is kept as-is."""
    if is_valid_tag(tag):
        return Tag(tag)
    return tag


def local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass(frozen=True)
class Entry:
    word: str
    definition: str
    tag: Tag | str
    created_at: datetime

    @classmethod
    def create(cls, word: str, definition: str, tag, now: datetime | None = None) -> "Entry":
        return cls(
            word=title_case(word),
            definition=definition,
            tag=_coerce_tag(tag),
            created_at=now if now is not None else local_now(),
        )

    def stamp(self) -> str:
        """Timestamp as 'Jan _2 15:04:05' - month, space-padded day, time."""
        t = self.created_at
        return f"{t:%b} {t.day:>2} {t:%H:%M:%S}"

    def render(self) -> str:
        return f"{self.word:<10}\t{self.definition:<50}{str(self.tag):<6}\t{self.stamp()}"

    def __str__(self) -> str:
        return self.render()

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "definition": self.definition,
            "tag": str(self.tag),
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Entry":
        if not isinstance(data, dict):
            raise DeserializationError(f"Entry must be an object, got {type(data).__name__}")

        missing = [f for f in _FIELDS if f not in data]
        if missing:
            raise DeserializationError(f"Entry is missing fields: {', '.join(missing)}")

        for f in _FIELDS:
            if not isinstance(data[f], str):
                raise DeserializationError(f"Entry field {f!r} must be a string")

        try:
            created_at = datetime.fromisoformat(data["created_at"])
        except ValueError as e:
            raise DeserializationError(f"Bad created_at: {data['created_at']!r}") from e

        return cls(
            word=data["word"],
            definition=data["definition"],
            tag=_coerce_tag(data["tag"]),
            created_at=created_at,
        )


def encode_entry(entry: Entry) -> bytes:
    for name in ("word", "definition", "tag"):
        if not isinstance(getattr(entry, name), str):
            raise SerializationError(f"Entry field {name!r} must be a string, got {getattr(entry, name)!r}")
    try:
        return json.dumps(entry.to_dict(), ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError, AttributeError) as e:
        raise SerializationError(f"Cannot encode entry {entry.word!r}: {e}") from e


def decode_entry(data: bytes) -> Entry:
    try:
        payload = json.loads(bytes(data).decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise DeserializationError(f"Cannot decode entry: {e}") from e
    return Entry.from_dict(payload)
