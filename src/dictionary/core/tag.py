"""
Tags - the closed set of categories an entry can belong to.
"""

from enum import Enum

from dictionary.core.errors import InvalidTagError


class Tag(str, Enum):
    TECH = "tech"
    PHILO = "philo"
    FOOD = "food"

    def __str__(self) -> str:
        return self.value


ALL_TAGS = frozenset(t.value for t in Tag)


def is_valid_tag(tag) -> bool:
    if isinstance(tag, Tag):
        return True
    return isinstance(tag, str) and tag in ALL_TAGS


def parse_tag(value) -> Tag:
    """Turn user input into a Tag, rejecting anything outside the set."""
    if not is_valid_tag(value):
        raise InvalidTagError(value)
    return Tag(value)
