"""
English title casing for display words.

"hello world" -> "Hello World", "don't" -> "Don't", "HELLO" -> "Hello",
"abc123def" -> "Abc123def", "1st" -> "1st"
"""

import re

# digits, underscores and apostrophes stay inside a word; spaces and
# hyphens end it
_WORD_RE = re.compile(r"[\w'’]+")


def _title_word(match: re.Match) -> str:
    word = match.group(0)
    if not word[0].isalpha():
        return word
    return word[:1].title() + word[1:].lower()


def title_case(text: str) -> str:
    return _WORD_RE.sub(_title_word, text)
