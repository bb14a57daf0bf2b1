"""
Add (or replace) a word.
"""

from dictionary.cli.console import console
from dictionary.core.tag import is_valid_tag, parse_tag

NARGS = 3
USAGE = "<word> <definition> <tag>"


def run(d, args):
    word, definition, raw_tag = args[:3]

    if not is_valid_tag(raw_tag):
        console.print(f"Invalid tag: {raw_tag}")
        return

    tag = parse_tag(raw_tag)
    d.add(word, definition, tag)
    console.print(f"Word {word} added to the dictionary")
    console.print(f" Definition: {definition}")
    console.print(f" Tag: {tag}")
