"""
List the entries carrying one tag.
"""

from dictionary.cli.console import console
from dictionary.core.tag import is_valid_tag, parse_tag

NARGS = 1
USAGE = "<tag>"


def run(d, args):
    raw_tag = args[0]

    if not is_valid_tag(raw_tag):
        console.print(f"Invalid tag: {raw_tag}")
        return

    tag = parse_tag(raw_tag)
    words, entries = d.list_tag(tag)
    for word in words:
        console.print(f"{tag} tag: {entries[word].render()}")
