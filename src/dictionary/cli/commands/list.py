"""
List every entry, sorted by display word.
"""

from dictionary.cli.console import console

NARGS = 0
USAGE = ""


def run(d, args):
    words, entries = d.list()
    for word in words:
        console.print(entries[word].render())
