"""
Remove a word. Removing a missing word is not an error.
"""

from dictionary.cli.console import console

NARGS = 1
USAGE = "<word>"


def run(d, args):
    word = args[0]
    d.remove(word)
    console.print(f"Word {word} has been removed from the dictionary")
