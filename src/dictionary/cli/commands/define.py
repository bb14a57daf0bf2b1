"""
Print the definition of a word.
"""

from dictionary.cli.console import console

NARGS = 1
USAGE = "<word>"


def run(d, args):
    word = args[0]
    entry = d.get(word)
    console.print(f"Definition of {word} is: {entry.definition}")
