"""
Shared stdout console. User text is printed verbatim, never as markup.
"""

import sys

from rich.console import Console

console = Console(highlight=False, markup=False, emoji=False, soft_wrap=True)


def handle_error(err: Exception):
    """Print a core error and stop the process with status 1."""
    console.print(f"Dictionary error: {err}")
    sys.exit(1)
