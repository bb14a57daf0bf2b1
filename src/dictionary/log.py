"""
Logging setup for the command line.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level="WARNING") -> None:
    """Send `dictionary.*` log records to stderr through rich."""
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger("dictionary")
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(level)
