"""
Word dictionary backed by an embedded key-value store.
"""

__version__ = "0.1.0"
