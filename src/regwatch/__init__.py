"""RegWatch - regulatory change tracking with word-level diff review."""

__version__ = "0.1.0"
