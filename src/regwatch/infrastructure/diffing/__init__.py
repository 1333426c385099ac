"""Diff engine: word-level edit scripts between text snapshots."""

from regwatch.infrastructure.diffing.word_differ import (
    WordDiffer,
    new_text,
    old_text,
    tokenize,
)

__all__ = ["WordDiffer", "new_text", "old_text", "tokenize"]
