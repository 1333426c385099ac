"""Differ port - token-level text comparison."""

from collections.abc import Iterator
from typing import Protocol

from regwatch.domain.value_objects import Segment


class Differ(Protocol):
    """Port for computing an edit script between two texts."""

    def diff(self, old_text: str, new_text: str) -> Iterator[Segment]: ...
