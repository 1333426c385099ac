"""Diff renderer port - presentation strategy over diff segments."""

from collections.abc import Sequence
from typing import Any, Protocol

from regwatch.domain.value_objects import Segment


class DiffRenderer(Protocol):
    """Port for turning diff segments into a serializable view."""

    def render(self, segments: Sequence[Segment]) -> dict[str, Any]: ...
