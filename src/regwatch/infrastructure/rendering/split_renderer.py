"""Split view: prior and current text side by side, unannotated."""

from collections.abc import Sequence
from typing import Any

from regwatch.domain.value_objects import DiffViewMode, Segment
from regwatch.infrastructure.diffing import new_text, old_text

NO_PREVIOUS_CONTENT = "No previous content"


class SplitRenderer:
    """Render both sides reconstructed from the segments."""

    def render(self, segments: Sequence[Segment]) -> dict[str, Any]:
        old = old_text(segments)
        result: dict[str, Any] = {
            "mode": DiffViewMode.SPLIT.value,
            "old": old or None,
            "new": new_text(segments),
        }
        if not old:
            result["old_placeholder"] = NO_PREVIOUS_CONTENT
        return result
