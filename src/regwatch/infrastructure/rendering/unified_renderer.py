"""Unified view: one pane with added/removed runs marked."""

from collections.abc import Sequence
from html import escape
from typing import Any

from regwatch.domain.value_objects import DiffViewMode, Segment, SegmentTag

_HTML_TAGS = {
    SegmentTag.ADDED: "ins",
    SegmentTag.REMOVED: "del",
}


def segments_to_html(segments: Sequence[Segment]) -> str:
    """Inline HTML: <del> for removed text, <ins> for added text."""
    parts: list[str] = []
    for seg in segments:
        text = escape(seg.text)
        tag = _HTML_TAGS.get(seg.tag)
        parts.append(f"<{tag}>{text}</{tag}>" if tag else text)
    return "".join(parts)


class UnifiedRenderer:
    """Render segments in order with their tags."""

    def render(self, segments: Sequence[Segment]) -> dict[str, Any]:
        return {
            "mode": DiffViewMode.UNIFIED.value,
            "segments": [{"tag": s.tag.value, "text": s.text} for s in segments],
            "html": segments_to_html(segments),
        }
