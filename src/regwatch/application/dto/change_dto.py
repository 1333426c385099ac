"""Change DTOs."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from uuid import UUID

from regwatch.domain.entities import ChangeSummary
from regwatch.domain.value_objects import Segment, SegmentTag


class ListingState(StrEnum):
    """Outcome of a successful listing query."""

    ALL_CURRENT = "all_current"
    UPDATES_AVAILABLE = "updates_available"


@dataclass
class RecentChangesOutput:
    """Changes detected within the current reporting window."""

    items: list[ChangeSummary]
    window_start: datetime
    window_end: datetime

    @property
    def unreviewed_count(self) -> int:
        return sum(1 for c in self.items if not c.reviewed)

    @property
    def state(self) -> ListingState:
        if not self.items:
            return ListingState.ALL_CURRENT
        return ListingState.UPDATES_AVAILABLE


@dataclass
class DiffStats:
    """Token counts for a diff."""

    added_tokens: int = 0
    removed_tokens: int = 0
    unchanged_tokens: int = 0

    @classmethod
    def from_segments(cls, segments: list[Segment]) -> "DiffStats":
        """Count non-whitespace tokens per tag."""
        stats = cls()
        for seg in segments:
            n = len(seg.text.split())
            if seg.tag == SegmentTag.ADDED:
                stats.added_tokens += n
            elif seg.tag == SegmentTag.REMOVED:
                stats.removed_tokens += n
            else:
                stats.unchanged_tokens += n
        return stats

    @property
    def has_changes(self) -> bool:
        return bool(self.added_tokens or self.removed_tokens)


@dataclass
class ChangeDetailOutput:
    """Output DTO for change detail with computed diff."""

    id: UUID
    regulation_id: UUID
    regulation_title: str
    regulation_url: str
    detected_at: datetime
    old_content: str
    new_content: str
    reviewed: bool
    is_new_regulation: bool = False
    segments: list[Segment] = field(default_factory=list)
    stats: DiffStats = field(default_factory=DiffStats)

