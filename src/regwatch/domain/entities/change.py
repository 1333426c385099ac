"""Change entity - transition between two consecutive snapshots."""

from dataclasses import dataclass, replace
from datetime import datetime
from uuid import UUID

from regwatch.domain.entities.regulation import Regulation
from regwatch.domain.value_objects import ReviewState


@dataclass(frozen=True)
class Change:
    """Detected change with its prior/current content pair.

    Content never changes after detection. Review produces a new value
    through ``mark_reviewed``.
    """

    id: UUID
    regulation: Regulation
    detected_at: datetime
    old_content: str
    new_content: str
    reviewed: bool = False

    @property
    def review_state(self) -> ReviewState:
        return ReviewState.from_flag(self.reviewed)

    @property
    def is_new_regulation(self) -> bool:
        """True when there is no prior snapshot content."""
        return self.old_content == ""

    def mark_reviewed(self) -> "Change":
        """Return the reviewed version of this change (self if already reviewed)."""
        state = self.review_state.mark_reviewed()
        if state == self.review_state:
            return self
        return replace(self, reviewed=state.is_reviewed)

    def summary(self) -> "ChangeSummary":
        return ChangeSummary(
            id=self.id,
            regulation_id=self.regulation.id,
            regulation_title=self.regulation.title,
            regulation_url=self.regulation.url,
            detected_at=self.detected_at,
            reviewed=self.reviewed,
        )


@dataclass(frozen=True)
class ChangeSummary:
    """List projection of a change - metadata only, no content bodies."""

    id: UUID
    regulation_id: UUID
    regulation_title: str
    regulation_url: str
    detected_at: datetime
    reviewed: bool

    @property
    def review_state(self) -> ReviewState:
        return ReviewState.from_flag(self.reviewed)
