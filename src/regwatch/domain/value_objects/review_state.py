"""Review state machine for changes."""

from enum import StrEnum


class ReviewState(StrEnum):
    """Unreviewed -> Reviewed. Reviewed is terminal."""

    UNREVIEWED = "unreviewed"
    REVIEWED = "reviewed"

    @classmethod
    def from_flag(cls, reviewed: bool) -> "ReviewState":
        return cls.REVIEWED if reviewed else cls.UNREVIEWED

    @property
    def is_reviewed(self) -> bool:
        return self is ReviewState.REVIEWED

    def mark_reviewed(self) -> "ReviewState":
        """Apply MarkReviewed. Idempotent: Reviewed stays Reviewed."""
        return ReviewState.REVIEWED
