"""Change repository port."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from regwatch.domain.entities import Change, ChangeSummary


class ChangeRepository(Protocol):
    """Port for change store access."""

    async def list_detected_between(
        self, start: datetime, end: datetime
    ) -> list[ChangeSummary]:
        """Changes detected in [start, end], newest first, ties by id ascending."""
        ...

    async def get_by_id(self, change_id: UUID) -> Change | None: ...

    async def mark_reviewed(self, change_id: UUID) -> bool:
        """Set reviewed flag. Returns True only if the flag was false before."""
        ...

    async def get_summary(self, change_id: UUID) -> ChangeSummary | None:
        """List projection of one change, without content bodies."""
        ...
