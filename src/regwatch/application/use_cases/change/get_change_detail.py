"""Get change detail use case."""

import asyncio
from uuid import UUID

from regwatch.application.dto.change_dto import ChangeDetailOutput, DiffStats
from regwatch.application.ports import Differ
from regwatch.domain.exceptions import NotFound
from regwatch.domain.value_objects import Segment


def _compute_segments(differ: Differ, old_text: str, new_text: str) -> list[Segment]:
    """Run the diff to completion (sync, run in executor)."""
    return list(differ.diff(old_text, new_text))


class GetChangeDetailUseCase:
    """Get change with its old/new content pair and computed diff."""

    def __init__(
        self,
        unit_of_work_factory: type,
        differ: Differ,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._differ = differ

    async def execute(self, change_id: UUID) -> ChangeDetailOutput:
        """Get change by id. Read-only; does not touch review state.

        The diff is CPU-bound and runs in the default executor so other
        requests keep being served.
        """
        async with self._uow_factory() as uow:
            change = await uow.changes.get_by_id(change_id)
            if not change:
                raise NotFound("Change", str(change_id))

        loop = asyncio.get_running_loop()
        segments = await loop.run_in_executor(
            None, _compute_segments, self._differ, change.old_content, change.new_content
        )
        return ChangeDetailOutput(
            id=change.id,
            regulation_id=change.regulation.id,
            regulation_title=change.regulation.title,
            regulation_url=change.regulation.url,
            detected_at=change.detected_at,
            old_content=change.old_content,
            new_content=change.new_content,
            reviewed=change.reviewed,
            is_new_regulation=change.is_new_regulation,
            segments=segments,
            stats=DiffStats.from_segments(segments),
        )
