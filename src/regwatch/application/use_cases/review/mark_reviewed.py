"""Mark reviewed use case."""

from uuid import UUID

import structlog

from regwatch.domain.exceptions import NotFound

logger = structlog.get_logger()


class MarkReviewedUseCase:
    """Move a change to Reviewed. Idempotent; Reviewed is terminal."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, change_id: UUID) -> bool:
        """Mark change reviewed. Returns True if this call performed the transition.

        Already reviewed changes are not written again. The store update is
        conditional as well, so concurrent callers see exactly one transition.
        """
        async with self._uow_factory() as uow:
            summary = await uow.changes.get_summary(change_id)
            if not summary:
                raise NotFound("Change", str(change_id))
            current = summary.review_state
            if current.mark_reviewed() == current:
                return False
            transitioned = await uow.changes.mark_reviewed(change_id)

        if transitioned:
            logger.info("Change marked reviewed", change_id=str(change_id))
        return transitioned
