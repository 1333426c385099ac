"""Review side effect of viewing a change detail."""

from uuid import UUID

import structlog

from regwatch.application.use_cases.review.mark_reviewed import MarkReviewedUseCase
from regwatch.domain.exceptions import RegWatchError

logger = structlog.get_logger()


class ReviewRecorder:
    """Fire-and-forget wrapper around MarkReviewedUseCase.

    Runs after a detail read has already succeeded. Failures are logged and
    absorbed so that viewing content never fails because of the review
    mutation; the next visit retries implicitly.
    """

    def __init__(self, mark_reviewed: MarkReviewedUseCase) -> None:
        self._mark_reviewed = mark_reviewed

    async def record(self, change_id: UUID) -> None:
        try:
            await self._mark_reviewed.execute(change_id)
        except RegWatchError as e:
            logger.warning(
                "Failed to mark change reviewed",
                change_id=str(change_id),
                error=str(e),
            )
        except Exception:
            logger.exception(
                "Unexpected error marking change reviewed",
                change_id=str(change_id),
            )
