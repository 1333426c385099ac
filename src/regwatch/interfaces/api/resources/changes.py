"""Change API resources."""

from uuid import UUID

import falcon.asgi
import structlog

from regwatch.application.dto.change_dto import ChangeDetailOutput, RecentChangesOutput
from regwatch.application.use_cases.change.get_change_detail import GetChangeDetailUseCase
from regwatch.application.use_cases.change.list_recent_changes import (
    ListRecentChangesUseCase,
)
from regwatch.application.use_cases.review.mark_reviewed import MarkReviewedUseCase
from regwatch.application.use_cases.review.review_recorder import ReviewRecorder
from regwatch.domain.entities import ChangeSummary
from regwatch.domain.exceptions import NotFound, RetrievalError, ValidationError
from regwatch.domain.value_objects import DiffViewMode
from regwatch.infrastructure.rendering import get_renderer, supported_modes

logger = structlog.get_logger()


class ChangesResource:
    """GET /v1/changes - changes detected in the current reporting window."""

    def __init__(self, list_recent_changes: ListRecentChangesUseCase) -> None:
        self._list_recent_changes = list_recent_changes

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List recent changes. Empty window is a success with state all_current."""
        try:
            result = await self._list_recent_changes.execute()
        except RetrievalError as e:
            logger.error("Failed to load changes", error=str(e))
            resp.status = falcon.HTTP_503
            resp.media = {
                "error": "Failed to load updates. Please try again later.",
                "retryable": True,
            }
            return

        resp.media = _listing_to_dict(result)
        resp.status = falcon.HTTP_200


class ChangeResource:
    """GET /v1/changes/{change_id} - change detail with rendered diff.

    A successful read schedules the review mutation to run after the
    response is sent; its outcome never affects this response.
    """

    def __init__(
        self,
        get_change_detail: GetChangeDetailUseCase,
        review_recorder: ReviewRecorder,
    ) -> None:
        self._get_change_detail = get_change_detail
        self._review_recorder = review_recorder

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        change_id: str,
    ) -> None:
        """Get change detail. Query param view=split|unified (default split)."""
        try:
            cid = UUID(change_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid UUID"}
            return

        view = req.get_param("view") or DiffViewMode.SPLIT.value
        try:
            renderer = get_renderer(view)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e), "supported_views": supported_modes()}
            return

        try:
            detail = await self._get_change_detail.execute(cid)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Change not found"}
            return
        except RetrievalError as e:
            logger.error("Failed to load change details", change_id=change_id, error=str(e))
            resp.status = falcon.HTTP_503
            resp.media = {"error": "Failed to load change details"}
            return

        resp.media = _detail_to_dict(detail, renderer.render(detail.segments))
        resp.status = falcon.HTTP_200

        async def record_review() -> None:
            await self._review_recorder.record(cid)

        resp.schedule(record_review)


class ChangeReviewResource:
    """POST /v1/changes/{change_id}/review - explicit idempotent review mark."""

    def __init__(self, mark_reviewed: MarkReviewedUseCase) -> None:
        self._mark_reviewed = mark_reviewed

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        change_id: str,
    ) -> None:
        """Mark change reviewed. Repeated calls succeed with transitioned=false."""
        try:
            cid = UUID(change_id)
        except ValueError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid UUID"}
            return

        try:
            transitioned = await self._mark_reviewed.execute(cid)
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Change not found"}
            return
        except RetrievalError as e:
            logger.error("Failed to mark change reviewed", change_id=change_id, error=str(e))
            resp.status = falcon.HTTP_503
            resp.media = {"error": "Failed to mark change reviewed", "retryable": True}
            return

        resp.media = {"id": str(cid), "reviewed": True, "transitioned": transitioned}
        resp.status = falcon.HTTP_200


def _summary_to_dict(s: ChangeSummary) -> dict:
    return {
        "change_id": str(s.id),
        "regulation_id": str(s.regulation_id),
        "regulation_title": s.regulation_title,
        "regulation_url": s.regulation_url,
        "detected_at": s.detected_at.isoformat(),
        "reviewed": s.reviewed,
    }


def _listing_to_dict(result: RecentChangesOutput) -> dict:
    return {
        "items": [_summary_to_dict(s) for s in result.items],
        "count": len(result.items),
        "unreviewed_count": result.unreviewed_count,
        "state": result.state.value,
        "window": {
            "start": result.window_start.isoformat(),
            "end": result.window_end.isoformat(),
        },
    }


def _detail_to_dict(d: ChangeDetailOutput, rendered: dict) -> dict:
    return {
        "change_id": str(d.id),
        "regulation_id": str(d.regulation_id),
        "regulation_title": d.regulation_title,
        "regulation_url": d.regulation_url,
        "detected_at": d.detected_at.isoformat(),
        "old_content": d.old_content,
        "new_content": d.new_content,
        # Viewing is what marks a change reviewed.
        "reviewed": True,
        "reviewed_before_view": d.reviewed,
        "is_new_regulation": d.is_new_regulation,
        "stats": {
            "added_tokens": d.stats.added_tokens,
            "removed_tokens": d.stats.removed_tokens,
            "unchanged_tokens": d.stats.unchanged_tokens,
            "has_changes": d.stats.has_changes,
        },
        "diff": rendered,
    }
