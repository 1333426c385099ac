"""Application entry point and composition root."""

import logging

import structlog

from regwatch import __version__
from regwatch.application.use_cases.change.get_change_detail import GetChangeDetailUseCase
from regwatch.application.use_cases.change.list_recent_changes import (
    ListRecentChangesUseCase,
)
from regwatch.application.use_cases.review.mark_reviewed import MarkReviewedUseCase
from regwatch.application.use_cases.review.review_recorder import ReviewRecorder
from regwatch.config import Settings, get_settings
from regwatch.infrastructure.clock.system_clock import SystemClock
from regwatch.infrastructure.diffing import WordDiffer
from regwatch.infrastructure.persistence.postgres.connection import create_pool
from regwatch.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from regwatch.interfaces.api.app import create_app
from regwatch.interfaces.api.middleware.cors import CORSMiddleware
from regwatch.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from regwatch.interfaces.api.resources.changes import (
    ChangeResource,
    ChangeReviewResource,
    ChangesResource,
)
from regwatch.interfaces.api.resources.health import HealthResource


def _get_log_level(settings: Settings) -> int:
    return logging.getLevelNamesMapping().get(settings.log_level.upper(), logging.INFO)


def configure_logging(settings: Settings) -> None:
    """Configure structlog renderer and level from settings."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer()
            if settings.log_format == "json"
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level(settings)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def create_regwatch_app(settings: Settings | None = None):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings)
    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    list_recent_changes = ListRecentChangesUseCase(
        unit_of_work_factory=uow_factory,
        clock=SystemClock(),
        window_days=settings.reporting_window_days,
    )
    get_change_detail = GetChangeDetailUseCase(
        unit_of_work_factory=uow_factory,
        differ=WordDiffer(timeout=settings.diff_timeout_seconds),
    )
    mark_reviewed = MarkReviewedUseCase(unit_of_work_factory=uow_factory)

    return create_app(
        changes_resource=ChangesResource(list_recent_changes),
        change_resource=ChangeResource(get_change_detail, ReviewRecorder(mark_reviewed)),
        change_review_resource=ChangeReviewResource(mark_reviewed),
        health_resource=HealthResource(pool),
        middleware=[
            CORSMiddleware(settings.cors_origin_list),
            PoolLifespanMiddleware(pool),
        ],
    )


def main() -> None:
    """CLI entry point - run the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    app = create_regwatch_app(settings)
    structlog.get_logger().info(
        "Starting RegWatch",
        version=__version__,
        environment=settings.environment,
    )
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
