"""Falcon ASGI application."""

import falcon
import falcon.asgi
import structlog
from falcon.asgi import App

from regwatch.interfaces.api.resources.changes import (
    ChangeResource,
    ChangeReviewResource,
    ChangesResource,
)
from regwatch.interfaces.api.resources.health import HealthResource

logger = structlog.get_logger()


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Catch-all: log with traceback, answer 500."""
    logger.exception("Unhandled error", method=req.method, path=req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    changes_resource: ChangesResource,
    change_resource: ChangeResource,
    change_review_resource: ChangeReviewResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/changes", changes_resource)
    app.add_route("/v1/changes/{change_id}", change_resource)
    app.add_route("/v1/changes/{change_id}/review", change_review_resource)
    return app
