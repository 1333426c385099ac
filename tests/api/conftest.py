"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from regwatch.application.use_cases.change.get_change_detail import GetChangeDetailUseCase
from regwatch.application.use_cases.change.list_recent_changes import (
    ListRecentChangesUseCase,
)
from regwatch.application.use_cases.review.mark_reviewed import MarkReviewedUseCase
from regwatch.application.use_cases.review.review_recorder import ReviewRecorder
from regwatch.infrastructure.diffing import WordDiffer
from regwatch.interfaces.api.app import create_app
from regwatch.interfaces.api.middleware.cors import CORSMiddleware
from regwatch.interfaces.api.resources.changes import (
    ChangeResource,
    ChangeReviewResource,
    ChangesResource,
)
from regwatch.interfaces.api.resources.health import HealthResource

FRONTEND_ORIGIN = "http://localhost:5173"


@pytest.fixture
def app(uow_factory, clock):
    """Falcon ASGI app wired to in-memory fakes."""
    list_recent_changes = ListRecentChangesUseCase(unit_of_work_factory=uow_factory, clock=clock)
    get_change_detail = GetChangeDetailUseCase(
        unit_of_work_factory=uow_factory,
        differ=WordDiffer(),
    )
    mark_reviewed = MarkReviewedUseCase(unit_of_work_factory=uow_factory)

    return create_app(
        changes_resource=ChangesResource(list_recent_changes),
        change_resource=ChangeResource(get_change_detail, ReviewRecorder(mark_reviewed)),
        change_review_resource=ChangeReviewResource(mark_reviewed),
        health_resource=HealthResource(),
        middleware=[CORSMiddleware([FRONTEND_ORIGIN])],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)
