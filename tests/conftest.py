"""Pytest fixtures for RegWatch tests."""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest

from regwatch.domain.entities import Change, ChangeSummary, Regulation
from regwatch.domain.exceptions import RetrievalError
from regwatch.domain.value_objects import ReportingWindow

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=UTC)


# --- Fake clock ---


class FixedClock:
    """Clock frozen at a given moment."""

    def __init__(self, moment: datetime = NOW) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


# --- Fake repositories ---


class FakeChangeRepository:
    """In-memory change repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Change] = {}
        self.mark_calls: list[UUID] = []
        self.fail_reads = False
        self.fail_writes = False

    def add(self, change: Change) -> Change:
        """Helper to seed a change (stands in for the external detector)."""
        self._by_id[change.id] = change
        return change

    async def list_detected_between(
        self, start: datetime, end: datetime
    ) -> list[ChangeSummary]:
        if self.fail_reads:
            raise RetrievalError("store unavailable")
        window = ReportingWindow(start=start, end=end)
        items = [c.summary() for c in self._by_id.values() if window.contains(c.detected_at)]
        items.sort(key=lambda s: s.id)
        items.sort(key=lambda s: s.detected_at, reverse=True)
        return items

    async def get_by_id(self, change_id: UUID) -> Change | None:
        if self.fail_reads:
            raise RetrievalError("store unavailable")
        return self._by_id.get(change_id)

    async def mark_reviewed(self, change_id: UUID) -> bool:
        self.mark_calls.append(change_id)
        if self.fail_writes:
            raise RetrievalError("store unavailable")
        change = self._by_id.get(change_id)
        if not change:
            return False
        reviewed = change.mark_reviewed()
        self._by_id[change_id] = reviewed
        return reviewed is not change

    async def get_summary(self, change_id: UUID) -> ChangeSummary | None:
        if self.fail_reads:
            raise RetrievalError("store unavailable")
        change = self._by_id.get(change_id)
        return change.summary() if change else None


class FakeUnitOfWork:
    """In-memory Unit of Work."""

    def __init__(self) -> None:
        self._changes = FakeChangeRepository()
        self.commits = 0

    @property
    def changes(self) -> FakeChangeRepository:
        return self._changes

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        pass


def make_change(
    *,
    detected_at: datetime = NOW - timedelta(days=1),
    old_content: str = "The fee is 5 dollars.",
    new_content: str = "The fee is 10 dollars.",
    reviewed: bool = False,
    title: str = "Fee Schedule",
    url: str = "https://example.gov/regs/fees",
    change_id: UUID | None = None,
) -> Change:
    """Build a change for a fresh regulation."""
    return Change(
        id=change_id or uuid4(),
        regulation=Regulation(id=uuid4(), title=title, url=url),
        detected_at=detected_at,
        old_content=old_content,
        new_content=new_content,
        reviewed=reviewed,
    )


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Shared in-memory UoW."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(uow: FakeUnitOfWork):
    """UoW factory yielding the same UoW for every operation in a test."""

    @asynccontextmanager
    async def _factory():
        yield uow
        await uow.commit()

    return _factory


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()
