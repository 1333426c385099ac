"""List recent changes use case."""

import structlog

from regwatch.application.dto.change_dto import RecentChangesOutput
from regwatch.application.ports import Clock
from regwatch.domain.value_objects import ReportingWindow

logger = structlog.get_logger()

DEFAULT_WINDOW_DAYS = 7


class ListRecentChangesUseCase:
    """List changes detected in the trailing reporting window."""

    def __init__(
        self,
        unit_of_work_factory: type,
        clock: Clock,
        window_days: int = DEFAULT_WINDOW_DAYS,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock
        self._window_days = window_days

    async def execute(self) -> RecentChangesOutput:
        """List changes newest first. The window ends at the clock's now."""
        window = ReportingWindow.trailing(self._clock.now(), self._window_days)
        async with self._uow_factory() as uow:
            items = await uow.changes.list_detected_between(window.start, window.end)

        output = RecentChangesOutput(
            items=items,
            window_start=window.start,
            window_end=window.end,
        )
        logger.debug(
            "Listed recent changes",
            count=len(items),
            unreviewed=output.unreviewed_count,
            window_start=window.start.isoformat(),
        )
        return output
