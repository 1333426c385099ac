"""System clock implementation."""

from datetime import UTC, datetime


class SystemClock:
    """Clock backed by the host's wall time (UTC)."""

    def now(self) -> datetime:
        return datetime.now(UTC)
