"""Reporting window - trailing interval over detection timestamps."""

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class ReportingWindow:
    """Closed interval [start, end] used to filter changes at query time."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start.tzinfo is None or self.end.tzinfo is None:
            raise ValueError("Reporting window bounds must be timezone-aware")
        if self.start > self.end:
            raise ValueError("Reporting window start must not be after end")

    @classmethod
    def trailing(cls, now: datetime, days: int) -> "ReportingWindow":
        """Window of ``days`` days ending at ``now``."""
        if days <= 0:
            raise ValueError("Reporting window must span at least one day")
        return cls(start=now - timedelta(days=days), end=now)

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end
