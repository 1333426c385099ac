"""Domain value objects."""

from regwatch.domain.value_objects.diff_view_mode import DiffViewMode
from regwatch.domain.value_objects.reporting_window import ReportingWindow
from regwatch.domain.value_objects.review_state import ReviewState
from regwatch.domain.value_objects.segment import Segment, SegmentTag

__all__ = [
    "DiffViewMode",
    "ReportingWindow",
    "ReviewState",
    "Segment",
    "SegmentTag",
]
