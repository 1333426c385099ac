"""Diff segment - contiguous run of token text with a tag."""

from dataclasses import dataclass
from enum import StrEnum


class SegmentTag(StrEnum):
    """How a segment transforms prior text into current text."""

    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class Segment:
    """Tagged text run produced by the diff engine."""

    tag: SegmentTag
    text: str

    @property
    def in_old(self) -> bool:
        return self.tag != SegmentTag.ADDED

    @property
    def in_new(self) -> bool:
        return self.tag != SegmentTag.REMOVED
