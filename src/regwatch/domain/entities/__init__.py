"""Domain entities."""

from regwatch.domain.entities.change import Change, ChangeSummary
from regwatch.domain.entities.regulation import Regulation

__all__ = [
    "Change",
    "ChangeSummary",
    "Regulation",
]
