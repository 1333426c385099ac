"""Regulation entity."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Regulation:
    """Externally monitored regulatory document."""

    id: UUID
    title: str
    url: str
