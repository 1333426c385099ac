"""Application ports - interfaces for external adapters."""

from regwatch.application.ports.clock import Clock
from regwatch.application.ports.diff_renderer import DiffRenderer
from regwatch.application.ports.differ import Differ
from regwatch.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "Clock",
    "DiffRenderer",
    "Differ",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
