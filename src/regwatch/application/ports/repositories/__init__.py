"""Repository ports."""

from regwatch.application.ports.repositories.change_repository import ChangeRepository

__all__ = [
    "ChangeRepository",
]
