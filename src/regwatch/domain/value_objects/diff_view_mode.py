"""Rendering modes for a change diff."""

from enum import StrEnum


class DiffViewMode(StrEnum):
    """Supported diff presentations."""

    SPLIT = "split"
    UNIFIED = "unified"
