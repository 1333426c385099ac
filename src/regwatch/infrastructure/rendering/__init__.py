"""Diff renderers: presentation strategies over one segment sequence."""

from regwatch.infrastructure.rendering.registry import get_renderer, supported_modes

__all__ = ["get_renderer", "supported_modes"]
