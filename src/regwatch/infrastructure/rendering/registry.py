"""Registry: select renderer by view mode."""

from regwatch.application.ports import DiffRenderer
from regwatch.domain.exceptions import ValidationError
from regwatch.domain.value_objects import DiffViewMode
from regwatch.infrastructure.rendering.split_renderer import SplitRenderer
from regwatch.infrastructure.rendering.unified_renderer import UnifiedRenderer

_RENDERERS: dict[DiffViewMode, DiffRenderer] = {
    DiffViewMode.SPLIT: SplitRenderer(),
    DiffViewMode.UNIFIED: UnifiedRenderer(),
}


def get_renderer(mode: DiffViewMode | str) -> DiffRenderer:
    """Return renderer for mode. Raises ValidationError for unknown modes."""
    try:
        return _RENDERERS[DiffViewMode(mode)]
    except ValueError:
        raise ValidationError(f"Unsupported view mode: {mode}") from None


def supported_modes() -> list[str]:
    """Return view mode names (e.g. for the frontend toggle)."""
    return [m.value for m in DiffViewMode]
