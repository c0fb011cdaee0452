"""Box and column sizing for the selector.

Every fixed column gets its schema width and the single flexible column takes
what is left, so a row always fills the box exactly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cumulus_common.config.settings import SelectorSettings
from cumulus_ui.tui.system.models import Schema

CURSOR_WIDTH = 3
BORDER_WIDTH = 2


@dataclass(frozen=True)
class Layout:
    content_width: int
    column_widths: tuple[int, ...]
    column_gap: int = 2

    @property
    def outer_width(self) -> int:
        return self.content_width + BORDER_WIDTH


def clamp_content_width(terminal_width: int, settings: SelectorSettings) -> int:
    width = terminal_width - BORDER_WIDTH
    return max(settings.min_width, min(width, settings.max_width))


def fixed_row_width(schema: Schema[Any], settings: SelectorSettings) -> int:
    """Cursor, fixed columns and inter-column gaps; everything but the flexible column."""
    gaps = settings.column_gap * (len(schema.columns) - 1)
    fixed = sum(col.min_width for col in schema.columns if not col.flexible)
    return CURSOR_WIDTH + fixed + gaps


def compute_layout(
    terminal_width: int,
    schema: Schema[Any],
    settings: SelectorSettings | None = None,
) -> Layout:
    resolved = settings or SelectorSettings()
    content_width = clamp_content_width(terminal_width, resolved)
    fixed = fixed_row_width(schema, resolved)
    flex_width = content_width - fixed
    if flex_width < resolved.min_flex_width:
        # Grow the box so rows still fill it exactly.
        flex_width = resolved.min_flex_width
        content_width = fixed + flex_width

    widths = tuple(
        flex_width if col.flexible else col.min_width for col in schema.columns
    )
    return Layout(
        content_width=content_width,
        column_widths=widths,
        column_gap=resolved.column_gap,
    )
