"""Project selector state into a bordered frame of Rich text lines.

The frame always has the same height for a given schema and every boxed line
is exactly ``content_width + 2`` terminal cells wide, whatever the content.
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.cells import cell_len, set_cell_size
from rich.text import Text

from cumulus_ui.tui.core.theme import DEFAULT_THEME, Theme
from cumulus_ui.tui.system.models import DetailField, Schema
from cumulus_ui.tui.system.state import SelectorState

UNDERLINE_WIDTH = 20

_CONTROL_TRANSLATION = {code: " " for code in range(32)}
_CONTROL_TRANSLATION[127] = " "


def clean(value: Any) -> str:
    """Render a field value as single-line text."""
    if value is None:
        return ""
    return str(value).translate(_CONTROL_TRANSLATION)


def fit(value: str, width: int, ellipsis: str = "…") -> str:
    """Pad or cut ``value`` to exactly ``width`` cells, marking cuts with ``ellipsis``."""
    if width <= 0:
        return ""
    length = cell_len(value)
    if length <= width:
        return value + " " * (width - length)
    marker_width = cell_len(ellipsis)
    if width <= marker_width:
        return set_cell_size(value, width)
    return set_cell_size(value, width - marker_width) + ellipsis


def fit_tail(value: str, width: int) -> str:
    """Like :func:`fit` but keeps the end of ``value`` visible (input lines)."""
    if width <= 0:
        return ""
    while cell_len(value) > width:
        value = value[1:]
    return value + " " * (width - cell_len(value))


def center(value: str, width: int, ellipsis: str = "…") -> str:
    length = cell_len(value)
    if length >= width:
        return fit(value, width, ellipsis)
    left = (width - length) // 2
    return fit(" " * left + value, width, ellipsis)


class FrameRenderer:
    """Renders a :class:`SelectorState` with a fixed theme."""

    def __init__(self, theme: Theme = DEFAULT_THEME) -> None:
        self.theme = theme

    def render(self, state: SelectorState[Any], schema: Schema[Any]) -> list[Text]:
        width = state.layout.content_width
        lines: list[Text] = [self._edge(width, "top")]
        lines.append(self._search_line(state, width))
        lines.append(self._blank(width))
        lines.extend(self._list_rows(state, schema))
        lines.append(self._blank(width))
        lines.append(self._edge(width, "separator"))
        lines.extend(self._detail_panel(state, schema))
        lines.append(self._edge(width, "bottom"))
        lines.append(self.status_line(state, schema))
        return lines

    # Box pieces

    def _edge(self, width: int, kind: str) -> Text:
        glyphs = self.theme.glyphs
        left, right = {
            "top": (glyphs.top_left, glyphs.top_right),
            "separator": (glyphs.left_tee, glyphs.right_tee),
            "bottom": (glyphs.bottom_left, glyphs.bottom_right),
        }[kind]
        return Text(left + glyphs.horizontal * width + right, style=self.theme.style("border"))

    def _boxed(self, inner: Text) -> Text:
        border = self.theme.style("border")
        line = Text(self.theme.glyphs.vertical, style=border)
        line.append_text(inner)
        line.append(self.theme.glyphs.vertical, style=border)
        return line

    def _blank(self, width: int) -> Text:
        return self._boxed(Text(" " * width))

    def _padded(self, value: str, width: int, tag: str) -> Text:
        return self._boxed(Text(fit(value, width, self.theme.ellipsis), style=self.theme.style(tag)))

    # Search and list

    def _search_line(self, state: SelectorState[Any], width: int) -> Text:
        text = fit_tail(self.theme.prompt + clean(state.query), width)
        return self._boxed(Text(text, style=self.theme.style("name")))

    def _list_rows(self, state: SelectorState[Any], schema: Schema[Any]) -> list[Text]:
        width = state.layout.content_width
        rows: list[Text] = []
        for index in range(state.scroll_offset, state.scroll_offset + state.visible_height):
            if index < len(state.filtered):
                rows.append(self._boxed(self.render_row(state, schema, index)))
            else:
                rows.append(self._blank(width))
        return rows

    def render_row(self, state: SelectorState[Any], schema: Schema[Any], index: int) -> Text:
        """Render one list row without its border; exactly ``content_width`` cells."""
        theme = self.theme
        layout = state.layout
        item = state.filtered[index]
        selected = index == state.cursor

        line = Text(" ")
        line.append(theme.cursor_glyph if selected else " ", style=theme.style("cursor"))
        line.append(theme.marker_glyph if schema.marker(item) else " ", style=theme.style("current"))

        gap = " " * layout.column_gap
        for position, (column, col_width) in enumerate(zip(schema.columns, layout.column_widths)):
            if position:
                line.append(gap)
            cell = fit(clean(column.text_for(item)), col_width, theme.ellipsis)
            line.append(cell, style=theme.style(column.style_for(item)))

        shortfall = layout.content_width - line.cell_len
        if shortfall > 0:
            line.append(" " * shortfall)
        return line

    # Detail panel

    def _detail_panel(self, state: SelectorState[Any], schema: Schema[Any]) -> list[Text]:
        width = state.layout.content_width
        lines = [
            self._padded(f" {schema.title}", width, "header"),
            self._padded(" " + self.theme.glyphs.horizontal * UNDERLINE_WIDTH, width, "muted"),
        ]
        item = state.selected_item
        if item is None:
            middle = (schema.detail_height - 1) // 2
            for row in range(schema.detail_height):
                if row == middle:
                    text = center(schema.empty_message, width, self.theme.ellipsis)
                    lines.append(self._boxed(Text(text, style=self.theme.style("muted"))))
                else:
                    lines.append(self._blank(width))
        else:
            fields = list(schema.detail_fields(item))[: schema.detail_height]
            for detail in fields:
                lines.append(self._boxed(self.render_detail(detail, width, schema.detail_label_width)))
            for _ in range(schema.detail_height - len(fields)):
                lines.append(self._blank(width))
        lines.append(self._blank(width))
        return lines

    def render_detail(self, detail: DetailField, width: int, label_width: int) -> Text:
        label = fit(f" {clean(detail.label)}", label_width + 1, self.theme.ellipsis)
        value = fit(clean(detail.value), width - cell_len(label), self.theme.ellipsis)
        line = Text(label, style=self.theme.style("muted"))
        line.append(value, style=self.theme.style(detail.style))
        return line

    # Status bar

    def status_line(self, state: SelectorState[Any], schema: Schema[Any]) -> Text:
        outer = state.layout.outer_width
        count = f"  {len(state.filtered)}/{len(state.items)} {schema.noun}"
        legend = schema.legend()
        padding = outer - cell_len(count) - cell_len(legend)
        if padding >= 1:
            line = Text(count)
            line.append(" " * padding)
            line.append(legend, style=self.theme.style("hint"))
            return line
        count = fit(count, outer, self.theme.ellipsis)
        room = outer - cell_len(count.rstrip()) - 1
        if room <= 0:
            return Text(count)
        line = Text(count.rstrip() + " ")
        line.append(fit(legend, room, self.theme.ellipsis), style=self.theme.style("hint"))
        return line


def render_frame(
    state: SelectorState[Any],
    schema: Schema[Any],
    theme: Theme = DEFAULT_THEME,
) -> list[Text]:
    return FrameRenderer(theme).render(state, schema)


def frame_plain(lines: Sequence[Text]) -> list[str]:
    return [line.plain for line in lines]
