"""Tests for box and column sizing."""

import pytest

from cumulus_common.config.settings import SelectorSettings
from cumulus_ui.resources.schemas import vm_schema, vpc_schema
from cumulus_ui.tui.system.layout import (
    CURSOR_WIDTH,
    clamp_content_width,
    compute_layout,
    fixed_row_width,
)


pytestmark = pytest.mark.unit_ui


def _row_width(layout):
    gaps = layout.column_gap * (len(layout.column_widths) - 1)
    return CURSOR_WIDTH + sum(layout.column_widths) + gaps


@pytest.mark.parametrize(
    "terminal_width, expected",
    [(40, 60), (62, 60), (100, 98), (122, 120), (300, 120)],
)
def test_content_width_is_clamped(settings, terminal_width, expected):
    assert clamp_content_width(terminal_width, settings) == expected


@pytest.mark.parametrize("terminal_width", [60, 80, 100, 122, 200])
def test_columns_fill_the_content_width_exactly(terminal_width):
    layout = compute_layout(terminal_width, vpc_schema())
    assert _row_width(layout) == layout.content_width


def test_flexible_column_takes_the_remainder():
    schema = vpc_schema()
    layout = compute_layout(102, schema)
    # 100 content - (3 cursor + 24 id + 18 cidr + 2 gaps of 2)
    assert layout.content_width == 100
    assert layout.column_widths == (24, 18, 51)


def test_flexible_floor_grows_the_box():
    schema = vm_schema()
    settings = SelectorSettings()
    layout = compute_layout(62, schema, settings)
    fixed = fixed_row_width(schema, settings)

    assert layout.column_widths[schema.flexible_index] == settings.min_flex_width
    assert layout.content_width == fixed + settings.min_flex_width
    assert _row_width(layout) == layout.content_width


def test_outer_width_adds_the_borders():
    layout = compute_layout(100, vpc_schema())
    assert layout.outer_width == layout.content_width + 2


def test_layout_is_a_pure_function_of_width():
    schema = vm_schema()
    assert compute_layout(90, schema) == compute_layout(90, schema)
    assert compute_layout(140, schema) == compute_layout(500, schema)


def test_custom_bounds_are_honoured():
    settings = SelectorSettings(min_width=40, max_width=70)
    layout = compute_layout(200, vpc_schema(), settings)
    assert layout.content_width == 70
