"""Tests for schema validation and selection results."""

import pytest

from cumulus_common.errors import SchemaError
from cumulus_ui.tui.system.models import (
    Action,
    Column,
    DetailField,
    Outcome,
    Schema,
    SelectionResult,
)


pytestmark = pytest.mark.unit_ui


def _schema(columns=None, actions=(), **kwargs):
    if columns is None:
        columns = (
            Column("KEY", 8, lambda item: item["key"], "id"),
            Column("NAME", 10, lambda item: item["name"], "name", flexible=True),
        )
    return Schema(
        columns=columns,
        search_fields=lambda item: (item["name"],),
        detail_fields=lambda item: [DetailField("Name:", item["name"])],
        actions=actions,
        **kwargs,
    )


def test_schema_needs_columns():
    with pytest.raises(SchemaError):
        _schema(columns=())


def test_schema_needs_exactly_one_flexible_column():
    rigid = (Column("A", 5, str), Column("B", 5, str))
    with pytest.raises(SchemaError) as excinfo:
        _schema(columns=rigid)
    assert excinfo.value.context == {"flexible": []}

    loose = (Column("A", 5, str, flexible=True), Column("B", 5, str, flexible=True))
    with pytest.raises(SchemaError):
        _schema(columns=loose)


@pytest.mark.parametrize("key", ["escape", "c-m", "up", "down", "c-c", "c-h"])
def test_actions_cannot_take_reserved_keys(key):
    with pytest.raises(SchemaError, match="reserved"):
        _schema(actions=(Action(key, "boom"),))


def test_action_keys_must_be_unique():
    with pytest.raises(SchemaError, match="bound twice"):
        _schema(actions=(Action("c-s", "start"), Action("c-s", "stop")))


def test_heights_must_be_positive():
    with pytest.raises(SchemaError):
        _schema(visible_height=0)


def test_flexible_index_and_action_lookup():
    schema = _schema(actions=(Action("c-s", "start", "^S:start"),))
    assert schema.flexible_index == 1
    assert schema.action_for_key("c-s").tag == "start"
    assert schema.action_for_key("c-x") is None


def test_legend_lists_default_actions_and_cancel():
    schema = _schema(
        actions=(Action("c-s", "start", "^S:start"), Action("c-x", "stop")),
        default_label="Enter:connect",
    )
    assert schema.legend() == "[Enter:connect] [^S:start] [stop] [Esc:cancel]"


def test_column_style_may_depend_on_item():
    column = Column("STATE", 10, lambda item: item, lambda item: f"tag-{item}")
    assert column.style_for("running") == "tag-running"
    assert column.text_for(3) == "3"


def test_selection_result_helpers():
    committed = SelectionResult.committed("vm", "select", "select")
    assert committed.outcome is Outcome.COMMITTED
    assert committed.is_default_action
    assert not committed.cancelled

    other = SelectionResult.committed("vm", "stop", "connect")
    assert not other.is_default_action

    cancelled = SelectionResult.cancelled_result()
    assert cancelled.cancelled
    assert cancelled.item is None
    assert not cancelled.is_default_action
