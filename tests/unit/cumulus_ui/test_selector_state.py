"""Tests for the selector state machine."""

import pytest

from cumulus_common.errors import EmptyInputError
from cumulus_ui.resources.schemas import vm_schema
from cumulus_ui.tui.system.events import (
    ActionInvoked,
    Backspace,
    Cancel,
    CharacterInput,
    Commit,
    MoveDown,
    MoveUp,
    Resize,
)
from cumulus_ui.tui.system.layout import compute_layout
from cumulus_ui.tui.system.models import Outcome
from cumulus_ui.tui.system.state import Phase, Selector


pytestmark = pytest.mark.unit_ui


def _type(selector, text):
    for char in text:
        selector.dispatch(CharacterInput(char))


def _assert_cursor_in_window(state):
    if state.filtered:
        assert 0 <= state.cursor < len(state.filtered)
    else:
        assert state.cursor == 0
    assert state.scroll_offset >= 0
    assert state.scroll_offset <= state.cursor <= state.scroll_offset + state.visible_height - 1


def test_empty_items_are_rejected():
    with pytest.raises(EmptyInputError, match="No VMs available"):
        Selector([], vm_schema())


def test_initial_state(vms):
    selector = Selector(vms, vm_schema())
    state = selector.state
    assert state.phase is Phase.BROWSING
    assert state.cursor == 0
    assert state.scroll_offset == 0
    assert state.query == ""
    assert list(state.filtered) == vms
    assert selector.result is None


def test_moving_past_the_window_scrolls(vms):
    selector = Selector(vms, vm_schema())
    for _ in range(9):
        selector.dispatch(MoveDown())
        _assert_cursor_in_window(selector.state)
    assert selector.state.cursor == 9
    assert selector.state.scroll_offset == 2


def test_moving_up_at_the_top_is_a_no_op(vms):
    selector = Selector(vms, vm_schema())
    selector.dispatch(MoveUp())
    assert selector.state.cursor == 0
    assert selector.state.scroll_offset == 0


def test_moving_down_stops_at_the_last_item(vms):
    selector = Selector(vms, vm_schema())
    for _ in range(40):
        selector.dispatch(MoveDown())
    assert selector.state.cursor == len(vms) - 1
    _assert_cursor_in_window(selector.state)


def test_moving_up_scrolls_back(vms):
    selector = Selector(vms, vm_schema())
    for _ in range(12):
        selector.dispatch(MoveDown())
    for _ in range(8):
        selector.dispatch(MoveUp())
        _assert_cursor_in_window(selector.state)
    assert selector.state.cursor == 4
    assert selector.state.scroll_offset == 4


def test_typing_filters_and_clamps_the_cursor(vms):
    selector = Selector(vms, vm_schema())
    for _ in range(15):
        selector.dispatch(MoveDown())

    _type(selector, "web-0")
    state = selector.state
    assert len(state.filtered) == 9
    assert state.cursor == 8
    _assert_cursor_in_window(state)

    _type(selector, "3")
    assert [vm.name for vm in state.filtered] == ["web-03"]
    assert state.cursor == 0
    assert state.scroll_offset == 0


def test_backspace_widens_the_filter(vms):
    selector = Selector(vms, vm_schema())
    _type(selector, "web-03")
    selector.dispatch(Backspace())
    assert selector.state.query == "web-0"
    assert len(selector.state.filtered) == 9


def test_backspace_on_empty_query_changes_nothing(vms):
    selector = Selector(vms, vm_schema())
    selector.dispatch(MoveDown())
    selector.dispatch(Backspace())
    assert selector.state.query == ""
    assert selector.state.cursor == 1


def test_commit_uses_the_default_action(vms):
    selector = Selector(vms, vm_schema())
    selector.dispatch(MoveDown())
    selector.dispatch(Commit())

    result = selector.result
    assert result.outcome is Outcome.COMMITTED
    assert result.item is vms[1]
    assert result.action == "connect"
    assert result.is_default_action
    assert selector.state.phase is Phase.COMMITTED


def test_action_commits_with_its_tag(vms):
    selector = Selector(vms, vm_schema())
    selector.dispatch(ActionInvoked("stop"))
    assert selector.result.item is vms[0]
    assert selector.result.action == "stop"
    assert not selector.result.is_default_action


def test_commit_with_no_matches_keeps_browsing(vms):
    selector = Selector(vms, vm_schema())
    _type(selector, "zzz")
    selector.dispatch(Commit())
    selector.dispatch(ActionInvoked("start"))
    assert selector.state.phase is Phase.BROWSING
    assert selector.result is None


def test_cancel_is_final(vms):
    selector = Selector(vms, vm_schema())
    selector.dispatch(Cancel())
    selector.dispatch(Commit())
    selector.dispatch(MoveDown())

    assert selector.result.cancelled
    assert selector.result.item is None
    assert selector.state.cursor == 0


def test_commit_is_final(vms):
    selector = Selector(vms, vm_schema())
    selector.dispatch(Commit())
    first = selector.result
    selector.dispatch(Cancel())
    _type(selector, "x")
    assert selector.result is first
    assert selector.state.query == ""


def test_resize_recomputes_layout_only(vms):
    schema = vm_schema()
    selector = Selector(vms, schema)
    selector.dispatch(MoveDown())
    selector.dispatch(Resize(140, 40))

    state = selector.state
    assert state.terminal_width == 140
    assert state.layout == compute_layout(140, schema)
    assert state.cursor == 1


def test_initial_index_positions_and_scrolls(vms):
    selector = Selector(vms, vm_schema(), initial_index=12)
    assert selector.state.cursor == 12
    assert selector.state.scroll_offset == 5
    _assert_cursor_in_window(selector.state)


def test_initial_index_is_clamped(vms):
    selector = Selector(vms, vm_schema(), initial_index=99)
    assert selector.state.cursor == len(vms) - 1


def test_unknown_event_is_rejected(vms):
    selector = Selector(vms, vm_schema())
    with pytest.raises(TypeError):
        selector.dispatch("not-an-event")


def test_items_snapshot_is_not_affected_by_caller_mutation(vms):
    selector = Selector(vms, vm_schema())
    vms.clear()
    assert len(selector.state.items) == 20
