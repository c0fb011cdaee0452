"""Translate raw terminal input into selector events."""

from __future__ import annotations

from typing import Any

from prompt_toolkit.key_binding.key_processor import KeyPress
from prompt_toolkit.keys import Keys

from cumulus_ui.tui.system.events import (
    ActionInvoked,
    Backspace,
    Cancel,
    CharacterInput,
    Commit,
    MoveDown,
    MoveUp,
    Resize,
    SelectorEvent,
)
from cumulus_ui.tui.system.models import ResizeSignal, Schema

_FIXED_BINDINGS: dict[str, SelectorEvent] = {
    Keys.Escape.value: Cancel(),
    Keys.ControlC.value: Cancel(),
    Keys.ControlM.value: Commit(),
    Keys.ControlJ.value: Commit(),
    Keys.Up.value: MoveUp(),
    Keys.Down.value: MoveDown(),
    Keys.ControlH.value: Backspace(),
}


def key_name(key: Keys | str) -> str:
    return key.value if isinstance(key, Keys) else key


def translate_key(
    raw: KeyPress | ResizeSignal,
    schema: Schema[Any],
) -> SelectorEvent | None:
    """Map one terminal input to a selector event, or None when it means nothing here."""
    if isinstance(raw, ResizeSignal):
        return Resize(width=raw.size.width, height=raw.size.height)

    name = key_name(raw.key)
    bound = _FIXED_BINDINGS.get(name)
    if bound is not None:
        return bound

    action = schema.action_for_key(name)
    if action is not None:
        return ActionInvoked(action.tag)

    if not isinstance(raw.key, Keys) and len(name) == 1 and name.isprintable():
        return CharacterInput(name)
    return None
