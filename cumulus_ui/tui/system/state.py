"""Selector state machine: cursor, scrolling, search buffer and result."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Sequence, TypeVar

from cumulus_common.config.settings import SelectorSettings
from cumulus_common.errors import EmptyInputError
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
from cumulus_ui.tui.system.filtering import filter_items
from cumulus_ui.tui.system.layout import Layout, compute_layout
from cumulus_ui.tui.system.models import Schema, SelectionResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TERMINAL_WIDTH = 80


class Phase(Enum):
    BROWSING = "browsing"
    COMMITTED = "committed"
    CANCELLED = "cancelled"


@dataclass
class SelectorState(Generic[T]):
    items: tuple[T, ...]
    filtered: Sequence[T]
    layout: Layout
    visible_height: int
    cursor: int = 0
    scroll_offset: int = 0
    query: str = ""
    terminal_width: int = DEFAULT_TERMINAL_WIDTH
    phase: Phase = Phase.BROWSING
    result: SelectionResult[T] | None = None

    @property
    def browsing(self) -> bool:
        return self.phase is Phase.BROWSING

    @property
    def selected_item(self) -> T | None:
        if not self.filtered:
            return None
        return self.filtered[self.cursor]

    @property
    def visible_rows(self) -> Sequence[T]:
        return self.filtered[self.scroll_offset : self.scroll_offset + self.visible_height]


class Selector(Generic[T]):
    """Applies selector events to a :class:`SelectorState`.

    The state is created once per selection session and mutated in place. After
    a commit or cancel the result is frozen and further events are ignored.
    """

    def __init__(
        self,
        items: Sequence[T],
        schema: Schema[T],
        *,
        settings: SelectorSettings | None = None,
        initial_index: int = 0,
        terminal_width: int = DEFAULT_TERMINAL_WIDTH,
    ) -> None:
        if not items:
            raise EmptyInputError(
                f"No {schema.noun} available",
                context={"noun": schema.noun},
            )
        self.schema = schema
        self.settings = settings or SelectorSettings()
        snapshot = tuple(items)
        self.state: SelectorState[T] = SelectorState(
            items=snapshot,
            filtered=snapshot,
            layout=compute_layout(terminal_width, schema, self.settings),
            visible_height=schema.visible_height,
            terminal_width=terminal_width,
        )
        self._handlers: dict[type, Callable[[Any], None]] = {
            Resize: self._on_resize,
            CharacterInput: self._on_character,
            Backspace: self._on_backspace,
            MoveUp: self._on_move_up,
            MoveDown: self._on_move_down,
            Commit: self._on_commit,
            ActionInvoked: self._on_action,
            Cancel: self._on_cancel,
        }
        if initial_index:
            self._place_cursor(initial_index)

    @property
    def result(self) -> SelectionResult[T] | None:
        return self.state.result

    def dispatch(self, event: SelectorEvent) -> None:
        if not self.state.browsing:
            logger.debug("Ignoring %s after selection finished", type(event).__name__)
            return
        handler = self._handlers.get(type(event))
        if handler is None:
            raise TypeError(f"Unsupported selector event: {event!r}")
        handler(event)

    def _on_resize(self, event: Resize) -> None:
        self.state.terminal_width = event.width
        self.state.layout = compute_layout(event.width, self.schema, self.settings)

    def _on_character(self, event: CharacterInput) -> None:
        if not event.text:
            return
        self.state.query += event.text
        self._refilter()

    def _on_backspace(self, event: Backspace) -> None:
        if not self.state.query:
            return
        self.state.query = self.state.query[:-1]
        self._refilter()

    def _on_move_up(self, event: MoveUp) -> None:
        state = self.state
        if state.cursor > 0:
            state.cursor -= 1
            if state.cursor < state.scroll_offset:
                state.scroll_offset = state.cursor

    def _on_move_down(self, event: MoveDown) -> None:
        state = self.state
        if state.cursor < len(state.filtered) - 1:
            state.cursor += 1
            if state.cursor >= state.scroll_offset + state.visible_height:
                state.scroll_offset = state.cursor - state.visible_height + 1

    def _on_commit(self, event: Commit) -> None:
        self._commit(self.schema.default_action)

    def _on_action(self, event: ActionInvoked) -> None:
        self._commit(event.tag)

    def _on_cancel(self, event: Cancel) -> None:
        self.state.result = SelectionResult.cancelled_result()
        self.state.phase = Phase.CANCELLED

    def _commit(self, action: str) -> None:
        item = self.state.selected_item
        if item is None:
            return
        self.state.result = SelectionResult.committed(
            item, action, self.schema.default_action
        )
        self.state.phase = Phase.COMMITTED

    def _refilter(self) -> None:
        state = self.state
        state.filtered = filter_items(state.items, state.query, self.schema)
        if state.filtered:
            state.cursor = min(state.cursor, len(state.filtered) - 1)
        else:
            state.cursor = 0
        state.scroll_offset = 0
        self._scroll_to_cursor()

    def _place_cursor(self, index: int) -> None:
        state = self.state
        state.cursor = max(0, min(index, len(state.filtered) - 1))
        self._scroll_to_cursor()

    def _scroll_to_cursor(self) -> None:
        state = self.state
        if state.cursor < state.scroll_offset:
            state.scroll_offset = state.cursor
        elif state.cursor >= state.scroll_offset + state.visible_height:
            state.scroll_offset = state.cursor - state.visible_height + 1
