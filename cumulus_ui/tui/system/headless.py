"""Scripted terminal used for tests and non-interactive runs."""

from __future__ import annotations

from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Sequence

from prompt_toolkit.key_binding.key_processor import KeyPress
from prompt_toolkit.keys import Keys
from rich.text import Text

from cumulus_common.errors import EmptyInputError
from cumulus_ui.tui.core.protocols import TerminalInput
from cumulus_ui.tui.system.models import ResizeSignal, Schema, SelectionResult, TerminalSize


def keys_for_text(text: str) -> list[KeyPress]:
    return [KeyPress(char, char) for char in text]


def _as_key(key: Keys | str) -> Keys | str:
    # Named keys such as "c-x" or "escape" map onto prompt_toolkit's Keys enum.
    if isinstance(key, Keys) or len(key) == 1:
        return key
    return Keys(key)


def resize(width: int, height: int = 24) -> ResizeSignal:
    return ResizeSignal(TerminalSize(width, height))


@dataclass
class ScriptedTerminal:
    """Feeds a fixed input script and records every frame written.

    When the script runs out the terminal answers with Escape, so a selector
    driven by an incomplete script still terminates.
    """

    inputs: Iterable[TerminalInput] = ()
    terminal_size: TerminalSize = TerminalSize(80, 24)
    frames: list[list[Text]] = field(default_factory=list)
    sessions_entered: int = 0
    sessions_exited: int = 0
    reads: int = 0

    def __post_init__(self) -> None:
        self._queue: deque[TerminalInput] = deque(self.inputs)

    def feed(self, *inputs: TerminalInput) -> None:
        self._queue.extend(inputs)

    def type_text(self, text: str) -> None:
        self._queue.extend(keys_for_text(text))

    def press(self, *keys: Keys | str) -> None:
        self._queue.extend(KeyPress(_as_key(key)) for key in keys)

    @contextmanager
    def session(self) -> Iterator[None]:
        self.sessions_entered += 1
        try:
            yield
        finally:
            self.sessions_exited += 1

    @property
    def active(self) -> bool:
        return self.sessions_entered > self.sessions_exited

    def size(self) -> TerminalSize:
        return self.terminal_size

    def next_input(self) -> TerminalInput:
        self.reads += 1
        if not self._queue:
            return KeyPress(Keys.Escape)
        item = self._queue.popleft()
        if isinstance(item, ResizeSignal):
            self.terminal_size = item.size
        return item

    def write_frame(self, lines: Sequence[Text]) -> None:
        self.frames.append(list(lines))

    @property
    def last_frame(self) -> list[str]:
        if not self.frames:
            return []
        return [line.plain for line in self.frames[-1]]


@dataclass
class RecordedSelection:
    items: list[Any]
    schema: Schema[Any]
    initial_index: int


@dataclass
class HeadlessPicker:
    """Picker for CI and tests: returns ``next_result`` without a terminal.

    When no result is configured, the item at ``initial_index`` is committed
    with the schema's default action.
    """

    next_result: SelectionResult[Any] | None = None
    recorded: list[RecordedSelection] = field(default_factory=list)

    def select(
        self,
        items: Sequence[Any],
        schema: Schema[Any],
        *,
        initial_index: int = 0,
    ) -> SelectionResult[Any]:
        if not items:
            raise EmptyInputError(f"No {schema.noun} available", context={"noun": schema.noun})
        self.recorded.append(RecordedSelection(list(items), schema, initial_index))
        if self.next_result is not None:
            return self.next_result
        index = max(0, min(initial_index, len(items) - 1))
        return SelectionResult.committed(items[index], schema.default_action, schema.default_action)
