from __future__ import annotations

from typing import Any, ContextManager, Protocol, Sequence

from prompt_toolkit.key_binding.key_processor import KeyPress
from rich.text import Text

from cumulus_ui.tui.system.models import ResizeSignal, Schema, SelectionResult, TerminalSize

TerminalInput = KeyPress | ResizeSignal


class TerminalDriver(Protocol):
    """The narrow terminal capability the selector loop runs on."""

    def session(self) -> ContextManager[None]: ...

    def size(self) -> TerminalSize: ...

    def next_input(self) -> TerminalInput: ...

    def write_frame(self, lines: Sequence[Text]) -> None: ...


class ItemPicker(Protocol):
    def select(
        self,
        items: Sequence[Any],
        schema: Schema[Any],
        *,
        initial_index: int = 0,
    ) -> SelectionResult[Any]: ...
