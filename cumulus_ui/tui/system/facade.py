from typing import Any, Sequence

from cumulus_common.config.settings import SelectorSettings
from cumulus_ui.tui.core.protocols import ItemPicker, TerminalDriver
from cumulus_ui.tui.core.theme import DEFAULT_THEME, Theme
from cumulus_ui.tui.screens.selector_screen import select
from cumulus_ui.tui.system.models import Schema, SelectionResult


class TUI(ItemPicker):
    """Interactive picker bound to one terminal, theme and settings."""

    def __init__(
        self,
        terminal: TerminalDriver | None = None,
        theme: Theme = DEFAULT_THEME,
        settings: SelectorSettings | None = None,
    ):
        self._terminal = terminal
        self._theme = theme
        self._settings = settings

    def select(
        self,
        items: Sequence[Any],
        schema: Schema[Any],
        *,
        initial_index: int = 0,
    ) -> SelectionResult[Any]:
        return select(
            items,
            schema,
            terminal=self._terminal,
            theme=self._theme,
            settings=self._settings,
            initial_index=initial_index,
        )
