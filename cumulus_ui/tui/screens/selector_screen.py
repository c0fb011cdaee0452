"""Event loop driving one interactive selection session."""

from __future__ import annotations

import logging
from typing import Generic, Sequence, TypeVar

from cumulus_common.config.settings import SelectorSettings, load_settings
from cumulus_common.errors import SelectorError
from cumulus_ui.tui.adapters.terminal import PromptToolkitTerminal
from cumulus_ui.tui.core.protocols import TerminalDriver
from cumulus_ui.tui.core.theme import DEFAULT_THEME, Theme
from cumulus_ui.tui.system.components.renderer import FrameRenderer
from cumulus_ui.tui.system.events import Resize
from cumulus_ui.tui.system.keys import translate_key
from cumulus_ui.tui.system.models import Schema, SelectionResult
from cumulus_ui.tui.system.state import Selector

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SelectorScreen(Generic[T]):
    """Wires terminal input, the selector state machine and the renderer.

    The item list is validated when the screen is built, so an empty list fails
    before the terminal is ever switched to raw mode.
    """

    def __init__(
        self,
        items: Sequence[T],
        schema: Schema[T],
        *,
        terminal: TerminalDriver | None = None,
        theme: Theme = DEFAULT_THEME,
        settings: SelectorSettings | None = None,
        initial_index: int = 0,
    ) -> None:
        self.schema = schema
        self.settings = settings or load_settings()
        self.selector: Selector[T] = Selector(
            items,
            schema,
            settings=self.settings,
            initial_index=initial_index,
        )
        self.renderer = FrameRenderer(theme)
        self.terminal: TerminalDriver = terminal or PromptToolkitTerminal(settings=self.settings)

    def run(self) -> SelectionResult[T]:
        state = self.selector.state
        logger.debug("Selecting among %d %s", len(state.items), self.schema.noun)
        with self.terminal.session():
            size = self.terminal.size()
            self.selector.dispatch(Resize(size.width, size.height))
            self._draw()
            while state.browsing:
                event = translate_key(self.terminal.next_input(), self.schema)
                if event is None:
                    continue
                self.selector.dispatch(event)
                if state.browsing:
                    self._draw()

        result = self.selector.result
        if result is None:
            raise SelectorError(
                "Selection ended without a result",
                context={"phase": state.phase.value, "query": state.query},
            )
        if result.cancelled:
            logger.debug("Selection cancelled")
        else:
            logger.debug("Selection committed with action %s", result.action)
        return result

    def _draw(self) -> None:
        self.terminal.write_frame(self.renderer.render(self.selector.state, self.schema))


def select(
    items: Sequence[T],
    schema: Schema[T],
    *,
    terminal: TerminalDriver | None = None,
    theme: Theme = DEFAULT_THEME,
    settings: SelectorSettings | None = None,
    initial_index: int = 0,
) -> SelectionResult[T]:
    """Run an interactive selection and return its result.

    Raises EmptyInputError when ``items`` is empty and TerminalUnavailableError
    when no interactive terminal can be acquired. Cancellation is returned as a
    result, not raised.
    """
    try:
        screen = SelectorScreen(
            items,
            schema,
            terminal=terminal,
            theme=theme,
            settings=settings,
            initial_index=initial_index,
        )
        return screen.run()
    except SelectorError as exc:
        logger.debug("Selection failed", extra={"error": exc.to_dict()})
        raise
