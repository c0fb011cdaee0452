"""Real terminal driver built on prompt_toolkit input/output and Rich rendering."""

from __future__ import annotations

import io
import logging
import os
import select
import signal
import threading
from collections import deque
from contextlib import ExitStack, contextmanager
from typing import Any, Iterator, Sequence

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.key_binding.key_processor import KeyPress
from prompt_toolkit.keys import Keys
from prompt_toolkit.output import Output, create_output
from rich.console import Console
from rich.text import Text

from cumulus_common.config.settings import SelectorSettings
from cumulus_common.errors import TerminalUnavailableError, wrap_error
from cumulus_ui.tui.core.capabilities import supports_fullscreen_ui, supports_resize_signal
from cumulus_ui.tui.core.protocols import TerminalInput
from cumulus_ui.tui.system.models import ResizeSignal, TerminalSize

logger = logging.getLogger(__name__)

_CONSOLE_WIDTH = 4096


class PromptToolkitTerminal:
    """Raw-mode, alternate-screen terminal for the selector loop.

    ``input``/``output`` default to the process TTY and are created lazily when
    the session starts, after checking a TTY is present. Tests pass a pipe input
    and a dummy output instead.
    """

    def __init__(
        self,
        *,
        input: Input | None = None,
        output: Output | None = None,
        settings: SelectorSettings | None = None,
        watch_resize: bool = True,
    ) -> None:
        self._input = input
        self._output = output
        self._settings = settings or SelectorSettings()
        self._watch_resize = watch_resize
        self._pending: deque[TerminalInput] = deque()
        self._wake_fd: int | None = None
        self._flush_due = False
        self._console = Console(
            file=io.StringIO(),
            force_terminal=True,
            color_system=self._settings.color_system,
            width=_CONSOLE_WIDTH,
            highlight=False,
            legacy_windows=False,
        )

    @contextmanager
    def session(self) -> Iterator[None]:
        self._ensure_streams()
        with ExitStack() as stack:
            try:
                stack.enter_context(self._require_input().raw_mode())
                stack.enter_context(self._screen())
                stack.enter_context(self._resize_watch())
            except OSError as exc:
                raise wrap_error(
                    TerminalUnavailableError,
                    "Could not switch the terminal to interactive mode",
                    context={"errno": exc.errno},
                    cause=exc,
                ) from exc
            logger.debug("Terminal session started")
            yield
        logger.debug("Terminal session restored")

    def size(self) -> TerminalSize:
        size = self._require_output().get_size()
        return TerminalSize(width=size.columns, height=size.rows)

    def next_input(self) -> TerminalInput:
        while not self._pending:
            self._wait_and_read()
        return self._pending.popleft()

    def write_frame(self, lines: Sequence[Text]) -> None:
        output = self._require_output()
        for row, line in enumerate(lines, start=1):
            output.cursor_goto(row, 1)
            output.write_raw(self._to_ansi(line))
            output.erase_end_of_line()
        output.erase_down()
        output.flush()

    # Internals

    def _ensure_streams(self) -> None:
        if self._input is not None and self._output is not None:
            return
        if not supports_fullscreen_ui():
            raise TerminalUnavailableError("Interactive selection requires a TTY.")
        try:
            if self._input is None:
                self._input = create_input()
            if self._output is None:
                self._output = create_output()
        except OSError as exc:
            raise wrap_error(
                TerminalUnavailableError,
                "Could not open the terminal",
                context={"errno": exc.errno},
                cause=exc,
            ) from exc

    def _require_input(self) -> Input:
        if self._input is None:
            raise TerminalUnavailableError("Terminal session has not been started")
        return self._input

    def _require_output(self) -> Output:
        if self._output is None:
            raise TerminalUnavailableError("Terminal session has not been started")
        return self._output

    @contextmanager
    def _screen(self) -> Iterator[None]:
        output = self._require_output()
        output.enter_alternate_screen()
        output.hide_cursor()
        output.disable_autowrap()
        output.erase_screen()
        output.flush()
        try:
            yield
        finally:
            output.reset_attributes()
            output.enable_autowrap()
            output.show_cursor()
            output.quit_alternate_screen()
            output.flush()

    @contextmanager
    def _resize_watch(self) -> Iterator[None]:
        if (
            not self._watch_resize
            or not supports_resize_signal()
            or threading.current_thread() is not threading.main_thread()
        ):
            yield
            return

        read_fd, write_fd = os.pipe()
        os.set_blocking(read_fd, False)
        os.set_blocking(write_fd, False)

        def _on_resize(signum: int, frame: Any) -> None:
            try:
                os.write(write_fd, b"\0")
            except BlockingIOError:
                # Pipe full: a wake-up is already pending.
                pass

        previous = signal.signal(signal.SIGWINCH, _on_resize)
        self._wake_fd = read_fd
        try:
            yield
        finally:
            signal.signal(signal.SIGWINCH, previous)
            self._wake_fd = None
            os.close(read_fd)
            os.close(write_fd)

    def _wait_and_read(self) -> None:
        terminal_input = self._require_input()
        input_fd = terminal_input.fileno()
        watched = [input_fd]
        if self._wake_fd is not None:
            watched.append(self._wake_fd)

        # A trailing ESC stays in the parser until escape_timeout passes with no input.
        timeout = self._settings.escape_timeout if self._flush_due else None
        readable, _, _ = select.select(watched, [], [], timeout)
        if not readable:
            self._flush_due = False
            self._pending.extend(terminal_input.flush_keys())
            return

        if self._wake_fd is not None and self._wake_fd in readable:
            self._drain_wake_pipe()
            self._pending.append(ResizeSignal(self.size()))

        if input_fd not in readable:
            return

        keys = terminal_input.read_keys()
        if not keys and terminal_input.closed:
            logger.debug("Terminal input closed; cancelling selection")
            self._pending.append(KeyPress(Keys.Escape))
            return
        self._pending.extend(keys)
        self._flush_due = True

    def _drain_wake_pipe(self) -> None:
        if self._wake_fd is None:
            return
        try:
            while os.read(self._wake_fd, 512):
                pass
        except BlockingIOError:
            return

    def _to_ansi(self, line: Text) -> str:
        with self._console.capture() as capture:
            self._console.print(line, end="", soft_wrap=True)
        return capture.get()
