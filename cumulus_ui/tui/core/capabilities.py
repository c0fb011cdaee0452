from __future__ import annotations

import signal
import sys


def is_tty_available() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def supports_fullscreen_ui() -> bool:
    return is_tty_available()


def supports_resize_signal() -> bool:
    return hasattr(signal, "SIGWINCH")
