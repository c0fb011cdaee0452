"""
Interactive selector package with a prompt_toolkit terminal and headless fakes.
"""

from cumulus_ui.tui.core.protocols import ItemPicker, TerminalDriver
from cumulus_ui.tui.system.facade import TUI
from cumulus_ui.tui.system.headless import HeadlessPicker, ScriptedTerminal

__all__ = [
    "ItemPicker",
    "TerminalDriver",
    "TUI",
    "HeadlessPicker",
    "ScriptedTerminal",
]
