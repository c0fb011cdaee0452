"""Stable selector API surface."""

from __future__ import annotations

from cumulus_common.errors import (
    EmptyInputError,
    SchemaError,
    SelectorError,
    TerminalUnavailableError,
)
from cumulus_ui.resources import (
    asg_schema,
    context_schema,
    current_index,
    instance_schema,
    load_balancer_schema,
    profile_schema,
    vm_schema,
    vpc_schema,
)
from cumulus_ui.tui.adapters.terminal import PromptToolkitTerminal
from cumulus_ui.tui.core.theme import DEFAULT_THEME, Theme
from cumulus_ui.tui.screens.selector_screen import SelectorScreen, select
from cumulus_ui.tui.system.facade import TUI
from cumulus_ui.tui.system.headless import HeadlessPicker, ScriptedTerminal
from cumulus_ui.tui.system.models import (
    Action,
    Column,
    DetailField,
    Outcome,
    Schema,
    SelectionResult,
)

__all__ = [
    "select",
    "SelectorScreen",
    "Schema",
    "Column",
    "DetailField",
    "Action",
    "SelectionResult",
    "Outcome",
    "Theme",
    "DEFAULT_THEME",
    "TUI",
    "HeadlessPicker",
    "ScriptedTerminal",
    "PromptToolkitTerminal",
    "SelectorError",
    "EmptyInputError",
    "SchemaError",
    "TerminalUnavailableError",
    "asg_schema",
    "context_schema",
    "current_index",
    "instance_schema",
    "load_balancer_schema",
    "profile_schema",
    "vm_schema",
    "vpc_schema",
]
