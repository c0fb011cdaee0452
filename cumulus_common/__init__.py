"""Shared errors, configuration and logging for the cumulus selector."""

from cumulus_common.config.settings import SelectorSettings, load_settings
from cumulus_common.errors import (
    ConfigurationError,
    CumulusError,
    EmptyInputError,
    SchemaError,
    SelectorError,
    TerminalUnavailableError,
)
from cumulus_common.logging import configure_logging

__all__ = [
    "CumulusError",
    "SelectorError",
    "EmptyInputError",
    "TerminalUnavailableError",
    "SchemaError",
    "ConfigurationError",
    "SelectorSettings",
    "load_settings",
    "configure_logging",
]
