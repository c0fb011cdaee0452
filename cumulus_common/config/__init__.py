"""Configuration helpers shared by the selector packages."""

from cumulus_common.config.settings import SelectorSettings, load_settings

__all__ = ["SelectorSettings", "load_settings"]
