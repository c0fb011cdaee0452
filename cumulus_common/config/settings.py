"""Selector settings resolved from explicit values and the environment."""

from __future__ import annotations

import os
from typing import Any, Callable, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from cumulus_common.config.env import parse_float_env, parse_int_env, parse_str_env
from cumulus_common.errors import ConfigurationError

ENV_PREFIX = "CUMULUS_UI_"

ColorSystem = Literal["standard", "256", "truecolor"]


class SelectorSettings(BaseModel):
    """Tunable limits for the interactive selector box."""

    min_width: int = Field(default=60, ge=20)
    max_width: int = Field(default=120, ge=20)
    min_flex_width: int = Field(default=10, ge=1)
    column_gap: int = Field(default=2, ge=1)
    escape_timeout: float = Field(default=0.05, gt=0)
    color_system: ColorSystem = "256"

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def _check_bounds(self) -> "SelectorSettings":
        if self.min_width > self.max_width:
            raise ValueError(
                f"min_width ({self.min_width}) must not exceed max_width ({self.max_width})"
            )
        return self


_ENV_FIELDS: dict[str, tuple[str, Callable[[str | None], Any]]] = {
    "min_width": ("MIN_WIDTH", parse_int_env),
    "max_width": ("MAX_WIDTH", parse_int_env),
    "min_flex_width": ("MIN_FLEX_WIDTH", parse_int_env),
    "escape_timeout": ("ESCAPE_TIMEOUT", parse_float_env),
    "color_system": ("COLOR_SYSTEM", parse_str_env),
}


def load_settings(
    environ: Mapping[str, str] | None = None,
    **overrides: Any,
) -> SelectorSettings:
    """Build settings.

    Priority: explicit overrides > environment variables > defaults.
    Unparseable environment values are ignored; values that parse but fail
    validation raise ConfigurationError.
    """
    env = os.environ if environ is None else environ
    values: dict[str, Any] = {}
    for field_name, (suffix, parser) in _ENV_FIELDS.items():
        parsed = parser(env.get(f"{ENV_PREFIX}{suffix}"))
        if parsed is not None:
            values[field_name] = parsed
    values.update({key: val for key, val in overrides.items() if val is not None})
    try:
        return SelectorSettings.model_validate(values)
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid selector settings",
            context={"values": values},
            cause=exc,
        ) from exc
