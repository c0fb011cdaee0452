from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

COLOR_BORDER = "color(240)"
COLOR_HEADER = "color(252)"
COLOR_ID = "color(214)"
COLOR_NAME = "color(81)"
COLOR_IP = "color(252)"
COLOR_TYPE = "color(252)"
COLOR_ZONE = "color(252)"
COLOR_GROUP = "color(245)"
COLOR_RUNNING = "color(82)"
COLOR_STOPPED = "color(245)"
COLOR_PENDING = "color(214)"
COLOR_MUTED = "color(240)"
COLOR_HINT = "color(245)"
COLOR_AWS = "color(214)"
COLOR_GCP = "color(39)"

DEFAULT_STYLES: dict[str, str] = {
    "border": COLOR_BORDER,
    "header": f"bold {COLOR_HEADER}",
    "id": COLOR_ID,
    "name": COLOR_NAME,
    "ip": COLOR_IP,
    "type": COLOR_TYPE,
    "zone": COLOR_ZONE,
    "group": COLOR_GROUP,
    "running": COLOR_RUNNING,
    "stopped": COLOR_STOPPED,
    "pending": COLOR_PENDING,
    "muted": COLOR_MUTED,
    "hint": COLOR_HINT,
    "aws": COLOR_AWS,
    "gcp": COLOR_GCP,
    "current": COLOR_RUNNING,
    "cursor": f"bold {COLOR_NAME}",
}

STATE_TAGS: dict[str, str] = {
    "running": "running",
    "available": "running",
    "active": "running",
    "inservice": "running",
    "pending": "pending",
    "stopping": "pending",
    "provisioning": "pending",
    "updating": "pending",
    "stopped": "stopped",
    "terminated": "stopped",
}

STATE_INDICATORS: dict[str, str] = {
    "running": "●",
    "pending": "◐",
}


@dataclass(frozen=True)
class BoxGlyphs:
    top_left: str = "╭"
    top_right: str = "╮"
    bottom_left: str = "╰"
    bottom_right: str = "╯"
    horizontal: str = "─"
    vertical: str = "│"
    left_tee: str = "├"
    right_tee: str = "┤"


@dataclass(frozen=True)
class Theme:
    """Immutable styling handed to the renderer.

    ``styles`` maps schema style tags to Rich style strings; unknown tags render
    unstyled.
    """

    styles: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_STYLES))
    )
    glyphs: BoxGlyphs = field(default_factory=BoxGlyphs)
    prompt: str = " > "
    cursor_glyph: str = ">"
    marker_glyph: str = "*"
    ellipsis: str = "…"

    def __post_init__(self) -> None:
        if not isinstance(self.styles, MappingProxyType):
            object.__setattr__(self, "styles", MappingProxyType(dict(self.styles)))

    def style(self, tag: str | None) -> str:
        if not tag:
            return ""
        return self.styles.get(tag, "")

    def with_styles(self, **overrides: str) -> "Theme":
        merged = dict(self.styles)
        merged.update(overrides)
        return Theme(
            styles=merged,
            glyphs=self.glyphs,
            prompt=self.prompt,
            cursor_glyph=self.cursor_glyph,
            marker_glyph=self.marker_glyph,
            ellipsis=self.ellipsis,
        )


DEFAULT_THEME = Theme()


def state_tag(state: str) -> str:
    return STATE_TAGS.get(state.strip().lower(), "stopped")


def state_indicator(state: str) -> str:
    return STATE_INDICATORS.get(state_tag(state), "○")


def state_label(state: str) -> str:
    """Return ``"● running"`` style text for a lifecycle state."""
    return f"{state_indicator(state)} {state}"


def provider_tag(provider: str) -> str:
    provider = provider.strip().lower()
    if provider in ("aws", "gcp"):
        return provider
    return "muted"
