from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Sequence, TypeVar

from cumulus_common.errors import SchemaError

T = TypeVar("T")

StyleSpec = str | Callable[[Any], str]

# prompt_toolkit key names the engine binds itself.
RESERVED_KEYS = frozenset(
    {"c-m", "c-j", "escape", "c-c", "up", "down", "c-h"}
)


@dataclass(frozen=True)
class Column(Generic[T]):
    label: str
    min_width: int
    extractor: Callable[[T], str]
    style: StyleSpec = ""
    flexible: bool = False

    def text_for(self, item: T) -> str:
        return str(self.extractor(item))

    def style_for(self, item: T) -> str:
        if callable(self.style):
            return self.style(item)
        return self.style


@dataclass(frozen=True)
class DetailField:
    label: str
    value: str
    style: str = ""


@dataclass(frozen=True)
class Action:
    """A secondary key bound to an action tag, e.g. ``Action("c-s", "start", "^S:start")``."""

    key: str
    tag: str
    label: str = ""


def _no_marker(item: Any) -> bool:
    return False


@dataclass(frozen=True)
class Schema(Generic[T]):
    """Declarative description of how one resource type is searched and shown."""

    columns: tuple[Column[T], ...]
    search_fields: Callable[[T], Sequence[str]]
    detail_fields: Callable[[T], Sequence[DetailField]]
    actions: tuple[Action, ...] = ()
    title: str = "Details"
    noun: str = "items"
    empty_message: str = "No results"
    default_action: str = "select"
    default_label: str = "Enter:select"
    marker: Callable[[T], bool] = _no_marker
    visible_height: int = 8
    detail_height: int = 10
    detail_label_width: int = 12

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        object.__setattr__(self, "actions", tuple(self.actions))
        if not self.columns:
            raise SchemaError("Schema needs at least one column")
        flexible = [col.label for col in self.columns if col.flexible]
        if len(flexible) != 1:
            raise SchemaError(
                "Schema needs exactly one flexible column",
                context={"flexible": flexible},
            )
        if self.visible_height < 1 or self.detail_height < 1:
            raise SchemaError(
                "Schema heights must be positive",
                context={
                    "visible_height": self.visible_height,
                    "detail_height": self.detail_height,
                },
            )
        seen: set[str] = set()
        for action in self.actions:
            if action.key in RESERVED_KEYS:
                raise SchemaError(
                    f"Action key '{action.key}' is reserved by the selector",
                    context={"tag": action.tag},
                )
            if action.key in seen:
                raise SchemaError(
                    f"Action key '{action.key}' is bound twice",
                    context={"tag": action.tag},
                )
            seen.add(action.key)

    @property
    def flexible_index(self) -> int:
        for idx, col in enumerate(self.columns):
            if col.flexible:
                return idx
        raise SchemaError("Schema has no flexible column")

    def action_for_key(self, key: str) -> Action | None:
        for action in self.actions:
            if action.key == key:
                return action
        return None

    def legend(self) -> str:
        parts = [f"[{self.default_label}]"]
        parts.extend(f"[{action.label or action.tag}]" for action in self.actions)
        parts.append("[Esc:cancel]")
        return " ".join(parts)


class Outcome(Enum):
    COMMITTED = "committed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class SelectionResult(Generic[T]):
    outcome: Outcome
    item: T | None = None
    action: str | None = None
    default_action: str = field(default="select", compare=False)

    @classmethod
    def committed(cls, item: T, action: str, default_action: str) -> "SelectionResult[T]":
        return cls(Outcome.COMMITTED, item, action, default_action)

    @classmethod
    def cancelled_result(cls) -> "SelectionResult[T]":
        return cls(Outcome.CANCELLED)

    @property
    def cancelled(self) -> bool:
        return self.outcome is Outcome.CANCELLED

    @property
    def is_default_action(self) -> bool:
        return self.outcome is Outcome.COMMITTED and self.action == self.default_action


@dataclass(frozen=True)
class TerminalSize:
    width: int
    height: int


@dataclass(frozen=True)
class ResizeSignal:
    """Raw terminal input meaning "the window changed size"."""

    size: TerminalSize
