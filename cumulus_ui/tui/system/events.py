"""Events consumed by the selector state machine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Resize:
    width: int
    height: int = 0


@dataclass(frozen=True)
class CharacterInput:
    text: str


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class MoveUp:
    pass


@dataclass(frozen=True)
class MoveDown:
    pass


@dataclass(frozen=True)
class Commit:
    pass


@dataclass(frozen=True)
class ActionInvoked:
    tag: str


@dataclass(frozen=True)
class Cancel:
    pass


SelectorEvent = (
    Resize | CharacterInput | Backspace | MoveUp | MoveDown | Commit | ActionInvoked | Cancel
)
