"""Keyboard mapping result types."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class KeyAction(str, Enum):
    """Semantic outcome of a key press."""

    FOCUS_ONLY = "focusOnly"
    SELECT = "select"
    CLOSE = "close"
    NONE = "none"


class TabDirection(str, Enum):
    """Direction of a Tab key press."""

    FORWARD = "forward"
    BACKWARD = "backward"
    NONE = "none"


@dataclass(frozen=True)
class Modifiers:
    """Modifier keys held during a key press."""

    shift: bool = False
    ctrl: bool = False
    alt: bool = False
    meta: bool = False

    @classmethod
    def coerce(cls, value: "Modifiers | Iterable[str] | None") -> "Modifiers":
        """Accept a Modifiers value, a collection of names, or None."""
        if value is None:
            return cls()
        if isinstance(value, Modifiers):
            return value
        names = {name.lower() for name in value}
        return cls(
            shift="shift" in names,
            ctrl="ctrl" in names or "control" in names,
            alt="alt" in names,
            meta="meta" in names,
        )


@dataclass(frozen=True)
class KeyResult:
    """What a key press means for the focused date.

    ``delta`` is the new focus target (absolute date), or None when the key
    does not move focus.
    """

    action: KeyAction
    delta: date | None = None
    tab_direction: TabDirection = TabDirection.NONE


@dataclass(frozen=True)
class FocusTrapResult(Generic[T]):
    """Outcome of a Tab press inside the open surface."""

    target: T | None
    wrapped: bool
