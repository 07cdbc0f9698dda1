"""Keyboard navigation: key-to-action mapping, nearest enabled date, focus trap."""

import logging
from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from typing import TypeVar

from datepicker import calendar_math
from datepicker.constants import NEAREST_ENABLED_LIMIT
from datepicker.models.dates import to_calendar_date
from datepicker.models.keys import (
    FocusTrapResult,
    KeyAction,
    KeyResult,
    Modifiers,
    TabDirection,
)
from datepicker.models.policy import DisabledPolicy

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Keys that only move the focused date, with their day offsets
_DAY_STEPS = {
    "ArrowLeft": -1,
    "ArrowRight": 1,
    "ArrowUp": -7,
    "ArrowDown": 7,
}

_SELECT_KEYS = {"Enter", " ", "Space", "Spacebar"}


def map_key(
    key: str,
    modifiers: Modifiers | Iterable[str] | None,
    focused_date: date,
    is_open: bool,
    first_day_of_week: int = 0,
) -> KeyResult:
    """Translate a key press into a focus target or a semantic action.

    Stateless: everything needed comes in as arguments.

    Args:
        key: Key name as reported by the host (``ArrowLeft``, ``PageUp``,
            ``Enter``, ``" "``, ``Escape``, ``Tab`` ...).
        modifiers: Held modifier keys; only Shift changes the mapping.
        focused_date: Current keyboard cursor.
        is_open: Whether the picker surface is open.
        first_day_of_week: 0 = Sunday ... 6 = Saturday, for Home/End.

    Returns:
        A KeyResult. ``delta`` is the new focus target for navigation keys.
    """
    if not is_open:
        return KeyResult(action=KeyAction.NONE)

    mods = Modifiers.coerce(modifiers)
    focused = to_calendar_date(focused_date)

    if key in _DAY_STEPS:
        return KeyResult(
            action=KeyAction.FOCUS_ONLY,
            delta=calendar_math.add_days(focused, _DAY_STEPS[key]),
        )
    if key == "Home":
        return KeyResult(
            action=KeyAction.FOCUS_ONLY,
            delta=calendar_math.first_of_week(focused, first_day_of_week),
        )
    if key == "End":
        return KeyResult(
            action=KeyAction.FOCUS_ONLY,
            delta=calendar_math.last_of_week(focused, first_day_of_week),
        )
    if key in ("PageUp", "PageDown"):
        step = -1 if key == "PageUp" else 1
        if mods.shift:
            target = calendar_math.add_years(focused, step)
        else:
            target = calendar_math.add_months(focused, step)
        return KeyResult(action=KeyAction.FOCUS_ONLY, delta=target)
    if key in _SELECT_KEYS:
        return KeyResult(action=KeyAction.SELECT)
    if key == "Escape":
        return KeyResult(action=KeyAction.CLOSE)
    if key == "Tab":
        direction = TabDirection.BACKWARD if mods.shift else TabDirection.FORWARD
        return KeyResult(action=KeyAction.NONE, tab_direction=direction)
    return KeyResult(action=KeyAction.NONE)


def find_nearest_enabled(
    day: date,
    policy: DisabledPolicy,
    limit: int = NEAREST_ENABLED_LIMIT,
) -> date | None:
    """Closest selectable date to ``day``.

    Probes ``day`` itself, then the next day, the previous day, +2, -2 and
    so on, up to ``limit`` days in each direction. Candidates beyond
    ``date.min`` / ``date.max`` are skipped.

    Returns:
        The first enabled candidate, or None when every probed day is
        disabled.
    """
    day = to_calendar_date(day)
    if not calendar_math.is_disabled(day, policy):
        return day
    ahead = (date.max - day).days
    behind = (day - date.min).days
    for offset in range(1, limit + 1):
        if offset > ahead and offset > behind:
            break
        candidates = []
        if offset <= ahead:
            candidates.append(day + timedelta(days=offset))
        if offset <= behind:
            candidates.append(day - timedelta(days=offset))
        for candidate in candidates:
            if not calendar_math.is_disabled(candidate, policy):
                return candidate
    logger.debug(f"No enabled date within {limit} days of {day}")
    return None


def trap_focus(
    positions: Sequence[T],
    active: T | None,
    direction: TabDirection | str,
) -> FocusTrapResult[T]:
    """Keep Tab focus inside the open surface.

    Tabbing forward from the last position wraps to the first, Shift+Tab
    from the first wraps to the last. Anywhere else the host's default tab
    behaviour applies and no target is returned.
    """
    direction = TabDirection(direction)
    if not positions or direction == TabDirection.NONE:
        return FocusTrapResult(target=None, wrapped=False)

    first, last = positions[0], positions[-1]
    if direction == TabDirection.FORWARD and active == last:
        return FocusTrapResult(target=first, wrapped=True)
    if direction == TabDirection.BACKWARD and active == first:
        return FocusTrapResult(target=last, wrapped=True)
    return FocusTrapResult(target=None, wrapped=False)
