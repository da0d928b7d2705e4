"""Maintenance windows during which no alerts are sent. Times are UTC."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

LONG_DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

_DAY = timedelta(hours=24)
_INTEGER = re.compile(r"[+-]?[0-9]+")


class MaintenanceError(ValueError):
    """Base class for invalid maintenance configuration."""


class InvalidStartFormatError(MaintenanceError):
    """The start time is not hh:mm between 00:00 and 23:59."""

    def __init__(self, detail: str = "") -> None:
        message = (
            "invalid maintenance start format: must be hh:mm, between 00:00 and "
            "23:59 inclusively (e.g. 23:00)"
        )
        super().__init__(f"{message}: {detail}" if detail else message)


class InvalidDurationError(MaintenanceError):
    """The duration is not strictly between zero and 24 hours."""

    def __init__(self) -> None:
        super().__init__("invalid maintenance duration: must be bigger than 0 (e.g. 30m)")


class InvalidDayNameError(MaintenanceError):
    """A day in ``every`` is not a full English weekday name."""

    def __init__(self) -> None:
        names = " ".join(LONG_DAY_NAMES)
        super().__init__(f"invalid value specified for 'on'. supported values are [{names}]")


def _parse_number(text: str) -> int:
    trimmed = text[1:] if text.startswith("0") else text
    if not _INTEGER.fullmatch(trimmed):
        raise InvalidStartFormatError(f"invalid syntax in {text!r}")
    return int(trimmed)


def _hhmm_to_duration(text: str) -> timedelta:
    if len(text) != 5:
        raise InvalidStartFormatError()
    hours = _parse_number(text[:2])
    minutes = _parse_number(text[3:5])
    if not 0 <= hours <= 23 or not 0 <= minutes <= 59:
        raise InvalidStartFormatError()
    return timedelta(hours=hours, minutes=minutes)


def _weekday_name(moment: datetime) -> str:
    return LONG_DAY_NAMES[(moment.weekday() + 1) % 7]


@dataclass
class MaintenanceConfig:
    """A recurring maintenance window; enabled when ``enabled`` is unset."""

    enabled: bool | None = None
    start: str = ""
    duration: timedelta = timedelta(0)
    every: list[str] = field(default_factory=list)
    _start_offset: timedelta = field(
        default=timedelta(0), init=False, repr=False, compare=False
    )

    def is_enabled(self) -> bool:
        """Return whether maintenance is enabled."""
        return True if self.enabled is None else bool(self.enabled)

    def validate_and_set_defaults(self) -> None:
        """Validate the window; must run before ``is_under_maintenance``."""
        if not self.is_enabled():
            return
        if any(day not in LONG_DAY_NAMES for day in self.every):
            raise InvalidDayNameError()
        self._start_offset = _hhmm_to_duration(self.start)
        if self.duration <= timedelta(0) or self.duration >= _DAY:
            raise InvalidDurationError()

    def is_under_maintenance(self, now: datetime | None = None) -> bool:
        """Return whether ``now`` (default: current UTC time) is inside the window."""
        if not self.is_enabled():
            return False
        if now is None:
            now = datetime.now(timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        else:
            now = now.astimezone(timezone.utc)
        shifted = now - self.duration
        day_start = shifted.replace(hour=0, minute=0, second=0, microsecond=0)
        if self.every and _weekday_name(day_start) not in self.every:
            return False
        window_start = day_start + self._start_offset
        window_end = window_start + self.duration
        return window_start < now < window_end


def default_config() -> MaintenanceConfig:
    """Return a maintenance configuration that is disabled."""
    return MaintenanceConfig(enabled=False)