"""Alert configuration attached to a monitored service."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AlertType(str, Enum):
    """Kind of alert; the value is the name of the provider that handles it."""

    CUSTOM = "custom"
    DISCORD = "discord"
    MATTERMOST = "mattermost"
    MESSAGEBIRD = "messagebird"
    PAGERDUTY = "pagerduty"
    SLACK = "slack"
    TEAMS = "teams"
    TELEGRAM = "telegram"
    TWILIO = "twilio"

    def __str__(self) -> str:
        return self.value


@dataclass
class Alert:
    """A service's alert configuration.

    ``enabled``, ``description`` and ``send_on_resolved`` are ``None`` when not
    explicitly configured, so a provider's default alert can fill them in.
    """

    type: AlertType | None = None
    enabled: bool | None = None
    failure_threshold: int = 0
    description: str | None = None
    send_on_resolved: bool | None = None
    success_threshold: int = 0
    # Used by some providers (e.g. as a deduplication key) to resolve incidents.
    resolve_key: str = ""
    # Whether the alert has been triggered and not yet resolved.
    triggered: bool = False

    def description_text(self) -> str:
        """Return the description, or an empty string when none is set."""
        return self.description if self.description is not None else ""

    def is_enabled(self) -> bool:
        """Return whether the alert is enabled; unset means disabled."""
        return bool(self.enabled) if self.enabled is not None else False

    def is_sending_on_resolved(self) -> bool:
        """Return whether a notification is sent on resolution; unset means no."""
        return bool(self.send_on_resolved) if self.send_on_resolved is not None else False