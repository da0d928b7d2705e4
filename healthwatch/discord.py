"""Alert provider posting to a Discord webhook."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from healthwatch.alert import Alert
from healthwatch.custom import CustomAlertProvider
from healthwatch.slack import (
    _TITLE,
    _WebhookAlertProvider,
    _alert_message,
    _condition_lines,
    _json_document,
    _json_post,
    _quoted_description,
)

_RESOLVED_COLOR_CODE = 3066993
_TRIGGERED_COLOR_CODE = 15158332


@dataclass
class DiscordAlertProvider(_WebhookAlertProvider):
    """Configuration for sending alerts to Discord."""

    def is_valid(self) -> bool:
        """Return whether a webhook URL is configured."""
        return bool(self.webhook_url)

    def to_custom_alert_provider(
        self, service: Any, alert: Alert, result: Any, resolved: bool
    ) -> CustomAlertProvider:
        """Build the webhook request for ``service``'s alert."""
        description = _alert_message(
            service.name, alert, resolved, emphasis="**"
        ) + _quoted_description(alert, newline="\n")
        embed = {
            "title": _TITLE,
            "description": description,
            "color": _RESOLVED_COLOR_CODE if resolved else _TRIGGERED_COLOR_CODE,
            "fields": [
                {
                    "name": "Condition results",
                    "value": _condition_lines(result, end="\n"),
                    "inline": False,
                }
            ],
        }
        payload = {"content": "", "embeds": [embed]}
        return _json_post(self.webhook_url, _json_document(payload))