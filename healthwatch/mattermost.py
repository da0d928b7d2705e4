"""Alert provider posting to a Mattermost incoming webhook."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from healthwatch.alert import Alert
from healthwatch.client import ClientConfig, default_config
from healthwatch.custom import CustomAlertProvider
from healthwatch.provider import AlertProvider
from healthwatch.slack import (
    _RESOLVED_COLOR,
    _TRIGGERED_COLOR,
    _alert_message,
    _condition_lines,
    _json_document,
    _json_post,
    _quoted_description,
)

_TITLE = ":rescue_worker_helmet: Gatus"


@dataclass
class MattermostAlertProvider(AlertProvider):
    """Configuration for sending alerts to Mattermost."""

    webhook_url: str = ""
    client_config: ClientConfig | None = None
    default_alert: Alert | None = None
    icon_url: str = ""

    def is_valid(self) -> bool:
        """Return whether a webhook URL is configured; sets the default client config."""
        if self.client_config is None:
            self.client_config = default_config()
        return bool(self.webhook_url)

    def to_custom_alert_provider(
        self, service: Any, alert: Alert, result: Any, resolved: bool
    ) -> CustomAlertProvider:
        """Build the webhook request for ``service``'s alert."""
        message = _alert_message(service.name, alert, resolved)
        attachment = {
            "title": _TITLE,
            "fallback": f"Gatus - {message}",
            "text": message + _quoted_description(alert, newline="\n"),
            "short": False,
            "color": _RESOLVED_COLOR if resolved else _TRIGGERED_COLOR,
            "fields": [
                {"title": "URL", "value": service.url, "short": False},
                {
                    "title": "Condition results",
                    "value": _condition_lines(result, end="\n"),
                    "short": False,
                },
            ],
        }
        payload = {
            "text": "",
            "username": "gatus",
            "icon_url": self.icon_url,
            "attachments": [attachment],
        }
        return _json_post(
            self.webhook_url, _json_document(payload), client_config=self.client_config
        )