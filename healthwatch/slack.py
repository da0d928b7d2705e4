"""Alert provider posting to a Slack incoming webhook."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from healthwatch.alert import Alert
from healthwatch.custom import CustomAlertProvider
from healthwatch.provider import AlertProvider

_RESOLVED_COLOR = "#36A64F"
_TRIGGERED_COLOR = "#DD0000"
_TITLE = ":helmet_with_white_cross: Gatus"


def _alert_message(service_name: str, alert: Alert, resolved: bool, emphasis: str = "*") -> str:
    """Describe the alert's state change for a chat message."""
    name = f"{emphasis}{service_name}{emphasis}"
    if resolved:
        return (
            f"An alert for {name} has been resolved after passing successfully "
            f"{alert.success_threshold} time(s) in a row"
        )
    return (
        f"An alert for {name} has been triggered due to having failed "
        f"{alert.failure_threshold} time(s) in a row"
    )


def _condition_lines(
    result: Any, passed: str = ":white_check_mark:", failed: str = ":x:", end: str = "\\n"
) -> str:
    """One line per condition result, marked as passed or failed."""
    return "".join(
        f"{passed if outcome.success else failed} - `{outcome.condition}`{end}"
        for outcome in result.condition_results
    )


def _quoted_description(alert: Alert, newline: str = "\\n") -> str:
    """The alert's description as a quote, or an empty string."""
    description = alert.description_text()
    return f":{newline}> {description}" if description else ""


def _json_document(payload: dict[str, Any]) -> str:
    """Serialise a request payload as indented JSON."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _json_post(url: str, body: str, **extra: Any) -> CustomAlertProvider:
    """A POST request carrying a JSON body."""
    return CustomAlertProvider(
        url=url,
        method="POST",
        body=body,
        headers={"Content-Type": "application/json"},
        **extra,
    )


@dataclass
class _WebhookAlertProvider(AlertProvider):
    """A provider configured by a webhook URL alone."""

    webhook_url: str = ""
    default_alert: Alert | None = None

    def is_valid(self) -> bool:
        """Return whether a webhook URL is configured."""
        return bool(self.webhook_url)


@dataclass
class SlackAlertProvider(_WebhookAlertProvider):
    """Configuration for sending alerts to Slack."""

    def is_valid(self) -> bool:
        """Return whether a webhook URL is configured."""
        return bool(self.webhook_url)

    def to_custom_alert_provider(
        self, service: Any, alert: Alert, result: Any, resolved: bool
    ) -> CustomAlertProvider:
        """Build the webhook request for ``service``'s alert."""
        text = _alert_message(service.name, alert, resolved) + _quoted_description(
            alert, newline="\n"
        )
        attachment = {
            "title": _TITLE,
            "text": text,
            "short": False,
            "color": _RESOLVED_COLOR if resolved else _TRIGGERED_COLOR,
            "fields": [
                {
                    "title": "Condition results",
                    "value": _condition_lines(result, end="\n"),
                    "short": False,
                }
            ],
        }
        payload = {"text": "", "attachments": [attachment]}
        return _json_post(self.webhook_url, _json_document(payload))