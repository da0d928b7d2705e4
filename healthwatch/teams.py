"""Alert provider posting message cards to a Microsoft Teams webhook."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from healthwatch.alert import Alert
from healthwatch.custom import CustomAlertProvider
from healthwatch.slack import (
    _RESOLVED_COLOR,
    _TRIGGERED_COLOR,
    _WebhookAlertProvider,
    _alert_message,
    _condition_lines,
    _json_document,
    _json_post,
    _quoted_description,
)

_CARD_CONTEXT = "http://schema.org/extensions"
_CARD_TITLE = "&#x1F6A8; Gatus"


@dataclass
class TeamsAlertProvider(_WebhookAlertProvider):
    """Configuration for sending alerts to Microsoft Teams."""

    def is_valid(self) -> bool:
        """Return whether a webhook URL is configured."""
        return bool(self.webhook_url)

    def to_custom_alert_provider(
        self, service: Any, alert: Alert, result: Any, resolved: bool
    ) -> CustomAlertProvider:
        """Build the message card request for ``service``'s alert."""
        conditions = _condition_lines(
            result, passed="&#x2705;", failed="&#x274C;", end="<br/>"
        )
        payload = {
            "@type": "MessageCard",
            "@context": _CARD_CONTEXT,
            "themeColor": _RESOLVED_COLOR if resolved else _TRIGGERED_COLOR,
            "title": _CARD_TITLE,
            "text": _alert_message(service.name, alert, resolved)
            + _quoted_description(alert, newline="\n"),
            "sections": [
                {"activityTitle": "URL", "text": service.url},
                {"activityTitle": "Condition results", "text": conditions},
            ],
        }
        return _json_post(self.webhook_url, _json_document(payload))