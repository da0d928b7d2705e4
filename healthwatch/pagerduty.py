"""Alert provider creating and resolving PagerDuty incidents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from healthwatch.alert import Alert
from healthwatch.custom import CustomAlertProvider
from healthwatch.messagebird import _state_message
from healthwatch.provider import AlertProvider
from healthwatch.slack import _json_post

REST_API_URL = "https://events.pagerduty.com/v2/enqueue"

_BODY_TEMPLATE = """{
  "routing_key": "%s",
  "dedup_key": "%s",
  "event_action": "%s",
  "payload": {
    "summary": "%s",
    "source": "%s",
    "severity": "critical"
  }
}"""


@dataclass
class PagerDutyAlertProvider(AlertProvider):
    """Configuration for sending alerts to PagerDuty's events API."""

    integration_key: str = ""
    default_alert: Alert | None = None

    def is_valid(self) -> bool:
        """Return whether the integration key is exactly 32 characters long."""
        return len(self.integration_key) == 32

    def to_custom_alert_provider(
        self, service: Any, alert: Alert, result: Any, resolved: bool
    ) -> CustomAlertProvider:
        """Build the trigger or resolve event for ``service``'s alert."""
        event_action, resolve_key = ("resolve", alert.resolve_key) if resolved else ("trigger", "")
        body = _BODY_TEMPLATE % (
            self.integration_key,
            resolve_key,
            event_action,
            _state_message(service, alert, resolved),
            service.name,
        )
        return _json_post(REST_API_URL, body)