"""Alert provider sending SMS messages through Messagebird."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from healthwatch.alert import Alert
from healthwatch.custom import CustomAlertProvider
from healthwatch.provider import AlertProvider

REST_API_URL = "https://rest.messagebird.com/messages"

_BODY_TEMPLATE = """{
  "originator": "%s",
  "recipients": "%s",
  "body": "%s"
}"""


def _state_message(service: Any, alert: Alert, resolved: bool) -> str:
    """A one-line summary such as ``TRIGGERED: name - description``."""
    state = "RESOLVED" if resolved else "TRIGGERED"
    return f"{state}: {service.name} - {alert.description_text()}"


@dataclass
class MessagebirdAlertProvider(AlertProvider):
    """Configuration for sending alerts as SMS through Messagebird."""

    access_key: str = ""
    originator: str = ""
    recipients: str = ""
    default_alert: Alert | None = None

    def is_valid(self) -> bool:
        """Return whether access key, originator and recipients are all set."""
        return all((self.access_key, self.originator, self.recipients))

    def to_custom_alert_provider(
        self, service: Any, alert: Alert, result: Any, resolved: bool
    ) -> CustomAlertProvider:
        """Build the outbound SMS request for ``service``'s alert."""
        message = _state_message(service, alert, resolved)
        return CustomAlertProvider(
            url=REST_API_URL,
            method="POST",
            body=_BODY_TEMPLATE % (self.originator, self.recipients, message),
            headers={
                "Content-Type": "application/json",
                "Authorization": f"AccessKey {self.access_key}",
            },
        )