"""Alert provider sending SMS messages through Twilio."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

from healthwatch.alert import Alert
from healthwatch.custom import CustomAlertProvider
from healthwatch.provider import AlertProvider


@dataclass
class TwilioAlertProvider(AlertProvider):
    """Configuration for sending alerts as SMS through Twilio."""

    sid: str = ""
    token: str = ""
    from_: str = ""
    to: str = ""
    default_alert: Alert | None = None

    def is_valid(self) -> bool:
        """Return whether sid, token, sender and recipient are all set."""
        return bool(self.token) and bool(self.sid) and bool(self.from_) and bool(self.to)

    def to_custom_alert_provider(
        self, service: Any, alert: Alert, result: Any, resolved: bool
    ) -> CustomAlertProvider:
        """Build the form-encoded Messages request for ``service``'s alert."""
        state = "RESOLVED" if resolved else "TRIGGERED"
        message = f"{state}: {service.name} - {alert.description_text()}"
        form = {"To": self.to, "From": self.from_, "Body": message}
        credentials = base64.b64encode(f"{self.sid}:{self.token}".encode()).decode("ascii")
        return CustomAlertProvider(
            url=f"https://api.twilio.com/2010-04-01/Accounts/{self.sid}/Messages.json",
            method="POST",
            body=urlencode(sorted(form.items())),
            headers={
                "Content-Type": "application/x-www-form-urlencoded",
                "Authorization": f"Basic {credentials}",
            },
        )