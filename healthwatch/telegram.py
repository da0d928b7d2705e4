"""Alert provider sending messages through a Telegram bot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from healthwatch.alert import Alert
from healthwatch.custom import CustomAlertProvider
from healthwatch.provider import AlertProvider

_BODY_TEMPLATE = '{"chat_id": "%s", "text": "%s", "parse_mode": "MARKDOWN"}'


@dataclass
class TelegramAlertProvider(AlertProvider):
    """Configuration for sending alerts to a Telegram chat."""

    token: str = ""
    id: str = ""
    default_alert: Alert | None = None

    def is_valid(self) -> bool:
        """Return whether both the bot token and the chat id are set."""
        return bool(self.token) and bool(self.id)

    def to_custom_alert_provider(
        self, service: Any, alert: Alert, result: Any, resolved: bool
    ) -> CustomAlertProvider:
        """Build the sendMessage request for ``service``'s alert."""
        if resolved:
            message = (
                f"An alert for *{service.name}* has been resolved:\\n—\\n    "
                f"_healthcheck passing successfully {alert.failure_threshold} "
                f"time(s) in a row_\\n—  "
            )
        else:
            message = (
                f"An alert for *{service.name}* has been triggered:\\n—\\n    "
                f"_healthcheck failed {alert.failure_threshold} time(s) in a row_\\n—  "
            )
        results = "".join(
            f"{'✅' if cr.success else '❌'} - `{cr.condition}`\\n"
            for cr in result.condition_results
        )
        description = alert.description_text()
        if description:
            text = (
                f"⛑ *Gatus* \\n{message} \\n*Description* \\n_{description}_  "
                f"\\n\\n*Condition results*\\n{results}"
            )
        else:
            text = f"⛑ *Gatus* \\n{message} \\n*Condition results*\\n{results}"
        return CustomAlertProvider(
            url=f"https://api.telegram.org/bot{self.token}/sendMessage",
            method="POST",
            body=_BODY_TEMPLATE % (self.id, text),
            headers={"Content-Type": "application/json"},
        )