"""Alert provider sending an arbitrary, user-defined HTTP request."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

from healthwatch.alert import Alert
from healthwatch.client import ClientConfig, default_config, get_http_session
from healthwatch.provider import AlertProvider

_STATE_PLACEHOLDER = "ALERT_TRIGGERED_OR_RESOLVED"


class AlertSendError(Exception):
    """Sending an alert failed or the target answered with an error status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class PreparedAlertRequest:
    """An HTTP request ready to be sent to an alert target."""

    method: str
    url: str
    body: str
    headers: dict[str, str]


@dataclass
class CustomAlertProvider(AlertProvider):
    """Sends alerts through a configurable HTTP request.

    ``[ALERT_DESCRIPTION]``, ``[SERVICE_NAME]`` and
    ``[ALERT_TRIGGERED_OR_RESOLVED]`` in the URL and body are substituted.
    """

    url: str = ""
    method: str = ""
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)
    placeholders: dict[str, dict[str, str]] = field(default_factory=dict)
    client_config: ClientConfig | None = None
    default_alert: Alert | None = None

    def is_valid(self) -> bool:
        """Return whether a URL is configured; sets the default client config."""
        if self.client_config is None:
            self.client_config = default_config()
        return bool(self.url) and self.client_config is not None

    def to_custom_alert_provider(
        self, service: Any, alert: Alert, result: Any, resolved: bool
    ) -> CustomAlertProvider:
        """Return this provider itself."""
        return self

    def alert_state_placeholder_value(self, resolved: bool) -> str:
        """Return the value for ``[ALERT_TRIGGERED_OR_RESOLVED]``."""
        status = "RESOLVED" if resolved else "TRIGGERED"
        return (self.placeholders or {}).get(_STATE_PLACEHOLDER, {}).get(status, status)

    def _substitute(
        self, text: str, service_name: str, alert_description: str, resolved: bool
    ) -> str:
        text = text.replace("[ALERT_DESCRIPTION]", alert_description)
        text = text.replace("[SERVICE_NAME]", service_name)
        if f"[{_STATE_PLACEHOLDER}]" in text:
            text = text.replace(
                f"[{_STATE_PLACEHOLDER}]", self.alert_state_placeholder_value(resolved)
            )
        return text

    def build_request(
        self, service_name: str, alert_description: str, resolved: bool
    ) -> PreparedAlertRequest:
        """Build the request with all placeholders substituted."""
        return PreparedAlertRequest(
            method=self.method or "GET",
            url=self._substitute(self.url, service_name, alert_description, resolved),
            body=self._substitute(self.body, service_name, alert_description, resolved),
            headers=dict(self.headers or {}),
        )

    def send(self, service_name: str, alert_description: str, resolved: bool) -> bytes:
        """Send the alert and return the response body.

        Raises ``AlertSendError`` when the target answers with a status above
        399, and ``requests.RequestException`` when the request cannot be made.
        """
        if os.environ.get("MOCK_ALERT_PROVIDER") == "true":
            if os.environ.get("MOCK_ALERT_PROVIDER_ERROR") == "true":
                raise AlertSendError("error")
            return b"{}"
        request = self.build_request(service_name, alert_description, resolved)
        response = get_http_session(self.client_config).request(
            request.method,
            request.url,
            data=request.body.encode("utf-8"),
            headers=request.headers,
        )
        if response.status_code > 399:
            raise AlertSendError(
                f"call to provider alert returned status code "
                f"{response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        return response.content