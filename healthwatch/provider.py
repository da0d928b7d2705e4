"""Common interface of alert providers and default-alert merging."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from healthwatch.alert import Alert

if TYPE_CHECKING:
    from healthwatch.custom import CustomAlertProvider


class AlertProvider(ABC):
    """Interface implemented by every alert provider.

    Concrete providers also carry a ``default_alert`` attribute holding the
    alert configuration used as a baseline for services' alerts of their type.
    """

    default_alert: Alert | None

    @abstractmethod
    def is_valid(self) -> bool:
        """Return whether the provider's configuration is valid."""

    @abstractmethod
    def to_custom_alert_provider(
        self, service: Any, alert: Alert, result: Any, resolved: bool
    ) -> CustomAlertProvider:
        """Convert the provider into a custom provider ready to send the alert."""


def parse_with_default_alert(
    provider_default_alert: Alert | None, service_alert: Alert | None
) -> None:
    """Fill unset fields of ``service_alert`` from the provider's default alert."""
    if provider_default_alert is None or service_alert is None:
        return
    if service_alert.enabled is None:
        service_alert.enabled = provider_default_alert.enabled
    if service_alert.send_on_resolved is None:
        service_alert.send_on_resolved = provider_default_alert.send_on_resolved
    if service_alert.description is None:
        service_alert.description = provider_default_alert.description
    if service_alert.failure_threshold == 0:
        service_alert.failure_threshold = provider_default_alert.failure_threshold
    if service_alert.success_threshold == 0:
        service_alert.success_threshold = provider_default_alert.success_threshold