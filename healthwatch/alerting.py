"""Configuration of all alert providers."""

from __future__ import annotations

from dataclasses import dataclass

from healthwatch.alert import AlertType
from healthwatch.custom import CustomAlertProvider
from healthwatch.discord import DiscordAlertProvider
from healthwatch.mattermost import MattermostAlertProvider
from healthwatch.messagebird import MessagebirdAlertProvider
from healthwatch.pagerduty import PagerDutyAlertProvider
from healthwatch.provider import AlertProvider
from healthwatch.slack import SlackAlertProvider
from healthwatch.teams import TeamsAlertProvider
from healthwatch.telegram import TelegramAlertProvider
from healthwatch.twilio import TwilioAlertProvider


@dataclass
class AlertingConfig:
    """One optional configuration per alert provider, named by alert type."""

    custom: CustomAlertProvider | None = None
    discord: DiscordAlertProvider | None = None
    mattermost: MattermostAlertProvider | None = None
    messagebird: MessagebirdAlertProvider | None = None
    pagerduty: PagerDutyAlertProvider | None = None
    slack: SlackAlertProvider | None = None
    teams: TeamsAlertProvider | None = None
    telegram: TelegramAlertProvider | None = None
    twilio: TwilioAlertProvider | None = None

    def provider_for(self, alert_type: AlertType | str) -> AlertProvider | None:
        """Return the provider configured for ``alert_type``, or ``None``."""
        try:
            kind = AlertType(alert_type)
        except ValueError:
            return None
        return getattr(self, kind.value)