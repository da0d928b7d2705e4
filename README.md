# healthwatch

Building blocks for watching the health of services and telling people when
something breaks:

- **Client checks** (`healthwatch.client`): a cached HTTP session built from
  a `ClientConfig`, plus TCP connect, STARTTLS and ICMP ping checks.
- **Maintenance windows** (`healthwatch.maintenance`): a daily or per-weekday
  window, in UTC, during which no alerts should go out.
- **Web and UI settings** (`healthwatch.web`, `healthwatch.ui`): the address
  the dashboard listens on, and the title and logo it shows.
- **Alerting** (`healthwatch.alert`, `healthwatch.provider`,
  `healthwatch.alerting` and one module per provider): alerts with failure
  and success thresholds, and providers for Discord, Mattermost, Messagebird,
  PagerDuty, Slack, Microsoft Teams, Telegram, Twilio, and any HTTP endpoint
  through the custom provider.

## Requirements

Python 3.10 or later. The only runtime dependency is `requests`.

## Client checks

```python
from healthwatch import client

config = client.ClientConfig(timeout=5.0)   # seconds
config.validate_and_set_defaults()          # a timeout under 1 ms becomes 10 s

session = config.http_session()             # created once per config, then reused
client.get_http_session(None)               # the shared default session

client.can_create_tcp_connection("localhost:5432", config)
connected, certificate = client.can_perform_starttls("mail.example.com:587", config)
reachable, round_trip = client.ping("127.0.0.1", config)
```

- `ClientConfig.insecure` turns off certificate verification;
  `ignore_redirect` makes the session return redirect responses instead of
  following them. `default_config()` returns a fresh copy of the defaults.
- `can_create_tcp_connection` returns `False` for an address without a
  numeric `:port` part, and for any connection failure.
- `can_perform_starttls` returns `(True, certificate)` with the server's
  certificate in DER form. It raises `ValueError` when the address is not
  `host:port`, and `OSError` or `smtplib.SMTPException` when the exchange
  fails.
- `ping` sends a single ICMP echo request. It returns `(True, rtt)` on a
  reply, `(False, timeout)` when no reply arrives in time, and
  `(False, 0.0)` when the request cannot be sent, for instance when the
  host cannot be resolved or the process may not open an ICMP socket.

## Web settings

```python
from healthwatch import web

settings = web.WebConfig()
settings.validate_and_set_defaults()
settings.socket_address()        # "0.0.0.0:8080"
```

An empty address becomes `0.0.0.0` and a zero value becomes `8080`;
values below 0 or above 65535 raise `ValueError`. `web.default_config()`
returns a `WebConfig` already holding those defaults.

## UI settings

```python
from healthwatch import ui

page = ui.UIConfig(logo="/logo.png")
html = page.validate_and_set_defaults("web/static")
```

An empty title becomes `Health Dashboard | Gatus`. The method reads
`index.html` from the given folder (`./web/static` by default), fills in
`{{ .Title }}` and `{{ .Logo }}` with HTML-escaped values and returns the
result. It raises `OSError` when the file cannot be read and `ValueError`
when the template uses any other action. `ui.default_config()` returns the
default title and an empty logo.

## Maintenance windows

```python
from datetime import timedelta
from healthwatch import maintenance

window = maintenance.MaintenanceConfig(
    start="23:00", duration=timedelta(hours=2), every=["Friday", "Sunday"]
)
window.validate_and_set_defaults()
window.is_under_maintenance()      # uses the current UTC time
```

A window is enabled unless `enabled` is `False`; `maintenance.default_config()`
returns a disabled one. `validate_and_set_defaults()` checks the start time
(`hh:mm`, from `00:00` to `23:59`), the duration (more than zero and less
than a day) and the weekday names (`Sunday` to `Saturday`). Problems raise
`InvalidStartFormatError`, `InvalidDurationError` or `InvalidDayNameError`,
all subclasses of `MaintenanceError` (itself a `ValueError`). It must be
called before `is_under_maintenance(now)`, which accepts an optional
datetime (naive values are taken as UTC). A window that starts late in the
evening may run past midnight; the weekday that counts is the one on which
it started. An empty `every` means every day.

## Alerts and providers

An `Alert` carries its `AlertType`, whether it is enabled, a description and
the thresholds for triggering and resolving. `is_enabled()`,
`is_sending_on_resolved()` and `description_text()` treat unset fields as
`False` and the empty string. Unset fields can be filled in from a
provider's default alert:

```python
from healthwatch.alert import Alert, AlertType
from healthwatch.provider import parse_with_default_alert

default = Alert(enabled=True, failure_threshold=3, success_threshold=2)
service_alert = Alert(type=AlertType.SLACK, description="API is down")
parse_with_default_alert(default, service_alert)
```

Only fields the service alert leaves as `None` (or `0`, for the thresholds)
are taken from the default; the alert type is never changed.

`AlertingConfig` holds one optional provider per alert type, and
`provider_for(alert_type)` returns it, or `None` when it is not configured
or the type is unknown.

Every provider implements `is_valid()` and
`to_custom_alert_provider(service, alert, result, resolved)`. The `service`
argument needs `name` (and `url` for Mattermost and Teams); `result` needs
`condition_results`, each with `condition` and `success`. The returned
`CustomAlertProvider` holds the URL, method, headers and body of the
notification.

| Class | Module | Valid when |
| --- | --- | --- |
| `CustomAlertProvider` | `healthwatch.custom` | `url` is set |
| `DiscordAlertProvider` | `healthwatch.discord` | `webhook_url` is set |
| `MattermostAlertProvider` | `healthwatch.mattermost` | `webhook_url` is set |
| `MessagebirdAlertProvider` | `healthwatch.messagebird` | `access_key`, `originator`, `recipients` are set |
| `PagerDutyAlertProvider` | `healthwatch.pagerduty` | `integration_key` has 32 characters |
| `SlackAlertProvider` | `healthwatch.slack` | `webhook_url` is set |
| `TeamsAlertProvider` | `healthwatch.teams` | `webhook_url` is set |
| `TelegramAlertProvider` | `healthwatch.telegram` | `token` and `id` are set |
| `TwilioAlertProvider` | `healthwatch.twilio` | `sid`, `token`, `from_`, `to` are set |

`is_valid()` on the custom and Mattermost providers also fills in a default
`client_config` when none is set.

### Custom provider

The custom provider's URL and body may contain `[SERVICE_NAME]`,
`[ALERT_DESCRIPTION]` and `[ALERT_TRIGGERED_OR_RESOLVED]`. The last one
becomes `TRIGGERED` or `RESOLVED`, unless `placeholders` maps those words to
other values under the key `ALERT_TRIGGERED_OR_RESOLVED`. The method
defaults to `GET`.

```python
from healthwatch.custom import CustomAlertProvider

hook = CustomAlertProvider(
    url="https://hooks.example.com/[SERVICE_NAME]?state=[ALERT_TRIGGERED_OR_RESOLVED]",
    body="[ALERT_DESCRIPTION]",
)
request = hook.build_request("api", "API is down", resolved=False)
hook.send("api", "API is down", resolved=False)
```

`build_request` returns the `PreparedAlertRequest` that `send` would issue.
`send` returns the response body as bytes, raises `AlertSendError` (with
`status_code`) for a status above 399, and lets `requests` exceptions
through when the request cannot be made.

Setting the environment variable `MOCK_ALERT_PROVIDER=true` makes `send`
return `b"{}"` without any network traffic; adding
`MOCK_ALERT_PROVIDER_ERROR=true` makes it raise `AlertSendError` instead.

## What this package does not do

It provides the pieces, not a running monitor. There is no command-line
program, no loop that checks services on a schedule, no loading of a
configuration file, no storage of results and no web server or dashboard;
deciding when to trigger or resolve an alert and calling the providers is
left to the application that uses these modules.