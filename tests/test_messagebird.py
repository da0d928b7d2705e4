import json
from types import SimpleNamespace

import pytest

from healthwatch.alert import Alert
from healthwatch.messagebird import MessagebirdAlertProvider

FIELDS = {"access_key": "placeholder", "originator": "1", "recipients": "1"}


@pytest.mark.parametrize("missing", [None, "access_key", "originator", "recipients"])
def test_is_valid_requires_every_field(missing):
    fields = {k: v for k, v in FIELDS.items() if k != missing}
    assert MessagebirdAlertProvider(**fields).is_valid() is (missing is None)


def test_empty_provider_is_invalid():
    assert MessagebirdAlertProvider().is_valid() is False


@pytest.mark.parametrize(
    "resolved, name, description, expected",
    [
        (True, "", None, "RESOLVED:  - "),
        (False, "", None, "TRIGGERED:  - "),
        (True, "svc", "desc", "RESOLVED: svc - desc"),
    ],
)
def test_outbound_message(resolved, name, description, expected):
    custom = MessagebirdAlertProvider(**FIELDS).to_custom_alert_provider(
        SimpleNamespace(name=name, url=""),
        Alert(description=description),
        SimpleNamespace(condition_results=[]),
        resolved,
    )
    assert custom.url == "https://rest.messagebird.com/messages"
    assert custom.method == "POST"
    assert custom.headers == {
        "Content-Type": "application/json",
        "Authorization": "AccessKey placeholder",
    }
    assert json.loads(custom.body) == {"originator": "1", "recipients": "1", "body": expected}