from types import SimpleNamespace
from unittest import mock

import pytest

from healthwatch.alert import Alert
from healthwatch.custom import AlertSendError, CustomAlertProvider, PreparedAlertRequest

TEMPLATE_URL = (
    "http://example.com/[SERVICE_NAME]?event=[ALERT_TRIGGERED_OR_RESOLVED]"
    "&description=[ALERT_DESCRIPTION]"
)
TEMPLATE_BODY = "[SERVICE_NAME],[ALERT_DESCRIPTION],[ALERT_TRIGGERED_OR_RESOLVED]"


def test_is_valid():
    assert CustomAlertProvider(url="").is_valid() is False
    valid = CustomAlertProvider(url="http://example.com")
    assert valid.is_valid() is True
    assert valid.client_config is not None
    assert valid.client_config.timeout == 10.0


def test_build_request_when_resolved():
    provider = CustomAlertProvider(url=TEMPLATE_URL, body=TEMPLATE_BODY)
    request = provider.build_request("service-name", "alert-description", True)
    assert request.url == (
        "http://example.com/service-name?event=RESOLVED&description=alert-description"
    )
    assert request.body == "service-name,alert-description,RESOLVED"
    assert request.method == "GET"


def test_build_request_when_triggered():
    provider = CustomAlertProvider(
        url=TEMPLATE_URL,
        body=TEMPLATE_BODY,
        headers={"Authorization": "Basic token"},
    )
    request = provider.build_request("service-name", "alert-description", False)
    assert request == PreparedAlertRequest(
        method="GET",
        url="http://example.com/service-name?event=TRIGGERED&description=alert-description",
        body="service-name,alert-description,TRIGGERED",
        headers={"Authorization": "Basic token"},
    )


def test_build_request_uses_configured_method():
    provider = CustomAlertProvider(url="http://example.com", method="POST")
    assert provider.build_request("a", "b", False).method == "POST"


def test_to_custom_alert_provider_returns_itself():
    provider = CustomAlertProvider(url="http://example.com")
    converted = provider.to_custom_alert_provider(
        SimpleNamespace(name="", url=""), Alert(), SimpleNamespace(condition_results=[]), True
    )
    assert converted is provider
    assert converted.url == "http://example.com"


def test_build_request_with_custom_placeholder():
    provider = CustomAlertProvider(
        url=TEMPLATE_URL,
        body=TEMPLATE_BODY,
        placeholders={"ALERT_TRIGGERED_OR_RESOLVED": {"RESOLVED": "test"}},
    )
    request = provider.build_request("service-name", "alert-description", True)
    assert request.url == (
        "http://example.com/service-name?event=test&description=alert-description"
    )
    assert request.body == "service-name,alert-description,test"


def test_alert_state_placeholder_value_defaults():
    provider = CustomAlertProvider(url=TEMPLATE_URL, body=TEMPLATE_BODY)
    assert provider.alert_state_placeholder_value(True) == "RESOLVED"
    assert provider.alert_state_placeholder_value(False) == "TRIGGERED"


def test_send_mocked_success(monkeypatch):
    monkeypatch.setenv("MOCK_ALERT_PROVIDER", "true")
    monkeypatch.delenv("MOCK_ALERT_PROVIDER_ERROR", raising=False)
    assert CustomAlertProvider(url="http://example.com").send("a", "b", False) == b"{}"


def test_send_mocked_error(monkeypatch):
    monkeypatch.setenv("MOCK_ALERT_PROVIDER", "true")
    monkeypatch.setenv("MOCK_ALERT_PROVIDER_ERROR", "true")
    with pytest.raises(AlertSendError):
        CustomAlertProvider(url="http://example.com").send("a", "b", False)


def test_send_returns_response_body(monkeypatch):
    monkeypatch.delenv("MOCK_ALERT_PROVIDER", raising=False)
    provider = CustomAlertProvider(
        url="http://example.com/[SERVICE_NAME]", method="POST", body="[ALERT_DESCRIPTION]"
    )
    provider.is_valid()
    response = SimpleNamespace(status_code=200, content=b"ok", text="ok")
    with mock.patch("requests.Session.request", return_value=response) as request:
        assert provider.send("svc", "down", False) == b"ok"
    args, kwargs = request.call_args
    assert args[-2:] == ("POST", "http://example.com/svc")
    assert kwargs["data"] == b"down"


def test_send_raises_on_error_status(monkeypatch):
    monkeypatch.delenv("MOCK_ALERT_PROVIDER", raising=False)
    provider = CustomAlertProvider(url="http://example.com")
    provider.is_valid()
    response = SimpleNamespace(status_code=500, content=b"boom", text="boom")
    with mock.patch("requests.Session.request", return_value=response):
        with pytest.raises(AlertSendError) as excinfo:
            provider.send("svc", "down", False)
    assert excinfo.value.status_code == 500
    assert "500: boom" in str(excinfo.value)