from datetime import datetime, timedelta, timezone

import pytest

from healthwatch.maintenance import (
    InvalidDayNameError,
    InvalidDurationError,
    InvalidStartFormatError,
    MaintenanceConfig,
    MaintenanceError,
    default_config,
)

# A Wednesday.
NOW = datetime(2021, 10, 13, 14, 30, tzinfo=timezone.utc)


def test_default_config_is_disabled():
    assert default_config().is_enabled() is False


def test_unset_enabled_means_enabled():
    assert MaintenanceConfig().is_enabled() is True


@pytest.mark.parametrize(
    ("cfg", "error"),
    [
        (MaintenanceConfig(every=["invalid-day"]), InvalidDayNameError),
        (MaintenanceConfig(start="0000"), InvalidStartFormatError),
        (MaintenanceConfig(start="25:00"), InvalidStartFormatError),
        (MaintenanceConfig(start="0:61"), InvalidStartFormatError),
        (MaintenanceConfig(start="00:zz"), InvalidStartFormatError),
        (MaintenanceConfig(start="zz:00"), InvalidStartFormatError),
        (MaintenanceConfig(start="23:00", duration=timedelta(0)), InvalidDurationError),
        (MaintenanceConfig(start="23:00", duration=timedelta(hours=24)), InvalidDurationError),
    ],
)
def test_validate_errors(cfg, error):
    with pytest.raises(error):
        cfg.validate_and_set_defaults()


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        MaintenanceConfig(start="bad").validate_and_set_defaults()
    assert issubclass(InvalidDurationError, MaintenanceError)


@pytest.mark.parametrize(
    "cfg",
    [
        MaintenanceConfig(enabled=False),
        MaintenanceConfig(enabled=False, start="garbage"),
        MaintenanceConfig(start="23:00", duration=timedelta(hours=1)),
        MaintenanceConfig(start="00:00", duration=timedelta(minutes=30), every=["Monday"]),
        MaintenanceConfig(
            enabled=True,
            start="08:00",
            duration=timedelta(hours=8),
            every=["Friday", "Sunday"],
        ),
    ],
)
def test_validate_accepts(cfg):
    cfg.validate_and_set_defaults()
    assert cfg.start == cfg.start and cfg.is_under_maintenance(NOW) in (True, False)
    assert isinstance(cfg.is_under_maintenance(NOW), bool)


@pytest.mark.parametrize(
    ("cfg", "now", "expected"),
    [
        (MaintenanceConfig(enabled=False), NOW, False),
        (
            MaintenanceConfig(enabled=True, start="14:00", duration=timedelta(hours=2)),
            NOW,
            True,
        ),
        (MaintenanceConfig(start="14:00", duration=timedelta(hours=2)), NOW, True),
        (MaintenanceConfig(start="09:00", duration=timedelta(hours=1)), NOW, False),
        (
            MaintenanceConfig(start="14:00", duration=timedelta(hours=1), every=["Friday"]),
            NOW,
            False,
        ),
        (
            MaintenanceConfig(start="14:00", duration=timedelta(hours=1), every=["Wednesday"]),
            NOW,
            True,
        ),
        (MaintenanceConfig(start="14:30", duration=timedelta(hours=1)), NOW, False),
        (
            MaintenanceConfig(start="23:00", duration=timedelta(hours=2), every=["Tuesday"]),
            datetime(2021, 10, 13, 0, 30, tzinfo=timezone.utc),
            True,
        ),
        (
            MaintenanceConfig(start="23:00", duration=timedelta(hours=2), every=["Wednesday"]),
            datetime(2021, 10, 13, 0, 30, tzinfo=timezone.utc),
            False,
        ),
    ],
)
def test_is_under_maintenance(cfg, now, expected):
    cfg.validate_and_set_defaults()
    assert cfg.is_under_maintenance(now) is expected


def test_naive_now_is_treated_as_utc():
    cfg = MaintenanceConfig(start="14:00", duration=timedelta(hours=2))
    cfg.validate_and_set_defaults()
    assert cfg.is_under_maintenance(datetime(2021, 10, 13, 14, 30)) is True


def test_current_time_window_covering_now():
    current = datetime.now(timezone.utc)
    cfg = MaintenanceConfig(start=f"{current.hour:02d}:00", duration=timedelta(hours=2))
    cfg.validate_and_set_defaults()
    assert cfg.is_under_maintenance() is True