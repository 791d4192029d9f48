from datetime import timedelta

import pytest

from config_params.params.timespan import format_timespan, parse_timespan


@pytest.mark.parametrize(
    "value, text",
    [
        (timedelta(0), "0s"),
        (timedelta(milliseconds=150), "150ms"),
        (timedelta(seconds=1, milliseconds=500), "1500ms"),
        (timedelta(seconds=90), "90s"),
        (timedelta(minutes=5), "5m"),
        (timedelta(hours=2), "2h"),
        (timedelta(days=1.5), "36h"),
        (timedelta(days=3), "3d"),
    ],
)
def test_format_timespan(value, text):
    assert format_timespan(value) == text


@pytest.mark.parametrize(
    "text, value",
    [
        ("30s", timedelta(seconds=30)),
        ("2 hours", timedelta(hours=2)),
        ("1h, 30m", timedelta(hours=1, minutes=30)),
        ("1d2h", timedelta(days=1, hours=2)),
        ("250 MS", timedelta(milliseconds=250)),
        ("10 mins", timedelta(minutes=10)),
    ],
)
def test_parse_timespan(text, value):
    assert parse_timespan(text) == value


@pytest.mark.parametrize("text", ["", "abc", "10", "5 weeks", "1.5h", "h1"])
def test_parse_timespan_rejects_unknown_text(text):
    assert parse_timespan(text) is None
