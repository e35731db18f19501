"""Tests for status-line formatting helpers."""

import pytest

from chatquery.utils.formatting import (
    bold,
    humanize_duration,
    label,
    parse_iso_duration,
    strip_iso_prefix,
)


def test_bold_and_label():
    assert bold("x") == "\x02x\x02"
    assert label("Bing") == "\x02Bing:\x02"
    assert label("Bing", "3 results") == "\x02Bing (\x023 results\x02):\x02"


@pytest.mark.parametrize("raw,expected", [
    ("PT2M51S", "2m51s"),
    ("PT1H2M", "1h2m"),
    ("P1DT2H", "p1dt2h"),
    ("", ""),
])
def test_strip_iso_prefix(raw, expected):
    assert strip_iso_prefix(raw) == expected


@pytest.mark.parametrize("raw,expected", [
    ("PT2M51S", "2m51s"),
    ("PT37M51S", "37m51s"),
    ("PT1H2M3S", "1h2m3s"),
    ("PT1H", "1h0m0s"),
    ("PT5M", "5m0s"),
    ("PT45S", "45s"),
    ("PT0S", "0s"),
    ("P1DT1M", "24h1m0s"),
    ("pt2m51s", "2m51s"),
])
def test_humanize_duration(raw, expected):
    assert humanize_duration(raw) == expected


@pytest.mark.parametrize("raw", ["", "P", "PT", "2m51s", "PTXS", "P1W"])
def test_humanize_duration_rejects_garbage(raw):
    assert humanize_duration(raw) is None
    assert parse_iso_duration(raw) is None
