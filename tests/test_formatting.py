"""Tests for display formatting helpers."""

import pytest

from betterscore.core.formatting import format_time, format_ordinal, power_play_label


class TestFormatTime:

    @pytest.mark.parametrize("seconds,expected", [
        (0, "0:00"),
        (1200, "20:00"),
        (61, "1:01"),
        (59, "0:59"),
        (600, "10:00"),
        (3725, "62:05"),
    ])
    def test_minutes_unpadded_seconds_padded(self, seconds, expected):
        assert format_time(seconds) == expected

    def test_negative_clamps_to_zero(self):
        assert format_time(-5) == "0:00"


class TestFormatOrdinal:

    @pytest.mark.parametrize("n,expected", [
        (1, "1st"),
        (2, "2nd"),
        (3, "3rd"),
        (4, "4th"),
        (11, "11th"),
        (12, "12th"),
        (13, "13th"),
        (21, "21st"),
        (22, "22nd"),
        (23, "23rd"),
        (100, "100th"),
        (101, "101st"),
        (111, "111th"),
        (112, "112th"),
        (113, "113th"),
        (121, "121st"),
    ])
    def test_english_suffixes(self, n, expected):
        assert format_ordinal(n) == expected


class TestPowerPlayLabel:

    def test_labels(self):
        assert power_play_label("home") == "PP: HOME"
        assert power_play_label("AWAY") == "PP: AWAY"

    def test_unknown_side_rejected(self):
        with pytest.raises(ValueError):
            power_play_label("neutral")
