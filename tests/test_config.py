import logging

import pytest

from queensat.config import parse_log_level, parse_time_budget


class TestTimeBudget:
    @pytest.mark.parametrize("value", [None, ""])
    def test_unset_means_no_limit(self, value):
        assert parse_time_budget(value) is None

    def test_seconds(self):
        assert parse_time_budget("2.5") == 2.5
        assert parse_time_budget("30") == 30.0

    def test_malformed_value(self):
        with pytest.raises(ValueError, match="QUEENSAT_TIME_BUDGET must be a number of seconds, got 'soon'"):
            parse_time_budget("soon")

    @pytest.mark.parametrize("value", ["0", "-1"])
    def test_non_positive_value(self, value):
        with pytest.raises(ValueError, match="must be positive"):
            parse_time_budget(value)


class TestLogLevel:
    def test_default(self):
        assert parse_log_level(None) == "WARNING"

    @pytest.mark.parametrize("value,level", [("debug", "DEBUG"), (" Info ", "INFO"), ("ERROR", "ERROR")])
    def test_case_insensitive(self, value, level):
        assert parse_log_level(value) == level
        # the normalized name is one logging accepts
        assert isinstance(logging.getLevelName(parse_log_level(value)), int)
