"""Tests for tenure calculation."""

import logging

import pytest

from payslip_service.calculators.duration import NOT_AVAILABLE, calculate_duration


class TestCalculateDuration:
    """Test 365-day years and 30-day months."""

    def test_years_and_months(self):
        # 2021-01-15 to 2024-04-01 is 1172 days: 3 * 365 + 77
        assert calculate_duration("2021-01-15", "2024", "04") == "3 Years 2 Months"

    def test_singular_units(self):
        # 2023-03-01 to 2024-04-01 is 397 days: 365 + 32
        assert calculate_duration("2023-03-01", "2024", "04") == "1 Year 1 Month"

    def test_same_day(self):
        assert calculate_duration("2024-04-01", "2024", "04") == "0 Years 0 Months"

    def test_joining_after_period_uses_absolute_span(self):
        # 2024-04-01 to 2024-06-15 is 75 days
        assert calculate_duration("2024-06-15", "2024", "04") == "0 Years 2 Months"

    def test_leap_day_not_calendar_aware(self):
        # 2020-04-01 to 2024-04-01 is 1461 days: 4 * 365 + 1
        assert calculate_duration("2020-04-01", "2024", "04") == "4 Years 0 Months"

    def test_datetime_joining_date(self):
        assert calculate_duration("2023-04-01T00:00:00", "2024", "04") == "1 Year 0 Months"

    def test_timezone_aware_joining_date(self):
        assert calculate_duration("2023-04-01T00:00:00+00:00", "2024", 4) == "1 Year 0 Months"

    @pytest.mark.parametrize(
        "joining_date",
        ["2023-04-01T00:00:00Z", "2023-04-01T00:00:00.000Z", "2023-04-01T05:30:00.000z"],
    )
    def test_utc_designator_joining_date(self, joining_date):
        """Timestamps from JavaScript toISOString() parse as UTC."""
        assert calculate_duration(joining_date, "2024", "04") == "1 Year 0 Months"

    @pytest.mark.parametrize("joining_date", ["not-a-date", "", "2024-13-45", None])
    def test_unparseable_date_returns_na(self, joining_date, caplog):
        """Bad joining dates degrade to N/A and are logged, never raised."""
        with caplog.at_level(logging.WARNING):
            result = calculate_duration(joining_date, "2024", "04")

        assert result == NOT_AVAILABLE
        assert "Error calculating duration" in caplog.text
