from datetime import date, datetime, timezone
import math
import pytest
from workout_log.client.format import (
    filter_summary,
    format_date,
    format_date_time,
    format_rest,
    format_rpe,
    format_weight,
)

@pytest.mark.parametrize("seconds, text", [(0, "0s"), (45, "45s"), (60, "1m"), (150, "2m 30s"), (None, "-"), (math.inf, "-")])
def test_format_rest(seconds, text):
    assert format_rest(seconds) == text

def test_format_weight_and_rpe():
    assert format_weight(225) == "225 lb"
    assert format_weight(102.5) == "102.5 lb"
    assert format_weight(None) == "-"
    assert format_weight(math.nan) == "-"
    assert format_rpe(8) == "8.0"
    assert format_rpe(7.25) == "7.2"
    assert format_rpe(None) == "-"

def test_format_dates():
    assert format_date("2024-05-01T12:00:00Z") == "May 1, 2024"
    assert format_date(date(2024, 12, 25)) == "Dec 25, 2024"
    assert format_date_time(datetime(2024, 5, 1, 12, 5, tzinfo=timezone.utc)) == "May 1, 2024 12:05 PM"
    assert format_date_time("2024-05-01T00:30:00Z") == "May 1, 2024 12:30 AM"
    assert format_date_time(datetime(2024, 5, 1, 18, 0)) == "May 1, 2024 6:00 PM"

def test_filter_summary():
    assert filter_summary(None, None) == "Showing all sessions"
    assert filter_summary(date(2024, 5, 1), None) == "Showing sessions from May 1, 2024 to now"
    assert filter_summary(None, date(2024, 5, 3)) == "Showing sessions from any time to May 3, 2024"
