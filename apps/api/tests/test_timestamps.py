import pytest
from datetime import datetime, timezone, timedelta
from photoindex.core.timestamps import iso_utc, event_time_or_now


class TestIsoUtc:
    def test_given_utc_datetime_when_converting_then_returns_iso_string_with_z_suffix(self):
        """
        Given: A datetime with UTC timezone
        When: Converting to ISO UTC string
        Then: Returns ISO format with 'Z' suffix
        """
        # Given
        dt = datetime(2023, 12, 25, 10, 30, 45, tzinfo=timezone.utc)
        
        # When
        result = iso_utc(dt)
        
        # Then
        assert result == "2023-12-25T10:30:45Z"

    def test_given_naive_datetime_when_converting_then_assumes_utc_and_returns_iso_string(self):
        assert iso_utc(datetime(2023, 12, 25, 10, 30, 45)) == "2023-12-25T10:30:45Z"

    def test_given_non_utc_timezone_when_converting_then_converts_to_utc_and_returns_iso_string(self):
        # Given
        tz_offset = timezone(timedelta(hours=5))
        dt = datetime(2023, 12, 25, 15, 30, 45, tzinfo=tz_offset)
        
        # When
        result = iso_utc(dt)
        
        # Then (15:30 + 5 hours offset = 10:30 UTC)
        assert result == "2023-12-25T10:30:45Z"


class TestEventTimeOrNow:
    def test_given_event_time_when_resolving_then_keeps_it_verbatim(self):
        assert event_time_or_now("2024-03-01T08:00:00.000Z") == "2024-03-01T08:00:00.000Z"

    @pytest.mark.parametrize("event_time", [None, ""])
    def test_given_no_event_time_when_resolving_then_returns_current_utc_iso(self, event_time):
        # Given
        before = datetime.now(timezone.utc)

        # When
        result = event_time_or_now(event_time)

        # Then
        assert result.endswith("Z")
        parsed = datetime.fromisoformat(result.replace("Z", "+00:00"))
        assert before <= parsed <= datetime.now(timezone.utc)
