from datetime import datetime, timezone
from typing import Optional

def iso_utc(dt: datetime) -> str:
    """ Convert datetime to ISO 8601 UTC string with 'Z' suffix. """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")

def event_time_or_now(event_time: Optional[str]) -> str:
    """ Keep the notification's event time, or stamp the current UTC time. """
    if event_time:
        return event_time
    return iso_utc(datetime.now(timezone.utc))
