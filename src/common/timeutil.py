from datetime import UTC, datetime, timedelta

from .models import TimeWindow

ATHENA_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


def to_utc(dt: datetime) -> datetime:
    # Naive datetimes are taken to be UTC already
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def truncate_to_hour(dt: datetime) -> datetime:
    return to_utc(dt).replace(minute=0, second=0, microsecond=0)


def hour_window(trigger: datetime) -> TimeWindow:
    """Return the full hour that ended at or before ``trigger``."""
    end = truncate_to_hour(trigger)
    return TimeWindow(start=end - timedelta(hours=1), end=end)


def format_rfc3339(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    text = dt.replace(microsecond=0).isoformat()
    if dt.utcoffset() == timedelta(0):
        return text[: -len("+00:00")] + "Z"
    return text


def format_athena_timestamp(dt: datetime) -> str:
    return to_utc(dt).strftime(ATHENA_TIMESTAMP_FORMAT)


def storage_key(end: datetime) -> str:
    return format_rfc3339(end)
