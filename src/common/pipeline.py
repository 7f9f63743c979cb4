from datetime import datetime
from typing import Protocol

from aws_lambda_powertools import Logger

from .csv_encoder import encode_readings
from .models import Reading, TimeWindow
from .timeutil import format_rfc3339, hour_window, storage_key

logger = Logger()


class ReadingSource(Protocol):
    def fetch(self, window: TimeWindow) -> list[Reading]: ...


class ObjectSink(Protocol):
    def put(self, key: str, payload: bytes) -> str: ...


def export_hour(trigger: datetime, fetcher: ReadingSource, publisher: ObjectSink) -> str:
    """Export the hour before ``trigger``: fetch, encode as CSV, upload.

    Any ``ExportError`` from a step propagates as-is and the remaining steps
    are skipped. Returns a summary naming the window and the upload location.
    """
    window = hour_window(trigger)
    start, end = format_rfc3339(window.start), format_rfc3339(window.end)
    logger.info("time_range", start=start, end=end)

    readings = fetcher.fetch(window)
    logger.info("retrieved_readings", count=len(readings))
    if not readings:
        logger.warning("no_readings_for_window", start=start, end=end)

    payload = encode_readings(readings)
    location = publisher.put(storage_key(window.end), payload)

    return f"Saved data for {start} - {end} to {location}"
