import csv
import io
import math
from collections.abc import Iterable
from decimal import Decimal
from typing import TextIO

from .errors import EncodeError
from .models import Reading
from .timeutil import format_athena_timestamp


def format_value(value: float) -> str:
    """Shortest decimal that round-trips to ``value``, never in exponent form."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    # repr gives the shortest round-trip digits; the string constructor keeps them exact
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def write_readings(readings: Iterable[Reading], output: TextIO) -> int:
    """Write one headerless CSV row per reading to ``output``; return the row count."""
    writer = csv.writer(output, lineterminator="\n")
    rows = 0
    try:
        for reading in readings:
            writer.writerow(
                [
                    format_athena_timestamp(reading.timestamp),
                    reading.component,
                    format_value(reading.value),
                ]
            )
            rows += 1
    except (csv.Error, OSError) as exc:
        raise EncodeError(f"Failed to write CSV row {rows}: {exc}") from exc
    return rows


def encode_readings(readings: Iterable[Reading]) -> bytes:
    buffer = io.StringIO()
    write_readings(readings, buffer)
    try:
        return buffer.getvalue().encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodeError(f"CSV output is not valid UTF-8: {exc}") from exc
