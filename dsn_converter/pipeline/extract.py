"""Field extraction from a record block."""

from __future__ import annotations

import re

from dsn_converter.common.config_loader import FieldMarkers
from dsn_converter.common.models import ExtractedFields

_VALUE_RE = re.compile(r"\S*")


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == "'" and value[-1] == "'":
        return value[1:-1]
    return value


def extract_field(record: str, marker: str, delimiter: str = ",") -> str:
    """Return the value written after ``marker`` and its delimiter.

    The value runs up to the next whitespace character and loses its enclosing
    single quotes. A missing marker gives an empty string.
    """
    key = marker + delimiter
    idx = record.find(key)
    if idx < 0:
        return ""
    match = _VALUE_RE.match(record, idx + len(key))
    return _unquote(match.group(0))


def extract_fields(record: str, markers: FieldMarkers, delimiter: str = ",") -> ExtractedFields:
    return ExtractedFields(
        pay_period=extract_field(record, markers.pay_period, delimiter),
        establishment_id=extract_field(record, markers.establishment_id, delimiter),
        activity_code=extract_field(record, markers.activity_code, delimiter),
    )


def format_period_key(pay_period: str) -> str:
    # DDMMYYYY -> YYYY-MM-DD, no calendar check.
    day = pay_period[0:2]
    month = pay_period[2:4]
    year = pay_period[4:8]
    return f"{year}-{month}-{day}"
