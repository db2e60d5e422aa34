"""Split declaration text into a header and record blocks."""

from __future__ import annotations

from dsn_converter.common.models import Segments


def split_segments(text: str, separator: str) -> Segments:
    """Split ``text`` on every literal occurrence of ``separator``.

    The first part is the header shared by every record block of the file. Text
    without any separator yields the whole text as header and no records.
    """
    if not separator:
        raise ValueError("separator must be a non-empty string")
    parts = text.split(separator)
    return Segments(header=parts[0], records=parts[1:])
