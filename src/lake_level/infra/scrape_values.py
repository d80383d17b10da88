"""Cell value parsers for lake_level.

``parse_level`` never fails: an unreadable elevation becomes ``0.0``.
``parse_date`` raises ``DateParseError`` because the date cells key every
measurement.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from ..errors import DateParseError

# "msm" = mètres sur mer (metres above sea level)
LEVEL_UNIT = "msm"
DATE_FORMAT = "%d.%m.%Y"

_LEVEL_RE = re.compile(r"([0-9]+\.[0-9]+).*" + LEVEL_UNIT)
_DATE_RE = re.compile(r"^[0-9]{1,2}\.[0-9]{1,2}\.[0-9]{4}$")


def parse_level(text: str) -> float:
    """Return the first decimal number followed by ``msm``, or 0.0."""
    match = _LEVEL_RE.search(text or "")
    if match is None:
        return 0.0
    try:
        return float(match.group(1))
    except ValueError:
        return 0.0


def parse_date(text: str, fmt: str = DATE_FORMAT) -> date:
    """Parse a ``D.M.YYYY`` cell into a calendar date."""
    raw = (text or "").strip()
    if fmt == DATE_FORMAT and not _DATE_RE.match(raw):
        raise DateParseError(raw, fmt)
    try:
        return datetime.strptime(raw, fmt).date()
    except ValueError as exc:
        raise DateParseError(raw, fmt) from exc
