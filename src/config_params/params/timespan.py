from __future__ import annotations

import re
from datetime import timedelta
from typing import Dict, Optional

__all__ = ["format_timespan", "parse_timespan"]

_PART = re.compile(r"\s*(\d+)\s*([a-z]+)\s*,?\s*", re.IGNORECASE)
_WHOLE = re.compile(r"^(\s*\d+\s*[a-z]+\s*,?\s*)+$", re.IGNORECASE)

_UNITS: Dict[str, timedelta] = {}
for _names, _unit in (
    (("d", "day", "days"), timedelta(days=1)),
    (("h", "hr", "hrs", "hour", "hours"), timedelta(hours=1)),
    (("m", "min", "mins", "minute", "minutes"), timedelta(minutes=1)),
    (("s", "sec", "secs", "second", "seconds"), timedelta(seconds=1)),
    (("ms", "msec", "msecs", "millisecond", "milliseconds"), timedelta(milliseconds=1)),
):
    for _name in _names:
        _UNITS[_name] = _unit


def _number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(value)


def format_timespan(value: timedelta) -> str:
    """
    Render ``value`` in the smallest unit that has a non-zero component, e.g.
    ``90s``, ``36h`` or ``150ms``. A zero span renders as ``0s``.
    """
    if value == timedelta(0):
        return "0s"
    total_seconds = value.total_seconds()
    if value.microseconds:
        return _number(value // timedelta(microseconds=1) / 1000) + "ms"
    seconds = value.seconds
    if seconds % 60:
        return _number(total_seconds) + "s"
    if (seconds // 60) % 60:
        return _number(total_seconds / 60) + "m"
    if seconds // 3600:
        return _number(total_seconds / 3600) + "h"
    return _number(total_seconds / 86400) + "d"


def parse_timespan(text: str) -> Optional[timedelta]:
    """Parse ``"1h, 30m"``-style text. Returns ``None`` if the text is not understood."""
    if text is None or not _WHOLE.match(text):
        return None
    total = timedelta(0)
    for match in _PART.finditer(text):
        unit = _UNITS.get(match.group(2).lower())
        if unit is None:
            return None
        total += unit * int(match.group(1))
    return total
