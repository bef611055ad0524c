"""
Text → typed value helpers. All of them are total: bad input gives the zero value.
"""
from __future__ import annotations

import re

from .constants import GUID_PREFIX

_DECIMAL_COMMA = re.compile(r"^([+-]?\d+),(\d{1,2})$")


def to_text(s: str | None) -> str:
    if s is None:
        return ""
    return str(s).strip()


def to_int(s: str | None) -> int:
    """'1,234' -> 1234, '' -> 0, '  42 ' -> 42."""
    text = to_text(s).replace(",", "")
    try:
        return int(text)
    except ValueError:
        return 0


def to_float(s: str | None) -> float:
    """
    Like to_int, but keeps a lone decimal comma ('12,5' -> 12.5).
    Any other comma is a thousands separator.
    """
    text = to_text(s)
    m = _DECIMAL_COMMA.match(text)
    if m:
        text = f"{m.group(1)}.{m.group(2)}"
    else:
        text = text.replace(",", "")
    try:
        return float(text)
    except ValueError:
        return 0.0


def is_guid_name(name: str) -> bool:
    """Untranslated stats show up as 'overwatch.guid.0x…' and are dropped."""
    return name.startswith(GUID_PREFIX)


def pluralize_stat_name(name: str) -> str:
    # The site appends 's' when the value is > 1; show it as "(s)" instead.
    if name.endswith("s"):
        return name[:-1] + "(s)"
    return name
