from __future__ import annotations

from datetime import date, time as time_t


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_long_date(d: date) -> str:
    """
    Header date, e.g. 'Saturday, October 17th 2026'.
    """
    return f"{d.strftime('%A, %B')} {_ordinal(d.day)} {d.year}"


def time_label(t: time_t) -> str:
    """
    Sample label with minute precision, e.g. '13:45'.
    """
    return t.strftime("%H:%M")
