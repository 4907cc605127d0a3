"""Gregorian to Jalali (Persian solar) calendar conversion."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass

PERSIAN_MONTHS = (
    "فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
    "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند",
)

_DAYS_BEFORE_MONTH = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


@dataclass(frozen=True, order=True)
class JalaliDate:
    """A date in the Jalali calendar."""

    year: int
    month: int
    day: int


def gregorian_to_jalali(gdate: _dt.date) -> JalaliDate:
    """Convert a Gregorian date to its Jalali equivalent."""
    gy, gm, gd = gdate.year, gdate.month, gdate.day
    gy2 = gy + 1 if gm > 2 else gy

    days = (
        355666
        + 365 * gy
        + (gy2 + 3) // 4
        - (gy2 + 99) // 100
        + (gy2 + 399) // 400
        + gd
        + _DAYS_BEFORE_MONTH[gm - 1]
    )

    jy = -1595 + 33 * (days // 12053)
    days %= 12053
    jy += 4 * (days // 1461)
    days %= 1461

    if days > 365:
        jy += (days - 1) // 365
        days = (days - 1) % 365

    esfand = 30 if jy % 4 == 3 else 29
    month_lengths = (31,) * 6 + (30,) * 5 + (esfand,)
    for month, length in enumerate(month_lengths, start=1):
        if days < length:
            return JalaliDate(jy, month, days + 1)
        days -= length
    raise ValueError(f"{gdate.isoformat()} falls outside the Jalali year {jy}")


def format_persian_date(jdate: JalaliDate) -> str:
    """Render a Jalali date as 'day month-name year'."""
    if not 1 <= jdate.month <= len(PERSIAN_MONTHS):
        raise ValueError(f"invalid Jalali month: {jdate.month}")
    return f"{jdate.day} {PERSIAN_MONTHS[jdate.month - 1]} {jdate.year}"


def current_date(today: _dt.date | None = None) -> str:
    """Return the given (or today's) date formatted in the Jalali calendar."""
    if today is None:
        today = _dt.date.today()
    return format_persian_date(gregorian_to_jalali(today))