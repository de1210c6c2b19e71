"""Seasonal festivals and public holidays as Groups of calendar days.

Dates are pinned to 2020 (a leap year) so every month/day pair exists.
"""

from __future__ import annotations

import datetime

from groupset import Group, GroupBuilder


def day(month: int, dom: int) -> datetime.date:
    return datetime.date(2020, month, dom)


NANAKUSA = day(1, 7)
HINAMATSURI = day(3, 3)
TANGO = day(5, 5)
TANABATA = day(7, 7)
CHOYO = day(9, 9)

NEW_YEAR = day(1, 1)
CHILDRENS_DAY = day(5, 5)
SPORTS_DAY = day(10, 10)

FESTIVALS: Group[datetime.date] = GroupBuilder.of(NANAKUSA, HINAMATSURI, TANGO, TANABATA, CHOYO)
HOLIDAYS: Group[datetime.date] = GroupBuilder.of(NEW_YEAR, CHILDRENS_DAY, SPORTS_DAY)


def on_or_after(bound: datetime.date):
    return lambda d: d >= bound


def after(bound: datetime.date):
    return lambda d: d > bound


def later(one: datetime.date, another: datetime.date) -> datetime.date:
    return one if one > another else another


def months(days: Group[datetime.date]) -> Group[int]:
    return days.map(lambda d: d.month)


def month_total(days: Group[datetime.date]) -> int:
    """Sum of the month numbers; addition is order-independent."""
    return months(days).reduce(lambda a, b: a + b, 0)


def latest(days: Group[datetime.date]) -> datetime.date:
    return days.reduce(later)
