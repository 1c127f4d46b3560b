"""Date manipulation utilities"""

from datetime import date, datetime


def month_start(day: date) -> date:
    """First day of the month containing `day`"""
    return date(day.year, day.month, 1)


def shift_month(day: date, months: int) -> date:
    """First day of the month `months` away from the month containing `day`"""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def is_weekend(day: date) -> bool:
    """Saturday or Sunday"""
    return day.weekday() >= 5


def in_month(day: date, anchor: date) -> bool:
    """True when `day` falls in the same calendar month as `anchor`"""
    return day.year == anchor.year and day.month == anchor.month


def as_date(value: date) -> date:
    """Drop the time part of a datetime so it compares cleanly with plain dates"""
    if isinstance(value, datetime):
        return value.date()
    return value
