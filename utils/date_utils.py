import calendar
import pandas as pd
from datetime import datetime, timedelta, date as dt_date
from typing import List
from exceptions.custom_errors import InvalidDateRangeError

MONDAY = 0
WEDNESDAY = 2
FRIDAY = 4
SATURDAY = 5
SUNDAY = 6


def normalise_date(input_date) -> dt_date:
    """
    Convert input to a datetime.date object.
    Supports formats like:
      - 'Mon 2025-07-07', '2025/07/07', '20250707', etc.
    """
    if isinstance(input_date, dt_date) and not isinstance(input_date, datetime):
        return input_date
    elif isinstance(input_date, pd.Timestamp):
        return input_date.date()
    elif isinstance(input_date, datetime):
        return input_date.date()
    elif isinstance(input_date, str):
        text = input_date.strip()
        # drop a leading weekday label such as "Mon "
        if len(text) > 4 and text[:3].isalpha() and text[3] == " ":
            text = text[4:]
        try:
            # pandas handles all common formats using dateutil.parser under the hood
            return pd.to_datetime(text, errors="raise").date()
        except Exception as e:
            raise ValueError(f"Could not parse date string '{input_date}': {e}")
    raise ValueError(f"Unsupported date type: {type(input_date)}")


def date_range(start_date: dt_date, num_days: int) -> List[dt_date]:
    """Return the `num_days` consecutive dates starting at `start_date`."""
    if num_days < 1:
        raise InvalidDateRangeError(
            f"Number of days must be at least 1, got {num_days}."
        )
    return [start_date + timedelta(days=i) for i in range(num_days)]


def month_bounds(year: int, month: int) -> tuple[dt_date, int]:
    """Return (first day, number of days) of a calendar month."""
    if not 1 <= month <= 12:
        raise InvalidDateRangeError(f"Month must be between 1 and 12, got {month}.")
    return dt_date(year, month, 1), calendar.monthrange(year, month)[1]


def is_weekend(day: dt_date) -> bool:
    return day.weekday() >= SATURDAY


def iso_week_number(day: dt_date) -> int:
    """ISO 8601 week number (weeks start Monday, week 1 holds the year's first Thursday)."""
    return day.isocalendar()[1]


def is_odd_iso_week(day: dt_date) -> bool:
    return iso_week_number(day) % 2 == 1


def week_index(day: dt_date) -> int:
    """Monotonic index of the Monday-anchored week containing `day`."""
    monday = day - timedelta(days=day.weekday())
    return monday.toordinal() // 7


def weekend_of(day: dt_date) -> tuple[dt_date, dt_date]:
    """Saturday and Sunday of the Monday-anchored week containing `day`."""
    monday = day - timedelta(days=day.weekday())
    return monday + timedelta(days=SATURDAY), monday + timedelta(days=SUNDAY)


def friday_of(day: dt_date) -> dt_date:
    monday = day - timedelta(days=day.weekday())
    return monday + timedelta(days=FRIDAY)


def format_day(day: dt_date) -> str:
    """Column label used in schedule grids, e.g. 'Mon 2025-07-07'."""
    return day.strftime("%a %Y-%m-%d")
