"""Date arithmetic helpers"""

import calendar
from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    """Current time, timezone-aware UTC"""
    return datetime.now(timezone.utc)


def add_months(moment: datetime, months: int) -> datetime:
    """
    Add calendar months to a timestamp

    Keeps the day of month. When the target month is shorter, the surplus
    days roll over into the following month, so January 31st plus one month
    is March 2nd in a leap year.

    Args:
        moment: Start timestamp
        months: Number of months to add (may be negative)

    Returns:
        Shifted timestamp with the same time of day and tzinfo
    """
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    if moment.day <= last_day:
        return moment.replace(year=year, month=month)
    overflow = moment.day - last_day
    return moment.replace(year=year, month=month, day=last_day) + timedelta(days=overflow)
