from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Optional, Tuple

from bookingboost.core.errors import BadRequestError


def parse_time_window(window: str, today: Optional[date] = None) -> Tuple[date, date]:
    today = today or date.today()
    try:
        if window.endswith("d"):
            days = int(window[:-1])
            if days <= 0:
                raise BadRequestError("Unsupported time window format")
            return today - timedelta(days=days), today
        if window.endswith("m"):
            months = int(window[:-1])
            if months <= 0:
                raise BadRequestError("Unsupported time window format")
            return add_months(today, -months), today
    except ValueError as exc:
        raise BadRequestError("Unsupported time window format") from exc
    raise BadRequestError("Unsupported time window format")


def resolve_date_range(
    time_window: str,
    start_date: Optional[date],
    end_date: Optional[date],
    today: Optional[date] = None,
) -> Tuple[date, date, str]:
    """Explicit dates win over the rolling window; returns (start, end, label)."""
    today = today or date.today()
    if start_date is None and end_date is None:
        start, end = parse_time_window(time_window, today)
        return start, end, time_window
    start = start_date or month_start(end_date or today)
    end = end_date or today
    if start > end:
        raise BadRequestError("start_date must be on or before end_date")
    return start, end, f"{start.isoformat()}..{end.isoformat()}"


def previous_period(start: date, end: date) -> Tuple[date, date]:
    length = end - start
    previous_end = start - timedelta(days=1)
    return previous_end - length, previous_end


def month_start(value: date) -> date:
    return date(value.year, value.month, 1)


def month_end(value: date) -> date:
    return date(value.year, value.month, calendar.monthrange(value.year, value.month)[1])


def add_months(value: date, months: int) -> date:
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)
