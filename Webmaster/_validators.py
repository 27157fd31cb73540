"""Parameter validation helpers."""
from __future__ import annotations

import calendar
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional, Tuple, Union

from .errors import ValidationFailure

DateLike = Union[datetime, date, int, float]

DEFAULT_LIMIT = 100


def coerce_timestamp(value: DateLike, param_name: str = "date") -> datetime:
    """
    Coerce a date-like value to an aware datetime.

    Naive datetimes and plain dates are taken as UTC; numbers are unix timestamps.
    """
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (ValueError, OverflowError, OSError) as exc:
            raise ValidationFailure(f"Invalid value for '{param_name}': {value!r}") from exc
    raise ValidationFailure(
        f"Invalid value for '{param_name}': {value!r}. Expected datetime, date or unix timestamp"
    )


def format_timestamp(value: datetime) -> str:
    """ISO-8601 with offset, e.g. 2024-01-15T08:30:00+00:00."""
    return value.isoformat(timespec="seconds")


def one_month_before(value: datetime) -> datetime:
    """Same wall-clock time one calendar month earlier, day clamped to the month's length."""
    year, month = (value.year, value.month - 1) if value.month > 1 else (value.year - 1, 12)
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def date_window(
    date_from: Optional[DateLike] = None,
    date_to: Optional[DateLike] = None,
    *,
    now: Optional[datetime] = None,
) -> Tuple[str, str]:
    """
    Resolve a reporting window.

    A missing `date_to` defaults to now and a missing `date_from` to one month
    before now. Raises ValidationFailure when the window is inverted.
    """
    current = now or datetime.now(timezone.utc)
    start = coerce_timestamp(date_from, "date_from") if date_from is not None else one_month_before(current)
    end = coerce_timestamp(date_to, "date_to") if date_to is not None else current
    if end < start:
        raise ValidationFailure("Date to can't be smaller then Date from")
    return format_timestamp(start), format_timestamp(end)


def optional_date_range(
    date_from: Optional[DateLike] = None,
    date_to: Optional[DateLike] = None,
) -> Dict[str, str]:
    """Serialize whichever bounds are given; the service picks its own default window."""
    params: Dict[str, str] = {}
    start = coerce_timestamp(date_from, "date_from") if date_from is not None else None
    end = coerce_timestamp(date_to, "date_to") if date_to is not None else None
    if start is not None and end is not None and end < start:
        raise ValidationFailure("Date to can't be smaller then Date from")
    if start is not None:
        params["date_from"] = format_timestamp(start)
    if end is not None:
        params["date_to"] = format_timestamp(end)
    return params


def validate_page(offset: int = 0, limit: int = DEFAULT_LIMIT, max_limit: int = DEFAULT_LIMIT) -> Dict[str, int]:
    """Check pagination bounds. Out-of-range values are rejected, never clamped."""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0 or limit > max_limit:
        raise ValidationFailure(f"Bad limit to {limit}")
    if isinstance(offset, bool) or not isinstance(offset, int) or offset < 0:
        raise ValidationFailure(f"Bad offset to {offset}")
    return {"offset": offset, "limit": limit}


def require(value: Any, param_name: str) -> str:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationFailure(f"Parameter '{param_name}' is required")
    return str(value)
