from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from ..errors import InvalidDateRangeError
from ..models import Vehicle

CENT = Decimal("0.01")

DateLike = Union[str, date]


def parse_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip().split("T")[0])
    except (AttributeError, ValueError):
        raise InvalidDateRangeError(f"Invalid date: {value!r}") from None


def rental_days(start_date: DateLike, end_date: DateLike) -> int:
    """Whole days between pickup and return, the return day not counted."""
    start = parse_date(start_date)
    end = parse_date(end_date)
    if end <= start:
        raise InvalidDateRangeError(f"End date {end.isoformat()} must be after start date {start.isoformat()}")
    return (end - start).days


def compute_total_cost(vehicle: Vehicle, start_date: DateLike, end_date: DateLike) -> Decimal:
    days = rental_days(start_date, end_date)
    return (vehicle.pricePerDay * days).quantize(CENT, rounding=ROUND_HALF_UP)
