"""Adapter over the standard library datetime type."""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

from datepicker.adapters.base import DateAdapter


def _clamp_day(year: int, month: int, day: int) -> int:
    return min(day, calendar.monthrange(year, month)[1])


class NativeDateAdapter(DateAdapter[datetime]):
    """``datetime.datetime`` backend.

    With no ``tz`` the adapter works on naive values and epoch-based
    construction yields the UTC wall clock. ``now`` freezes the clock.
    """

    def __init__(self, tz: Optional[tzinfo] = None, now: Optional[datetime] = None) -> None:
        self.tz = tz
        self._frozen_now = now

    @property
    def name(self) -> str:
        return "native"

    def date(self, value: Optional[Union[int, float, datetime]] = None) -> datetime:
        if value is None:
            if self._frozen_now is not None:
                return self._frozen_now
            return datetime.now(self.tz)
        if isinstance(value, datetime):
            return value
        utc = datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
        if self.tz is None:
            return utc.replace(tzinfo=None)
        return utc.astimezone(self.tz)

    def to_datetime(self, value: datetime) -> datetime:
        return value

    def get_year(self, value: datetime) -> int:
        return value.year

    def get_month(self, value: datetime) -> int:
        return value.month

    def get_date(self, value: datetime) -> int:
        return value.day

    def get_hours(self, value: datetime) -> int:
        return value.hour

    def get_minutes(self, value: datetime) -> int:
        return value.minute

    def get_seconds(self, value: datetime) -> int:
        return value.second

    def set_year(self, value: datetime, year: int) -> datetime:
        return value.replace(year=year, day=_clamp_day(year, value.month, value.day))

    def set_month(self, value: datetime, month: int) -> datetime:
        return value.replace(month=month, day=_clamp_day(value.year, month, value.day))

    def set_seconds(self, value: datetime, seconds: int) -> datetime:
        return value.replace(second=seconds)

    def add_days(self, value: datetime, count: int) -> datetime:
        return value + timedelta(days=count)

    def add_months(self, value: datetime, count: int) -> datetime:
        return value + relativedelta(months=count)

    def is_before(self, value: datetime, comparing: datetime) -> bool:
        return value < comparing

    def is_after(self, value: datetime, comparing: datetime) -> bool:
        return value > comparing

    def is_same_day(self, value: datetime, comparing: datetime) -> bool:
        return value.date() == comparing.date()

    def get_diff(self, value: datetime, comparing: datetime) -> float:
        return (value - comparing).total_seconds() * 1000.0

    def start_of_month(self, value: datetime) -> datetime:
        return value.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

    def merge_date_and_time(self, date: datetime, time: datetime) -> datetime:
        return date.replace(hour=time.hour, minute=time.minute, second=0, microsecond=0)

    def format_by_string(self, value: datetime, pattern: str) -> str:
        return value.strftime(pattern)
