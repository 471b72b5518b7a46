"""Calendar math and disabled-date policy over a pluggable date adapter."""

from __future__ import annotations

from datetime import timezone
from functools import reduce
from typing import Generic, Optional, Sequence, Tuple, TypeVar, Union

from datepicker.adapters.base import DateAdapter
from datepicker.utils.errors import ConfigurationError, EmptyDateSequenceError
from datepicker.utils.logger import get_logger
from datepicker.utils.types import DateBounds, DateBoundsConfig, MaxDateBounds, MinDateBounds

T = TypeVar("T")

MINUTE = 60
HOUR = MINUTE * 60
MS_PER_DAY = 864e5

logger = get_logger(__name__)

_MIN_BAGS = (MinDateBounds, DateBoundsConfig)
_MAX_BAGS = (MaxDateBounds, DateBoundsConfig)
_BOUNDS_BAGS = (DateBounds, DateBoundsConfig)

MinBoundsLike = Union[MinDateBounds[T], DateBoundsConfig[T], None]
MaxBoundsLike = Union[MaxDateBounds[T], DateBoundsConfig[T], None]
BoundsLike = Union[DateBounds[T], DateBoundsConfig[T], None]


def _check_bag(bag, allowed, operation):
    if bag is not None and not isinstance(bag, allowed):
        expected = " or ".join(cls.__name__ for cls in allowed)
        raise ConfigurationError(
            f"{operation} expects {expected} or None, got {type(bag).__name__}"
        )
    return bag


class DateHelpers(Generic[T]):
    """Stateless helpers parameterized by a date adapter.

    Bounds arguments accept the narrow bag for the operation or a full
    ``DateBoundsConfig``; ``None`` means no bounds at all.
    """

    def __init__(self, adapter: DateAdapter[T]) -> None:
        self.adapter = adapter

    def date_to_seconds(self, date: T) -> int:
        seconds = self.adapter.get_seconds(date)
        minutes = self.adapter.get_minutes(date) * MINUTE
        hours = self.adapter.get_hours(date) * HOUR
        return seconds + minutes + hours

    def seconds_to_hour_minute(self, seconds: int) -> Tuple[int, int]:
        d = self.adapter.to_datetime(self.adapter.date(seconds * 1000))
        if d.tzinfo is not None:
            d = d.astimezone(timezone.utc)
        return d.hour, d.minute

    def difference_in_calendar_months(self, from_date: T, to_date: T) -> int:
        year_diff = self.adapter.get_year(from_date) - self.adapter.get_year(to_date)
        month_diff = self.adapter.get_month(from_date) - self.adapter.get_month(to_date)
        return year_diff * 12 + month_diff

    def difference_in_calendar_days(self, from_date: T, to_date: T) -> float:
        # Time of day leaks into the result; callers normalize if they need whole days.
        return self.adapter.get_diff(from_date, to_date) / MS_PER_DAY

    def sub_months(self, date: T, months: int) -> T:
        return self.adapter.add_months(date, -months)

    def min(self, dates: Sequence[T]) -> T:
        if not dates:
            raise EmptyDateSequenceError("cannot take the minimum of an empty date sequence")
        return reduce(
            lambda min_date, date: date if self.adapter.is_before(date, min_date) else min_date,
            dates,
        )

    def max(self, dates: Sequence[T]) -> T:
        if not dates:
            raise EmptyDateSequenceError("cannot take the maximum of an empty date sequence")
        return reduce(
            lambda max_date, date: date if self.adapter.is_after(date, max_date) else max_date,
            dates,
        )

    def get_effective_min_date(self, bounds: MinBoundsLike = None) -> T:
        """Earliest selectable date given a lower bound and/or an include list.

        With neither supplied this returns the adapter's current date.
        """
        bounds = _check_bag(bounds, _MIN_BAGS, "get_effective_min_date") or MinDateBounds()
        min_date = bounds.min_date
        include_dates = bounds.include_dates
        if include_dates and min_date is not None:
            candidates = [
                include_date
                for include_date in include_dates
                if self.difference_in_calendar_days(include_date, min_date) >= 0
            ]
            return self.min(candidates)
        if include_dates:
            return self.min(include_dates)
        if min_date is not None:
            return min_date
        logger.debug("no min_date or include_dates supplied, using current date")
        return self.adapter.date()

    def get_effective_max_date(self, bounds: MaxBoundsLike = None) -> T:
        """Latest selectable date; mirrors ``get_effective_min_date``."""
        bounds = _check_bag(bounds, _MAX_BAGS, "get_effective_max_date") or MaxDateBounds()
        max_date = bounds.max_date
        include_dates = bounds.include_dates
        if include_dates and max_date is not None:
            candidates = [
                include_date
                for include_date in include_dates
                if self.difference_in_calendar_days(include_date, max_date) <= 0
            ]
            return self.max(candidates)
        if include_dates:
            return self.max(include_dates)
        if max_date is not None:
            return max_date
        logger.debug("no max_date or include_dates supplied, using current date")
        return self.adapter.date()

    def month_disabled_before(self, day: T, bounds: MinBoundsLike = None) -> bool:
        """True when the month before ``day`` holds no selectable date."""
        bounds = _check_bag(bounds, _MIN_BAGS, "month_disabled_before") or MinDateBounds()
        min_date = bounds.min_date
        include_dates = bounds.include_dates
        previous_month = self.sub_months(day, 1)
        if min_date is not None and self.difference_in_calendar_months(min_date, previous_month) > 0:
            return True
        if include_dates is not None:
            return all(
                self.difference_in_calendar_months(include_date, previous_month) > 0
                for include_date in include_dates
            )
        return False

    def month_disabled_after(self, day: T, bounds: MaxBoundsLike = None) -> bool:
        """True when the month after ``day`` holds no selectable date."""
        bounds = _check_bag(bounds, _MAX_BAGS, "month_disabled_after") or MaxDateBounds()
        max_date = bounds.max_date
        include_dates = bounds.include_dates
        next_month = self.adapter.add_months(day, 1)
        if max_date is not None and self.difference_in_calendar_months(next_month, max_date) > 0:
            return True
        if include_dates is not None:
            return all(
                self.difference_in_calendar_months(next_month, include_date) > 0
                for include_date in include_dates
            )
        return False

    def set_date(self, date: T, day_number: int) -> T:
        """Move ``date`` to ``day_number`` of its month, keeping time of day."""
        if day_number < 1:
            raise ConfigurationError(f"day_number must be >= 1, got {day_number}")
        start_of_month_no_time = self.adapter.start_of_month(date)
        start_of_month_hours_and_minutes = self.adapter.merge_date_and_time(
            start_of_month_no_time,
            date,
        )
        # merge_date_and_time may drop seconds
        start_of_month = self.adapter.set_seconds(
            start_of_month_hours_and_minutes,
            self.adapter.get_seconds(date),
        )
        return self.adapter.add_days(start_of_month, day_number - 1)

    def apply_date_to_time(self, time: Optional[T], date: T) -> T:
        """Calendar day of ``date`` combined with the clock of ``time``."""
        if time is None:
            return date
        year_number = self.adapter.get_year(date)
        month_number = self.adapter.get_month(date)
        day_number = self.adapter.get_date(date)
        year_date = self.adapter.set_year(time, year_number)
        month_date = self.adapter.set_month(year_date, month_number)
        return self.set_date(month_date, day_number)

    def is_day_disabled(self, day: T, config: Optional[DateBoundsConfig[T]] = None) -> bool:
        config = _check_bag(config, (DateBoundsConfig,), "is_day_disabled") or DateBoundsConfig()
        if self.is_out_of_bounds(day, config):
            return True
        if config.exclude_dates and any(
            self.adapter.is_same_day(day, exclude_date) for exclude_date in config.exclude_dates
        ):
            return True
        if config.include_dates is not None and not any(
            self.adapter.is_same_day(day, include_date) for include_date in config.include_dates
        ):
            return True
        if config.filter_date is not None and not config.filter_date(day):
            return True
        return False

    def is_out_of_bounds(self, day: T, bounds: BoundsLike = None) -> bool:
        bounds = _check_bag(bounds, _BOUNDS_BAGS, "is_out_of_bounds") or DateBounds()
        min_date = bounds.min_date
        max_date = bounds.max_date
        return (min_date is not None and self.difference_in_calendar_days(day, min_date) < 0) or (
            max_date is not None and self.difference_in_calendar_days(day, max_date) > 0
        )
