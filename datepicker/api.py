"""Month view API used by a picker to render one month."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Generic, Optional, Tuple, TypeVar

from datepicker.utils.date_helpers import DateHelpers
from datepicker.utils.errors import ConfigurationError
from datepicker.utils.logger import get_logger
from datepicker.utils.types import DateBoundsConfig

T = TypeVar("T")

DAYS_PER_WEEK = 7

logger = get_logger(__name__)


@dataclass(frozen=True)
class DayCell(Generic[T]):
    date: T
    in_month: bool
    disabled: bool


@dataclass(frozen=True)
class MonthView(Generic[T]):
    month_start: T
    weeks: Tuple[Tuple[DayCell[T], ...], ...]
    prev_disabled: bool
    next_disabled: bool
    min_date: Optional[T] = None
    max_date: Optional[T] = None


def _start_of_day(helpers: DateHelpers[T], value: Optional[T]) -> Optional[T]:
    if value is None:
        return None
    adapter = helpers.adapter
    return adapter.add_days(adapter.start_of_month(value), adapter.get_date(value) - 1)


def build_month_view(
    helpers: DateHelpers[T],
    day: T,
    config: Optional[DateBoundsConfig[T]] = None,
    week_start: int = 0,
) -> MonthView[T]:
    """Lay out the month containing ``day`` as full weeks of day cells.

    ``week_start`` follows ``datetime.weekday()``: 0 is Monday, 6 is Sunday.
    """

    if not 0 <= week_start < DAYS_PER_WEEK:
        raise ConfigurationError(f"week_start must be in 0..6, got {week_start}")
    if config is not None and not isinstance(config, DateBoundsConfig):
        raise ConfigurationError(f"config must be a DateBoundsConfig, got {type(config).__name__}")
    config = config or DateBoundsConfig()
    adapter = helpers.adapter
    # Disabled flags are computed at midnight against day-aligned bounds.
    day_config = replace(
        config,
        min_date=_start_of_day(helpers, config.min_date),
        max_date=_start_of_day(helpers, config.max_date),
    )

    month_start = helpers.set_date(day, 1)
    next_month_start = adapter.add_months(month_start, 1)
    lead = (adapter.to_datetime(month_start).weekday() - week_start) % DAYS_PER_WEEK
    cursor = adapter.add_days(month_start, -lead)
    midnight = adapter.add_days(adapter.start_of_month(day), -lead)

    weeks = []
    while not weeks or adapter.is_before(cursor, next_month_start):
        week = []
        for _ in range(DAYS_PER_WEEK):
            week.append(
                DayCell(
                    date=cursor,
                    in_month=helpers.difference_in_calendar_months(cursor, month_start) == 0,
                    disabled=helpers.is_day_disabled(midnight, day_config),
                )
            )
            cursor = adapter.add_days(cursor, 1)
            midnight = adapter.add_days(midnight, 1)
        weeks.append(tuple(week))

    min_date = None
    if config.min_date is not None or config.include_dates:
        min_date = helpers.get_effective_min_date(config)
    max_date = None
    if config.max_date is not None or config.include_dates:
        max_date = helpers.get_effective_max_date(config)

    logger.debug(
        "built month view for %s with %d weeks",
        adapter.format_by_string(month_start, "%Y-%m"),
        len(weeks),
    )
    return MonthView(
        month_start=month_start,
        weeks=tuple(weeks),
        prev_disabled=helpers.month_disabled_before(day, config),
        next_disabled=helpers.month_disabled_after(day, config),
        min_date=min_date,
        max_date=max_date,
    )
