"""Date picker helpers package entry point."""

from datepicker.adapters import DateAdapter, NativeDateAdapter
from datepicker.api import DayCell, MonthView, build_month_view
from datepicker.utils.date_helpers import DateHelpers
from datepicker.utils.types import DateBounds, DateBoundsConfig, MaxDateBounds, MinDateBounds

__all__ = [
    "DateAdapter",
    "NativeDateAdapter",
    "DayCell",
    "MonthView",
    "build_month_view",
    "DateHelpers",
    "DateBounds",
    "DateBoundsConfig",
    "MaxDateBounds",
    "MinDateBounds",
]
