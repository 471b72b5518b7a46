"""Date adapter exports."""

from datepicker.adapters.base import DateAdapter
from datepicker.adapters.native import NativeDateAdapter

__all__ = [
    "DateAdapter",
    "NativeDateAdapter",
]
