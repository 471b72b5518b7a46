"""Utility exports."""

from datepicker.utils.date_helpers import DateHelpers
from datepicker.utils.errors import ConfigurationError, DatePickerError, EmptyDateSequenceError
from datepicker.utils.logger import get_logger
from datepicker.utils.types import DateBounds, DateBoundsConfig, MaxDateBounds, MinDateBounds

__all__ = [
    "DateHelpers",
    "ConfigurationError",
    "DatePickerError",
    "EmptyDateSequenceError",
    "get_logger",
    "DateBounds",
    "DateBoundsConfig",
    "MaxDateBounds",
    "MinDateBounds",
]
