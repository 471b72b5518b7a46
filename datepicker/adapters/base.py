"""Date adapter interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Generic, Optional, TypeVar, Union

T = TypeVar("T")


class DateAdapter(ABC, Generic[T]):
    """Primitive operations over a concrete date-time representation.

    Helpers never inspect a date value directly; everything goes through
    these methods. Month numbering is up to the adapter as long as
    ``get_month`` and ``set_month`` agree.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def date(self, value: Optional[Union[int, float, T]] = None) -> T:
        """Return now for ``None``, a date from epoch milliseconds for a number."""
        raise NotImplementedError

    @abstractmethod
    def to_datetime(self, value: T) -> datetime:
        raise NotImplementedError

    @abstractmethod
    def get_year(self, value: T) -> int:
        raise NotImplementedError

    @abstractmethod
    def get_month(self, value: T) -> int:
        raise NotImplementedError

    @abstractmethod
    def get_date(self, value: T) -> int:
        """Day of month, 1-based."""
        raise NotImplementedError

    @abstractmethod
    def get_hours(self, value: T) -> int:
        raise NotImplementedError

    @abstractmethod
    def get_minutes(self, value: T) -> int:
        raise NotImplementedError

    @abstractmethod
    def get_seconds(self, value: T) -> int:
        raise NotImplementedError

    @abstractmethod
    def set_year(self, value: T, year: int) -> T:
        raise NotImplementedError

    @abstractmethod
    def set_month(self, value: T, month: int) -> T:
        raise NotImplementedError

    @abstractmethod
    def set_seconds(self, value: T, seconds: int) -> T:
        raise NotImplementedError

    @abstractmethod
    def add_days(self, value: T, count: int) -> T:
        raise NotImplementedError

    @abstractmethod
    def add_months(self, value: T, count: int) -> T:
        raise NotImplementedError

    @abstractmethod
    def is_before(self, value: T, comparing: T) -> bool:
        raise NotImplementedError

    @abstractmethod
    def is_after(self, value: T, comparing: T) -> bool:
        raise NotImplementedError

    @abstractmethod
    def is_same_day(self, value: T, comparing: T) -> bool:
        raise NotImplementedError

    @abstractmethod
    def get_diff(self, value: T, comparing: T) -> float:
        """Return ``value - comparing`` in milliseconds."""
        raise NotImplementedError

    @abstractmethod
    def start_of_month(self, value: T) -> T:
        raise NotImplementedError

    @abstractmethod
    def merge_date_and_time(self, date: T, time: T) -> T:
        """Calendar part of ``date`` with the hours and minutes of ``time``.

        Seconds are not guaranteed to survive the merge.
        """
        raise NotImplementedError

    @abstractmethod
    def format_by_string(self, value: T, pattern: str) -> str:
        raise NotImplementedError
