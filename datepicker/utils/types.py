"""Bounds and filter configuration passed to the date helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class MinDateBounds(Generic[T]):
    min_date: Optional[T] = None
    include_dates: Optional[Sequence[T]] = None


@dataclass(frozen=True)
class MaxDateBounds(Generic[T]):
    max_date: Optional[T] = None
    include_dates: Optional[Sequence[T]] = None


@dataclass(frozen=True)
class DateBounds(Generic[T]):
    min_date: Optional[T] = None
    max_date: Optional[T] = None


@dataclass(frozen=True)
class DateBoundsConfig(Generic[T]):
    """Everything that decides whether a day can be picked.

    ``include_dates`` restricts selection to those days, ``exclude_dates``
    removes days, and ``filter_date`` returns False for days to reject.
    """

    min_date: Optional[T] = None
    max_date: Optional[T] = None
    exclude_dates: Optional[Sequence[T]] = None
    include_dates: Optional[Sequence[T]] = None
    filter_date: Optional[Callable[[T], bool]] = None

    def min_bounds(self) -> MinDateBounds[T]:
        return MinDateBounds(min_date=self.min_date, include_dates=self.include_dates)

    def max_bounds(self) -> MaxDateBounds[T]:
        return MaxDateBounds(max_date=self.max_date, include_dates=self.include_dates)

    def bounds(self) -> DateBounds[T]:
        return DateBounds(min_date=self.min_date, max_date=self.max_date)
