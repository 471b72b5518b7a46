from datetime import datetime

import pytest

from date_scenarios import helpers
from datepicker.api import build_month_view
from datepicker.utils.errors import ConfigurationError
from datepicker.utils.types import DateBoundsConfig


def test_month_view_pads_to_full_weeks():
    view = build_month_view(helpers(), datetime(2020, 6, 15, 8, 30))

    assert view.month_start == datetime(2020, 6, 1, 8, 30)
    assert len(view.weeks) == 5
    assert all(len(week) == 7 for week in view.weeks)
    assert view.weeks[0][0].date == datetime(2020, 6, 1, 8, 30)
    assert view.weeks[-1][-1].date == datetime(2020, 7, 5, 8, 30)
    assert [cell.in_month for cell in view.weeks[-1]] == [True, True, False, False, False, False, False]


def test_month_view_week_start_sunday():
    view = build_month_view(helpers(), datetime(2020, 6, 15), week_start=6)

    first = view.weeks[0][0]
    assert first.date == datetime(2020, 5, 31)
    assert first.in_month is False
    assert view.weeks[0][1].in_month is True


def test_month_view_exact_four_weeks():
    view = build_month_view(helpers(), datetime(2021, 2, 10))

    assert len(view.weeks) == 4
    assert all(cell.in_month for week in view.weeks for cell in week)


def test_month_view_marks_disabled_days_and_navigation():
    config = DateBoundsConfig(
        min_date=datetime(2020, 6, 10),
        max_date=datetime(2020, 6, 20),
        exclude_dates=[datetime(2020, 6, 15)],
    )

    view = build_month_view(helpers(), datetime(2020, 6, 12), config)

    cells = {cell.date.day: cell for week in view.weeks for cell in week if cell.in_month}
    assert cells[9].disabled is True
    assert cells[10].disabled is False
    assert cells[15].disabled is True
    assert cells[20].disabled is False
    assert cells[21].disabled is True
    assert view.prev_disabled is True
    assert view.next_disabled is True
    assert view.min_date == datetime(2020, 6, 10)
    assert view.max_date == datetime(2020, 6, 20)


def test_month_view_without_bounds_leaves_effective_dates_empty():
    view = build_month_view(helpers(), datetime(2020, 6, 12))

    assert view.min_date is None
    assert view.max_date is None
    assert view.prev_disabled is False
    assert view.next_disabled is False
    assert not any(cell.disabled for week in view.weeks for cell in week)


def test_month_view_uses_include_dates_for_effective_bounds():
    include = [datetime(2020, 6, 3), datetime(2020, 7, 9)]

    view = build_month_view(helpers(), datetime(2020, 6, 12), DateBoundsConfig(include_dates=include))

    assert view.min_date == datetime(2020, 6, 3)
    assert view.max_date == datetime(2020, 7, 9)
    assert view.prev_disabled is True
    assert view.next_disabled is False


@pytest.mark.parametrize("week_start", [-1, 7])
def test_month_view_rejects_bad_week_start(week_start):
    with pytest.raises(ConfigurationError):
        build_month_view(helpers(), datetime(2020, 6, 12), week_start=week_start)


@pytest.mark.parametrize("anchor_hour,anchor_minute", [(0, 0), (8, 30), (13, 0), (23, 59)])
def test_month_view_disabled_days_ignore_time_of_day(anchor_hour, anchor_minute):
    config = DateBoundsConfig(min_date=datetime(2020, 6, 10, 12), max_date=datetime(2020, 6, 20, 6))

    view = build_month_view(helpers(), datetime(2020, 6, 12, anchor_hour, anchor_minute), config)

    cells = {cell.date.day: cell for week in view.weeks for cell in week if cell.in_month}
    assert cells[9].disabled is True
    assert cells[10].disabled is False
    assert cells[20].disabled is False
    assert cells[21].disabled is True
    assert (cells[10].date.hour, cells[10].date.minute) == (anchor_hour, anchor_minute)


def test_month_view_rejects_dict_config():
    with pytest.raises(ConfigurationError):
        build_month_view(helpers(), datetime(2020, 6, 12), {"min_date": datetime(2020, 6, 10)})
