from __future__ import annotations

from datetime import time

import pytest

from frota_premio.core.enums import StoppageInclusion
from frota_premio.core.exceptions import InvalidStoppageError
from frota_premio.stoppages.rules import classify_inclusion, compute_credit, credited_value, stopped_minutes


def test_ninety_minutes_formats_as_hh_mm():
    credit = compute_credit(start=time(8, 0), end=time(9, 30), trips_that_day=1, month_trip_total=2200.0)

    assert credit.minutes == 90
    assert credit.duration == "01:30"
    assert credit.inclusion == StoppageInclusion.HALF_DAY
    assert credit.value == 50.0


@pytest.mark.parametrize("start, end", [(time(8, 0), time(8, 0)), (time(10, 0), time(9, 0))])
def test_non_positive_duration_is_rejected(start, end):
    with pytest.raises(InvalidStoppageError):
        stopped_minutes(start, end)


@pytest.mark.parametrize(
    "trips, minutes, expected",
    [
        (0, 30, StoppageInclusion.FULL_DAY),
        (1, 360, StoppageInclusion.FULL_DAY),
        (3, 400, StoppageInclusion.FULL_DAY),
        (3, 60, StoppageInclusion.WORKSHOP_TRIP),
        (2, 60, StoppageInclusion.HALF_DAY),
        (1, 359, StoppageInclusion.HALF_DAY),
    ],
)
def test_classify_inclusion(trips, minutes, expected):
    assert classify_inclusion(trips, minutes) == expected


def test_credited_values():
    assert credited_value(StoppageInclusion.FULL_DAY, 2200.0) == 100.0
    assert credited_value(StoppageInclusion.HALF_DAY, 2200.0) == 50.0
    assert credited_value(StoppageInclusion.WORKSHOP_TRIP, 2200.0) == 7.71
    assert credited_value(StoppageInclusion.FULL_DAY, 1000.0) == 45.45


def test_zero_trips_gives_full_day_even_when_short():
    credit = compute_credit(start=time(8, 0), end=time(8, 15), trips_that_day=0, month_trip_total=0.0)

    assert credit.inclusion == StoppageInclusion.FULL_DAY
    assert credit.value == 0.0
