"""Regras de crédito de dia parado.

Pure functions shared by the driver request flow and the admin flows.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from ..common.datetime_utils import format_minutes, minutes_between
from ..core.constants import (
    FULL_DAY_STOP_MINUTES,
    WORKDAYS_PER_MONTH,
    WORKSHOP_CREDIT,
    WORKSHOP_TRIP_THRESHOLD,
)
from ..core.enums import StoppageInclusion
from ..core.exceptions import InvalidStoppageError


@dataclass(frozen=True)
class StoppageCredit:
    minutes: int
    duration: str
    inclusion: StoppageInclusion
    value: float


def stopped_minutes(start: time, end: time) -> int:
    """Minutes stopped between start and end; must be strictly positive."""
    minutes = minutes_between(start, end)
    if minutes <= 0:
        raise InvalidStoppageError("Horário de fim da parada deve ser maior que início")
    return minutes


def classify_inclusion(trips_that_day: int, minutes: int) -> StoppageInclusion:
    if trips_that_day == 0 or minutes >= FULL_DAY_STOP_MINUTES:
        return StoppageInclusion.FULL_DAY
    if trips_that_day > WORKSHOP_TRIP_THRESHOLD:
        return StoppageInclusion.WORKSHOP_TRIP
    return StoppageInclusion.HALF_DAY


def credited_value(inclusion: StoppageInclusion, month_trip_total: float) -> float:
    daily = month_trip_total / WORKDAYS_PER_MONTH
    if inclusion == StoppageInclusion.FULL_DAY:
        value = daily
    elif inclusion == StoppageInclusion.HALF_DAY:
        value = daily / 2
    else:
        value = WORKSHOP_CREDIT
    return round(value, 2)


def compute_credit(*, start: time, end: time, trips_that_day: int, month_trip_total: float) -> StoppageCredit:
    minutes = stopped_minutes(start, end)
    inclusion = classify_inclusion(trips_that_day, minutes)
    return StoppageCredit(
        minutes=minutes,
        duration=format_minutes(minutes),
        inclusion=inclusion,
        value=credited_value(inclusion, month_trip_total),
    )
