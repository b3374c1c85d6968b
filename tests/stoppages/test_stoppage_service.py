from __future__ import annotations

from datetime import date, time

import pytest

from frota_premio.core.enums import StoppageInclusion
from frota_premio.core.exceptions import InvalidStoppageError, ValidationError
from frota_premio.stoppages.model import PendingStoppage
from frota_premio.stoppages.service import StoppageService


class FakeTrips:
    def __init__(self, *, count: int, month_total: float):
        self._count = count
        self._month_total = month_total
        self.sum_args = None

    def count_on(self, *, driver_name, day):
        return self._count

    def sum_values(self, *, driver_name, start, end):
        self.sum_args = (driver_name, start, end)
        return self._month_total


class InMemoryStoppages:
    def __init__(self):
        self.inserted = []
        self.pending: dict[int, PendingStoppage] = {}
        self._id = 0

    def insert(self, stoppage):
        self.inserted.append(stoppage)
        return len(self.inserted)

    def list_stoppages(self, *, driver_name=None, start=None, end=None, limit=500):
        return []

    def create_pending(self, *, driver_name, stop_date, start_time, end_time, duration, submitted_by):
        self._id += 1
        self.pending[self._id] = PendingStoppage(
            pending_id=self._id,
            driver_name=driver_name,
            stop_date=stop_date,
            start_time=start_time,
            end_time=end_time,
            duration=duration,
            submitted_by=submitted_by,
        )
        return self._id

    def get_pending(self, pending_id):
        return self.pending.get(pending_id)

    def list_pending(self):
        return list(self.pending.values())

    def delete_pending(self, pending_id):
        return self.pending.pop(pending_id, None) is not None


def test_request_stores_pending_with_formatted_duration():
    repo = InMemoryStoppages()
    svc = StoppageService(repo, FakeTrips(count=0, month_total=0))

    pending_id = svc.request(
        driver_name="João Silva",
        stop_date="2024-03-10",
        start_time="08:00",
        end_time="09:30",
        submitted_by="joao@frota.com",
    )

    pending = repo.get_pending(pending_id)
    assert pending.duration == "01:30"
    assert pending.stop_date == date(2024, 3, 10)
    assert repo.inserted == []


def test_request_rejects_zero_minutes():
    svc = StoppageService(InMemoryStoppages(), FakeTrips(count=0, month_total=0))

    with pytest.raises(InvalidStoppageError):
        svc.request(driver_name="João Silva", stop_date="2024-03-10", start_time="08:00", end_time="08:00")


def test_approve_computes_credit_from_calendar_month_and_removes_pending():
    repo = InMemoryStoppages()
    trips = FakeTrips(count=1, month_total=2200.0)
    svc = StoppageService(repo, trips)
    pending_id = svc.request(driver_name="João Silva", stop_date="2024-02-10", start_time="08:00", end_time="10:00")

    stoppage = svc.approve_pending(pending_id)

    assert stoppage.inclusion == StoppageInclusion.HALF_DAY
    assert stoppage.value == 50.0
    assert trips.sum_args == ("João Silva", date(2024, 2, 1), date(2024, 2, 29))
    assert repo.pending == {}
    assert repo.inserted[0].duration == "02:00"


def test_include_direct_workshop_trip():
    repo = InMemoryStoppages()
    svc = StoppageService(repo, FakeTrips(count=3, month_total=2200.0))

    stoppage = svc.include_direct(driver_name="Maria Souza", stop_date="2024-03-01", start_time="13:00", end_time="14:00")

    assert stoppage.inclusion == StoppageInclusion.WORKSHOP_TRIP
    assert stoppage.value == 7.71
    assert stoppage.start_time == time(13, 0)


def test_reject_unknown_pending():
    svc = StoppageService(InMemoryStoppages(), FakeTrips(count=0, month_total=0))

    with pytest.raises(ValidationError):
        svc.reject_pending(42)


def test_include_direct_requires_driver():
    svc = StoppageService(InMemoryStoppages(), FakeTrips(count=0, month_total=0))

    with pytest.raises(ValidationError):
        svc.include_direct(driver_name=" ", stop_date="2024-03-01", start_time="13:00", end_time="14:00")
