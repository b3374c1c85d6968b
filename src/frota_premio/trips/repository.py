from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import NewTrip, Trip


class TripRepository(Protocol):
    def list_trips(
        self,
        *,
        driver_name: Optional[str] = None,
        email: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[Trip]:
        raise NotImplementedError

    def count_on(self, *, driver_name: str, day: date) -> int:
        raise NotImplementedError

    def sum_values(self, *, driver_name: str, start: date, end: date) -> float:
        raise NotImplementedError

    def insert(self, trip: NewTrip) -> int:
        raise NotImplementedError

    def bulk_insert(self, trips: Sequence[NewTrip]) -> int:
        raise NotImplementedError
