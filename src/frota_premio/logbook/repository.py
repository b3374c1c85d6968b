from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import LogbookEntry, NewLogbookEntry, NewWeeklyDelivery, WeeklyDelivery


class LogbookRepository(Protocol):
    def add_entry(self, entry: NewLogbookEntry) -> int:
        raise NotImplementedError

    def list_entries(self, *, driver_id: int, start: date, end: date) -> Sequence[LogbookEntry]:
        raise NotImplementedError

    def get_delivery(self, *, driver_id: int, week: str) -> Optional[WeeklyDelivery]:
        raise NotImplementedError

    def create_delivery(self, delivery: NewWeeklyDelivery) -> int:
        raise NotImplementedError

    def list_deliveries(self, *, week: str) -> Sequence[WeeklyDelivery]:
        raise NotImplementedError
