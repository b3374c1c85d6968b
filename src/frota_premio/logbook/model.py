from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..core.enums import Direction, WorkPeriod


@dataclass(frozen=True)
class LogbookEntry:
    """Um trecho do diário de bordo (ida ou volta)."""

    entry_id: int
    driver_id: int
    trip_date: date
    direction: Direction
    origin: str
    km_start: float
    start_time: time
    destination: str
    end_time: time
    week: str
    status: str = "rascunho"


@dataclass(frozen=True)
class NewLogbookEntry:
    driver_id: int
    trip_date: date
    direction: Direction
    origin: str
    km_start: float
    start_time: time
    destination: str
    end_time: time
    week: str
    status: str = "rascunho"


@dataclass(frozen=True)
class RoundTrip:
    """Ida seguida da volta correspondente; `inbound` is None for a single leg."""

    outbound: LogbookEntry
    inbound: Optional[LogbookEntry] = None

    @property
    def legs(self) -> list[LogbookEntry]:
        return [self.outbound] if self.inbound is None else [self.outbound, self.inbound]

    @property
    def is_paired(self) -> bool:
        return self.inbound is not None


@dataclass(frozen=True)
class WeeklyDelivery:
    delivery_id: int
    driver_id: int
    week: str
    start_date: date
    end_date: date
    status: str
    justification: Optional[str]
    signature: str
    tractor: str
    trailer: str
    period: WorkPeriod
    pdf_path: str
    delivered_at: Optional[datetime] = None
    driver_name: Optional[str] = None


@dataclass(frozen=True)
class NewWeeklyDelivery:
    driver_id: int
    week: str
    start_date: date
    end_date: date
    justification: Optional[str]
    signature: str
    tractor: str
    trailer: str
    period: WorkPeriod
    pdf_path: str
    delivered_at: datetime
    status: str = "entregue"
