from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import TripStatus


@dataclass(frozen=True)
class Trip:
    """Entidade de domínio: viagem confirmada que gera receita."""

    trip_id: int
    driver_name: str
    origin: str
    destination: str
    trip_date: date
    container: Optional[str]
    value: float
    email: Optional[str] = None
    status: TripStatus = TripStatus.CONFIRMED


@dataclass(frozen=True)
class NewTrip:
    driver_name: str
    email: Optional[str]
    origin: str
    destination: str
    trip_date: date
    container: Optional[str]
    value: float
    status: TripStatus = TripStatus.CONFIRMED
