from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import accounting_period
from ..core.exceptions import ValidationError
from .model import Trip
from .repository import TripRepository


@dataclass(frozen=True)
class TripListing:
    trips: list[Trip]
    total_value: float
    start: Optional[date]
    end: Optional[date]


class TripService:
    """Use case: motorista consulta as próprias viagens."""

    def __init__(self, trips: TripRepository):
        self._trips = trips

    def list_my_trips(
        self,
        *,
        email: str,
        competencia: str = "",
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> TripListing:
        # O filtro por mês da premiação tem prioridade sobre o intervalo livre.
        if competencia:
            period = accounting_period(competencia)
            start, end = period.start, period.end
        elif start and end:
            if end < start:
                raise ValidationError("A data final deve ser maior ou igual à inicial")
        else:
            start = end = None

        trips = list(self._trips.list_trips(email=email, start=start, end=end))
        return TripListing(
            trips=trips,
            total_value=round(sum(t.value for t in trips), 2),
            start=start,
            end=end,
        )
