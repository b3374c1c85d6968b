from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import FuelRecord, NewFuelRecord


class FuelRepository(Protocol):
    def get_for(self, *, driver_name: str, competencia: str) -> Optional[FuelRecord]:
        raise NotImplementedError

    def bulk_insert(self, records: Sequence[NewFuelRecord]) -> int:
        raise NotImplementedError

    def list_records(
        self,
        *,
        driver_filter: Optional[str] = None,
        competencia: Optional[str] = None,
        limit: int = 500,
    ) -> Sequence[FuelRecord]:
        raise NotImplementedError
