from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import CorrectionStatus


@dataclass(frozen=True)
class TripCorrection:
    """Viagem que o motorista informa como faltante ou errada, com comprovante."""

    correction_id: int
    driver_id: int
    email: str
    origin: str
    destination: str
    trip_date: date
    container: str
    message: Optional[str]
    receipt_path: str
    status: CorrectionStatus
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class CorrectionPage:
    items: list[TripCorrection]
    page: int
    total: int
    page_size: int

    @property
    def pages(self) -> int:
        return max((self.total + self.page_size - 1) // self.page_size, 1)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.pages
