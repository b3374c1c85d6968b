from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import CorrectionStatus
from .model import TripCorrection


class CorrectionRepository(Protocol):
    def create(
        self,
        *,
        driver_id: int,
        email: str,
        origin: str,
        destination: str,
        trip_date: date,
        container: str,
        message: Optional[str],
        receipt_path: str,
    ) -> int:
        raise NotImplementedError

    def get(self, correction_id: int) -> Optional[TripCorrection]:
        raise NotImplementedError

    def list_for_driver(self, driver_id: int, *, limit: int = 200) -> Sequence[TripCorrection]:
        raise NotImplementedError

    def list_by_status(
        self,
        *,
        status: CorrectionStatus,
        created_from: Optional[date] = None,
        created_to: Optional[date] = None,
        offset: int = 0,
        limit: int = 10,
    ) -> Sequence[TripCorrection]:
        raise NotImplementedError

    def count_by_status(
        self,
        *,
        status: CorrectionStatus,
        created_from: Optional[date] = None,
        created_to: Optional[date] = None,
    ) -> int:
        raise NotImplementedError

    def set_status(self, correction_id: int, status: CorrectionStatus) -> bool:
        raise NotImplementedError
