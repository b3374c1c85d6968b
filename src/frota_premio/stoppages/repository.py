from __future__ import annotations

from datetime import date, time
from typing import Optional, Protocol, Sequence

from .model import NewStoppage, PendingStoppage, Stoppage


class StoppageRepository(Protocol):
    # Dias parados aprovados
    def insert(self, stoppage: NewStoppage) -> int:
        raise NotImplementedError

    def list_stoppages(
        self,
        *,
        driver_name: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
        limit: int = 500,
    ) -> Sequence[Stoppage]:
        raise NotImplementedError

    # Solicitações pendentes
    def create_pending(
        self,
        *,
        driver_name: str,
        stop_date: date,
        start_time: time,
        end_time: time,
        duration: str,
        submitted_by: Optional[str],
    ) -> int:
        raise NotImplementedError

    def get_pending(self, pending_id: int) -> Optional[PendingStoppage]:
        raise NotImplementedError

    def list_pending(self) -> Sequence[PendingStoppage]:
        raise NotImplementedError

    def delete_pending(self, pending_id: int) -> bool:
        raise NotImplementedError
