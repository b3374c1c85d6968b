from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..core.enums import StoppageInclusion


@dataclass(frozen=True)
class Stoppage:
    """Entidade de domínio: dia parado aprovado e creditado na produção."""

    stoppage_id: int
    driver_name: str
    stop_date: date
    start_time: time
    end_time: time
    duration: str
    inclusion: Optional[StoppageInclusion]
    value: float

    @property
    def included(self) -> bool:
        return self.inclusion is not None


@dataclass(frozen=True)
class PendingStoppage:
    """Solicitação de dia parado aguardando aprovação do admin."""

    pending_id: int
    driver_name: str
    stop_date: date
    start_time: time
    end_time: time
    duration: str
    submitted_by: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class NewStoppage:
    driver_name: str
    stop_date: date
    start_time: time
    end_time: time
    duration: str
    inclusion: StoppageInclusion
    value: float
