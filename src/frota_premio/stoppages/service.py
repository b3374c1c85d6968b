from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import calendar_month, format_minutes, parse_hhmm, parse_iso_date
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_LIST_LIMIT
from ..core.exceptions import ValidationError
from ..trips.repository import TripRepository
from .model import NewStoppage, PendingStoppage, Stoppage
from .repository import StoppageRepository
from .rules import compute_credit, stopped_minutes

logger = logging.getLogger(__name__)


class StoppageService:
    """Use cases do dia parado: solicitação do motorista e aprovação/inclusão pelo admin."""

    def __init__(self, stoppages: StoppageRepository, trips: TripRepository):
        self._stoppages = stoppages
        self._trips = trips

    def request(
        self,
        *,
        driver_name: str,
        stop_date: str,
        start_time: str,
        end_time: str,
        submitted_by: Optional[str] = None,
    ) -> int:
        driver_name = require_non_empty(driver_name, "Motorista")
        day = parse_iso_date(stop_date)
        start = parse_hhmm(start_time)
        end = parse_hhmm(end_time)
        minutes = stopped_minutes(start, end)

        return self._stoppages.create_pending(
            driver_name=driver_name,
            stop_date=day,
            start_time=start,
            end_time=end,
            duration=format_minutes(minutes),
            submitted_by=submitted_by,
        )

    def include_direct(self, *, driver_name: str, stop_date: str, start_time: str, end_time: str) -> Stoppage:
        driver_name = require_non_empty(driver_name, "Motorista")
        return self._include(
            driver_name=driver_name,
            day=parse_iso_date(stop_date),
            start=parse_hhmm(start_time),
            end=parse_hhmm(end_time),
        )

    def approve_pending(self, pending_id: int) -> Stoppage:
        pending = self._stoppages.get_pending(int(pending_id))
        if not pending:
            raise ValidationError("Solicitação não encontrada")

        stoppage = self._include(
            driver_name=pending.driver_name,
            day=pending.stop_date,
            start=pending.start_time,
            end=pending.end_time,
        )
        self._stoppages.delete_pending(pending.pending_id)
        return stoppage

    def reject_pending(self, pending_id: int) -> None:
        if not self._stoppages.delete_pending(int(pending_id)):
            raise ValidationError("Solicitação não encontrada")

    def list_pending(self) -> list[PendingStoppage]:
        return list(self._stoppages.list_pending())

    def list_records(self, *, driver_name: Optional[str] = None, limit: int = DEFAULT_LIST_LIMIT) -> list[Stoppage]:
        name = (driver_name or "").strip() or None
        return list(self._stoppages.list_stoppages(driver_name=name, limit=limit))

    def _include(self, *, driver_name: str, day: date, start, end) -> Stoppage:
        month = calendar_month(day)
        credit = compute_credit(
            start=start,
            end=end,
            trips_that_day=self._trips.count_on(driver_name=driver_name, day=day),
            month_trip_total=self._trips.sum_values(driver_name=driver_name, start=month.start, end=month.end),
        )
        new = NewStoppage(
            driver_name=driver_name,
            stop_date=day,
            start_time=start,
            end_time=end,
            duration=credit.duration,
            inclusion=credit.inclusion,
            value=credit.value,
        )
        stoppage_id = self._stoppages.insert(new)
        logger.info(
            "dia parado incluido motorista=%s data=%s categoria=%s valor=%.2f",
            driver_name, day, credit.inclusion.value, credit.value,
        )
        return Stoppage(
            stoppage_id=stoppage_id,
            driver_name=new.driver_name,
            stop_date=new.stop_date,
            start_time=new.start_time,
            end_time=new.end_time,
            duration=new.duration,
            inclusion=new.inclusion,
            value=new.value,
        )
