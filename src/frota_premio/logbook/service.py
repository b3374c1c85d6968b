from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Optional

from ..common.datetime_utils import Week, now_local, parse_hhmm, parse_iso_date, parse_week_code, week_of
from ..common.validators import require_non_empty, require_positive_number
from ..core.enums import Direction, WorkPeriod
from ..core.exceptions import BusinessRuleError, ValidationError
from ..drivers.model import Driver
from ..drivers.repository import DriverRepository
from ..storage.local import FileStorage
from .model import LogbookEntry, NewLogbookEntry, NewWeeklyDelivery, RoundTrip, WeeklyDelivery
from .pairing import pair_round_trips
from .pdf import build_logbook_pdf
from .repository import LogbookRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeekView:
    week: Week
    entries: list[LogbookEntry]
    round_trips: list[RoundTrip]
    delivery: Optional[WeeklyDelivery]

    @property
    def can_close(self) -> bool:
        return bool(self.entries) and self.delivery is None


@dataclass(frozen=True)
class WeekOverview:
    week: Week
    deliveries: list[WeeklyDelivery]
    missing: list[Driver]


def _parse_choice(enum_cls, value: str, message: str):
    try:
        return enum_cls((value or "").strip().lower())
    except ValueError:
        raise ValidationError(message)


class LogbookService:
    """Diário de bordo: registro de trechos e fechamento semanal com PDF."""

    def __init__(
        self,
        logbook: LogbookRepository,
        drivers: DriverRepository,
        storage: FileStorage,
        *,
        pdf_builder: Callable[..., bytes] = build_logbook_pdf,
        clock: Callable[[], datetime] = now_local,
    ):
        self._logbook = logbook
        self._drivers = drivers
        self._storage = storage
        self._pdf_builder = pdf_builder
        self._clock = clock

    def add_entry(
        self,
        *,
        driver_id: int,
        trip_date: str,
        direction: str,
        origin: str,
        km_start: Any,
        start_time: str,
        destination: str,
        end_time: str,
    ) -> int:
        day = parse_iso_date(trip_date)
        entry = NewLogbookEntry(
            driver_id=int(driver_id),
            trip_date=day,
            direction=_parse_choice(Direction, direction, "Sentido inválido (ida/volta)"),
            origin=require_non_empty(origin, "Origem"),
            km_start=require_positive_number(km_start, "KM inicial"),
            start_time=parse_hhmm(start_time),
            destination=require_non_empty(destination, "Destino"),
            end_time=parse_hhmm(end_time),
            week=week_of(day).code,
        )
        return self._logbook.add_entry(entry)

    def day_view(self, *, driver_id: int, day: date) -> list[RoundTrip]:
        entries = self._logbook.list_entries(driver_id=int(driver_id), start=day, end=day)
        return pair_round_trips(entries)

    def week_view(self, *, driver_id: int, day: date) -> WeekView:
        week = week_of(day)
        entries = list(self._logbook.list_entries(driver_id=int(driver_id), start=week.start, end=week.end))
        return WeekView(
            week=week,
            entries=entries,
            round_trips=pair_round_trips(entries),
            delivery=self._logbook.get_delivery(driver_id=int(driver_id), week=week.code),
        )

    def close_week(
        self,
        *,
        driver_id: int,
        day: date,
        signature: str,
        tractor: str,
        trailer: str,
        period: str,
        justification: str = "",
    ) -> WeeklyDelivery:
        driver = self._drivers.get_by_id(int(driver_id))
        if not driver:
            raise ValidationError("Motorista não identificado.")

        signature = require_non_empty(signature, "Assinatura")
        tractor = require_non_empty(tractor, "Cavalo")
        trailer = require_non_empty(trailer, "Carreta")
        work_period = _parse_choice(WorkPeriod, period, "Horário inválido (diurno/noturno)")
        justification = (justification or "").strip()

        view = self.week_view(driver_id=driver.driver_id, day=day)
        if not view.entries:
            raise BusinessRuleError("Nenhuma viagem registrada nesta semana. Nada a enviar.")
        if view.delivery is not None:
            raise BusinessRuleError("O fechamento desta semana já foi enviado.")

        pdf_bytes = self._pdf_builder(
            driver_name=driver.name,
            tractor=tractor,
            trailer=trailer,
            period=work_period.value,
            week=view.week.code,
            entries=view.entries,
            justification=justification,
            signature=signature,
        )
        pdf_path = self._storage.save(
            folder="diariodebordo",
            filename=f"diariodebordo-{view.week.code}-{driver.driver_id}.pdf",
            data=pdf_bytes,
        )

        new = NewWeeklyDelivery(
            driver_id=driver.driver_id,
            week=view.week.code,
            start_date=view.week.start,
            end_date=view.week.end,
            justification=justification or None,
            signature=signature,
            tractor=tractor,
            trailer=trailer,
            period=work_period,
            pdf_path=pdf_path,
            delivered_at=self._clock(),
        )
        delivery_id = self._logbook.create_delivery(new)
        logger.info("fechamento semanal %s enviado motorista=%s", view.week.code, driver.name)

        return WeeklyDelivery(
            delivery_id=delivery_id,
            driver_id=new.driver_id,
            week=new.week,
            start_date=new.start_date,
            end_date=new.end_date,
            status=new.status,
            justification=new.justification,
            signature=new.signature,
            tractor=new.tractor,
            trailer=new.trailer,
            period=new.period,
            pdf_path=new.pdf_path,
            delivered_at=new.delivered_at,
            driver_name=driver.name,
        )

    def week_overview(self, week_code: str = "") -> WeekOverview:
        week = parse_week_code(week_code) if (week_code or "").strip() else week_of(self._clock().date())
        deliveries = list(self._logbook.list_deliveries(week=week.code))
        delivered = {d.driver_id for d in deliveries}
        missing = sorted(
            (d for d in self._drivers.list_drivers(include_admins=False) if d.driver_id not in delivered),
            key=lambda d: d.name.casefold(),
        )
        return WeekOverview(week=week, deliveries=deliveries, missing=missing)

    def delivery_pdf(self, *, driver_id: int, week_code: str):
        week = parse_week_code(week_code)
        delivery = self._logbook.get_delivery(driver_id=int(driver_id), week=week.code)
        if not delivery:
            raise ValidationError("Entrega não encontrada")
        return self._storage.resolve(delivery.pdf_path)
