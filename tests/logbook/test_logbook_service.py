from __future__ import annotations

from datetime import date, datetime, time

import pytest

from frota_premio.core.enums import Direction, WorkPeriod
from frota_premio.core.exceptions import BusinessRuleError, ValidationError
from frota_premio.logbook.model import LogbookEntry, WeeklyDelivery
from frota_premio.logbook.pdf import build_logbook_pdf
from frota_premio.logbook.service import LogbookService


class InMemoryLogbook:
    def __init__(self):
        self.entries: list[LogbookEntry] = []
        self.deliveries: list[WeeklyDelivery] = []

    def add_entry(self, entry):
        entry_id = len(self.entries) + 1
        self.entries.append(
            LogbookEntry(
                entry_id=entry_id,
                driver_id=entry.driver_id,
                trip_date=entry.trip_date,
                direction=entry.direction,
                origin=entry.origin,
                km_start=entry.km_start,
                start_time=entry.start_time,
                destination=entry.destination,
                end_time=entry.end_time,
                week=entry.week,
            )
        )
        return entry_id

    def list_entries(self, *, driver_id, start, end):
        items = [e for e in self.entries if e.driver_id == driver_id and start <= e.trip_date <= end]
        return sorted(items, key=lambda e: (e.trip_date, e.start_time))

    def get_delivery(self, *, driver_id, week):
        return next((d for d in self.deliveries if d.driver_id == driver_id and d.week == week), None)

    def create_delivery(self, delivery):
        self.deliveries.append(
            WeeklyDelivery(
                delivery_id=len(self.deliveries) + 1,
                driver_id=delivery.driver_id,
                week=delivery.week,
                start_date=delivery.start_date,
                end_date=delivery.end_date,
                status=delivery.status,
                justification=delivery.justification,
                signature=delivery.signature,
                tractor=delivery.tractor,
                trailer=delivery.trailer,
                period=delivery.period,
                pdf_path=delivery.pdf_path,
                delivered_at=delivery.delivered_at,
            )
        )
        return len(self.deliveries)

    def list_deliveries(self, *, week):
        return [d for d in self.deliveries if d.week == week]


class FakeStorage:
    def __init__(self):
        self.saved = {}

    def save(self, *, folder, filename, data):
        path = f"{folder}/{filename}"
        self.saved[path] = data
        return path

    def resolve(self, relative_path):
        return relative_path


@pytest.fixture
def service(driver_repo, fixed_now):
    return LogbookService(
        InMemoryLogbook(),
        driver_repo,
        FakeStorage(),
        pdf_builder=lambda **kwargs: b"%PDF-fake",
        clock=lambda: fixed_now,
    )


def add(service, *, day="2024-03-11", direction="ida", origin="Santos", destination="Cubatão", start="08:00"):
    return service.add_entry(
        driver_id=1,
        trip_date=day,
        direction=direction,
        origin=origin,
        km_start="1520,5",
        start_time=start,
        destination=destination,
        end_time="09:00",
    )


def test_add_entry_stores_week_code(service):
    add(service)

    round_trips = service.day_view(driver_id=1, day=date(2024, 3, 11))
    entry = round_trips[0].outbound
    assert entry.week == "2024-W11"
    assert entry.km_start == 1520.5
    assert entry.direction == Direction.OUTBOUND


@pytest.mark.parametrize(
    "field, value",
    [("km_start", "0"), ("direction", "lateral"), ("origin", "")],
)
def test_add_entry_validation(service, field, value):
    kwargs = dict(
        driver_id=1,
        trip_date="2024-03-11",
        direction="ida",
        origin="Santos",
        km_start="100",
        start_time="08:00",
        destination="Cubatão",
        end_time="09:00",
    )
    kwargs[field] = value

    with pytest.raises(ValidationError):
        service.add_entry(**kwargs)


def test_day_view_pairs_legs(service):
    add(service, start="08:00")
    add(service, direction="volta", origin="Cubatão", destination="Santos", start="12:00")

    round_trips = service.day_view(driver_id=1, day=date(2024, 3, 11))

    assert len(round_trips) == 1
    assert round_trips[0].is_paired


def test_close_week_without_legs_is_rejected(service):
    with pytest.raises(BusinessRuleError, match="Nenhuma viagem"):
        service.close_week(
            driver_id=1, day=date(2024, 3, 11), signature="João", tractor="ABC1D23", trailer="XYZ9K87", period="diurno"
        )


def test_close_week_creates_delivery_and_pdf(service, fixed_now):
    add(service, day="2024-03-11")

    delivery = service.close_week(
        driver_id=1,
        day=date(2024, 3, 14),
        signature="João Silva",
        tractor="ABC1D23",
        trailer="XYZ9K87",
        period="noturno",
        justification="Chuva",
    )

    assert delivery.week == "2024-W11"
    assert delivery.start_date == date(2024, 3, 10)
    assert delivery.end_date == date(2024, 3, 16)
    assert delivery.period == WorkPeriod.NIGHT
    assert delivery.delivered_at == fixed_now
    assert delivery.pdf_path == "diariodebordo/diariodebordo-2024-W11-1.pdf"

    with pytest.raises(BusinessRuleError, match="já foi enviado"):
        service.close_week(
            driver_id=1, day=date(2024, 3, 11), signature="João", tractor="A", trailer="B", period="diurno"
        )


def test_week_overview_lists_missing_drivers(service):
    add(service, day="2024-03-11")
    service.close_week(driver_id=1, day=date(2024, 3, 11), signature="J", tractor="A", trailer="B", period="diurno")

    overview = service.week_overview("2024-W11")

    assert [d.driver_id for d in overview.deliveries] == [1]
    assert [d.name for d in overview.missing] == ["Maria Souza"]


def test_week_overview_defaults_to_current_week(service):
    assert service.week_overview().week.code == "2024-W11"


def test_pdf_builder_renders_a_pdf():
    entry = LogbookEntry(
        entry_id=1,
        driver_id=1,
        trip_date=date(2024, 3, 11),
        direction=Direction.OUTBOUND,
        origin="Santos",
        km_start=1520.5,
        start_time=time(8, 0),
        destination="Cubatão & Cia",
        end_time=time(9, 0),
        week="2024-W11",
    )

    data = build_logbook_pdf(
        driver_name="João Silva",
        tractor="ABC1D23",
        trailer="XYZ9K87",
        period="diurno",
        week="2024-W11",
        entries=[entry],
        justification="<sem atraso>",
        signature="João Silva",
    )

    assert data.startswith(b"%PDF")
