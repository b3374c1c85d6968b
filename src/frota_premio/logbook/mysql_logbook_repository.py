from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import Direction, WorkPeriod
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_time, to_date, to_float
from .model import LogbookEntry, NewLogbookEntry, NewWeeklyDelivery, WeeklyDelivery
from .repository import LogbookRepository

_DELIVERY_COLUMNS = (
    "e.delivery_id, e.driver_id, e.semana, e.data_inicio, e.data_fim, e.status, e.justificativa, "
    "e.assinatura, e.cavalo, e.carreta, e.horario, e.pdf_path, e.data_entrega, m.motorista"
)


def _to_delivery(row: dict) -> WeeklyDelivery:
    return WeeklyDelivery(
        delivery_id=int(row["delivery_id"]),
        driver_id=int(row["driver_id"]),
        week=row["semana"],
        start_date=to_date(row["data_inicio"]),
        end_date=to_date(row["data_fim"]),
        status=row["status"],
        justification=row.get("justificativa"),
        signature=row["assinatura"],
        tractor=row["cavalo"],
        trailer=row["carreta"],
        period=WorkPeriod(row["horario"]),
        pdf_path=row["pdf_path"],
        delivered_at=row.get("data_entrega"),
        driver_name=row.get("motorista"),
    )


class MySQLLogbookRepository(LogbookRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add_entry(self, entry: NewLogbookEntry) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO diariodebordo_viagens(
                    driver_id, data, sentido, origem, km_inicial, hora_inicial, destino, hora_final, semana, status
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    entry.driver_id,
                    entry.trip_date,
                    entry.direction.value,
                    entry.origin,
                    entry.km_start,
                    entry.start_time,
                    entry.destination,
                    entry.end_time,
                    entry.week,
                    entry.status,
                ),
            )
            return int(cur.lastrowid)

    def list_entries(self, *, driver_id: int, start: date, end: date) -> Sequence[LogbookEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT entry_id, driver_id, data, sentido, origem, km_inicial, hora_inicial,
                       destino, hora_final, semana, status
                FROM diariodebordo_viagens
                WHERE driver_id=%s AND data>=%s AND data<=%s
                ORDER BY data, hora_inicial, entry_id
                """,
                (driver_id, start, end),
            )
            return [
                LogbookEntry(
                    entry_id=int(r["entry_id"]),
                    driver_id=int(r["driver_id"]),
                    trip_date=to_date(r["data"]),
                    direction=Direction(r["sentido"]),
                    origin=r["origem"],
                    km_start=to_float(r["km_inicial"]),
                    start_time=to_time(r["hora_inicial"]),
                    destination=r["destino"],
                    end_time=to_time(r["hora_final"]),
                    week=r["semana"],
                    status=r["status"],
                )
                for r in fetchall(cur)
            ]

    def get_delivery(self, *, driver_id: int, week: str) -> Optional[WeeklyDelivery]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_DELIVERY_COLUMNS}
                FROM diariodebordo_entregas e
                JOIN motoristas_cadastrados m ON m.driver_id = e.driver_id
                WHERE e.driver_id=%s AND e.semana=%s
                """,
                (driver_id, week),
            )
            row = fetchone(cur)
            return _to_delivery(row) if row else None

    def create_delivery(self, delivery: NewWeeklyDelivery) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO diariodebordo_entregas(
                    driver_id, semana, data_inicio, data_fim, status, justificativa,
                    assinatura, cavalo, carreta, horario, pdf_path, data_entrega
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    delivery.driver_id,
                    delivery.week,
                    delivery.start_date,
                    delivery.end_date,
                    delivery.status,
                    delivery.justification,
                    delivery.signature,
                    delivery.tractor,
                    delivery.trailer,
                    delivery.period.value,
                    delivery.pdf_path,
                    delivery.delivered_at,
                ),
            )
            return int(cur.lastrowid)

    def list_deliveries(self, *, week: str) -> Sequence[WeeklyDelivery]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_DELIVERY_COLUMNS}
                FROM diariodebordo_entregas e
                JOIN motoristas_cadastrados m ON m.driver_id = e.driver_id
                WHERE e.semana=%s
                ORDER BY e.data_entrega DESC
                """,
                (week,),
            )
            return [_to_delivery(r) for r in fetchall(cur)]
