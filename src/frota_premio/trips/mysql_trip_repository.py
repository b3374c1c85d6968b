from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import TripStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_date, to_float
from .model import NewTrip, Trip
from .repository import TripRepository

_INSERT = """
    INSERT INTO minhas_viagens(motorista, email, origem, destino, data, container, valor, status)
    VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
"""


def _params(t: NewTrip) -> tuple:
    return (t.driver_name, t.email, t.origin, t.destination, t.trip_date, t.container, t.value, t.status.value)


class MySQLTripRepository(TripRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_trips(
        self,
        *,
        driver_name: Optional[str] = None,
        email: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[Trip]:
        clauses = ["1=1"]
        params: list[object] = []

        if driver_name is not None:
            clauses.append("motorista=%s")
            params.append(driver_name)
        if email is not None:
            clauses.append("email=%s")
            params.append(email)
        if start is not None:
            clauses.append("data>=%s")
            params.append(start)
        if end is not None:
            clauses.append("data<=%s")
            params.append(end)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT trip_id, motorista, email, origem, destino, data, container, valor, status
                FROM minhas_viagens
                WHERE {where}
                ORDER BY data, trip_id
                """,
                tuple(params),
            )
            return [
                Trip(
                    trip_id=int(r["trip_id"]),
                    driver_name=r["motorista"],
                    email=r.get("email"),
                    origin=r["origem"],
                    destination=r["destino"],
                    trip_date=to_date(r["data"]),
                    container=r.get("container"),
                    value=to_float(r.get("valor")),
                    status=TripStatus(r.get("status") or TripStatus.CONFIRMED.value),
                )
                for r in fetchall(cur)
            ]

    def count_on(self, *, driver_name: str, day: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT COUNT(*) AS total FROM minhas_viagens WHERE motorista=%s AND data=%s",
                (driver_name, day),
            )
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def sum_values(self, *, driver_name: str, start: date, end: date) -> float:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COALESCE(SUM(valor), 0) AS total
                FROM minhas_viagens
                WHERE motorista=%s AND data>=%s AND data<=%s
                """,
                (driver_name, start, end),
            )
            row = fetchone(cur)
            return to_float(row["total"]) if row else 0.0

    def insert(self, trip: NewTrip) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_INSERT, _params(trip))
            return int(cur.lastrowid)

    def bulk_insert(self, trips: Sequence[NewTrip]) -> int:
        if not trips:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(_INSERT, [_params(t) for t in trips])
            return len(trips)
