from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_float
from .model import FuelRecord, NewFuelRecord
from .repository import FuelRepository

_COLUMNS = "fuel_id, motorista, media, categoria, competencia"


def _to_record(row: dict) -> FuelRecord:
    return FuelRecord(
        fuel_id=int(row["fuel_id"]),
        driver_name=row["motorista"],
        average=to_float(row["media"]),
        category=row["categoria"],
        competencia=row["competencia"],
    )


class MySQLFuelRepository(FuelRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for(self, *, driver_name: str, competencia: str) -> Optional[FuelRecord]:
        # Imports never delete older rows; the latest one wins.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM diesel
                WHERE motorista=%s AND competencia=%s
                ORDER BY fuel_id DESC
                LIMIT 1
                """,
                (driver_name, competencia),
            )
            row = fetchone(cur)
            return _to_record(row) if row else None

    def bulk_insert(self, records: Sequence[NewFuelRecord]) -> int:
        if not records:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                "INSERT INTO diesel(motorista, media, categoria, competencia) VALUES(%s,%s,%s,%s)",
                [(r.driver_name, r.average, r.category, r.competencia) for r in records],
            )
            return len(records)

    def list_records(
        self,
        *,
        driver_filter: Optional[str] = None,
        competencia: Optional[str] = None,
        limit: int = 500,
    ) -> Sequence[FuelRecord]:
        clauses = ["1=1"]
        params: list[object] = []

        if driver_filter:
            clauses.append("LOWER(motorista) LIKE %s")
            params.append(f"%{driver_filter.lower()}%")
        if competencia:
            clauses.append("competencia=%s")
            params.append(competencia)

        where = " AND ".join(clauses)
        params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM diesel
                WHERE {where}
                ORDER BY motorista ASC, competencia DESC
                LIMIT %s
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]
