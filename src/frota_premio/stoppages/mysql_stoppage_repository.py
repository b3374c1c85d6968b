from __future__ import annotations

from datetime import date, time
from typing import Optional, Sequence

from ..core.enums import StoppageInclusion
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_time, to_date, to_float
from .model import NewStoppage, PendingStoppage, Stoppage
from .repository import StoppageRepository


def _to_pending(row: dict) -> PendingStoppage:
    return PendingStoppage(
        pending_id=int(row["pending_id"]),
        driver_name=row["motorista"],
        stop_date=to_date(row["data"]),
        start_time=to_time(row["inicio_parada"]),
        end_time=to_time(row["fim_parada"]),
        duration=row["tempo_parado"],
        submitted_by=row.get("enviado_por"),
        created_at=row.get("created_at"),
    )


class MySQLStoppageRepository(StoppageRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert(self, stoppage: NewStoppage) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO dia_parado(motorista, data, inicio_parada, fim_parada, tempo_parado, incluso, valor)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    stoppage.driver_name,
                    stoppage.stop_date,
                    stoppage.start_time,
                    stoppage.end_time,
                    stoppage.duration,
                    stoppage.inclusion.value,
                    stoppage.value,
                ),
            )
            return int(cur.lastrowid)

    def list_stoppages(
        self,
        *,
        driver_name: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
        limit: int = 500,
    ) -> Sequence[Stoppage]:
        clauses = ["1=1"]
        params: list[object] = []

        if driver_name is not None:
            clauses.append("motorista=%s")
            params.append(driver_name)
        if start is not None:
            clauses.append("data>=%s")
            params.append(start)
        if end is not None:
            clauses.append("data<=%s")
            params.append(end)

        where = " AND ".join(clauses)
        params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT stoppage_id, motorista, data, inicio_parada, fim_parada, tempo_parado, incluso, valor
                FROM dia_parado
                WHERE {where}
                ORDER BY data DESC, stoppage_id DESC
                LIMIT %s
                """,
                tuple(params),
            )
            return [
                Stoppage(
                    stoppage_id=int(r["stoppage_id"]),
                    driver_name=r["motorista"],
                    stop_date=to_date(r["data"]),
                    start_time=to_time(r["inicio_parada"]),
                    end_time=to_time(r["fim_parada"]),
                    duration=r["tempo_parado"],
                    inclusion=StoppageInclusion(r["incluso"]) if r.get("incluso") else None,
                    value=to_float(r.get("valor")),
                )
                for r in fetchall(cur)
            ]

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO dia_parado_pendentes(motorista, data, inicio_parada, fim_parada, tempo_parado, status, enviado_por)
                VALUES(%s,%s,%s,%s,%s,'pendente',%s)
                """,
                (driver_name, stop_date, start_time, end_time, duration, submitted_by),
            )
            return int(cur.lastrowid)

    def get_pending(self, pending_id: int) -> Optional[PendingStoppage]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT pending_id, motorista, data, inicio_parada, fim_parada, tempo_parado, enviado_por, created_at
                FROM dia_parado_pendentes
                WHERE pending_id=%s
                """,
                (pending_id,),
            )
            row = fetchone(cur)
            return _to_pending(row) if row else None

    def list_pending(self) -> Sequence[PendingStoppage]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT pending_id, motorista, data, inicio_parada, fim_parada, tempo_parado, enviado_por, created_at
                FROM dia_parado_pendentes
                WHERE status='pendente'
                ORDER BY data, pending_id
                """
            )
            return [_to_pending(r) for r in fetchall(cur)]

    def delete_pending(self, pending_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM dia_parado_pendentes WHERE pending_id=%s", (pending_id,))
            return cur.rowcount > 0
