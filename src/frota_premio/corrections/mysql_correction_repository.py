from __future__ import annotations

from datetime import date, timedelta
from typing import Optional, Sequence

from ..core.enums import CorrectionStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_date
from .model import TripCorrection
from .repository import CorrectionRepository

_COLUMNS = (
    "correction_id, driver_id, email, origem, destino, data, container, "
    "mensagem, comprovante_path, status, created_at"
)


def _to_correction(row: dict) -> TripCorrection:
    return TripCorrection(
        correction_id=int(row["correction_id"]),
        driver_id=int(row["driver_id"]),
        email=row["email"],
        origin=row["origem"],
        destination=row["destino"],
        trip_date=to_date(row["data"]),
        container=row["container"],
        message=row.get("mensagem"),
        receipt_path=row["comprovante_path"],
        status=CorrectionStatus(row["status"]),
        created_at=row.get("created_at"),
    )


def _status_where(
    status: CorrectionStatus, created_from: Optional[date], created_to: Optional[date]
) -> tuple[str, list[object]]:
    clauses = ["status=%s"]
    params: list[object] = [status.value]
    if created_from is not None:
        clauses.append("created_at>=%s")
        params.append(created_from)
    if created_to is not None:
        # created_at is DATETIME; include the whole end day
        clauses.append("created_at<%s")
        params.append(created_to + timedelta(days=1))
    return " AND ".join(clauses), params


class MySQLCorrectionRepository(CorrectionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO viagens_pendentes(driver_id, email, origem, destino, data, container, mensagem, comprovante_path, status)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    driver_id,
                    email,
                    origin,
                    destination,
                    trip_date,
                    container,
                    message,
                    receipt_path,
                    CorrectionStatus.PENDING.value,
                ),
            )
            return int(cur.lastrowid)

    def get(self, correction_id: int) -> Optional[TripCorrection]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM viagens_pendentes WHERE correction_id=%s", (correction_id,))
            row = fetchone(cur)
            return _to_correction(row) if row else None

    def list_for_driver(self, driver_id: int, *, limit: int = 200) -> Sequence[TripCorrection]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM viagens_pendentes
                WHERE driver_id=%s
                ORDER BY created_at DESC, correction_id DESC
                LIMIT %s
                """,
                (driver_id, int(limit)),
            )
            return [_to_correction(r) for r in fetchall(cur)]

    def list_by_status(
        self,
        *,
        status: CorrectionStatus,
        created_from: Optional[date] = None,
        created_to: Optional[date] = None,
        offset: int = 0,
        limit: int = 10,
    ) -> Sequence[TripCorrection]:
        where, params = _status_where(status, created_from, created_to)
        params.extend([int(limit), int(offset)])
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM viagens_pendentes
                WHERE {where}
                ORDER BY created_at DESC, correction_id DESC
                LIMIT %s OFFSET %s
                """,
                tuple(params),
            )
            return [_to_correction(r) for r in fetchall(cur)]

    def count_by_status(
        self,
        *,
        status: CorrectionStatus,
        created_from: Optional[date] = None,
        created_to: Optional[date] = None,
    ) -> int:
        where, params = _status_where(status, created_from, created_to)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS total FROM viagens_pendentes WHERE {where}", tuple(params))
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def set_status(self, correction_id: int, status: CorrectionStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE viagens_pendentes SET status=%s WHERE correction_id=%s",
                (status.value, correction_id),
            )
            return cur.rowcount > 0
