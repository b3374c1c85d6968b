from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Driver
from .repository import DriverRepository

_COLUMNS = "driver_id, motorista, usuario, email, password_hash, admin, precisa_trocar_senha"


def _to_driver(row: dict) -> Driver:
    return Driver(
        driver_id=int(row["driver_id"]),
        name=row["motorista"],
        username=row["usuario"],
        email=row["email"],
        password_hash=row["password_hash"],
        is_admin=bool(row.get("admin")),
        must_change_password=bool(row.get("precisa_trocar_senha")),
    )


class MySQLDriverRepository(DriverRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, driver_id: int) -> Optional[Driver]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM motoristas_cadastrados WHERE driver_id=%s", (driver_id,))
            row = fetchone(cur)
            return _to_driver(row) if row else None

    def get_by_username(self, username: str) -> Optional[Driver]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM motoristas_cadastrados WHERE usuario=%s", (username,))
            row = fetchone(cur)
            return _to_driver(row) if row else None

    def list_drivers(self, *, include_admins: bool = False) -> Sequence[Driver]:
        where = "" if include_admins else "WHERE admin IS NULL OR admin=0"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM motoristas_cadastrados {where} ORDER BY motorista")
            return [_to_driver(r) for r in fetchall(cur)]

    def update_password(self, driver_id: int, *, password_hash: str, must_change_password: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE motoristas_cadastrados
                SET password_hash=%s, precisa_trocar_senha=%s
                WHERE driver_id=%s
                """,
                (password_hash, int(must_change_password), driver_id),
            )
            return cur.rowcount > 0
