from __future__ import annotations

from typing import Sequence

from ..core.enums import ContactCategory
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import SupportContact
from .repository import SupportRepository


class MySQLSupportRepository(SupportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, category: ContactCategory, submitter: str, message: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO contatos_suporte(tipo, usuario, mensagem) VALUES(%s,%s,%s)",
                (category.value, submitter, message),
            )
            return int(cur.lastrowid)

    def list_by_category(self, category: ContactCategory, *, limit: int = 500) -> Sequence[SupportContact]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT contact_id, tipo, usuario, mensagem, created_at
                FROM contatos_suporte
                WHERE tipo=%s
                ORDER BY created_at DESC, contact_id DESC
                LIMIT %s
                """,
                (category.value, int(limit)),
            )
            return [
                SupportContact(
                    contact_id=int(r["contact_id"]),
                    category=ContactCategory(r["tipo"]),
                    submitter=r["usuario"],
                    message=r["mensagem"],
                    created_at=r.get("created_at"),
                )
                for r in fetchall(cur)
            ]
