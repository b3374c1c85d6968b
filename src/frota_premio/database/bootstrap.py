from __future__ import annotations

import logging
import re
from pathlib import Path

from werkzeug.security import generate_password_hash

from .connection import DatabaseConnection, DBConfig

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"

ADMIN_NAME = "Administrador"


def schema_statements(sql: str) -> list[str]:
    """Statements of schema.sql, without comments or CREATE DATABASE/USE lines.

    The schema never puts ';' inside string literals, so a plain split works.
    """
    sql = re.sub(r"(?m)^\s*--.*$", "", sql)
    sql = re.sub(r"(?im)^\s*(CREATE\s+DATABASE|USE)\b.*?;\s*$", "", sql)
    return [stmt.strip() for stmt in sql.split(";") if stmt.strip()]


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = DatabaseConnection(target).connect(with_database=False)
    try:
        conn.cursor().execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    """Create the database and every table that does not exist yet."""
    ensure_database_exists(db_config)
    statements = schema_statements(Path(schema_path).read_text(encoding="utf-8"))

    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        for stmt in statements:
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()
    logger.info("schema aplicado: %d comandos de %s", len(statements), schema_path)


def ensure_admin_user(db_config: dict, *, username: str, password: str, email: str) -> None:
    """Create the first administrator when it does not exist yet."""
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor(dictionary=True)
        cur.execute("SELECT driver_id FROM motoristas_cadastrados WHERE usuario=%s", (username,))
        if cur.fetchone():
            return
        cur.execute(
            """
            INSERT INTO motoristas_cadastrados(motorista, usuario, email, password_hash, admin, precisa_trocar_senha)
            VALUES (%s, %s, %s, %s, 1, 0)
            """,
            (ADMIN_NAME, username, email, generate_password_hash(password)),
        )
        conn.commit()
        logger.info("administrador %r criado", username)
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = DatabaseConnection(DBConfig.from_dict(db_config)).connect()
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
