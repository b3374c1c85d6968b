"""Cursor helper and column converters shared by the MySQL repositories."""
from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """One connection per unit of work: commit on success, rollback on error."""
    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=dictionary)
    try:
        yield conn, cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    return cur.fetchone() or None


def fetchall(cur) -> List[Dict[str, Any]]:
    return list(cur.fetchall() or [])


def to_float(value: Any) -> float:
    """DECIMAL columns (valor, media) come back as Decimal."""
    if value is None:
        return 0.0
    return float(value)


def to_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(str(value)[:10], "%Y-%m-%d").date()


def to_time(value: Any) -> Optional[time]:
    """TIME columns (inicio/fim da parada, horários do diário).

    The connector hands TIME back as a timedelta since midnight; older
    drivers and text columns give 'HH:MM[:SS]'.
    """
    if value is None or isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        minutes, seconds = divmod(int(value.total_seconds()) % 86400, 60)
        return time(minutes // 60, minutes % 60, seconds)
    if isinstance(value, str):
        return datetime.strptime(value.strip()[:8], "%H:%M:%S" if value.count(":") == 2 else "%H:%M").time()
    raise TypeError(f"Tipo TIME não suportado: {type(value)!r}")
