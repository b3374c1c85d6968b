from __future__ import annotations

from datetime import date
from typing import Optional

from flask import request

from ..common.datetime_utils import parse_iso_date


def optional_date(value: Optional[str]) -> Optional[date]:
    """Empty form fields mean 'no filter'."""
    value = (value or "").strip()
    return parse_iso_date(value) if value else None


def page_number(value: Optional[str]) -> int:
    try:
        return max(int(value or 1), 1)
    except ValueError:
        return 1


def uploaded(field: str) -> tuple[str, bytes]:
    """(filename, bytes) of a request file field; empty when nothing was sent."""
    storage = request.files.get(field)
    if storage is None or not storage.filename:
        return "", b""
    return storage.filename, storage.read()
