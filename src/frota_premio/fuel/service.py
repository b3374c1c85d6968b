from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import parse_competencia
from ..core.constants import DEFAULT_LIST_LIMIT
from .model import FuelRecord
from .repository import FuelRepository


class FuelService:
    def __init__(self, fuel: FuelRepository):
        self._fuel = fuel

    def list_records(self, *, driver_filter: str = "", competencia: str = "") -> list[FuelRecord]:
        competencia = (competencia or "").strip()
        if competencia:
            parse_competencia(competencia)
        return list(
            self._fuel.list_records(
                driver_filter=(driver_filter or "").strip() or None,
                competencia=competencia or None,
                limit=DEFAULT_LIST_LIMIT,
            )
        )

    def get_for(self, *, driver_name: str, competencia: str) -> Optional[FuelRecord]:
        return self._fuel.get_for(driver_name=driver_name, competencia=competencia)
