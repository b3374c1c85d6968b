from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FuelRecord:
    """Média de consumo de diesel de um motorista em uma competência."""

    fuel_id: int
    driver_name: str
    average: float
    category: str
    competencia: str


@dataclass(frozen=True)
class NewFuelRecord:
    driver_name: str
    average: float
    category: str
    competencia: str
