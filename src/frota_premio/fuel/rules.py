from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FuelCategory:
    name: str
    label: str
    factor: float


POOR = FuelCategory("Ruim", "Abaixo da Média -10%", 0.9)
REGULAR = FuelCategory("Regular", "Média sem Ganho", 1.0)
GOOD = FuelCategory("Bom", "Média Limite 20%", 1.2)
EXCELLENT = FuelCategory("Excelente", "Média Desejada 30%", 1.3)

# (upper bound inclusive, category), checked in order
_BANDS = ((3.00, POOR), (3.10, REGULAR), (3.29, GOOD))


def classify_fuel(average: float) -> FuelCategory:
    for upper, category in _BANDS:
        if average <= upper:
            return category
    return EXCELLENT
