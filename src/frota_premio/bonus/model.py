from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import BonusTier


@dataclass(frozen=True)
class BonusResult:
    tier: BonusTier
    bonus: float
    production: float
    trip_total: float
    stoppage_total: float
    ratio: float
    trip_count: int
    goal: float
    message: str
    fuel_average: Optional[float] = None
    fuel_category: Optional[str] = None

    @property
    def missing_to_goal(self) -> float:
        return round(max(self.goal - self.production, 0.0), 2)

    @property
    def goal_reached(self) -> bool:
        return self.tier == BonusTier.GOAL_REACHED


@dataclass(frozen=True)
class DriverBonus:
    """Linha do resumo do admin: um motorista e o seu resultado na competência."""

    driver_name: str
    result: Optional[BonusResult]
    error: Optional[str] = None
