from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from ..model import BonusResult


class BonusCalculator(ABC):
    """Calculator interface (Strategy Pattern for the monthly bonus)."""

    @abstractmethod
    def calculate(
        self,
        *,
        trip_values: Iterable[float],
        stoppage_values: Iterable[float],
        goal: float,
        fuel_average: Optional[float] = None,
    ) -> BonusResult:
        raise NotImplementedError
