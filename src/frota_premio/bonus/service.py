from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import Period, accounting_period
from ..common.validators import require_non_empty
from ..core.constants import META_FIXA
from ..core.exceptions import BusinessRuleError
from ..drivers.repository import DriverRepository
from ..fuel.repository import FuelRepository
from ..stoppages.model import Stoppage
from ..stoppages.repository import StoppageRepository
from ..trips.model import Trip
from ..trips.repository import TripRepository
from .calculator.base import BonusCalculator
from .calculator.standard_calculator import StandardBonusCalculator
from .model import BonusResult, DriverBonus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BonusSummary:
    driver_name: str
    competencia: str
    period: Period
    trips: list[Trip]
    stoppages: list[Stoppage]
    result: BonusResult


class BonusService:
    """Gathers a driver's records for a competência and runs the calculator."""

    def __init__(
        self,
        trips: TripRepository,
        stoppages: StoppageRepository,
        fuel: FuelRepository,
        drivers: DriverRepository,
        *,
        goal: float = META_FIXA,
        calculator: Optional[BonusCalculator] = None,
    ):
        self._trips = trips
        self._stoppages = stoppages
        self._fuel = fuel
        self._drivers = drivers
        self._goal = float(goal)
        self._calculator = calculator or StandardBonusCalculator()

    @property
    def goal(self) -> float:
        return self._goal

    def summary(self, *, driver_name: str, competencia: str) -> BonusSummary:
        driver_name = require_non_empty(driver_name, "Motorista")
        period = accounting_period(competencia)

        trips = list(self._trips.list_trips(driver_name=driver_name, start=period.start, end=period.end))
        stoppages = [
            s
            for s in self._stoppages.list_stoppages(driver_name=driver_name, start=period.start, end=period.end)
            if s.included
        ]

        record = self._fuel.get_for(driver_name=driver_name, competencia=competencia)
        fuel_average = record.average if record else None

        result = self._calculator.calculate(
            trip_values=[t.value for t in trips],
            stoppage_values=[s.value for s in stoppages],
            goal=self._goal,
            fuel_average=fuel_average,
        )
        return BonusSummary(
            driver_name=driver_name,
            competencia=competencia,
            period=period,
            trips=trips,
            stoppages=stoppages,
            result=result,
        )

    def summary_for_driver_id(self, *, driver_id: int, competencia: str) -> BonusSummary:
        driver = self._drivers.get_by_id(int(driver_id))
        if not driver:
            raise BusinessRuleError("Motorista não encontrado")
        return self.summary(driver_name=driver.name, competencia=competencia)

    def summary_all(self, *, competencia: str) -> list[DriverBonus]:
        """Every registered driver for one competência; per-driver rule errors are reported, not raised."""
        accounting_period(competencia)
        rows: list[DriverBonus] = []
        for driver in sorted(self._drivers.list_drivers(include_admins=False), key=lambda d: d.name.casefold()):
            try:
                summary = self.summary(driver_name=driver.name, competencia=competencia)
            except BusinessRuleError as e:
                logger.warning("premiacao nao calculada motorista=%s competencia=%s: %s", driver.name, competencia, e)
                rows.append(DriverBonus(driver_name=driver.name, result=None, error=str(e)))
                continue
            rows.append(DriverBonus(driver_name=driver.name, result=summary.result))
        return rows
