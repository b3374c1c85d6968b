from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from ...core.constants import OVER_GOAL_MULTIPLIER, PARTIAL_TIERS
from ...core.enums import BonusTier
from ...core.exceptions import MissingFuelRecordError, ValidationError
from ...fuel.rules import classify_fuel
from ..model import BonusResult
from .base import BonusCalculator

_PARTIAL_TIER_NAMES = {
    0.9: BonusTier.PARTIAL_90,
    0.8: BonusTier.PARTIAL_80,
    0.7: BonusTier.PARTIAL_70,
}

CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    """Reais to the cent; floats go through str() so 100.1 stays 100.10."""
    return Decimal(str(value or 0)).quantize(CENT, rounding=ROUND_HALF_UP)


class StandardBonusCalculator(BonusCalculator):
    """Standard rule.

    production = trips + included stoppages; ratio = production / goal.
    At or above the goal the excess pays 1.5x and the fuel factor applies;
    between 70% and 100% a fixed share of production is paid; below 70% nothing.

    Sums and tier comparisons are done in cents, so a production that adds up
    to the goal to the cent reaches it.
    """

    def calculate(
        self,
        *,
        trip_values: Iterable[float],
        stoppage_values: Iterable[float],
        goal: float,
        fuel_average: Optional[float] = None,
    ) -> BonusResult:
        if goal <= 0:
            raise ValidationError("Meta inválida")

        trips = [to_money(v) for v in trip_values]
        trip_total = sum(trips, Decimal(0))
        stoppage_total = sum((to_money(v) for v in stoppage_values), Decimal(0))
        production = trip_total + stoppage_total
        goal_money = to_money(goal)
        ratio = production / goal_money

        common = dict(
            production=float(production),
            trip_total=float(trip_total),
            stoppage_total=float(stoppage_total),
            ratio=float(ratio),
            trip_count=len(trips),
            goal=goal,
        )

        if ratio >= 1:
            if fuel_average is None:
                raise MissingFuelRecordError("Média de combustível não encontrada para a competência")
            category = classify_fuel(fuel_average)
            base = goal_money + (production - goal_money) * Decimal(str(OVER_GOAL_MULTIPLIER))
            return BonusResult(
                tier=BonusTier.GOAL_REACHED,
                bonus=float(to_money(base * Decimal(str(category.factor)))),
                message="Meta atingida. Prêmio ajustado com base no consumo.",
                fuel_average=fuel_average,
                fuel_category=category.name,
                **common,
            )

        for threshold, share in PARTIAL_TIERS:
            if ratio >= Decimal(str(threshold)):
                return BonusResult(
                    tier=_PARTIAL_TIER_NAMES[threshold],
                    bonus=float(to_money(production * Decimal(str(share)))),
                    message=(
                        f"Meta parcial: {threshold:.0%} atingido. "
                        f"Prêmio fixo de {share:.0%} da produção."
                    ),
                    **common,
                )

        return BonusResult(
            tier=BonusTier.NOT_REACHED,
            bonus=0.0,
            message=f"Meta não atingida. Produção abaixo de 70% (R$ {production:.2f}).",
            **common,
        )
