from __future__ import annotations

import pytest

from frota_premio.bonus.calculator.standard_calculator import StandardBonusCalculator
from frota_premio.core.constants import META_FIXA
from frota_premio.core.enums import BonusTier
from frota_premio.core.exceptions import MissingFuelRecordError, ValidationError


def calc(production: float, *, goal: float = 100.0, fuel=None, stoppages=()):
    return StandardBonusCalculator().calculate(
        trip_values=[production],
        stoppage_values=list(stoppages),
        goal=goal,
        fuel_average=fuel,
    )


def test_exact_goal_pays_goal_times_fuel_factor():
    r = calc(677.86, goal=META_FIXA, fuel=3.05)

    assert r.ratio == 1.0
    assert r.tier == BonusTier.GOAL_REACHED
    assert r.bonus == pytest.approx(677.86)
    assert r.fuel_category == "Regular"
    assert r.message == "Meta atingida. Prêmio ajustado com base no consumo."


def test_excess_over_goal_pays_one_and_a_half():
    r = calc(1000.0, goal=META_FIXA, fuel=3.50)

    # (677.86 + 322.14 * 1.5) * 1.3
    assert r.bonus == pytest.approx(1509.39)
    assert r.fuel_category == "Excelente"
    assert r.fuel_average == 3.50


def test_600_is_forty_percent_tier():
    r = calc(600.0, goal=META_FIXA)

    assert r.tier == BonusTier.PARTIAL_80
    assert r.bonus == pytest.approx(240.00)
    assert r.message == "Meta parcial: 80% atingido. Prêmio fixo de 40% da produção."


def test_400_does_not_reach_goal():
    r = calc(400.0, goal=META_FIXA)

    assert r.tier == BonusTier.NOT_REACHED
    assert r.bonus == 0.0
    assert r.message == "Meta não atingida. Produção abaixo de 70% (R$ 400.00)."
    assert r.missing_to_goal == pytest.approx(277.86)


@pytest.mark.parametrize(
    "production, tier, bonus",
    [
        (90.0, BonusTier.PARTIAL_90, 40.5),
        (80.0, BonusTier.PARTIAL_80, 32.0),
        (70.0, BonusTier.PARTIAL_70, 24.5),
        (69.99, BonusTier.NOT_REACHED, 0.0),
    ],
)
def test_tier_boundaries_are_inclusive(production, tier, bonus):
    r = calc(production)

    assert r.tier == tier
    assert r.bonus == pytest.approx(bonus)


def test_goal_reached_without_fuel_record_is_an_error():
    with pytest.raises(MissingFuelRecordError):
        calc(150.0)


def test_fuel_is_ignored_below_goal():
    r = calc(95.0, fuel=2.5)

    assert r.fuel_category is None
    assert r.bonus == pytest.approx(42.75)


def test_poor_fuel_reduces_bonus():
    r = calc(100.0, fuel=3.00)

    assert r.fuel_category == "Ruim"
    assert r.bonus == pytest.approx(90.0)


def test_stoppages_count_toward_production():
    r = StandardBonusCalculator().calculate(
        trip_values=[50.0, 25.0],
        stoppage_values=[10.0, 5.0],
        goal=100.0,
    )

    assert r.production == pytest.approx(90.0)
    assert r.trip_count == 2
    assert r.stoppage_total == pytest.approx(15.0)
    assert r.tier == BonusTier.PARTIAL_90


def test_tiers_are_monotonic_in_production():
    order = [
        BonusTier.NOT_REACHED,
        BonusTier.PARTIAL_70,
        BonusTier.PARTIAL_80,
        BonusTier.PARTIAL_90,
        BonusTier.GOAL_REACHED,
    ]
    ranks = [order.index(calc(float(p), fuel=3.2).tier) for p in range(0, 151)]

    assert ranks == sorted(ranks)


def test_goal_must_be_positive():
    with pytest.raises(ValidationError):
        calc(10.0, goal=0)


def test_trips_adding_up_to_the_goal_reach_it():
    # 100.10 + 200.20 + 377.56 is 677.8599999999999 in binary floats
    r = StandardBonusCalculator().calculate(
        trip_values=[100.10, 200.20, 377.56],
        stoppage_values=[],
        goal=META_FIXA,
        fuel_average=3.05,
    )

    assert r.production == 677.86
    assert r.ratio == 1.0
    assert r.tier == BonusTier.GOAL_REACHED
    assert r.bonus == 677.86


def test_trips_and_stoppages_adding_up_to_a_partial_threshold():
    r = StandardBonusCalculator().calculate(
        trip_values=[0.1, 0.2, 69.6],
        stoppage_values=[0.1],
        goal=100.0,
    )

    assert r.production == 70.0
    assert r.tier == BonusTier.PARTIAL_70
    assert r.bonus == 24.5
