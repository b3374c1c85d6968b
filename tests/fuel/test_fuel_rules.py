from __future__ import annotations

import pytest

from frota_premio.fuel.rules import classify_fuel


@pytest.mark.parametrize(
    "average, name, factor",
    [
        (2.5, "Ruim", 0.9),
        (3.00, "Ruim", 0.9),
        (3.01, "Regular", 1.0),
        (3.10, "Regular", 1.0),
        (3.11, "Bom", 1.2),
        (3.29, "Bom", 1.2),
        (3.30, "Excelente", 1.3),
    ],
)
def test_fuel_bands(average, name, factor):
    category = classify_fuel(average)

    assert category.name == name
    assert category.factor == factor


def test_import_labels():
    assert classify_fuel(2.9).label == "Abaixo da Média -10%"
    assert classify_fuel(3.05).label == "Média sem Ganho"
    assert classify_fuel(3.2).label == "Média Limite 20%"
    assert classify_fuel(3.5).label == "Média Desejada 30%"
