from __future__ import annotations

import math
import re
from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} é obrigatório")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} deve ter pelo menos {min_len} caracteres")
    return value


_THOUSANDS_DOT = re.compile(r"^-?\d{1,3}(\.\d{3})+$")


def parse_number(value: Any, *, thousands_dot: bool = False) -> float | None:
    """Parse a number typed by a person or read from a spreadsheet cell.

    Accepts Brazilian decimal commas ("12,50"). With thousands_dot, text like
    "1.500" is read as 1500 (money columns); otherwise it is 1.5. Returns None
    for blanks and non-numeric text.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip().replace("R$", "").strip()
        if not text:
            return None
        if "," in text:
            text = text.replace(".", "").replace(",", ".")
        elif thousands_dot and _THOUSANDS_DOT.match(text):
            text = text.replace(".", "")
        try:
            number = float(text)
        except ValueError:
            return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def require_positive_number(value: Any, field_name: str) -> float:
    number = parse_number(value)
    if number is None or number <= 0:
        raise ValidationError(f"Informe um valor válido para {field_name}")
    return number
