from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from ..core.constants import PERIOD_END_DAY, PERIOD_START_DAY
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Period:
    start: date
    end: date


@dataclass(frozen=True)
class Week:
    """Semana do diário de bordo: domingo a sábado."""

    start: date
    end: date
    code: str


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError("Data inválida (AAAA-MM-DD)")


def parse_hhmm(value: str) -> time:
    try:
        return datetime.strptime((value or "").strip(), "%H:%M").time()
    except ValueError:
        raise ValidationError("Horário inválido (HH:MM)")


def parse_competencia(value: str) -> tuple[int, int]:
    """Parse a 'YYYY-MM' competência into (year, month)."""
    try:
        parsed = datetime.strptime((value or "").strip(), "%Y-%m")
    except ValueError:
        raise ValidationError("Competência inválida (AAAA-MM)")
    return parsed.year, parsed.month


def current_competencia(today: date | None = None) -> str:
    today = today or date.today()
    return today.strftime("%Y-%m")


def accounting_period(competencia: str) -> Period:
    """Bonus window for a competência: 21st of the prior month to the 20th."""
    year, month = parse_competencia(competencia)
    start_year, start_month = (year - 1, 12) if month == 1 else (year, month - 1)
    return Period(
        start=date(start_year, start_month, PERIOD_START_DAY),
        end=date(year, month, PERIOD_END_DAY),
    )


def calendar_month(day: date) -> Period:
    first = day.replace(day=1)
    next_first = (first + timedelta(days=32)).replace(day=1)
    return Period(start=first, end=next_first - timedelta(days=1))


def minutes_between(start: time, end: time) -> int:
    """Signed whole minutes from start to end on the same day."""
    anchor = date(2000, 1, 1)
    delta = datetime.combine(anchor, end) - datetime.combine(anchor, start)
    return int(delta.total_seconds() // 60)


def format_minutes(minutes: int) -> str:
    """90 -> '01:30'."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def _first_sunday(year: int) -> date:
    """Sunday of the week that contains January 1st."""
    jan_first = date(year, 1, 1)
    # date.weekday(): Monday=0 ... Sunday=6
    return jan_first - timedelta(days=(jan_first.weekday() + 1) % 7)


def week_of(day: date) -> Week:
    """Sunday-to-Saturday week; week 1 contains January 1st and belongs to that year."""
    start = day - timedelta(days=(day.weekday() + 1) % 7)
    end = start + timedelta(days=6)
    number = (start - _first_sunday(end.year)).days // 7 + 1
    return Week(start=start, end=end, code=f"{end.year}-W{number:02d}")


def parse_week_code(code: str) -> Week:
    """Inverse of week_of for codes like '2024-W07'."""
    try:
        year_text, number_text = (code or "").strip().upper().split("-W")
        year, number = int(year_text), int(number_text)
        start = _first_sunday(year) + timedelta(weeks=number - 1)
    except ValueError:
        raise ValidationError("Semana inválida (AAAA-Wss)")
    week = week_of(start)
    if number < 1 or week.code != f"{year}-W{number:02d}":
        raise ValidationError("Semana inválida (AAAA-Wss)")
    return week


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
