"""Importação de planilhas (viagens e médias de diesel).

Rows that cannot be used are dropped and counted, never failing the batch;
only file-level problems (unreadable file, empty sheet, missing columns,
nothing left to insert) raise ImportFileError.
"""
from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import PurePath
from typing import Any, Optional

import pandas as pd

from ..common.datetime_utils import parse_competencia
from ..common.validators import parse_number
from ..core.enums import TripStatus
from ..core.exceptions import ImportFileError, ValidationError
from ..drivers.repository import DriverRepository
from ..fuel.model import NewFuelRecord
from ..fuel.repository import FuelRepository
from ..fuel.rules import classify_fuel
from ..trips.model import NewTrip
from ..trips.repository import TripRepository

logger = logging.getLogger(__name__)

TRIP_COLUMNS = ["motorista", "origem", "destino", "container", "data", "valor"]
FUEL_COLUMNS = ["motorista", "media"]

_DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y", "%d/%m/%y", "%Y-%m-%d %H:%M:%S", "%d-%m-%Y")


@dataclass(frozen=True)
class ImportResult:
    inserted: int
    skipped: int
    message: str


def read_sheet(filename: str, data: bytes) -> pd.DataFrame:
    """First sheet of an .xlsx/.xls/.csv upload, column names normalized."""
    if not data:
        raise ImportFileError("Selecione um arquivo para importar")

    suffix = PurePath(filename or "").suffix.lower()
    try:
        if suffix == ".csv":
            df = pd.read_csv(io.BytesIO(data), sep=None, engine="python", dtype=object)
        elif suffix in {".xlsx", ".xls"}:
            df = pd.read_excel(io.BytesIO(data), sheet_name=0, dtype=object)
        else:
            raise ImportFileError("Formato não suportado. Envie .xlsx, .xls ou .csv")
    except ImportFileError:
        raise
    except Exception as e:
        logger.warning("falha ao ler planilha %s: %s", filename, e)
        raise ImportFileError("Erro ao processar o arquivo. Verifique se é uma planilha válida.")

    df.columns = [str(c).strip().lower() for c in df.columns]
    df = df.dropna(how="all")
    if df.empty:
        raise ImportFileError("A planilha está vazia.")
    return df


def require_columns(df: pd.DataFrame, expected: list[str]) -> None:
    missing = [c for c in expected if c not in df.columns]
    if missing:
        raise ImportFileError(f"Colunas faltando na planilha: {', '.join(missing)}")


def cell_text(value: Any) -> str:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    return str(value).strip()


def cell_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, pd.Timestamp):
        return None if pd.isna(value) else value.date()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = cell_text(value)
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


class ImportService:
    def __init__(self, trips: TripRepository, fuel: FuelRepository, drivers: DriverRepository):
        self._trips = trips
        self._fuel = fuel
        self._drivers = drivers

    def _email_by_name(self) -> dict[str, str]:
        return {d.name: d.email for d in self._drivers.list_drivers(include_admins=True)}

    def import_trips(self, *, filename: str, data: bytes) -> ImportResult:
        df = read_sheet(filename, data)
        require_columns(df, TRIP_COLUMNS)
        emails = self._email_by_name()

        rows: list[NewTrip] = []
        for record in df.to_dict(orient="records"):
            name = cell_text(record.get("motorista"))
            email = emails.get(name)
            value = parse_number(record.get("valor"), thousands_dot=True)
            trip_date = cell_date(record.get("data"))
            if not email or value is None or trip_date is None:
                continue
            rows.append(
                NewTrip(
                    driver_name=name,
                    email=email,
                    origin=cell_text(record.get("origem")),
                    destination=cell_text(record.get("destino")),
                    trip_date=trip_date,
                    container=cell_text(record.get("container")) or None,
                    value=round(value, 2),
                    status=TripStatus.CONFIRMED,
                )
            )

        skipped = len(df) - len(rows)
        if not rows:
            raise ImportFileError("Nenhum motorista da planilha corresponde aos cadastrados ou valores inválidos.")

        inserted = self._trips.bulk_insert(rows)
        logger.info("importacao de viagens: %d inseridas, %d ignoradas", inserted, skipped)
        return ImportResult(
            inserted=inserted,
            skipped=skipped,
            message=f"Importação concluída com sucesso! {inserted} viagem(ns) importada(s), {skipped} linha(s) ignorada(s).",
        )

    def import_fuel(self, *, competencia: str, filename: str, data: bytes) -> ImportResult:
        if not (competencia or "").strip():
            raise ValidationError("Por favor, selecione a competência antes de importar.")
        parse_competencia(competencia)
        competencia = competencia.strip()

        df = read_sheet(filename, data)
        require_columns(df, FUEL_COLUMNS)
        emails = self._email_by_name()

        rows: list[NewFuelRecord] = []
        for record in df.to_dict(orient="records"):
            name = cell_text(record.get("motorista"))
            average = parse_number(record.get("media"))
            if name not in emails or average is None:
                continue
            rows.append(
                NewFuelRecord(
                    driver_name=name,
                    average=round(average, 2),
                    category=classify_fuel(average).label,
                    competencia=competencia,
                )
            )

        skipped = len(df) - len(rows)
        if not rows:
            raise ImportFileError("Nenhum dado válido encontrado na planilha.")

        inserted = self._fuel.bulk_insert(rows)
        logger.info("importacao de diesel %s: %d inseridas, %d ignoradas", competencia, inserted, skipped)
        return ImportResult(
            inserted=inserted,
            skipped=skipped,
            message=f"Importação concluída com sucesso! {inserted} média(s) importada(s), {skipped} linha(s) ignorada(s).",
        )

    @staticmethod
    def trip_template() -> io.BytesIO:
        output = io.BytesIO()
        with pd.ExcelWriter(output, engine="openpyxl") as writer:
            pd.DataFrame(columns=TRIP_COLUMNS).to_excel(writer, index=False, sheet_name="Modelo")
        output.seek(0)
        return output
