from __future__ import annotations

import logging
from datetime import date
from pathlib import PurePath
from typing import Any, Optional

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty, require_positive_number
from ..core.constants import CORRECTIONS_PAGE_SIZE
from ..core.enums import CorrectionStatus, TripStatus
from ..core.exceptions import ValidationError
from ..drivers.repository import DriverRepository
from ..storage.local import FileStorage
from ..trips.model import NewTrip
from ..trips.repository import TripRepository
from .model import CorrectionPage, TripCorrection
from .repository import CorrectionRepository

logger = logging.getLogger(__name__)

RECEIPT_EXTENSIONS = {".pdf", ".png", ".jpg", ".jpeg", ".webp"}


class CorrectionService:
    """Use case: motorista envia correção de viagem; admin aprova ou reprova."""

    def __init__(
        self,
        corrections: CorrectionRepository,
        trips: TripRepository,
        drivers: DriverRepository,
        storage: FileStorage,
    ):
        self._corrections = corrections
        self._trips = trips
        self._drivers = drivers
        self._storage = storage

    def submit(
        self,
        *,
        driver_id: int,
        origin: str,
        destination: str,
        trip_date: str,
        container: str,
        message: str,
        receipt_filename: str,
        receipt_data: bytes,
    ) -> int:
        driver = self._drivers.get_by_id(int(driver_id))
        if not driver:
            raise ValidationError("Motorista não encontrado")

        origin = require_non_empty(origin, "Origem")
        destination = require_non_empty(destination, "Destino")
        container = require_non_empty(container, "Container")
        day = parse_iso_date(trip_date)

        if not receipt_filename or not receipt_data:
            raise ValidationError("Anexe o comprovante da viagem")
        if PurePath(receipt_filename).suffix.lower() not in RECEIPT_EXTENSIONS:
            raise ValidationError("Comprovante deve ser PDF ou imagem")

        receipt_path = self._storage.save(folder="comprovantes", filename=receipt_filename, data=receipt_data)

        return self._corrections.create(
            driver_id=driver.driver_id,
            email=driver.email,
            origin=origin,
            destination=destination,
            trip_date=day,
            container=container,
            message=(message or "").strip() or None,
            receipt_path=receipt_path,
        )

    def list_mine(self, driver_id: int) -> list[TripCorrection]:
        return list(self._corrections.list_for_driver(int(driver_id)))

    def list_pending(
        self,
        *,
        page: int = 1,
        created_from: Optional[date] = None,
        created_to: Optional[date] = None,
    ) -> CorrectionPage:
        if created_from and created_to and created_to < created_from:
            raise ValidationError("A data final deve ser maior ou igual à inicial")

        page = max(int(page or 1), 1)
        total = self._corrections.count_by_status(
            status=CorrectionStatus.PENDING, created_from=created_from, created_to=created_to
        )
        items = self._corrections.list_by_status(
            status=CorrectionStatus.PENDING,
            created_from=created_from,
            created_to=created_to,
            offset=(page - 1) * CORRECTIONS_PAGE_SIZE,
            limit=CORRECTIONS_PAGE_SIZE,
        )
        return CorrectionPage(items=list(items), page=page, total=total, page_size=CORRECTIONS_PAGE_SIZE)

    def approve(self, correction_id: int, *, value: Any) -> int:
        amount = require_positive_number(value, "aprovar a viagem")
        correction = self._pending(correction_id)

        driver = self._drivers.get_by_id(correction.driver_id)
        if not driver:
            raise ValidationError("Motorista não encontrado")

        if not self._corrections.set_status(correction.correction_id, CorrectionStatus.APPROVED):
            raise ValidationError("Erro ao atualizar status")

        trip_id = self._trips.insert(
            NewTrip(
                driver_name=driver.name,
                email=correction.email,
                origin=correction.origin,
                destination=correction.destination,
                trip_date=correction.trip_date,
                container=correction.container,
                value=round(amount, 2),
                status=TripStatus.CONFIRMED,
            )
        )
        logger.info("correcao %s aprovada -> viagem %s (R$ %.2f)", correction.correction_id, trip_id, amount)
        return trip_id

    def reject(self, correction_id: int) -> None:
        correction = self._pending(correction_id)
        if not self._corrections.set_status(correction.correction_id, CorrectionStatus.REJECTED):
            raise ValidationError("Erro ao atualizar status")

    def receipt_file(self, correction_id: int):
        correction = self._corrections.get(int(correction_id))
        if not correction:
            raise ValidationError("Correção não encontrada")
        return self._storage.resolve(correction.receipt_path)

    def _pending(self, correction_id: int) -> TripCorrection:
        correction = self._corrections.get(int(correction_id))
        if not correction:
            raise ValidationError("Correção não encontrada")
        if correction.status != CorrectionStatus.PENDING:
            raise ValidationError("Correção já foi processada")
        return correction
