from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .bonus.service import BonusService
from .core.constants import META_FIXA
from .corrections.mysql_correction_repository import MySQLCorrectionRepository
from .corrections.service import CorrectionService
from .database.connection import DBConfig, DatabaseConnection
from .drivers.mysql_driver_repository import MySQLDriverRepository
from .drivers.service import AuthService, DriverService
from .fuel.mysql_fuel_repository import MySQLFuelRepository
from .fuel.service import FuelService
from .imports.service import ImportService
from .logbook.mysql_logbook_repository import MySQLLogbookRepository
from .logbook.service import LogbookService
from .stoppages.mysql_stoppage_repository import MySQLStoppageRepository
from .stoppages.service import StoppageService
from .storage.local import LocalFileStorage
from .support.mysql_support_repository import MySQLSupportRepository
from .support.service import SupportService
from .trips.mysql_trip_repository import MySQLTripRepository
from .trips.service import TripService


@dataclass(frozen=True)
class Container:
    auth_service: AuthService
    driver_service: DriverService
    trip_service: TripService
    correction_service: CorrectionService
    stoppage_service: StoppageService
    fuel_service: FuelService
    bonus_service: BonusService
    import_service: ImportService
    logbook_service: LogbookService
    support_service: SupportService


def build_container(*, db_config: dict, upload_folder: str | Path, goal: float = META_FIXA) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    storage = LocalFileStorage(upload_folder)

    drivers_repo = MySQLDriverRepository(conn)
    trips_repo = MySQLTripRepository(conn)
    corrections_repo = MySQLCorrectionRepository(conn)
    stoppages_repo = MySQLStoppageRepository(conn)
    fuel_repo = MySQLFuelRepository(conn)
    logbook_repo = MySQLLogbookRepository(conn)
    support_repo = MySQLSupportRepository(conn)

    return Container(
        auth_service=AuthService(drivers_repo),
        driver_service=DriverService(drivers_repo),
        trip_service=TripService(trips_repo),
        correction_service=CorrectionService(corrections_repo, trips_repo, drivers_repo, storage),
        stoppage_service=StoppageService(stoppages_repo, trips_repo),
        fuel_service=FuelService(fuel_repo),
        bonus_service=BonusService(trips_repo, stoppages_repo, fuel_repo, drivers_repo, goal=goal),
        import_service=ImportService(trips_repo, fuel_repo, drivers_repo),
        logbook_service=LogbookService(logbook_repo, drivers_repo, storage),
        support_service=SupportService(support_repo),
    )
