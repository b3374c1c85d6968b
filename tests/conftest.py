from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from frota_premio.drivers.model import Driver


class InMemoryDrivers:
    def __init__(self, drivers: list[Driver]):
        self._by_id = {d.driver_id: d for d in drivers}

    def get_by_id(self, driver_id: int) -> Optional[Driver]:
        return self._by_id.get(driver_id)

    def get_by_username(self, username: str) -> Optional[Driver]:
        return next((d for d in self._by_id.values() if d.username == username), None)

    def list_drivers(self, *, include_admins: bool = False) -> list[Driver]:
        return [d for d in self._by_id.values() if include_admins or not d.is_admin]

    def update_password(self, driver_id: int, *, password_hash: str, must_change_password: bool) -> bool:
        d = self._by_id.get(driver_id)
        if not d:
            return False
        self._by_id[driver_id] = Driver(
            driver_id=d.driver_id,
            name=d.name,
            username=d.username,
            email=d.email,
            password_hash=password_hash,
            is_admin=d.is_admin,
            must_change_password=must_change_password,
        )
        return True


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 14, 9, 30)


@pytest.fixture
def driver_repo() -> InMemoryDrivers:
    return InMemoryDrivers(
        [
            Driver(1, "João Silva", "joao", "joao@frota.com", generate_password_hash("segredo1")),
            Driver(2, "Maria Souza", "maria", "maria@frota.com", generate_password_hash("segredo2"), must_change_password=True),
            Driver(9, "Administrador", "admin", "admin@frota.com", generate_password_hash("admin123"), is_admin=True),
        ]
    )
