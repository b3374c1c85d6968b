from __future__ import annotations

from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .model import Driver
from .repository import DriverRepository


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    driver_id: int
    name: str
    email: str
    role: Role
    must_change_password: bool


class AuthService:
    """Use case: login and password change."""

    def __init__(self, drivers: DriverRepository):
        self._drivers = drivers

    def authenticate(self, username: str, password: str) -> SessionUser:
        driver = self._drivers.get_by_username((username or "").strip())
        if not driver:
            raise AuthenticationError("Usuário ou senha inválidos")

        try:
            ok = check_password_hash(driver.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            raise AuthenticationError("Usuário ou senha inválidos")

        return SessionUser(
            driver_id=driver.driver_id,
            name=driver.name,
            email=driver.email,
            role=driver.role,
            must_change_password=driver.must_change_password,
        )

    def change_password(self, driver_id: int, *, new_password: str, confirmation: str) -> None:
        require_min_length(new_password, "A senha", MIN_PASSWORD_LENGTH)
        if new_password != confirmation:
            raise ValidationError("As senhas não coincidem")

        if not self._drivers.get_by_id(int(driver_id)):
            raise AuthenticationError("Usuário não autenticado")

        ok = self._drivers.update_password(
            int(driver_id),
            password_hash=generate_password_hash(new_password),
            must_change_password=False,
        )
        if not ok:
            raise ValidationError("Erro ao atualizar senha")


class DriverService:
    """Use case: consultas de motoristas usadas pelas telas de admin e importações."""

    def __init__(self, drivers: DriverRepository):
        self._drivers = drivers

    def get(self, driver_id: int) -> Driver:
        driver = self._drivers.get_by_id(int(driver_id))
        if not driver:
            raise ValidationError("Motorista não encontrado")
        return driver

    def list_drivers(self) -> list[Driver]:
        return list(self._drivers.list_drivers(include_admins=False))

    def list_driver_names(self) -> list[str]:
        return sorted((d.name for d in self.list_drivers()), key=str.casefold)

    def email_by_name(self) -> dict[str, str]:
        """Registered drivers keyed by name (admins included, as the import accepts any registered name)."""
        return {d.name: d.email for d in self._drivers.list_drivers(include_admins=True)}
