from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Driver:
    """Entidade de domínio: motorista cadastrado.

    Administradores também vivem nesta tabela, marcados pela flag ``is_admin``.
    """

    driver_id: int
    name: str
    username: str
    email: str
    password_hash: str
    is_admin: bool = False
    must_change_password: bool = False

    @property
    def role(self) -> Role:
        return Role.ADMIN if self.is_admin else Role.DRIVER
