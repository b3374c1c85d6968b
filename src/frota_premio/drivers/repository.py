from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Driver


class DriverRepository(Protocol):
    """Interface de repositório para motoristas.

    Os serviços dependem desta interface, não de um banco específico.
    """

    def get_by_id(self, driver_id: int) -> Optional[Driver]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[Driver]:
        raise NotImplementedError

    def list_drivers(self, *, include_admins: bool = False) -> Sequence[Driver]:
        raise NotImplementedError

    def update_password(self, driver_id: int, *, password_hash: str, must_change_password: bool) -> bool:
        raise NotImplementedError
