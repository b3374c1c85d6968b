from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import ContactCategory
from .model import SupportContact


class SupportRepository(Protocol):
    def create(self, *, category: ContactCategory, submitter: str, message: str) -> int:
        raise NotImplementedError

    def list_by_category(self, category: ContactCategory, *, limit: int = 500) -> Sequence[SupportContact]:
        raise NotImplementedError
