from __future__ import annotations

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_LIST_LIMIT
from ..core.enums import ContactCategory
from ..core.exceptions import ValidationError
from .model import SupportContact
from .repository import SupportRepository


class SupportService:
    def __init__(self, contacts: SupportRepository):
        self._contacts = contacts

    def submit_login_correction(self, *, submitter: str, message: str) -> int:
        """Public form: someone who cannot log in identifies themselves by name or e-mail."""
        return self._contacts.create(
            category=ContactCategory.LOGIN_CORRECTION,
            submitter=require_non_empty(submitter, "Usuário ou e-mail"),
            message=require_non_empty(message, "Mensagem"),
        )

    def submit_other(self, *, email: str, message: str) -> int:
        return self._contacts.create(
            category=ContactCategory.OTHER,
            submitter=require_non_empty(email, "E-mail"),
            message=require_non_empty(message, "Mensagem"),
        )

    def list_by_category(self, category: str) -> list[SupportContact]:
        try:
            cat = ContactCategory((category or ContactCategory.LOGIN_CORRECTION.value).strip())
        except ValueError:
            raise ValidationError("Categoria inválida")
        return list(self._contacts.list_by_category(cat, limit=DEFAULT_LIST_LIMIT))
