import pytest

from frota_premio.core.enums import ContactCategory
from frota_premio.core.exceptions import ValidationError
from frota_premio.support.model import SupportContact
from frota_premio.support.service import SupportService


class InMemoryContacts:
    def __init__(self):
        self.rows = []

    def create(self, *, category, submitter, message):
        self.rows.append(SupportContact(len(self.rows) + 1, category, submitter, message, None))
        return len(self.rows)

    def list_by_category(self, category, *, limit=500):
        return [c for c in self.rows if c.category == category][:limit]


@pytest.fixture
def contacts():
    return InMemoryContacts()


@pytest.fixture
def service(contacts):
    return SupportService(contacts)


def test_login_correction_and_other_are_kept_apart(service):
    service.submit_login_correction(submitter=" joao ", message="Esqueci a senha")
    service.submit_other(email="maria@frota.com", message="Dúvida sobre a meta")

    (login,) = service.list_by_category("correcao_login")
    (other,) = service.list_by_category("outros")
    assert login.submitter == "joao"
    assert login.category == ContactCategory.LOGIN_CORRECTION
    assert other.message == "Dúvida sobre a meta"


def test_default_category_is_login_correction(service):
    service.submit_login_correction(submitter="joao", message="Sem acesso")

    assert len(service.list_by_category("")) == 1


def test_message_is_required(service, contacts):
    with pytest.raises(ValidationError, match="Mensagem"):
        service.submit_other(email="maria@frota.com", message="   ")
    assert contacts.rows == []


def test_unknown_category(service):
    with pytest.raises(ValidationError, match="Categoria inválida"):
        service.list_by_category("spam")
