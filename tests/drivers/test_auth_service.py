import pytest
from werkzeug.security import check_password_hash

from frota_premio.core.enums import Role
from frota_premio.core.exceptions import AuthenticationError, ValidationError
from frota_premio.drivers.service import AuthService, DriverService


@pytest.fixture
def auth(driver_repo):
    return AuthService(driver_repo)


def test_authenticate_driver(auth):
    user = auth.authenticate(" joao ", "segredo1")

    assert user.driver_id == 1
    assert user.name == "João Silva"
    assert user.role == Role.DRIVER
    assert not user.must_change_password


def test_authenticate_admin_and_pending_password(auth):
    assert auth.authenticate("admin", "admin123").role == Role.ADMIN
    assert auth.authenticate("maria", "segredo2").must_change_password


@pytest.mark.parametrize("username,password", [("joao", "errada"), ("ninguem", "segredo1"), ("", "")])
def test_authenticate_rejects_bad_credentials(auth, username, password):
    with pytest.raises(AuthenticationError, match="Usuário ou senha inválidos"):
        auth.authenticate(username, password)


def test_change_password_validates_length(auth):
    with pytest.raises(ValidationError, match="pelo menos 6"):
        auth.change_password(2, new_password="abc", confirmation="abc")


def test_change_password_validates_confirmation(auth):
    with pytest.raises(ValidationError, match="não coincidem"):
        auth.change_password(2, new_password="novasenha", confirmation="outrasenha")


def test_change_password_clears_flag(auth, driver_repo):
    auth.change_password(2, new_password="novasenha", confirmation="novasenha")

    maria = driver_repo.get_by_id(2)
    assert not maria.must_change_password
    assert check_password_hash(maria.password_hash, "novasenha")
    assert not auth.authenticate("maria", "novasenha").must_change_password


def test_driver_service_lists_drivers_without_admins(driver_repo):
    service = DriverService(driver_repo)

    assert service.list_driver_names() == ["João Silva", "Maria Souza"]
    assert service.email_by_name()["Administrador"] == "admin@frota.com"
    with pytest.raises(ValidationError):
        service.get(77)
