from __future__ import annotations

import pytest

from frota_premio.bonus.service import BonusService
from frota_premio.container import Container
from frota_premio.corrections.service import CorrectionService
from frota_premio.drivers.service import AuthService, DriverService
from frota_premio.fuel.service import FuelService
from frota_premio.imports.service import ImportService
from frota_premio.logbook.service import LogbookService
from frota_premio.main import create_app
from frota_premio.stoppages.service import StoppageService
from frota_premio.support.service import SupportService
from frota_premio.trips.service import TripService


@pytest.fixture
def app(monkeypatch, driver_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    # Only the login flow and the home pages are exercised here.
    container = Container(
        auth_service=AuthService(driver_repo),
        driver_service=DriverService(driver_repo),
        trip_service=TripService(None),
        correction_service=CorrectionService(None, None, driver_repo, None),
        stoppage_service=StoppageService(None, None),
        fuel_service=FuelService(None),
        bonus_service=BonusService(None, None, None, driver_repo),
        import_service=ImportService(None, None, driver_repo),
        logbook_service=LogbookService(None, driver_repo, None),
        support_service=SupportService(None),
    )
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()


def log_in(client, *, user_id, name, role, must_change_password=False):
    with client.session_transaction() as sess:
        sess["user_id"] = user_id
        sess["name"] = name
        sess["email"] = f"{user_id}@frota.com"
        sess["role"] = role
        sess["must_change_password"] = must_change_password


def test_anonymous_user_is_sent_to_login(client):
    response = client.get("/admin")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/")


def test_driver_cannot_open_admin_pages(client):
    log_in(client, user_id=1, name="João Silva", role="motorista")

    response = client.get("/admin")

    assert response.status_code == 403
    assert "João Silva" in response.get_data(as_text=True)


def test_admin_cannot_open_driver_pages(client):
    log_in(client, user_id=9, name="Administrador", role="admin")

    assert client.get("/motorista").status_code == 403
    assert client.get("/admin").status_code == 200


def test_pending_password_change_blocks_other_pages(client):
    log_in(client, user_id=2, name="Maria Souza", role="motorista", must_change_password=True)

    response = client.get("/motorista")

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/alterar-senha")
    assert client.get("/alterar-senha").status_code == 200


def test_login_redirects_to_module_choice(client):
    response = client.post("/", data={"username": "joao", "password": "segredo1"})

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/escolher-modulo")
    with client.session_transaction() as sess:
        assert sess["role"] == "motorista"
        assert sess["name"] == "João Silva"


def test_login_with_pending_password_goes_to_change_password(client):
    response = client.post("/", data={"username": "maria", "password": "segredo2"})

    assert response.headers["Location"].endswith("/alterar-senha")


def test_login_failure_shows_message(client):
    response = client.post("/", data={"username": "joao", "password": "errada"})

    assert response.status_code == 200
    assert "Usuário ou senha inválidos" in response.get_data(as_text=True)
    with client.session_transaction() as sess:
        assert "user_id" not in sess


def test_module_choice_routes_by_role(client):
    log_in(client, user_id=9, name="Administrador", role="admin")

    bonus = client.post("/escolher-modulo", data={"module": "premiacao"})
    logbook = client.post("/escolher-modulo", data={"module": "diario"})

    assert bonus.headers["Location"].endswith("/admin")
    assert logbook.headers["Location"].endswith("/admin/diario")


def test_change_password_clears_pending_flag(client, driver_repo):
    log_in(client, user_id=2, name="Maria Souza", role="motorista", must_change_password=True)

    response = client.post("/alterar-senha", data={"new_password": "novasenha", "confirmation": "novasenha"})

    assert response.headers["Location"].endswith("/escolher-modulo")
    assert not driver_repo.get_by_id(2).must_change_password
    assert client.get("/motorista").status_code == 200
