"""HTTP tests for the welcome page, health check and error page."""

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, func, inspect, select
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from petclinic.core.config import settings
from petclinic.db.models import Vet
from petclinic.main import app


def test_welcome(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.template.name == "welcome.html"


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_unknown_route_renders_error_page(client):
    response = client.get("/no-such-page")
    assert response.status_code == 404
    assert response.template.name == "error.html"


def test_unhandled_error_renders_error_page():
    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/oups")
    assert response.status_code == 500
    assert "Something happened" in response.text


def test_startup_creates_tables_without_seeding(monkeypatch):
    fresh = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    monkeypatch.setattr("petclinic.main.engine", fresh)
    monkeypatch.setattr(settings, "seed_on_startup", False)

    with TestClient(app) as client:
        assert client.get("/health").status_code == 200

    assert {"owners", "pets", "visits", "vets"} <= set(inspect(fresh).get_table_names())
    with Session(fresh) as session:
        assert session.execute(select(func.count(Vet.id))).scalar_one() == 0
    fresh.dispose()
