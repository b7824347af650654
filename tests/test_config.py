"""Tests for settings and app factory wiring."""
import pytest
from fastapi.testclient import TestClient

from conftest import make_settings
from todoapp.config import Settings
from todoapp.db.session import normalize_url
from todoapp.main import create_app


def test__normalize_url__rewrites_postgres_driver() -> None:
    assert normalize_url("postgres://u:p@h/db") == "postgresql+psycopg://u:p@h/db"
    assert normalize_url("postgresql://u:p@h/db") == "postgresql+psycopg://u:p@h/db"
    assert normalize_url("sqlite:///./x.db") == "sqlite:///./x.db"


def test__settings__default_token_lifetime_is_one_day() -> None:
    assert make_settings().access_token_expire_minutes == 24 * 60


def test__create_app__requires_secret_outside_dev() -> None:
    with pytest.raises(RuntimeError):
        create_app(make_settings(SECRET_KEY=None, APP_ENV="production"))


def test__create_app__generates_secret_in_dev() -> None:
    app = create_app(make_settings(SECRET_KEY=None, APP_ENV="dev"))
    assert app.state.settings.secret_key


def test__root(client: TestClient) -> None:
    assert client.get("/").json() == {"name": "Todo & Reminders API", "env": "dev"}


def test__settings__cors_origins_accepts_comma_separated_list() -> None:
    assert make_settings().cors_origin_list == ["*"]
    settings = make_settings(CORS_ORIGINS="https://a.example, https://b.example")
    assert settings.cors_origin_list == ["https://a.example", "https://b.example"]


def test__settings__cors_origins_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example")
    monkeypatch.setenv("SECRET_KEY", "env-secret")
    assert Settings().cors_origin_list == ["https://a.example"]


def test__run__launches_uvicorn_with_configured_address(monkeypatch: pytest.MonkeyPatch) -> None:
    import uvicorn

    from todoapp import run
    from todoapp.config import settings

    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setattr(settings, "host", "0.0.0.0")
    monkeypatch.setattr(settings, "port", 9001)

    run.main()

    assert calls == [("todoapp.main:app", {"host": "0.0.0.0", "port": 9001})]
