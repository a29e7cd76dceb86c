import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from src.locales.registry import LocaleRegistry
from src.locales.resolver import (
    ActiveLocale,
    LocaleMiddleware,
    get_active_locale,
    get_requested_locale,
    resolve_locale,
)


def test_prefixed_path_selects_locale(registry):
    active = resolve_locale("/fr/a-propos", registry)
    assert active == ActiveLocale(code="fr", path="/a-propos", prefixed=True)


def test_unprefixed_path_uses_default(registry):
    active = resolve_locale("/about", registry)
    assert active.code == "en"
    assert active.path == "/about"
    assert not active.prefixed


def test_locale_only_path(registry):
    assert resolve_locale("/pt", registry) == ActiveLocale(code="pt", path="/", prefixed=True)
    assert resolve_locale("/pt/", registry) == ActiveLocale(code="pt", path="/", prefixed=True)


@pytest.mark.parametrize("path", ["/", "", "/de/about", "/FR/a-propos", "/french", "/fr-ca/x"])
def test_unsupported_segments_resolve_to_default(registry, path):
    active = resolve_locale(path, registry)
    assert active.code == "en"
    assert active.path == path


def test_codes_longer_than_two_characters_are_matched():
    registry = LocaleRegistry(("en", "pt-br", "fil"), default="en")
    assert resolve_locale("/pt-br/sobre", registry).code == "pt-br"
    assert resolve_locale("/fil/tungkol", registry).code == "fil"


@pytest.fixture
def locale_app(registry):
    app = FastAPI()
    app.state.registry = registry
    app.add_middleware(LocaleMiddleware, registry=registry)

    @app.get("/{path:path}")
    def echo(
        active: ActiveLocale = Depends(get_active_locale),
        requested: str = Depends(get_requested_locale),
    ):
        return {"code": active.code, "path": active.path, "requested": requested}

    return TestClient(app)


def test_middleware_sets_active_locale(locale_app):
    response = locale_app.get("/fr/a-propos")
    assert response.status_code == 200
    assert response.json() == {"code": "fr", "path": "/a-propos", "requested": "fr"}
    assert response.headers["content-language"] == "fr"


def test_middleware_defaults_without_prefix(locale_app):
    response = locale_app.get("/about")
    assert response.json()["code"] == "en"
    assert response.headers["content-language"] == "en"


def test_requested_locale_query_override(locale_app):
    assert locale_app.get("/about?locale=jp").json()["requested"] == "jp"
    assert locale_app.get("/fr/x?locale=de").json()["requested"] == "fr"
