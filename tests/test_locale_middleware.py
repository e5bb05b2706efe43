from __future__ import annotations

import pytest
from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from i18nstore import TranslationStore
from i18nstore.middleware.locale import LocaleMiddleware, get_lang


@pytest.fixture
def store():
    return TranslationStore(
        {"en": {"title": "Policies"}, "ru": {"title": "Политики"}},
        warn=lambda _m: None,
    )


@pytest.fixture
def app(store):
    app = FastAPI()
    app.add_middleware(LocaleMiddleware, store=store)

    @app.get("/title")
    def title(lang: str = Depends(get_lang)) -> dict[str, str]:
        return {"lang": lang, "title": store.t("title", lang)}

    return app


def test_default_locale_without_hints(app):
    r = TestClient(app).get("/title")

    assert r.status_code == 200
    assert r.json() == {"lang": "en", "title": "Policies"}
    assert "lang" not in r.cookies


def test_query_param_selects_locale_and_sets_cookie(app):
    r = TestClient(app).get("/title", params={"lang": "ru"})

    assert r.json() == {"lang": "ru", "title": "Политики"}
    assert r.cookies.get("lang") == "ru"
    assert "Max-Age=31536000" in r.headers["set-cookie"]


def test_cookie_selects_locale(app):
    client = TestClient(app, cookies={"lang": "ru"})

    assert client.get("/title").json()["lang"] == "ru"


def test_unknown_locale_falls_back_to_default(app):
    r = TestClient(app).get("/title", params={"lang": "de"})

    assert r.json() == {"lang": "en", "title": "Policies"}
    assert r.cookies.get("lang") == "en"


def test_get_lang_without_middleware():
    app = FastAPI()

    @app.get("/lang")
    def lang(request: Request) -> dict[str, str]:
        return {"lang": get_lang(request)}

    assert TestClient(app).get("/lang").json() == {"lang": "en"}
