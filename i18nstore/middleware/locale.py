from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from i18nstore.core.config import get_settings
from i18nstore.store import TranslationStore

COOKIE_NAME = "lang"
COOKIE_MAX_AGE = 60 * 60 * 24 * 365


class LocaleMiddleware(BaseHTTPMiddleware):
    """Pick the request locale from ?lang=, then the lang cookie, then the store default."""

    def __init__(self, app: ASGIApp, store: TranslationStore) -> None:
        super().__init__(app)
        self.store = store

    async def dispatch(self, request: Request, call_next):
        default = self.store.default_locale
        lang = request.query_params.get("lang") or request.cookies.get(COOKIE_NAME) or default
        if lang not in self.store:
            lang = default
        request.state.lang = lang
        response: Response = await call_next(request)
        if "lang" in request.query_params:
            response.set_cookie(
                COOKIE_NAME,
                lang,
                max_age=COOKIE_MAX_AGE,
                httponly=False,
                samesite="lax",
            )
        return response


def get_lang(request: Request) -> str:
    """FastAPI dependency: the locale chosen by LocaleMiddleware."""
    return getattr(request.state, "lang", None) or get_settings().DEFAULT_LOCALE
