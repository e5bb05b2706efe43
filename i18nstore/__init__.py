from __future__ import annotations

from functools import lru_cache
from typing import Any

from loguru import logger

from i18nstore.core.config import get_settings
from i18nstore.errors import (
    DocumentIOError,
    DocumentParseError,
    InvalidDocumentError,
    TranslationStoreError,
)
from i18nstore.store import MISSING, TranslationStore, resolve_path

__all__ = [
    "DocumentIOError",
    "DocumentParseError",
    "InvalidDocumentError",
    "MISSING",
    "TranslationStore",
    "TranslationStoreError",
    "get_store",
    "resolve_path",
    "translate",
]

# Silent until the application opts in via core.logging.init_logging()
logger.disable("i18nstore")


@lru_cache
def get_store() -> TranslationStore:
    """Shared store built from I18N_TRANSLATIONS_FILE (empty when unset)."""
    path = get_settings().TRANSLATIONS_FILE
    if path is None:
        return TranslationStore()
    return TranslationStore.from_file(path)


def translate(key: str, lang: str | None = None, default: Any = MISSING) -> Any:
    return get_store().t(key, lang, default)
