"""
Translation store: typed lookups over a locale-keyed document.

A document maps locale codes to nested trees:

    {
        "en": {"greeting": "Hello", "user": {"age": 30}},
        "id": {"greeting": "Halo"},
    }

Lookups take a dot-separated path ("user.age") and a locale. Resolution
order is: requested locale -> default locale -> caller default. Lookups
never raise; only construction does.

Typical usage:
    store = TranslationStore.from_file("translations.json")
    store.t("greeting", "id")                 # "Halo"
    store.get("user.age", "id", 0)            # 30, from "en"
    store.get("user", "en", {}, as_type=dict)
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from pathlib import Path
from typing import Any

from loguru import logger

from i18nstore.core.config import get_settings
from i18nstore.core.convert import ConversionError, convert, zero_value
from i18nstore.core.loader import load_document
from i18nstore.core.validation import validate_document

WarnSink = Callable[[str], None]


class _Missing:
    """Marker for "path not found" and "argument not given"."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def resolve_path(source: Any, path: str) -> Any:
    """
    Walk `source` along the dot-separated `path`.

    Returns the value found (which may be None) or MISSING when a segment
    is absent or the current value is not a mapping. The empty path
    resolves to `source` itself; a single trailing dot is ignored.
    """
    current = source
    if not path:
        return current
    segments = path.split(".")
    if segments[-1] == "":
        segments.pop()
    for segment in segments:
        if isinstance(current, dict) and segment in current:
            current = current[segment]
        else:
            return MISSING
    return current


def _present(value: Any) -> bool:
    return value is not MISSING and value is not None


def _default_warn(message: str) -> None:
    logger.warning(message)


class TranslationStore:
    """
    Immutable locale-keyed document with typed, falling-back lookups.

    `warn` receives the single-locale diagnostic; it defaults to the
    loguru logger. `default_locale` defaults to Settings.DEFAULT_LOCALE.
    """

    def __init__(
        self,
        document: Any = MISSING,
        *,
        default_locale: str | None = None,
        warn: WarnSink | None = None,
    ) -> None:
        settings = get_settings()
        if default_locale is None:
            default_locale = settings.DEFAULT_LOCALE
        self._default_locale = default_locale
        self._not_found_text = settings.NOT_FOUND_TEXT
        self._warn = warn or _default_warn

        if document is MISSING:
            # Deferred initialisation: every lookup yields the caller default
            self._translations: dict[str, Any] = {}
            self._locales: tuple[str, ...] = ()
            return

        validate_document(document)
        self._translations = copy.deepcopy(dict(document))
        self._locales = tuple(self._translations)
        logger.debug(
            "Translation store ready with locales {} (default {!r})",
            ", ".join(self._locales),
            self._default_locale,
        )

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        default_locale: str | None = None,
        warn: WarnSink | None = None,
    ) -> TranslationStore:
        """
        Build a store from a JSON (or .yaml/.yml) file.

        Raises:
            DocumentIOError: the file cannot be opened or is empty.
            DocumentParseError: the contents are not well-formed.
            InvalidDocumentError: the top level is not a non-empty mapping
                keyed by strings.
        """
        logger.debug("Loading translations from {}", path)
        document = load_document(path)
        return cls(document, default_locale=default_locale, warn=warn)

    # -- Public API ------------------------------------------------------------

    @property
    def locales(self) -> tuple[str, ...]:
        return self._locales

    @property
    def default_locale(self) -> str:
        return self._default_locale

    @property
    def document(self) -> dict[str, Any]:
        """A copy of the loaded document."""
        return copy.deepcopy(self._translations)

    def __contains__(self, lang_code: object) -> bool:
        return lang_code in self._translations

    def __repr__(self) -> str:
        return f"TranslationStore(locales={list(self._locales)!r}, default_locale={self._default_locale!r})"

    def get(self, path: str, lang_code: str, default: Any, as_type: Any = None) -> Any:
        """
        Look up `path` in `lang_code`, falling back to the default locale.

        The value is converted to `as_type` (or `type(default)` when omitted);
        a value of the wrong shape yields `default`. Emits a warning when no
        locale other than `lang_code` holds the path.
        """
        primary = MISSING
        if lang_code in self._translations:
            primary = resolve_path(self._translations[lang_code], path)

        if not self.is_available_elsewhere(path, lang_code):
            self._warn(
                f"Content for path '{path}' is not available in any locale except '{lang_code}'."
            )

        fallback = MISSING
        if lang_code != self._default_locale and self._default_locale in self._translations:
            fallback = resolve_path(self._translations[self._default_locale], path)

        if _present(primary):
            target = primary
        elif _present(fallback):
            target = fallback
        else:
            return default

        if as_type is None:
            if default is None:
                return copy.deepcopy(target)
            as_type = type(default)

        try:
            return convert(copy.deepcopy(target), as_type)
        except ConversionError:
            return default

    def t(
        self,
        path: str,
        lang_code: str | None = None,
        default: Any = MISSING,
        as_type: Any = str,
    ) -> Any:
        """
        Shorthand for get() with the default locale and a type-based default.

        Strings default to Settings.NOT_FOUND_TEXT ("Content not found");
        other types default to their zero value.
        """
        if lang_code is None:
            lang_code = self._default_locale

        if as_type is str:
            if default is MISSING or default == "":
                default = self._not_found_text
        elif default is MISSING:
            default = zero_value(as_type)

        return self.get(path, lang_code, default, as_type=as_type)

    def is_available_elsewhere(self, path: str, exclude: str) -> bool:
        """True if some locale other than `exclude` has a non-null value at `path`."""
        for locale in self._locales:
            if locale == exclude:
                continue
            if _present(resolve_path(self._translations[locale], path)):
                return True
        return False
