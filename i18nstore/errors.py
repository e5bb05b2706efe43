from __future__ import annotations


class TranslationStoreError(Exception):
    """Base class for errors raised while building a TranslationStore."""


class DocumentIOError(TranslationStoreError, OSError):
    """Raised when the backing file cannot be opened or is empty."""


class DocumentParseError(TranslationStoreError, ValueError):
    """Raised when the backing text is not a well-formed document."""


class InvalidDocumentError(TranslationStoreError, ValueError):
    """Raised when the top-level value is not a non-empty mapping."""
