from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jsonschema import Draft202012Validator

from i18nstore.errors import InvalidDocumentError

DOCUMENT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Translation document",
    "type": "object",
    "minProperties": 1,
    "propertyNames": {"type": "string"},
}

_MESSAGES = {
    "type": "Document must be an object",
    "minProperties": "Document object is empty",
    "propertyNames": "Locale codes must be strings",
}

_validator = Draft202012Validator(DOCUMENT_SCHEMA)


def validate_document(document: Any) -> None:
    """
    Check that `document` is a non-empty mapping of locale code -> tree.

    Raises:
        InvalidDocumentError: naming the first failed constraint.
    """
    # jsonschema only recognises dict as "object"
    if isinstance(document, Mapping):
        document = dict(document)

    for error in _validator.iter_errors(document):
        # propertyNames failures surface with the nested "type" keyword
        keyword = "propertyNames" if "propertyNames" in error.schema_path else error.validator
        raise InvalidDocumentError(_MESSAGES.get(keyword, error.message))
