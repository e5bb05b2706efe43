"""
Typed conversion of resolved tree values.

Conversion goes through a pydantic TypeAdapter in strict mode, so a node
only converts to a type it already has the shape of: "1" never becomes 1,
True never becomes 1, while 30 is accepted for float. Any type pydantic can
validate works (builtins, parametrized generics, dataclasses, models).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, get_origin

from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError


class ConversionError(ValueError):
    """Raised when a tree value does not have the shape of the requested type."""


@lru_cache(maxsize=128)
def _adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


def convert(value: Any, tp: Any) -> Any:
    """Return `value` validated as `tp`, or raise ConversionError."""
    try:
        return _adapter(tp).validate_python(value, strict=True)
    except (ValidationError, PydanticSchemaGenerationError) as e:
        raise ConversionError(f"Cannot convert {type(value).__name__} to {tp!r}") from e


def zero_value(tp: Any) -> Any:
    """
    Return the value `tp()` builds with no arguments.

    Parametrized generics use their origin (list[str] -> []). Types that
    need arguments yield None.
    """
    factory = get_origin(tp) or tp
    try:
        return factory()
    except (TypeError, ValueError):
        return None
