"""
Response normalization: pull a JSON payload out of free model text and check its shape.

The model is asked for bare JSON but often wraps it in prose or markdown fences,
so the payload is taken as the span from the first opening delimiter to the last
closing one. Braces or brackets inside surrounding prose shift that span; the
result then either fails to parse or fails schema validation.
"""

import json
from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from edumorph.domain.exceptions import ExtractionError, ParseError, SchemaError

T = TypeVar("T", bound=BaseModel)


def _extract_span(text: str, opening: str, closing: str, expected: str) -> str:
    start = text.find(opening)
    end = text.rfind(closing)
    if start == -1 or end == -1 or end < start:
        raise ExtractionError(expected, text)
    return text[start : end + 1]


def _parse(fragment: str) -> Any:
    try:
        return json.loads(fragment)
    except json.JSONDecodeError as e:
        raise ParseError(str(e), fragment) from e


def extract_json_object(text: str) -> Dict[str, Any]:
    """Parse the ``{...}`` span of ``text``."""
    fragment = _extract_span(text, "{", "}", "object")
    data = _parse(fragment)
    if not isinstance(data, dict):
        raise ParseError(f"expected an object, got {type(data).__name__}", fragment)
    return data


def extract_json_array(text: str) -> List[Any]:
    """Parse the ``[...]`` span of ``text``."""
    fragment = _extract_span(text, "[", "]", "array")
    data = _parse(fragment)
    if not isinstance(data, list):
        raise ParseError(f"expected an array, got {type(data).__name__}", fragment)
    return data


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc']) or '<root>'}: {e['msg']}"
        for e in error.errors()
    )


def validate_payload(model: Type[T], data: Any) -> T:
    """Validate one parsed payload against ``model``."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise SchemaError(model.__name__, _describe(e)) from e


def validate_payload_list(model: Type[T], items: List[Any]) -> List[T]:
    """Validate every element of a parsed array against ``model``."""
    results = []
    for index, item in enumerate(items):
        try:
            results.append(model.model_validate(item))
        except ValidationError as e:
            raise SchemaError(model.__name__, f"item {index}: {_describe(e)}") from e
    return results
