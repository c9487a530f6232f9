"""Validation of untyped values against a Spec.

Validation is fail-fast: the first mismatch found (fields and elements are
visited in order) is returned, its message prefixed with the path that led
to it:

    customers: element 0: contact_details: phone_numbers: element 0: number is required

The message text is a compatibility surface; the same path is available as
a list in `error.path`.
"""
from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from jsonspec.core.errors import AppError, Err, Ok, Result, invalid_date, invalid_type, required_field
from jsonspec.core.logging import validation_logger

from .coercion import PARSE_DATETIME, is_whole_number
from .decoding import decode
from .spec import Spec, Type

log = validation_logger()

OK: Result[None, AppError] = Ok(None)


def validate(spec: Spec, value: Any) -> Result[None, AppError]:
    """Return Err if `value` doesn't match `spec`."""
    result = _validate(spec, value)
    if isinstance(result, Err):
        log.debug(
            "validation_failed",
            code=result.error.code.name,
            message=result.error.message,
            path=result.error.path,
        )
    return result


def validate_json(spec: Spec, data: bytes | str) -> Result[None, AppError]:
    """Decode JSON text and validate the result."""
    return decode(data).and_then(lambda value: validate(spec, value))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _validate(spec: Spec, value: Any) -> Result[None, AppError]:
    match spec.type:
        case Type.BOOLEAN:
            if not isinstance(value, bool):
                return invalid_type("expected boolean value", origin="validator")
        case Type.STRING:
            if not isinstance(value, str):
                return invalid_type("expected a string", origin="validator")
        case Type.INTEGER:
            if not _is_number(value) or (isinstance(value, float) and not is_whole_number(value)):
                return invalid_type("expected an integer", origin="validator")
        case Type.NUMBER:
            if not _is_number(value):
                return invalid_type("expected a number", origin="validator")
        case Type.DATETIME:
            if not isinstance(value, datetime) and not PARSE_DATETIME.can_coerce(value):
                return invalid_date("expected a datetime in RFC3339 format", origin="validator")
        case Type.OBJECT:
            if not isinstance(value, Mapping):
                return invalid_type("expected an object", origin="validator")
            return _validate_fields(spec, value)
        case Type.ARRAY:
            if not isinstance(value, (list, tuple)):
                return invalid_type("expected an array", origin="validator")
            return _validate_elements(spec, value)
    return OK


def _validate_fields(spec: Spec, value: Mapping[str, Any]) -> Result[None, AppError]:
    if spec.fields is None:
        return OK
    for name, field in spec.fields.items():
        v = value.get(name)
        if v is None:
            if field.required:
                return required_field(name, origin="validator")
            continue
        if isinstance(result := _validate(field, v), Err):
            return Err(result.error.within(name, name))
    return OK


def _validate_elements(spec: Spec, value: list[Any] | tuple[Any, ...]) -> Result[None, AppError]:
    if spec.elements is None:
        return OK
    for index, element in enumerate(value):
        if isinstance(result := _validate(spec.elements, element), Err):
            return Err(result.error.within(index, f"element {index}"))
    return OK
