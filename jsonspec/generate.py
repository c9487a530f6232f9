"""Schema Generation

Derives a Spec from a native type:

    bool, str, int, float       -> boolean, string, integer, number
    datetime.datetime           -> datetime
    dataclass / pydantic model  -> object, one Field per declared field
    list[T], Sequence[T]        -> array of T
    dict, Mapping[K, V]         -> object without fields (open schema)

Derivation is a pure function of the type, so schema_for memoises it.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from functools import lru_cache
from typing import Any, get_args, get_origin

from jsonspec.core.config import settings
from jsonspec.core.errors import AppError, Err, Ok, Result, recursive_type, type_name, unsupported_type
from jsonspec.core.logging import schema_logger

from .names import translate_name
from .records import RecordField, is_record, record_fields, unwrap_annotated
from .spec import Field, Spec, Type
from .tags import parse_tag

log = schema_logger()

PRIMITIVES: dict[type, Type] = {
    bool: Type.BOOLEAN,
    str: Type.STRING,
    int: Type.INTEGER,
    float: Type.NUMBER,
    datetime: Type.DATETIME,
}

SEQUENCE_ORIGINS = (list, Sequence)
MAPPING_ORIGINS = (dict, Mapping)


def derive_schema(tp: Any) -> Result[Spec, AppError]:
    """Generate a Spec for a native type."""
    result = _spec_for_type(tp, ())
    match result:
        case Ok(_):
            log.debug("schema_derived", type=type_name(tp))
        case Err(error):
            log.debug("schema_derivation_failed", type=type_name(tp), code=error.code.name, message=error.message)
    return result


def spec_for(obj: Any) -> Result[Spec, AppError]:
    """Generate a Spec for a type, or for the type of a value."""
    if isinstance(obj, type) or get_origin(obj) is not None:
        return derive_schema(obj)
    return derive_schema(type(obj))


@lru_cache(maxsize=settings.SCHEMA_CACHE_SIZE)
def _cached_schema(tp: Any) -> Result[Spec, AppError]:
    return derive_schema(tp)


def schema_for(tp: Any) -> Result[Spec, AppError]:
    """derive_schema, memoised per type. Unhashable type objects are derived uncached."""
    try:
        return _cached_schema(tp)
    except TypeError:
        return derive_schema(tp)


def _spec_for_type(tp: Any, seen: tuple[type, ...]) -> Result[Spec, AppError]:
    tp, _ = unwrap_annotated(tp)
    if isinstance(tp, type) and tp in PRIMITIVES:
        return Ok(Spec(type=PRIMITIVES[tp]))

    origin = get_origin(tp) or tp
    if origin in SEQUENCE_ORIGINS:
        return _spec_for_array(tp, seen)
    if origin in MAPPING_ORIGINS:
        # No way to know the keys of an arbitrary mapping, so accept any object
        return Ok(Spec(type=Type.OBJECT))
    if is_record(tp):
        return _spec_for_object(tp, seen)

    return unsupported_type(tp, origin="generate")


def _spec_for_array(tp: Any, seen: tuple[type, ...]) -> Result[Spec, AppError]:
    if not (args := get_args(tp)):
        return Ok(Spec(type=Type.ARRAY))
    return _spec_for_type(args[0], seen).map(lambda elements: Spec(type=Type.ARRAY, elements=elements))


def _spec_for_object(tp: type, seen: tuple[type, ...]) -> Result[Spec, AppError]:
    if tp in seen:
        return recursive_type(tp, origin="generate")
    try:
        declared = record_fields(tp)
    except (NameError, TypeError) as e:
        return unsupported_type(tp, origin="generate", cause=e)

    fields: dict[str, Field] = {}
    for record_field in declared:
        match _field_for(record_field, (*seen, tp)):
            case Ok((name, field)):
                fields[name] = field
            case failure:
                return failure
    return Ok(Spec(type=Type.OBJECT, fields=fields))


def _field_for(record_field: RecordField, seen: tuple[type, ...]) -> Result[tuple[str, Field], AppError]:
    """Generate the Field for one declared member of a record."""
    name = translate_name(record_field.name)
    match _spec_for_type(record_field.hint, seen):
        case Ok(spec):
            pass
        case Err(error):
            return Err(error.within(name, f"field {name}"))
    field = Field(type=spec.type, fields=spec.fields, elements=spec.elements)
    return parse_tag(field, record_field.tag).map(lambda tagged: (name, tagged))
