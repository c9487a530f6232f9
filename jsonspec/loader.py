"""Loading validated values into native types.

    @dataclass
    class Person:
        FirstName: str
        LastName: Annotated[str, Tag('default:"Smith"')]

    load_json(b'{"first_name": "Jane"}', Person).unwrap()
    # Person(FirstName='Jane', LastName='Smith')

load() and load_json() derive the schema, validate, and only then build
the value. load_value() is the last step alone; it trusts that its input
already passed validation against the same Spec.
"""
from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, TypeVar, get_args, get_origin

from jsonspec.core.errors import AppError, AppErrorException, Err, Ok, Result, contract_violation, type_name
from jsonspec.core.logging import loader_logger

from .coercion import PARSE_DATETIME, ZERO_DATETIME
from .decoding import decode
from .generate import MAPPING_ORIGINS, SEQUENCE_ORIGINS, schema_for
from .names import translate_name
from .records import build_record, is_record, record_fields, unwrap_annotated
from .spec import Spec, Type
from .validator import validate

log = loader_logger()

T = TypeVar("T")

ZERO_VALUES: dict[type, Any] = {
    bool: False,
    str: "",
    int: 0,
    float: 0.0,
    datetime: ZERO_DATETIME,
}


def load(value: Any, tp: type[T]) -> Result[T, AppError]:
    """Validate an already decoded value against the schema of `tp` and build a `tp` from it."""
    match schema_for(tp):
        case Ok(spec):
            return validate(spec, value).map(lambda _: load_value(spec, value, tp))
        case failure:
            return failure


def load_json(data: bytes | str, tp: type[T]) -> Result[T, AppError]:
    """Load JSON text into a new `tp`. Returns Err if the data is invalid."""
    match schema_for(tp):
        case Ok(spec):
            pass
        case failure:
            return failure
    match decode(data):
        case Ok(value):
            return validate(spec, value).map(lambda _: load_value(spec, value, tp))
        case failure:
            return failure


def load_value(spec: Spec, value: Any, tp: Any) -> Any:
    """Build a native value from validated input.

    Raises AppErrorException (E9003_CONTRACT_VIOLATION) when the input does
    not have the shape `spec` describes, which validation rules out.
    """
    tp, _ = unwrap_annotated(tp)
    match spec.type:
        case Type.BOOLEAN:
            _expect(isinstance(value, bool), spec, value)
            return value
        case Type.STRING:
            _expect(isinstance(value, str), spec, value)
            return value
        case Type.INTEGER:
            _expect(_is_number(value), spec, value)
            return int(value)
        case Type.NUMBER:
            _expect(_is_number(value), spec, value)
            return float(value)
        case Type.DATETIME:
            return _load_datetime(spec, value)
        case Type.OBJECT:
            return _load_object(spec, value, tp)
        case Type.ARRAY:
            return _load_array(spec, value, tp)
    raise AppErrorException(contract_violation(f"unknown spec type {spec.type!r}", origin="loader"))


def zero_value(tp: Any) -> Any:
    """The value a field holds when nothing was loaded into it."""
    tp, _ = unwrap_annotated(tp)
    if isinstance(tp, type) and tp in ZERO_VALUES:
        return ZERO_VALUES[tp]
    origin = get_origin(tp) or tp
    if origin in SEQUENCE_ORIGINS:
        return []
    if origin in MAPPING_ORIGINS:
        return {}
    if is_record(tp):
        return build_record(tp, {})
    return None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _expect(condition: bool, spec: Spec, value: Any) -> None:
    if not condition:
        raise AppErrorException(contract_violation(
            f"cannot load {type(value).__name__} as {spec.type.value}",
            origin="loader",
            type=spec.type.value,
        ))


def _load_datetime(spec: Spec, value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    _expect(isinstance(value, str), spec, value)
    match PARSE_DATETIME.coerce(value):
        case Ok(parsed):
            return parsed
        case Err(error):
            # Unreachable after validation, which uses the same parser.
            # The zero datetime is kept rather than an error.
            log.warning("datetime_parse_fallback", value=value, error=error.message)
            return ZERO_DATETIME


def _load_object(spec: Spec, value: Any, tp: Any) -> Any:
    _expect(value is None or isinstance(value, Mapping), spec, value)
    mapping = value or {}
    if (get_origin(tp) or tp) in MAPPING_ORIGINS:
        return dict(mapping)
    if not is_record(tp):
        raise AppErrorException(contract_violation(f"cannot load an object into {type_name(tp)}", origin="loader"))

    fields = spec.fields or {}
    values: dict[str, Any] = {}
    for record_field in record_fields(tp):
        key = translate_name(record_field.name)
        if (field := fields.get(key)) is None:
            continue
        v = mapping.get(key)
        if v is None:
            v = field.default
        if v is not None:
            values[record_field.name] = load_value(field, v, record_field.hint)
    return build_record(tp, values)


def _load_array(spec: Spec, value: Any, tp: Any) -> list[Any]:
    _expect(value is None or isinstance(value, (list, tuple)), spec, value)
    items = value or []
    if spec.elements is None:
        return list(items)
    args = get_args(tp)
    element_type = args[0] if args else Any
    return [load_value(spec.elements, item, element_type) for item in items]
