"""Structural Records

A record is a dataclass or a pydantic model class. This module gives the
schema generator and the loader one view of both: the declared fields, in
declaration order, with their full type hints (Annotated extras included)
and tag text, and a way to build an instance from loaded values.
"""
from __future__ import annotations

from dataclasses import MISSING, dataclass, fields as dataclass_fields, is_dataclass
from typing import Annotated, Any, get_args, get_origin, get_type_hints

from pydantic import BaseModel

from .tags import TAG_METADATA_KEY, tag_text


@dataclass(frozen=True, slots=True)
class RecordField:
    """One declared field of a record."""
    name: str
    hint: Any
    tag: str = ""
    has_default: bool = False


def is_record(tp: Any) -> bool:
    return isinstance(tp, type) and (is_dataclass(tp) or issubclass(tp, BaseModel))


def unwrap_annotated(tp: Any) -> tuple[Any, tuple[Any, ...]]:
    """Split Annotated[T, ...] into T and its metadata."""
    if get_origin(tp) is Annotated:
        base, *metadata = get_args(tp)
        return base, tuple(metadata)
    return tp, ()


def record_fields(tp: type) -> list[RecordField]:
    """Declared fields of a record class.

    Raises NameError or TypeError when a type hint cannot be resolved.
    """
    result: list[RecordField] = []

    if is_dataclass(tp):
        hints = get_type_hints(tp, include_extras=True)
        for f in dataclass_fields(tp):
            if not f.init:
                continue
            hint = hints.get(f.name, Any)
            _, metadata = unwrap_annotated(hint)
            tags = [f.metadata.get(TAG_METADATA_KEY, ""), tag_text(metadata)]
            result.append(RecordField(
                name=f.name,
                hint=hint,
                tag=" ".join(t for t in tags if t),
                has_default=f.default is not MISSING or f.default_factory is not MISSING,
            ))
        return result

    # pydantic has already resolved the hints and moved Annotated extras into FieldInfo.metadata
    for name, info in tp.model_fields.items():
        result.append(RecordField(
            name=name,
            hint=info.annotation,
            tag=tag_text(info.metadata),
            has_default=not info.is_required(),
        ))
    return result


def build_record(tp: type, values: dict[str, Any]) -> Any:
    """Instantiate a record from already typed values.

    Fields missing from `values` keep their declared default, or get the
    zero value for their type when they have none.
    """
    from .loader import zero_value

    for f in record_fields(tp):
        if f.name not in values and not f.has_default:
            values[f.name] = zero_value(f.hint)
    if is_dataclass(tp):
        return tp(**values)
    return tp.model_construct(**values)
