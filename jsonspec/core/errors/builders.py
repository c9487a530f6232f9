"""Domain-Specific Error Builders

Ergonomic constructors for typed errors across schema derivation, tag
parsing, decoding and validation. Each builder returns an Err wrapping an
AppError with the appropriate code and context.
"""
from typing import Any

from .types import AppError, ErrorCode, ErrorContext, Err


# =============================================================================
# Schema Derivation Errors (E1xxx)
# =============================================================================

def schema_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E1000_SCHEMA_GENERIC,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create schema derivation error."""
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in metadata.items() if v is not None},
        cause=cause,
    ))


def unsupported_type(tp: Any, origin: str = "", cause: Exception | None = None) -> Err[AppError]:
    return schema_error(
        f"cannot generate spec for type {type_name(tp)}",
        code=ErrorCode.E1001_UNSUPPORTED_TYPE,
        origin=origin,
        cause=cause,
        type=type_name(tp),
    )


def recursive_type(tp: Any, origin: str = "") -> Err[AppError]:
    return schema_error(
        f"cannot generate spec for recursive type {type_name(tp)}",
        code=ErrorCode.E1002_RECURSIVE_TYPE,
        origin=origin,
        type=type_name(tp),
    )


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
    ))


def required_field(field: str, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"{field} is required",
        code=ErrorCode.E2001_REQUIRED_FIELD_MISSING,
        field=field,
        origin=origin,
        path=[field],
    )


def invalid_type(message: str, origin: str = "") -> Err[AppError]:
    return validation_error(message, code=ErrorCode.E2004_INVALID_TYPE, origin=origin)


def invalid_date(message: str, origin: str = "") -> Err[AppError]:
    return validation_error(message, code=ErrorCode.E2012_INVALID_DATE, origin=origin)


def invalid_json(exc: Exception, origin: str = "") -> Err[AppError]:
    """Decode failure, carrying the decoder's own message unmodified."""
    return Err(AppError(
        code=ErrorCode.E2021_INVALID_JSON,
        message=str(exc),
        context=ErrorContext(origin=origin),
        cause=exc,
    ))


# =============================================================================
# Tag Errors (E3xxx)
# =============================================================================

def tag_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E3000_TAG_GENERIC,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create declarative tag error."""
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in metadata.items() if v is not None},
        cause=cause,
    ))


def invalid_tag(tag: str, origin: str = "") -> Err[AppError]:
    return tag_error("invalid tag", code=ErrorCode.E3001_INVALID_TAG, origin=origin, tag=tag)


def invalid_tag_value(quoted: str, origin: str = "", cause: Exception | None = None) -> Err[AppError]:
    return tag_error(
        f"invalid value: {quoted}",
        code=ErrorCode.E3002_INVALID_TAG_VALUE,
        origin=origin,
        cause=cause,
        value=quoted,
    )


def unknown_tag_key(key: str, origin: str = "") -> Err[AppError]:
    return tag_error(
        f'unknown tag key: "{key}"',
        code=ErrorCode.E3003_UNKNOWN_TAG_KEY,
        origin=origin,
        key=key,
    )


def invalid_boolean(value: str, origin: str = "") -> Err[AppError]:
    return tag_error(
        f"invalid boolean: {value}",
        code=ErrorCode.E3010_INVALID_BOOLEAN,
        origin=origin,
        value=value,
    )


def invalid_default(kind: str, value: str, origin: str = "", cause: Exception | None = None) -> Err[AppError]:
    return tag_error(
        f'invalid {kind}: "{value}"',
        code=ErrorCode.E3011_INVALID_DEFAULT,
        origin=origin,
        cause=cause,
        value=value,
    )


def default_not_supported(type_value: str, origin: str = "") -> Err[AppError]:
    return tag_error(
        f"cannot set default value for {type_value}",
        code=ErrorCode.E3012_DEFAULT_NOT_SUPPORTED,
        origin=origin,
        type=type_value,
    )


# =============================================================================
# Internal Errors (E9xxx)
# =============================================================================

def contract_violation(message: str, origin: str = "", **metadata) -> AppError:
    """Loader precondition broken: input was not validated against its schema."""
    return AppError(
        code=ErrorCode.E9003_CONTRACT_VIOLATION,
        message=message,
        context=ErrorContext(origin=origin),
        metadata=metadata,
    )


def type_name(tp: Any) -> str:
    """Readable name for a class or typing construct."""
    if isinstance(tp, type) and not getattr(tp, "__args__", None):
        return tp.__qualname__
    return repr(tp).replace("typing.", "")
