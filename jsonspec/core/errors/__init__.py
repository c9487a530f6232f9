"""Monadic Error Handling System

Type-safe error handling inspired by Haskell's Either monad and Rust's
Result type.

Key components:
- Result[T, E]: Monadic container for success/failure
- AppError: Base error type with full context
- ErrorCode: Hierarchical error code taxonomy
- Builder functions: Ergonomic error construction

Usage:
    from jsonspec.core.errors import Ok, Err, Result, AppError

    match spec.validate(value):
        case Ok(_):
            ...
        case Err(error):
            log.error(error.message, code=error.code.name, path=error.path)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    AppErrorException,
    ErrorCode,
    ErrorContext,
)

from .builders import (
    # Schema (E1xxx)
    schema_error,
    unsupported_type,
    recursive_type,
    # Validation (E2xxx)
    validation_error,
    required_field,
    invalid_type,
    invalid_date,
    invalid_json,
    # Tags (E3xxx)
    tag_error,
    invalid_tag,
    invalid_tag_value,
    unknown_tag_key,
    invalid_boolean,
    invalid_default,
    default_not_supported,
    # Internal (E9xxx)
    contract_violation,
    type_name,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "AppErrorException",
    "ErrorCode",
    "ErrorContext",
    "schema_error",
    "unsupported_type",
    "recursive_type",
    "validation_error",
    "required_field",
    "invalid_type",
    "invalid_date",
    "invalid_json",
    "tag_error",
    "invalid_tag",
    "invalid_tag_value",
    "unknown_tag_key",
    "invalid_boolean",
    "invalid_default",
    "default_not_supported",
    "contract_violation",
    "type_name",
]
