"""JSON decoding boundary.

Raw bytes become the untyped value tree consumed by validation and
loading: None, bool, str, int, float, dict and list. Integral literals
decode to int, everything else numeric to float. Number literals too
large for a float (1e400) are rejected like NaN and Infinity.
"""
from typing import Any
import math

from pydantic_core import from_json

from jsonspec.core.errors import AppError, Ok, Result, invalid_json
from jsonspec.core.logging import validation_logger

log = validation_logger()


def decode(data: bytes | bytearray | str) -> Result[Any, AppError]:
    """Decode JSON text. Failures carry the decoder's message unmodified."""
    try:
        value = from_json(data, allow_inf_nan=False)
        if _has_non_finite(value):
            raise ValueError("number out of range")
    except ValueError as e:
        log.debug("json_decode_failed", error=str(e))
        return invalid_json(e, origin="decoding")
    return Ok(value)


def _has_non_finite(value: Any) -> bool:
    match value:
        case float():
            return not math.isfinite(value)
        case dict():
            return any(_has_non_finite(v) for v in value.values())
        case list():
            return any(_has_non_finite(v) for v in value)
    return False
