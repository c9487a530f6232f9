"""
Result monad and AppError tests.
"""
import pytest

from jsonspec.core.errors import (
    AppError,
    AppErrorException,
    Err,
    ErrorCode,
    Ok,
    contract_violation,
    invalid_type,
    required_field,
    type_name,
)


class TestResult:
    def test_ok(self):
        result = Ok(2)
        assert result.is_ok() and not result.is_err()
        assert result.unwrap() == 2
        assert result.map(lambda v: v * 2).unwrap() == 4
        assert result.and_then(lambda v: Ok(v + 1)).unwrap() == 3
        assert result.unwrap_or(0) == 2

    def test_err(self):
        result = invalid_type("expected a string")
        assert result.is_err() and not result.is_ok()
        assert result.map(lambda v: v * 2) is result
        assert result.and_then(lambda v: Ok(v)) is result
        assert result.unwrap_or(0) == 0
        assert result.unwrap_err().message == "expected a string"

    def test_unwrap_err_raises(self):
        with pytest.raises(AppErrorException) as exc_info:
            invalid_type("expected a string").unwrap()
        assert str(exc_info.value) == "expected a string"
        assert exc_info.value.error.code == ErrorCode.E2004_INVALID_TYPE

    def test_pattern_matching(self):
        match Ok("value"):
            case Ok(v):
                assert v == "value"
            case Err(_):
                pytest.fail("unexpected Err")


class TestAppError:
    def test_within(self):
        error = required_field("number").unwrap_err()
        nested = error.within(0, "element 0").within("phone_numbers", "phone_numbers")
        assert nested.message == "phone_numbers: element 0: number is required"
        assert nested.path == ["phone_numbers", 0, "number"]
        assert nested.code == error.code
        assert error.path == ["number"]

    def test_categories(self):
        assert ErrorCode.E1001_UNSUPPORTED_TYPE.category == "schema"
        assert ErrorCode.E2004_INVALID_TYPE.category == "validation"
        assert ErrorCode.E3001_INVALID_TAG.category == "tag"
        assert ErrorCode.E9003_CONTRACT_VIOLATION.category == "internal"

    def test_to_dict(self):
        error = contract_violation("cannot load int as string", type="string")
        payload = error.to_dict()["error"]
        assert payload["code"] == "E9003_CONTRACT_VIOLATION"
        assert payload["category"] == "internal"
        assert payload["metadata"] == {"type": "string"}

    def test_with_metadata(self):
        error = AppError(code=ErrorCode.E2000_VALIDATION_GENERIC, message="bad")
        assert error.with_metadata(field="x").metadata == {"field": "x"}
        assert error.metadata == {}

    def test_str(self):
        error = AppError(code=ErrorCode.E2004_INVALID_TYPE, message="expected a string")
        assert str(error).startswith("[E2004_INVALID_TYPE] expected a string")


def test_type_name():
    class Local:
        pass

    assert type_name(int) == "int"
    assert type_name(list[int]) == "list[int]"
    assert type_name(Local).endswith("Local")
