"""
core/ledger/result.py 테스트
"""

import pytest

from core.ledger.result import (
    LedgerError,
    Ok,
    forbidden,
    internal_error,
    not_found,
    validation_error,
)
from core.types import ErrorCode


class TestOk:
    """Ok 테스트"""

    def test_ok(self) -> None:
        result = Ok(42)

        assert result.ok is True
        assert result.value == 42

    def test_frozen(self) -> None:
        result = Ok("value")

        with pytest.raises(AttributeError):
            result.value = "other"  # type: ignore


class TestLedgerError:
    """LedgerError 테스트"""

    def test_not_ok(self) -> None:
        error = LedgerError(ErrorCode.NOT_FOUND, "account not found")

        assert error.ok is False

    def test_to_dict(self) -> None:
        error = LedgerError(ErrorCode.VALIDATION_ERROR, "amount must be a number")

        assert error.to_dict() == {
            "code": "VALIDATION_ERROR",
            "message": "amount must be a number",
        }

    @pytest.mark.parametrize(
        "factory, code",
        [
            (validation_error, ErrorCode.VALIDATION_ERROR),
            (not_found, ErrorCode.NOT_FOUND),
            (forbidden, ErrorCode.FORBIDDEN),
            (internal_error, ErrorCode.INTERNAL_ERROR),
        ],
    )
    def test_constructors(self, factory, code: ErrorCode) -> None:
        """종류별 생성 함수"""
        error = factory("message")

        assert error.code == code
        assert error.message == "message"
