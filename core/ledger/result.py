"""
원장 연산 결과 타입

성공(Ok) 또는 오류(LedgerError) 중 하나를 반환.
검증/미존재/권한/내부 오류는 예외로 던지지 않고 값으로 돌려줌.

사용 예시:
```python
result = await writer.deposit(account_id, amount, user_id)
if not result.ok:
    return error_response(result)
receipt = result.value
```
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from core.types import ErrorCode

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """성공 결과"""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class LedgerError:
    """오류 결과

    code로 종류를 구분하고 message는 사람이 읽는 설명.
    저장소 엔진의 오류 문구는 message에 담지 않음.
    """

    code: ErrorCode
    message: str

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code.value, "message": self.message}


Result = Union[Ok[T], LedgerError]


def validation_error(message: str) -> LedgerError:
    return LedgerError(ErrorCode.VALIDATION_ERROR, message)


def not_found(message: str) -> LedgerError:
    return LedgerError(ErrorCode.NOT_FOUND, message)


def forbidden(message: str) -> LedgerError:
    return LedgerError(ErrorCode.FORBIDDEN, message)


def internal_error(message: str) -> LedgerError:
    return LedgerError(ErrorCode.INTERNAL_ERROR, message)
