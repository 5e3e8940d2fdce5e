"""
입력 검증

입금 금액과 페이지네이션 파라미터를 저장소 접근 전에 검증.
검사 순서가 곧 오류 우선순위 (첫 번째 실패가 반환됨).
"""

import re
from decimal import Decimal
from typing import Any

from core.constants import Pagination
from core.ledger.result import Ok, Result, validation_error
from core.ledger.types import MAX_AMOUNT, ErrorMessages
from core.utils.money import quantize_money

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def parse_amount(value: Any) -> Result[Decimal]:
    """입금 금액 검증 및 Decimal 변환

    1. 숫자 타입(int, float, Decimal)이 아니면 "amount must be a number"
       (bool, 문자열, NaN/Infinity 포함)
    2. 0 이하이면 "amount must be greater than 0"
    3. 소수점 2자리 반올림 후 0이 되면 역시 "amount must be greater than 0"

    float은 str()을 거쳐 변환하여 이진 부동소수점 오차를 제거.

    Args:
        value: 요청 본문의 amount 값

    Returns:
        Ok(소수점 2자리 Decimal) 또는 VALIDATION_ERROR
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return validation_error(ErrorMessages.AMOUNT_NOT_NUMBER)

    amount = Decimal(str(value)) if isinstance(value, float) else Decimal(value)

    if not amount.is_finite():
        return validation_error(ErrorMessages.AMOUNT_NOT_NUMBER)

    if amount <= 0:
        return validation_error(ErrorMessages.AMOUNT_NOT_POSITIVE)

    if amount > MAX_AMOUNT:
        return validation_error(ErrorMessages.AMOUNT_TOO_LARGE)

    amount = quantize_money(amount)
    if amount <= 0:
        return validation_error(ErrorMessages.AMOUNT_NOT_POSITIVE)

    return Ok(amount)


def require_account_id(value: Any) -> Result[str]:
    """계좌 ID 필수 검증 (None, 빈 문자열, 문자열 외 타입 거부)"""
    if not isinstance(value, str) or not value.strip():
        return validation_error(ErrorMessages.ACCOUNT_ID_REQUIRED)
    return Ok(value.strip())


def _parse_positive_int(value: Any, default: int, message: str) -> Result[int]:
    """양의 정수 파싱

    None이면 기본값. int 또는 10진 정수 문자열만 허용 ("1.5", "abc", "" 거부).
    """
    if value is None:
        return Ok(default)

    if isinstance(value, bool):
        return validation_error(message)

    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and _INTEGER_PATTERN.fullmatch(value.strip()):
        number = int(value.strip())
    else:
        return validation_error(message)

    if number < 1:
        return validation_error(message)

    return Ok(number)


def parse_page(value: Any) -> Result[int]:
    """페이지 번호 검증 (1부터 시작)"""
    return _parse_positive_int(value, Pagination.DEFAULT_PAGE, ErrorMessages.PAGE_INVALID)


def parse_limit(value: Any) -> Result[int]:
    """페이지 크기 검증 (1 ~ 100)"""
    result = _parse_positive_int(value, Pagination.DEFAULT_LIMIT, ErrorMessages.LIMIT_INVALID)
    if not result.ok:
        return result

    if result.value > Pagination.MAX_LIMIT:
        return validation_error(ErrorMessages.LIMIT_TOO_LARGE)

    return result
