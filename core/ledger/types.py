"""
원장 상수 정의

오류 메시지 등 Ledger 연산에서 공통으로 사용하는 고정값.
메시지는 API 응답에 그대로 노출되므로 문구 변경 시 테스트도 함께 수정.
"""

from decimal import Decimal


class ErrorMessages:
    """호출자에게 전달되는 오류 메시지"""

    # 입금 검증
    AMOUNT_NOT_NUMBER = "amount must be a number"
    AMOUNT_NOT_POSITIVE = "amount must be greater than 0"
    AMOUNT_TOO_LARGE = "amount must not exceed 9999999999999.99"

    # 조회 검증
    ACCOUNT_ID_REQUIRED = "accountId is required"
    PAGE_INVALID = "page must be a positive integer"
    LIMIT_INVALID = "limit must be a positive integer"
    LIMIT_TOO_LARGE = "limit cannot exceed 100"

    # 계좌 생성 검증
    CURRENCY_REQUIRED = "Currency is required"
    CURRENCY_INVALID = "Currency must be EUR or USD"

    # 존재/권한
    ACCOUNT_NOT_FOUND = "account not found"
    ACCOUNT_FORBIDDEN = "caller does not own this account"
    USER_NOT_FOUND = "user not found"

    # 내부 오류 (저장소 오류 문구는 노출하지 않음)
    DEPOSIT_FAILED = "Failed to process deposit"
    LISTING_FAILED = "Failed to retrieve transactions"
    UNEXPECTED_ERROR = "An unexpected error occurred"


# NUMERIC(15, 2) 상한
MAX_AMOUNT: Decimal = Decimal("9999999999999.99")
