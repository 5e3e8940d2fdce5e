"""
타입 정의 모듈

Enum 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class AppMode(str, Enum):
    """실행 모드 (운영 / 개발)"""

    PRODUCTION = "production"
    DEVELOPMENT = "development"


class Currency(str, Enum):
    """계좌 통화 (생성 후 변경 불가)"""

    EUR = "EUR"
    USD = "USD"


class TransactionKind(str, Enum):
    """원장 항목 유형

    현재는 입금(deposit)만 정의.
    출금/이체 추가 시 스키마 변경 없이 값만 확장.
    """

    DEPOSIT = "deposit"


class ErrorCode(str, Enum):
    """오류 종류 (호출자에게 그대로 전달되는 판별자)"""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"  # HTTP 인증 가드 전용


class IssueSeverity(str, Enum):
    """무결성 검사 결과 심각도"""

    ERROR = "ERROR"
    WARNING = "WARNING"
