"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import (
    AccountCreateRequest,
    DepositRequest,
)
from web.models.responses import (
    AccountListResponse,
    AccountResponse,
    DepositResponse,
    ErrorResponse,
    HealthResponse,
    TransactionListResponse,
    TransactionResponse,
    UserResponse,
)

__all__ = [
    # Requests
    "AccountCreateRequest",
    "DepositRequest",
    # Responses
    "AccountListResponse",
    "AccountResponse",
    "DepositResponse",
    "ErrorResponse",
    "HealthResponse",
    "TransactionListResponse",
    "TransactionResponse",
    "UserResponse",
]
