"""
요청 스키마 (Pydantic)

Web API 요청 데이터 파싱.
금액/계좌/통화 값 자체의 검증은 core 계층에서 수행하여
오류 메시지와 검증 순서를 일관되게 유지.
"""

from typing import Any

from pydantic import BaseModel, Field


class AccountCreateRequest(BaseModel):
    """계좌 생성 요청"""

    currency: Any = Field(default=None, description="통화 (EUR/USD)")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"currency": "EUR"},
            ]
        }
    }


class DepositRequest(BaseModel):
    """입금 요청

    amount는 JSON 숫자여야 함 ("100" 같은 문자열은 거부).
    """

    accountId: Any = Field(default=None, description="계좌 ID")
    amount: Any = Field(default=None, description="입금 금액 (소수점 2자리)")
    reference: str | None = Field(default=None, description="메모 (선택)")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "accountId": "5f0c3c8e-8d7a-4f55-9a1c-2b8f4b0f6a01",
                    "amount": 100.50,
                    "reference": "first",
                },
            ]
        }
    }
