"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화.
금액은 소수점 2자리 문자열 (float 정밀도 손실 방지).
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="서비스 상태")
    mode: str = Field(..., description="실행 모드 (development/production)")
    version: str = Field(..., description="서비스 버전")


class UserResponse(BaseModel):
    """사용자 응답"""

    id: str = Field(..., description="사용자 ID")
    email: str = Field(..., description="이메일")


class AccountResponse(BaseModel):
    """계좌 응답"""

    id: str = Field(..., description="계좌 ID")
    currency: str = Field(..., description="통화")
    balance: str = Field(..., description="잔액")


class AccountListResponse(BaseModel):
    """계좌 목록 응답"""

    accounts: list[AccountResponse] = Field(default_factory=list)


class TransactionResponse(BaseModel):
    """원장 항목 응답"""

    id: str = Field(..., description="거래 ID")
    account_id: str = Field(..., description="계좌 ID")
    type: str = Field(..., description="거래 유형 (deposit)")
    amount: str = Field(..., description="금액")
    reference: str | None = Field(default=None, description="메모")
    created_at: str = Field(..., description="생성 시각 (UTC ISO-8601)")


class DepositResponse(BaseModel):
    """입금 응답"""

    transactionId: str = Field(..., description="생성된 거래 ID")
    newBalance: str = Field(..., description="입금 후 잔액")
    entry: TransactionResponse


class TransactionListResponse(BaseModel):
    """거래 내역 응답 (최신순)"""

    items: list[TransactionResponse] = Field(default_factory=list)
    page: int = Field(..., description="페이지 번호")
    limit: int = Field(..., description="페이지 크기")
    total: int = Field(..., description="전체 항목 수")


class ErrorDetail(BaseModel):
    """오류 상세"""

    code: str = Field(..., description="오류 종류")
    message: str = Field(..., description="오류 메시지")


class ErrorResponse(BaseModel):
    """오류 응답"""

    error: ErrorDetail
