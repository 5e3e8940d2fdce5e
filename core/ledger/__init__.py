"""
원장 (Ledger) 시스템

입금 기록과 거래 내역 조회.
잔액은 항상 원장 항목 합계와 일치 (balance == sum(amount)).

사용 예시:
```python
from core.ledger.writer import LedgerWriter
from core.ledger.reader import TransactionReader

# 입금 (항목 삽입 + 잔액 갱신을 하나의 트랜잭션으로)
result = await LedgerWriter(db).deposit(account_id, Decimal("100.50"), user_id)

# 거래 내역 (최신순, 페이지 단위)
page = await TransactionReader(db).list_transactions(account_id, user_id, page=1, limit=20)

# 무결성 검사
report = await IntegrityChecker(db).verify()
```

주의: writer/reader/integrity는 core.storage에 의존하므로 여기서 import하지 않음
(core.storage → core.ledger.result 순환 방지). 전체 경로로 import.
"""

from core.ledger.result import (
    LedgerError,
    Ok,
    Result,
    forbidden,
    internal_error,
    not_found,
    validation_error,
)
from core.ledger.types import MAX_AMOUNT, ErrorMessages

__all__ = [
    # 결과 타입
    "Ok",
    "LedgerError",
    "Result",
    "validation_error",
    "not_found",
    "forbidden",
    "internal_error",
    # 상수
    "ErrorMessages",
    "MAX_AMOUNT",
]
