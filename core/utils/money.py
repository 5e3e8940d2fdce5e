"""
금액 유틸리티

Decimal 정규화 및 문자열 표현 (float 사용 금지)
"""

from decimal import ROUND_HALF_UP, Decimal

from core.constants import Money


def quantize_money(value: Decimal) -> Decimal:
    """소수점 2자리로 정규화 (NUMERIC(15, 2)와 동일한 반올림)"""
    return value.quantize(Money.SCALE, rounding=ROUND_HALF_UP)


def format_money(value: Decimal) -> str:
    """API/DB 표현용 문자열

    Example:
        >>> format_money(Decimal("100.5"))
        '100.50'
    """
    return str(quantize_money(value))


def parse_money(value: str | None) -> Decimal:
    """DB TEXT 컬럼 값을 Decimal로 변환 (NULL은 0)"""
    if value is None:
        return Money.ZERO
    return quantize_money(Decimal(value))
