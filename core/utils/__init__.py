"""
유틸리티 패키지

타임존 처리, 금액 정규화 등 공통 유틸리티
"""

from core.utils.money import format_money, parse_money, quantize_money
from core.utils.timezone import from_db_ts, now_utc, to_db_ts, to_utc

__all__ = [
    "format_money",
    "parse_money",
    "quantize_money",
    "from_db_ts",
    "now_utc",
    "to_db_ts",
    "to_utc",
]
