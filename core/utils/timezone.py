"""
타임존 유틸리티

내부 저장: UTC 원칙 준수를 위한 헬퍼 함수.
DB에는 마이크로초까지 고정 자릿수로 저장하여 문자열 정렬 = 시간 순서가 되도록 함.
"""

from datetime import datetime, timezone


def now_utc() -> datetime:
    """현재 UTC 시간 반환 (타임존 명시)

    datetime.now(timezone.utc)의 축약형.

    Returns:
        현재 UTC 시간 (tzinfo=timezone.utc)
    """
    return datetime.now(timezone.utc)


def to_utc(dt: datetime) -> datetime:
    """datetime을 UTC로 변환 (naive면 UTC로 간주)"""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_db_ts(dt: datetime) -> str:
    """DB 저장용 타임스탬프 문자열

    isoformat()은 마이크로초가 0이면 생략하므로 timespec을 고정.

    Example:
        >>> to_db_ts(datetime(2026, 2, 20, 16, 0, 0, tzinfo=timezone.utc))
        '2026-02-20T16:00:00.000000+00:00'
    """
    return to_utc(dt).isoformat(timespec="microseconds")


def from_db_ts(value: str) -> datetime:
    """DB 타임스탬프 문자열을 UTC datetime으로 변환"""
    return to_utc(datetime.fromisoformat(value))
