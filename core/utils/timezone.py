"""
타임존 유틸리티

원장 시각은 고정 오프셋(+09:00) ISO-8601 문자열로 저장.
날짜 부분(앞 10자리)이 곧 거래의 달력 날짜.
"""

from datetime import date, datetime, timedelta, timezone

# KST 타임존 (UTC+9)
KST = timezone(timedelta(hours=9))


def to_kst(dt: datetime) -> datetime:
    """datetime을 KST로 변환

    Args:
        dt: datetime 객체 (naive면 UTC로 간주)

    Returns:
        KST 타임존의 datetime

    Example:
        >>> utc_dt = datetime(2026, 2, 20, 16, 0, 0, tzinfo=timezone.utc)
        >>> to_kst(utc_dt).hour
        1  # 다음날 01:00
    """
    if dt.tzinfo is None:
        # naive datetime은 UTC로 간주
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(KST)


def now_kst() -> datetime:
    """현재 KST 시간 반환

    Returns:
        현재 KST 시간 (tzinfo=KST)
    """
    return datetime.now(KST)


def format_kst_iso(dt: datetime) -> str:
    """원장 저장용 ISO 문자열

    Example:
        >>> format_kst_iso(datetime(2026, 2, 7, 1, 23, 45, 123000, tzinfo=timezone.utc))
        '2026-02-07T10:23:45.123+09:00'
    """
    return to_kst(dt).isoformat(timespec="milliseconds")


def parse_ymd(value: str) -> date:
    """YYYY-MM-DD 문자열을 date로 변환

    Raises:
        ValueError: 형식이 다르거나 존재하지 않는 날짜
    """
    if not isinstance(value, str) or len(value) != 10 or value[4] != "-" or value[7] != "-":
        raise ValueError(f"expected YYYY-MM-DD: {value!r}")
    return date.fromisoformat(value)
