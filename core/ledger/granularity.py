"""
집계 단위 선택 및 버킷 키 계산

순수 함수만 포함 (DB 불필요).
"""

from datetime import date, timedelta
from typing import Callable

from core.constants import GranularityThresholds
from core.ledger.errors import InvalidGranularity, ValidationError
from core.types import GRANULARITY_AUTO, Granularity
from core.utils.timezone import parse_ymd


def _as_date(value: date | str) -> date:
    if isinstance(value, date):
        return value
    try:
        return parse_ymd(value)
    except ValueError as e:
        raise ValidationError(f"date must be YYYY-MM-DD: {value!r}") from e


def parse_granularity(raw: Granularity | str | None) -> Granularity | None:
    """요청 값을 Granularity로 변환

    Args:
        raw: "auto" / "day" / "week" / "month" / None

    Returns:
        명시된 Granularity, 자동 선택이면 None

    Raises:
        InvalidGranularity: 허용되지 않는 값
    """
    if raw is None or raw == GRANULARITY_AUTO:
        return None
    try:
        return Granularity(raw)
    except ValueError as e:
        raise InvalidGranularity("granularity must be auto|day|week|month") from e


def days_between(start: date | str, end: date | str) -> int:
    """양 끝을 포함한 일수 (같은 날이면 1)"""
    return (_as_date(end) - _as_date(start)).days + 1


def select_granularity(
    start: date | str,
    end: date | str,
    requested: Granularity | str | None = None,
) -> Granularity:
    """집계 단위 선택

    명시된 단위는 그대로 사용하고, 자동이면 기간 길이로 결정.
    - 60일 이하: day
    - 180일 이하: week
    - 그 이상: month

    Example:
        >>> select_granularity("2024-01-01", "2024-01-01", "auto")
        <Granularity.DAY: 'day'>
    """
    explicit = parse_granularity(requested)
    if explicit is not None:
        return explicit

    days = days_between(start, end)
    if days <= GranularityThresholds.DAY_MAX_DAYS:
        return Granularity.DAY
    if days <= GranularityThresholds.WEEK_MAX_DAYS:
        return Granularity.WEEK
    return Granularity.MONTH


# -------------------------------------------------------------------------
# 버킷 키
# -------------------------------------------------------------------------


def day_bucket(d: date) -> date:
    """일 단위: 날짜 그대로"""
    return d


def week_bucket(d: date) -> date:
    """주 단위: 그 날짜 이전(당일 포함)의 월요일

    일요일=0 ... 토요일=6 번호에서 (번호 + 6) % 7 일을 뺀다.
    수요일(3) → 2일 전, 일요일(0) → 6일 전.
    """
    sunday_based = (d.weekday() + 1) % 7
    return d - timedelta(days=(sunday_based + 6) % 7)


def month_bucket(d: date) -> date:
    """월 단위: 그 달의 1일"""
    return d.replace(day=1)


BUCKET_FUNCTIONS: dict[Granularity, Callable[[date], date]] = {
    Granularity.DAY: day_bucket,
    Granularity.WEEK: week_bucket,
    Granularity.MONTH: month_bucket,
}


def bucket_key(d: date, granularity: Granularity) -> date:
    """날짜의 버킷 키"""
    return BUCKET_FUNCTIONS[granularity](d)
