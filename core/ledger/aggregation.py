"""
기간 집계 엔진

계정의 [start, end] 기간을 day/week/month 버킷으로 묶어
버킷별 증감(delta)과 누적 잔액(running_total)을 계산한다.

1. opening_balance: start 이전 전체 거래 합계
2. 기간 내 거래를 날짜별로 합산 (SQL)
3. 날짜를 버킷 키로 변환해 버킷별 합산 (순수 함수)
4. running_total = opening_balance + 버킷 delta 누적합
5. grand_total: 기간과 무관한 전체 합계

거래가 없는 버킷은 만들지 않는다 (0 채우기 없음).
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Iterable

from core.ledger.errors import InvalidRange
from core.ledger.granularity import bucket_key, select_granularity
from core.ledger.types import BucketRow, LedgerSummary
from core.ledger.validation import date_upper_bound, parse_date_param
from core.types import Granularity

if TYPE_CHECKING:
    from adapters.db.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)


def build_buckets(
    opening_balance: int,
    daily_rows: Iterable[tuple[date, int]],
    granularity: Granularity,
) -> tuple[BucketRow, ...]:
    """날짜별 합계를 버킷으로 묶고 누적 잔액 계산

    Args:
        opening_balance: 기간 시작 전 잔액
        daily_rows: (날짜, 그 날짜의 금액 합계) 목록, 순서 무관
        granularity: 집계 단위

    Returns:
        버킷 키 오름차순 BucketRow 튜플
    """
    deltas: dict[date, int] = {}
    for day, amount in daily_rows:
        key = bucket_key(day, granularity)
        deltas[key] = deltas.get(key, 0) + amount

    rows: list[BucketRow] = []
    running = opening_balance
    for key in sorted(deltas):
        running += deltas[key]
        rows.append(BucketRow(bucket=key, delta=deltas[key], running_total=running))

    return tuple(rows)


class LedgerAggregator:
    """기간 집계 엔진

    하나의 읽기 스냅샷 안에서 opening / 기간 합계 / 전체 합계를 조회.

    Args:
        db: SQLite 어댑터 (읽기 전용 연결 가능)
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db

    async def summarize(
        self,
        owner: int,
        start: date | str,
        end: date | str,
        granularity: Granularity | str | None = None,
    ) -> LedgerSummary:
        """기간 집계

        Args:
            owner: 계정 ID
            start: 시작 날짜 (포함)
            end: 종료 날짜 (포함)
            granularity: day/week/month, None 또는 "auto"면 자동 선택

        Returns:
            LedgerSummary

        Raises:
            ValidationError: 날짜 형식 오류
            InvalidRange: start > end
            InvalidGranularity: 허용되지 않는 집계 단위
        """
        start_date = parse_date_param(start, "from")
        end_date = parse_date_param(end, "to")
        if start_date is None or end_date is None:
            raise InvalidRange("from/to are required")
        if start_date > end_date:
            raise InvalidRange("from must be on or before to")

        resolved = select_granularity(start_date, end_date, granularity)

        # occurred_at은 'YYYY-MM-DDT...' 형식이므로 문자열 비교로 날짜 범위를 표현
        # (인덱스 ix_transactions_account_ts 사용)
        lower = start_date.isoformat()
        upper = date_upper_bound(end_date)

        async with self.db.snapshot():
            row = await self.db.fetchone(
                """
                SELECT COALESCE(SUM(amount), 0)
                FROM transactions
                WHERE account_id = ? AND occurred_at < ?
                """,
                (owner, lower),
            )
            opening_balance = row[0] if row else 0

            daily = await self.db.fetchall(
                """
                SELECT substr(occurred_at, 1, 10) AS day_key, SUM(amount)
                FROM transactions
                WHERE account_id = ? AND occurred_at >= ? AND occurred_at < ?
                GROUP BY day_key
                ORDER BY day_key
                """,
                (owner, lower, upper),
            )

            row = await self.db.fetchone(
                "SELECT COALESCE(SUM(amount), 0) FROM transactions WHERE account_id = ?",
                (owner,),
            )
            grand_total = row[0] if row else 0

        buckets = build_buckets(
            opening_balance,
            ((date.fromisoformat(day_key), amount) for day_key, amount in daily),
            resolved,
        )

        logger.debug(
            f"기간 집계: {lower}~{end_date.isoformat()} {resolved.value} "
            f"buckets={len(buckets)}",
            extra={"account_id": owner},
        )

        return LedgerSummary(
            start=start_date,
            end=end_date,
            granularity=resolved,
            opening_balance=opening_balance,
            grand_total=grand_total,
            buckets=buckets,
        )
