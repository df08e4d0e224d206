"""
거래 목록 cursor 페이지네이션

id 내림차순(최신순)으로 정렬하고 마지막으로 본 id를 다음 페이지의
배타적 상한으로 사용한다. limit + 1 건을 조회해 다음 페이지 존재 여부를
별도 COUNT 쿼리 없이 판단.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

from core.constants import PageLimits
from core.ledger.errors import ValidationError
from core.ledger.store import TRANSACTION_COLUMNS, row_to_transaction
from core.ledger.types import TransactionPage
from core.ledger.validation import date_upper_bound, parse_date_param

if TYPE_CHECKING:
    from adapters.db.sqlite_adapter import SQLiteAdapter


def clamp_limit(raw: Any) -> int:
    """페이지 크기 정규화

    - 없음 / 숫자가 아님 / 1 미만 → 50
    - 200 초과 → 200 (거부하지 않음)
    """
    try:
        limit = int(raw)
    except (TypeError, ValueError):
        return PageLimits.DEFAULT

    if limit < 1:
        return PageLimits.DEFAULT
    return min(limit, PageLimits.MAX)


def parse_cursor(raw: Any) -> int | None:
    """cursor 검증

    Returns:
        양의 정수 cursor, 없으면 None

    Raises:
        ValidationError: 양의 정수가 아닌 경우
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        raise ValidationError("cursor must be positive integer")
    try:
        cursor = int(raw)
    except (TypeError, ValueError) as e:
        raise ValidationError("cursor must be positive integer") from e
    if cursor <= 0:
        raise ValidationError("cursor must be positive integer")
    return cursor


class TransactionPager:
    """계정 거래 목록 (최신순)

    Args:
        db: SQLite 어댑터
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db

    async def list(
        self,
        owner: int,
        start: date | str | None = None,
        end: date | str | None = None,
        limit: Any = None,
        cursor: Any = None,
    ) -> TransactionPage:
        """거래 목록 한 페이지 조회

        Args:
            owner: 계정 ID
            start: 시작 날짜 (포함, 선택)
            end: 종료 날짜 (포함, 선택)
            limit: 페이지 크기 (clamp_limit 적용)
            cursor: 이 id보다 작은 거래만 조회 (선택)

        Returns:
            items (id 내림차순)와 next_cursor (마지막 페이지면 None)

        Raises:
            ValidationError: 날짜/cursor 형식 오류
        """
        start_date = parse_date_param(start, "from")
        end_date = parse_date_param(end, "to")

        page_size = clamp_limit(limit)
        before_id = parse_cursor(cursor)

        sql = f"SELECT {TRANSACTION_COLUMNS} FROM transactions WHERE account_id = ?"
        params: list[Any] = [owner]
        if start_date is not None:
            sql += " AND occurred_at >= ?"
            params.append(start_date.isoformat())
        if end_date is not None:
            sql += " AND occurred_at < ?"
            params.append(date_upper_bound(end_date))
        if before_id is not None:
            sql += " AND id < ?"
            params.append(before_id)
        sql += " ORDER BY id DESC LIMIT ?"
        params.append(page_size + 1)

        rows = await self.db.fetchall(sql, tuple(params))

        next_cursor: int | None = None
        if len(rows) > page_size:
            rows = rows[:page_size]
            # 마지막으로 반환한 행의 id → 다음 페이지는 이보다 작은 id
            next_cursor = rows[-1][0]

        return TransactionPage(
            items=tuple(row_to_transaction(r) for r in rows),
            next_cursor=next_cursor,
        )
