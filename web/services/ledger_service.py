"""
원장 서비스

LedgerStore / LedgerAggregator / TransactionPager를 조합해
API 응답 형태(dict)로 변환
"""

from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.aggregation import LedgerAggregator
from core.ledger.pagination import TransactionPager
from core.ledger.store import LedgerStore
from core.ledger.types import AppendResult, Transaction
from core.types import TransactionKind


def _transaction_dict(tx: Transaction) -> dict[str, Any]:
    return {
        "id": tx.id,
        "kind": tx.kind.value,
        "occurred_at": tx.occurred_at,
        "amount": tx.amount,
        "memo": tx.memo,
        "recorded_at": tx.recorded_at,
    }


def _append_dict(result: AppendResult) -> dict[str, Any]:
    return {
        "transaction": _transaction_dict(result.transaction),
        "total": result.total,
    }


class LedgerService:
    """원장 서비스

    Args:
        db: 요청 단위 SQLite 어댑터
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db
        self.store = LedgerStore(db)

    async def record_transaction(
        self,
        owner: int,
        amount: int,
        memo: str | None = None,
    ) -> dict[str, Any]:
        """일반 거래 추가"""
        result = await self.store.append(owner, TransactionKind.NORMAL, amount, memo)
        return _append_dict(result)

    async def record_initial_balance(
        self,
        owner: int,
        amount: int,
        memo: str | None = None,
    ) -> dict[str, Any]:
        """초기 잔액 추가

        두 번째 이후의 init 거래도 현재는 허용.
        """
        result = await self.store.append(owner, TransactionKind.INIT, amount, memo)
        return _append_dict(result)

    async def get_summary(
        self,
        owner: int,
        start: str,
        end: str,
        granularity: str | None = None,
    ) -> dict[str, Any]:
        """기간 집계

        Returns:
            grand_total, from_date, to_date, granularity, buckets 포함 응답
        """
        summary = await LedgerAggregator(self.db).summarize(owner, start, end, granularity)
        return {
            "grand_total": summary.grand_total,
            "from_date": summary.start.isoformat(),
            "to_date": summary.end.isoformat(),
            "granularity": summary.granularity.value,
            "buckets": [
                {
                    "date": row.bucket.isoformat(),
                    "delta": row.delta,
                    "running_total": row.running_total,
                }
                for row in summary.buckets
            ],
        }

    async def list_transactions(
        self,
        owner: int,
        start: str | None = None,
        end: str | None = None,
        limit: str | int | None = None,
        cursor: str | int | None = None,
    ) -> dict[str, Any]:
        """거래 목록 (최신순, cursor 페이지네이션)"""
        page = await TransactionPager(self.db).list(owner, start, end, limit, cursor)
        return {
            "items": [
                {
                    "id": tx.id,
                    "occurred_at": tx.occurred_at,
                    "amount": tx.amount,
                    "memo": tx.memo,
                }
                for tx in page.items
            ],
            "next_cursor": page.next_cursor,
        }

    async def get_meta(self, owner: int) -> dict[str, Any]:
        """가장 오래된 거래 날짜 (없으면 None)"""
        earliest = await self.store.earliest_date(owner)
        return {"min_date": earliest.isoformat() if earliest else None}
