"""
원장 (append-only ledger)

계정별 거래 저장, 기간 집계, cursor 페이지네이션.

사용 예시:
```python
from core.ledger import LedgerAggregator, LedgerStore, TransactionPager

store = LedgerStore(db)
result = await store.append(owner=1, kind="normal", amount=500)

summary = await LedgerAggregator(db).summarize(1, "2026-01-01", "2026-03-31")
page = await TransactionPager(db).list(1, limit=50)
```
"""

from core.ledger.aggregation import LedgerAggregator, build_buckets
from core.ledger.errors import (
    ConstraintViolation,
    ForeignKeyViolation,
    InvalidGranularity,
    InvalidRange,
    LedgerError,
    ValidationError,
)
from core.ledger.granularity import bucket_key, parse_granularity, select_granularity
from core.ledger.pagination import TransactionPager, clamp_limit, parse_cursor
from core.ledger.schema import init_ledger_schema
from core.ledger.store import LedgerStore
from core.ledger.types import (
    Account,
    AppendResult,
    BucketRow,
    DeleteResult,
    LedgerSummary,
    NewEntry,
    Transaction,
    TransactionPage,
)

__all__ = [
    # 핵심 클래스
    "LedgerStore",
    "LedgerAggregator",
    "TransactionPager",
    # 함수
    "init_ledger_schema",
    "build_buckets",
    "bucket_key",
    "parse_granularity",
    "select_granularity",
    "clamp_limit",
    "parse_cursor",
    # 데이터
    "Account",
    "AppendResult",
    "BucketRow",
    "DeleteResult",
    "LedgerSummary",
    "NewEntry",
    "Transaction",
    "TransactionPage",
    # 예외
    "LedgerError",
    "ValidationError",
    "InvalidRange",
    "InvalidGranularity",
    "ConstraintViolation",
    "ForeignKeyViolation",
]
