"""
원장 타입 정의

저장소/집계/페이지네이션 결과를 담는 불변 데이터 구조
"""

from dataclasses import dataclass, field
from datetime import date, datetime

from core.types import Granularity, TransactionKind


@dataclass(frozen=True)
class Account:
    """원장 소유자 계정"""

    id: int
    email: str
    created_at: str


@dataclass(frozen=True)
class Transaction:
    """원장 거래 (불변)

    occurred_at / recorded_at은 +09:00 고정 오프셋 ISO 문자열.
    """

    id: int
    account_id: int
    kind: TransactionKind
    amount: int
    occurred_at: str
    memo: str | None
    recorded_at: str

    @property
    def occurred_on(self) -> date:
        """거래의 달력 날짜"""
        return date.fromisoformat(self.occurred_at[:10])


@dataclass(frozen=True)
class NewEntry:
    """관리 도구용 거래 입력 (과거 시각 지정 가능)"""

    kind: TransactionKind
    amount: int
    occurred_at: datetime
    memo: str | None = None


@dataclass(frozen=True)
class AppendResult:
    """거래 추가 결과 (추가된 거래 + 추가 직후 총액)"""

    transaction: Transaction
    total: int


@dataclass(frozen=True)
class DeleteResult:
    """계정 삭제 결과"""

    transactions_deleted: int
    account_deleted: bool


@dataclass(frozen=True)
class BucketRow:
    """집계 버킷 한 행"""

    bucket: date
    delta: int
    running_total: int


@dataclass(frozen=True)
class LedgerSummary:
    """기간 집계 결과

    opening_balance는 내부 검증용이며 API에는 첫 버킷의
    running_total을 통해서만 드러난다.
    """

    start: date
    end: date
    granularity: Granularity
    opening_balance: int
    grand_total: int
    buckets: tuple[BucketRow, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TransactionPage:
    """거래 목록 한 페이지"""

    items: tuple[Transaction, ...]
    next_cursor: int | None
