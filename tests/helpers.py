"""테스트 헬퍼 (시계 / 거래 입력 생성)"""

from datetime import date, datetime

from core.ledger.types import NewEntry
from core.types import TransactionKind
from core.utils.timezone import KST


class FixedClock:
    """테스트용 시계 (LedgerStore clock 인자)"""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def kst(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> datetime:
    """KST datetime 생성"""
    return datetime(year, month, day, hour, minute, tzinfo=KST)


def normal_entry(day: date, amount: int, hour: int = 12) -> NewEntry:
    """지정 날짜의 normal 거래 입력"""
    return NewEntry(
        kind=TransactionKind.NORMAL,
        amount=amount,
        occurred_at=kst(day.year, day.month, day.day, hour),
    )


def init_entry(day: date, amount: int, hour: int = 9) -> NewEntry:
    """지정 날짜의 init 거래 입력"""
    return NewEntry(
        kind=TransactionKind.INIT,
        amount=amount,
        occurred_at=kst(day.year, day.month, day.day, hour),
    )
