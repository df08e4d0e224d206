"""
원장 저장소

계정/거래 저장 및 삭제. 거래는 추가만 가능하고 수정 연산은 없다.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Callable, Iterable

import aiosqlite

from core.constants import LedgerLimits
from core.ledger.errors import ConstraintViolation, ForeignKeyViolation, LedgerError
from core.ledger.types import (
    Account,
    AppendResult,
    DeleteResult,
    NewEntry,
    Transaction,
)
from core.ledger.validation import validate_entry
from core.types import TransactionKind
from core.utils.timezone import format_kst_iso, now_kst

if TYPE_CHECKING:
    from adapters.db.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)


TRANSACTION_COLUMNS = "id, account_id, kind, amount, occurred_at, memo, recorded_at"

INSERT_TRANSACTION_SQL = """
    INSERT INTO transactions (account_id, kind, amount, occurred_at, memo, recorded_at)
    VALUES (?, ?, ?, ?, ?, ?)
"""


def row_to_transaction(row: tuple[Any, ...]) -> Transaction:
    """transactions 행을 Transaction으로 변환 (TRANSACTION_COLUMNS 순서)"""
    return Transaction(
        id=row[0],
        account_id=row[1],
        kind=TransactionKind(row[2]),
        amount=row[3],
        occurred_at=row[4],
        memo=row[5],
        recorded_at=row[6],
    )


def translate_integrity_error(error: aiosqlite.IntegrityError) -> LedgerError:
    """SQLite 제약 위반을 원장 예외로 변환

    CHECK 제약 → ConstraintViolation, FOREIGN KEY → ForeignKeyViolation.
    """
    message = str(error)
    if "FOREIGN KEY" in message:
        return ForeignKeyViolation("account does not exist")
    return ConstraintViolation(message)


class LedgerStore:
    """원장 저장소

    Args:
        db: SQLite 어댑터 (호출자가 연결 생명주기 관리)
        clock: 서버 시각 공급자 (기본: 현재 KST)
    """

    def __init__(
        self,
        db: SQLiteAdapter,
        clock: Callable[[], datetime] = now_kst,
    ):
        self.db = db
        self.clock = clock

    # =========================================================================
    # 계정
    # =========================================================================

    async def create_account(self, email: str, password_hash: str) -> Account:
        """계정 생성

        Raises:
            ConstraintViolation: 이미 존재하는 email
        """
        created_at = format_kst_iso(self.clock())
        try:
            async with self.db.transaction():
                cursor = await self.db.execute(
                    """
                    INSERT INTO accounts (email, password_hash, created_at)
                    VALUES (?, ?, ?)
                    """,
                    (email, password_hash, created_at),
                )
                account_id = cursor.lastrowid
        except aiosqlite.IntegrityError as e:
            raise ConstraintViolation(f"account already exists: {email}") from e

        logger.info("계정 생성", extra={"account_id": account_id})
        return Account(id=account_id, email=email, created_at=created_at)

    async def get_account(self, account_id: int) -> Account | None:
        """계정 단건 조회"""
        row = await self.db.fetchone(
            "SELECT id, email, created_at FROM accounts WHERE id = ?",
            (account_id,),
        )
        return Account(id=row[0], email=row[1], created_at=row[2]) if row else None

    async def get_account_by_email(self, email: str) -> Account | None:
        """email로 계정 조회"""
        row = await self.db.fetchone(
            "SELECT id, email, created_at FROM accounts WHERE email = ?",
            (email,),
        )
        return Account(id=row[0], email=row[1], created_at=row[2]) if row else None

    async def list_accounts(
        self,
        limit: int = 50,
        offset: int = 0,
        search: str | None = None,
    ) -> list[Account]:
        """계정 목록 조회 (id 오름차순)

        Args:
            limit: 조회 개수 제한
            offset: 시작 위치
            search: email 부분 일치 (대소문자 무시)
        """
        sql = "SELECT id, email, created_at FROM accounts"
        params: list[Any] = []
        if search:
            sql += " WHERE lower(email) LIKE lower(?)"
            params.append(f"%{search}%")
        sql += " ORDER BY id ASC LIMIT ? OFFSET ?"
        params.extend([limit, offset])

        rows = await self.db.fetchall(sql, tuple(params))
        return [Account(id=r[0], email=r[1], created_at=r[2]) for r in rows]

    # =========================================================================
    # 거래 추가
    # =========================================================================

    async def append(
        self,
        owner: int,
        kind: TransactionKind | str,
        amount: int,
        memo: str | None = None,
    ) -> AppendResult:
        """거래 추가

        INSERT와 직후의 총액 조회를 하나의 트랜잭션에서 수행.
        init 거래에서 memo가 없으면 "initial balance"로 저장.

        Args:
            owner: 계정 ID
            kind: normal 또는 init
            amount: 금액
            memo: 메모 (선택)

        Returns:
            추가된 거래와 추가 직후 계정 총액

        Raises:
            ConstraintViolation: 금액/메모 규칙 위반
            ForeignKeyViolation: 존재하지 않는 계정
        """
        kind = validate_entry(kind, amount, memo)
        if kind == TransactionKind.INIT and memo is None:
            memo = LedgerLimits.INIT_MEMO_DEFAULT

        # occurred_at / recorded_at은 같은 시각으로 서버에서 부여
        now = format_kst_iso(self.clock())

        try:
            async with self.db.transaction():
                cursor = await self.db.execute(
                    INSERT_TRANSACTION_SQL,
                    (owner, kind.value, amount, now, memo, now),
                )
                tx_id = cursor.lastrowid
                total = await self.grand_total(owner)
        except aiosqlite.IntegrityError as e:
            error = translate_integrity_error(e)
            logger.warning(
                f"거래 추가 거부: {error}",
                extra={"account_id": owner, "kind": kind.value, "amount": amount},
            )
            raise error from e

        transaction = Transaction(
            id=tx_id,
            account_id=owner,
            kind=kind,
            amount=amount,
            occurred_at=now,
            memo=memo,
            recorded_at=now,
        )
        logger.debug(f"거래 추가: id={tx_id} kind={kind.value} amount={amount}")
        return AppendResult(transaction=transaction, total=total)

    async def import_entries(self, owner: int, entries: Iterable[NewEntry]) -> int:
        """관리용 일괄 추가 (시드/가져오기)

        과거 시각을 지정할 수 있다. 모두 추가되거나 하나도 추가되지 않는다.

        Returns:
            추가된 거래 수

        Raises:
            ConstraintViolation: 규칙 위반 항목이 있는 경우
            ForeignKeyViolation: 존재하지 않는 계정
        """
        recorded_at = format_kst_iso(self.clock())
        params: list[tuple[Any, ...]] = []
        for entry in entries:
            kind = validate_entry(entry.kind, entry.amount, entry.memo)
            memo = entry.memo
            if kind == TransactionKind.INIT and memo is None:
                memo = LedgerLimits.INIT_MEMO_DEFAULT
            params.append(
                (owner, kind.value, entry.amount, format_kst_iso(entry.occurred_at), memo, recorded_at)
            )

        if not params:
            return 0

        try:
            async with self.db.transaction():
                await self.db.executemany(INSERT_TRANSACTION_SQL, params)
        except aiosqlite.IntegrityError as e:
            raise translate_integrity_error(e) from e

        logger.info(f"거래 일괄 추가: {len(params)}건", extra={"account_id": owner})
        return len(params)

    # =========================================================================
    # 조회
    # =========================================================================

    async def grand_total(self, owner: int) -> int:
        """계정 전체 기간 총액"""
        row = await self.db.fetchone(
            "SELECT COALESCE(SUM(amount), 0) FROM transactions WHERE account_id = ?",
            (owner,),
        )
        return row[0] if row else 0

    async def count(self, owner: int) -> int:
        """계정 거래 수"""
        row = await self.db.fetchone(
            "SELECT COUNT(*) FROM transactions WHERE account_id = ?",
            (owner,),
        )
        return row[0] if row else 0

    async def earliest_date(self, owner: int) -> date | None:
        """가장 오래된 거래 날짜 (거래가 없으면 None)"""
        row = await self.db.fetchone(
            "SELECT MIN(occurred_at) FROM transactions WHERE account_id = ?",
            (owner,),
        )
        if not row or row[0] is None:
            return None
        return date.fromisoformat(row[0][:10])

    async def get_transaction(self, transaction_id: int) -> Transaction | None:
        """거래 단건 조회"""
        row = await self.db.fetchone(
            f"SELECT {TRANSACTION_COLUMNS} FROM transactions WHERE id = ?",
            (transaction_id,),
        )
        return row_to_transaction(row) if row else None

    # =========================================================================
    # 관리용 삭제
    # =========================================================================

    async def delete_by_owner(self, owner: int) -> int:
        """계정의 모든 거래 삭제 (계정 행은 유지)

        거래가 없으면 0을 반환하는 no-op.

        Returns:
            삭제된 거래 수
        """
        async with self.db.transaction():
            cursor = await self.db.execute(
                "DELETE FROM transactions WHERE account_id = ?",
                (owner,),
            )
            deleted = cursor.rowcount

        logger.info(f"거래 전체 삭제: {deleted}건", extra={"account_id": owner})
        return deleted

    async def delete_account(self, owner: int) -> DeleteResult:
        """계정과 그 거래를 함께 삭제

        Returns:
            삭제된 거래 수와 계정 삭제 여부
        """
        async with self.db.transaction():
            cursor = await self.db.execute(
                "DELETE FROM transactions WHERE account_id = ?",
                (owner,),
            )
            deleted = cursor.rowcount

            cursor = await self.db.execute(
                "DELETE FROM accounts WHERE id = ?",
                (owner,),
            )
            account_deleted = cursor.rowcount > 0

        logger.info(
            f"계정 삭제: transactions={deleted}, account={account_deleted}",
            extra={"account_id": owner},
        )
        return DeleteResult(transactions_deleted=deleted, account_deleted=account_deleted)
