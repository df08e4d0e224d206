"""
원장 스키마 초기화

Web 시작 시 / init_db 스크립트에서 accounts, transactions 테이블 생성.
CREATE IF NOT EXISTS 패턴으로 여러 번 호출해도 안전하게 동작.

금액/메모 제약은 애플리케이션 검증과 별개로 DB CHECK 제약으로 강제하여
시드/마이그레이션 등 외부 쓰기도 원장을 깨뜨릴 수 없다.
"""

import logging
from typing import TYPE_CHECKING

from core.constants import LedgerLimits

if TYPE_CHECKING:
    from adapters.db.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)


def _sql_int_list(values: tuple[int, ...]) -> str:
    return ", ".join(str(v) for v in values)


ACCOUNTS_DDL = """
    CREATE TABLE IF NOT EXISTS accounts (
        id               INTEGER PRIMARY KEY AUTOINCREMENT,
        email            TEXT NOT NULL UNIQUE,
        password_hash    TEXT NOT NULL,
        created_at       TEXT NOT NULL
    )
"""

TRANSACTIONS_DDL = f"""
    CREATE TABLE IF NOT EXISTS transactions (
        id               INTEGER PRIMARY KEY AUTOINCREMENT,
        account_id       INTEGER NOT NULL
                         REFERENCES accounts(id) ON DELETE CASCADE,
        kind             TEXT NOT NULL DEFAULT 'normal',
        amount           INTEGER NOT NULL,
        occurred_at      TEXT NOT NULL,
        memo             TEXT,
        recorded_at      TEXT NOT NULL,

        CONSTRAINT ck_transactions_kind
            CHECK (kind IN ('normal', 'init')),
        CONSTRAINT ck_transactions_amount_integer
            CHECK (typeof(amount) = 'integer'),
        CONSTRAINT ck_transactions_normal_amount
            CHECK (kind <> 'normal' OR amount IN ({_sql_int_list(LedgerLimits.NORMAL_AMOUNTS)})),
        CONSTRAINT ck_transactions_init_amount
            CHECK (kind <> 'init' OR amount BETWEEN {LedgerLimits.INIT_AMOUNT_MIN} AND {LedgerLimits.INIT_AMOUNT_MAX}),
        CONSTRAINT ck_transactions_memo_length
            CHECK (memo IS NULL OR length(memo) <= {LedgerLimits.MEMO_MAX_LENGTH})
    )
"""

INDEX_DDL = [
    # 계정 내 날짜 범위 조회
    "CREATE INDEX IF NOT EXISTS ix_transactions_account_ts ON transactions(account_id, occurred_at)",
    # 관리용 리포트
    "CREATE INDEX IF NOT EXISTS ix_transactions_ts ON transactions(occurred_at)",
    "CREATE INDEX IF NOT EXISTS ix_transactions_kind ON transactions(kind)",
    # cursor 페이지네이션 (account_id = ? AND id < ? ORDER BY id DESC)
    "CREATE INDEX IF NOT EXISTS ix_transactions_account_id ON transactions(account_id, id)",
]


async def init_ledger_schema(db: "SQLiteAdapter") -> None:
    """원장 스키마 초기화 (테이블 + 인덱스)

    이미 존재하는 경우 안전하게 건너뜀 (IF NOT EXISTS).

    Args:
        db: 쓰기 가능한 SQLiteAdapter 인스턴스
    """
    await db.execute(ACCOUNTS_DDL)
    await db.execute(TRANSACTIONS_DDL)

    for ddl in INDEX_DDL:
        await db.execute(ddl)

    await db.commit()
    logger.info("원장 스키마 초기화 완료", extra={"db_path": str(db.db_path)})
