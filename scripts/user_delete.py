"""
계정 데이터 삭제

사용법:
    # 해당 계정의 거래만 전부 삭제
    python -m scripts.user_delete --account-id 1

    # 계정 행까지 삭제 (거래도 함께 삭제)
    python -m scripts.user_delete --account-id 1 --hard
"""

import argparse
import asyncio

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.store import LedgerStore
from core.logging import setup_logging
from scripts._common import add_db_argument, positive_int, resolve_db_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="계정 거래 삭제 / 계정 삭제")
    parser.add_argument("--account-id", type=positive_int, required=True)
    parser.add_argument(
        "--hard",
        action="store_true",
        help="accounts 행도 삭제 (지정하지 않으면 transactions만 삭제)",
    )
    add_db_argument(parser)
    return parser


async def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    async with SQLiteAdapter(resolve_db_path(args.db)) as db:
        store = LedgerStore(db)
        if args.hard:
            result = await store.delete_account(args.account_id)
            print(
                f"Deleted: transactions={result.transactions_deleted}, "
                f"users={int(result.account_deleted)}"
            )
        else:
            deleted = await store.delete_by_owner(args.account_id)
            print(f"Deleted: transactions={deleted}")

    return 0


if __name__ == "__main__":
    setup_logging("cli")
    raise SystemExit(asyncio.run(main()))
