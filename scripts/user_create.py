"""
계정 생성

사용법:
    python -m scripts.user_create --email admin@example.com --password password123
"""

import argparse
import asyncio

import bcrypt

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.schema import init_ledger_schema
from core.ledger.store import LedgerStore
from core.ledger.types import Account
from core.logging import setup_logging
from scripts._common import add_db_argument, resolve_db_path


class UserExistsError(Exception):
    """이미 존재하는 email"""

    def __init__(self, account: Account):
        super().__init__(f"User already exists: email={account.email}, id={account.id}")
        self.account = account


def hash_password(password: str) -> str:
    """bcrypt 해시 (cost 10)"""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=10)).decode("utf-8")


async def create_user(db: SQLiteAdapter, email: str, password: str) -> Account:
    """계정 생성

    Raises:
        UserExistsError: 같은 email의 계정이 이미 있는 경우
    """
    store = LedgerStore(db)

    existing = await store.get_account_by_email(email)
    if existing is not None:
        raise UserExistsError(existing)

    return await store.create_account(email, hash_password(password))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="계정 생성")
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", required=True)
    add_db_argument(parser)
    return parser


async def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    async with SQLiteAdapter(resolve_db_path(args.db)) as db:
        await init_ledger_schema(db)
        try:
            account = await create_user(db, args.email, args.password)
        except UserExistsError as e:
            print(e)
            return 1

    print(f"User created: id={account.id}, email={account.email}")
    return 0


if __name__ == "__main__":
    setup_logging("cli")
    raise SystemExit(asyncio.run(main()))
