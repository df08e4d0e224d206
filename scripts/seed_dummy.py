"""
더미 거래 생성

지정 계정에 과거 N일치 normal 거래를 무작위로 넣는다.

사용법:
    python -m scripts.seed_dummy --account-id 1
    python -m scripts.seed_dummy --account-id 1 --days 30 --max-per-day 5
"""

import argparse
import asyncio
import random
from datetime import date, datetime, timedelta

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.constants import LedgerLimits
from core.ledger.store import LedgerStore
from core.ledger.types import NewEntry
from core.logging import setup_logging
from core.types import TransactionKind
from core.utils.timezone import KST, now_kst
from scripts._common import add_db_argument, positive_int, resolve_db_path

DUMMY_MEMO = "dummy"
MAX_PER_DAY_LIMIT = 50


def generate_dummy_entries(
    days: int,
    max_per_day: int,
    today: date,
    rng: random.Random,
) -> list[NewEntry]:
    """today를 포함한 최근 days일에 하루 0..max_per_day건씩 거래 생성

    금액은 4가지 normal 금액 중 하나, 시각은 하루 중 무작위.
    """
    entries: list[NewEntry] = []
    start = today - timedelta(days=days - 1)

    for offset in range(days):
        day = start + timedelta(days=offset)
        for _ in range(rng.randint(0, max_per_day)):
            occurred_at = datetime(
                day.year,
                day.month,
                day.day,
                rng.randrange(24),
                rng.randrange(60),
                rng.randrange(60),
                tzinfo=KST,
            )
            entries.append(
                NewEntry(
                    kind=TransactionKind.NORMAL,
                    amount=rng.choice(LedgerLimits.NORMAL_AMOUNTS),
                    occurred_at=occurred_at,
                    memo=DUMMY_MEMO,
                )
            )

    return entries


def max_per_day_arg(value: str) -> int:
    number = int(value)
    if not 0 <= number <= MAX_PER_DAY_LIMIT:
        raise argparse.ArgumentTypeError(f"--max-per-day must be 0..{MAX_PER_DAY_LIMIT}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="더미 거래 생성")
    parser.add_argument("--account-id", type=positive_int, required=True)
    parser.add_argument("--days", type=positive_int, default=365, help="며칠 전까지 넣을지 (기본 365)")
    parser.add_argument(
        "--max-per-day",
        type=max_per_day_arg,
        default=3,
        help=f"하루 최대 건수 (기본 3, 0..{MAX_PER_DAY_LIMIT})",
    )
    parser.add_argument("--seed", type=int, default=None, help="난수 시드 (재현용)")
    add_db_argument(parser)
    return parser


async def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    async with SQLiteAdapter(resolve_db_path(args.db)) as db:
        store = LedgerStore(db)

        if await store.get_account(args.account_id) is None:
            print(f"User not found: id={args.account_id}")
            return 1

        entries = generate_dummy_entries(
            args.days,
            args.max_per_day,
            now_kst().date(),
            random.Random(args.seed),
        )
        inserted = await store.import_entries(args.account_id, entries)

    print(f"Inserted {inserted} dummy transactions for account_id={args.account_id}")
    return 0


if __name__ == "__main__":
    setup_logging("cli")
    raise SystemExit(asyncio.run(main()))
