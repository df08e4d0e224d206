"""
원장 스키마 생성

사용법:
    python -m scripts.init_db
    python -m scripts.init_db --db data/piggybank_local.db
"""

import argparse
import asyncio

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.schema import init_ledger_schema
from core.logging import setup_logging
from scripts._common import add_db_argument, resolve_db_path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="원장 스키마 생성")
    add_db_argument(parser)
    return parser


async def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    db_path = resolve_db_path(args.db)

    async with SQLiteAdapter(db_path) as db:
        await init_ledger_schema(db)

    print(f"Schema ready: {db_path}")
    return 0


if __name__ == "__main__":
    setup_logging("cli")
    raise SystemExit(asyncio.run(main()))
