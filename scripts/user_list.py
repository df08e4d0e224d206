"""
계정 목록

사용법:
    python -m scripts.user_list
    python -m scripts.user_list --limit 200
    python -m scripts.user_list --offset 200 --limit 200
    python -m scripts.user_list --search example.com
    python -m scripts.user_list --json
"""

import argparse
import asyncio
import json
import math

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.store import LedgerStore
from core.ledger.types import Account
from core.logging import setup_logging
from scripts._common import add_db_argument, resolve_db_path

LIMIT_DEFAULT = 50
LIMIT_MAX = 500
OFFSET_MAX = 1_000_000


def clamp_int(raw: str | None, default: int, minimum: int, maximum: int) -> int:
    """숫자가 아니면 기본값, 범위 밖이면 경계값"""
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if not math.isfinite(value):
        return default
    return min(maximum, max(minimum, math.floor(value)))


def format_table(accounts: list[Account]) -> str:
    """id / email / created_at 표 형식"""
    id_width = max(2, *(len(str(a.id)) for a in accounts))
    email_width = max(5, *(len(a.email) for a in accounts))

    header = f"{'id':>{id_width}}  {'email':<{email_width}}  created_at"
    lines = [header, "-" * len(header)]
    for a in accounts:
        lines.append(f"{a.id:>{id_width}}  {a.email:<{email_width}}  {a.created_at}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="계정 목록")
    parser.add_argument("--limit", default=None, help=f"기본 {LIMIT_DEFAULT} (최대 {LIMIT_MAX})")
    parser.add_argument("--offset", default=None, help="기본 0")
    parser.add_argument("--search", default=None, help="email 부분 일치 (대소문자 무시)")
    parser.add_argument("--json", action="store_true", help="JSON 출력")
    add_db_argument(parser)
    return parser


async def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    limit = clamp_int(args.limit, LIMIT_DEFAULT, 1, LIMIT_MAX)
    offset = clamp_int(args.offset, 0, 0, OFFSET_MAX)

    async with SQLiteAdapter(resolve_db_path(args.db), readonly=True) as db:
        accounts = await LedgerStore(db).list_accounts(limit, offset, args.search)

    if args.json:
        items = [{"id": a.id, "email": a.email, "created_at": a.created_at} for a in accounts]
        print(json.dumps({"count": len(items), "items": items}, indent=2, ensure_ascii=False))
        return 0

    if not accounts:
        print("(no users)")
        return 0

    print(format_table(accounts))
    search_note = f', search="{args.search}"' if args.search else ""
    print(f"\ncount={len(accounts)} (limit={limit}, offset={offset}{search_note})")
    return 0


if __name__ == "__main__":
    setup_logging("cli")
    raise SystemExit(asyncio.run(main()))
