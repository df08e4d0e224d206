"""
로컬 개발용 액세스 토큰 발급

사용법:
    python -m scripts.issue_token --account-id 1
    curl -H "Authorization: Bearer $(python -m scripts.issue_token --account-id 1)" \
        "http://127.0.0.1:3000/api/meta"
"""

import argparse

from core.config.loader import get_settings
from scripts._common import positive_int
from web.security import create_access_token


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="액세스 토큰 발급 (로컬 개발용)")
    parser.add_argument("--account-id", type=positive_int, required=True)
    parser.add_argument(
        "--expires-minutes",
        type=positive_int,
        default=None,
        help="유효 시간 (기본: secrets.yaml web.token_expire_minutes)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    token = create_access_token(
        args.account_id,
        settings.web_secret_key,
        args.expires_minutes or settings.token_expire_minutes,
    )
    print(token)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
