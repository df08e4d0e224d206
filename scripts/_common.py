"""관리 스크립트 공통 함수"""

import argparse
from pathlib import Path

from core.config.loader import get_settings


def positive_int(value: str) -> int:
    """argparse 타입: 양의 정수"""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"must be positive integer: {value}") from e
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive integer: {value}")
    return number


def add_db_argument(parser: argparse.ArgumentParser) -> None:
    """--db 옵션 추가 (없으면 secrets.yaml 기준 경로)"""
    parser.add_argument(
        "--db",
        type=Path,
        default=None,
        help="SQLite DB 경로 (기본: secrets.yaml mode에 따른 경로)",
    )


def resolve_db_path(db: Path | None) -> Path:
    """DB 경로 결정"""
    if db is not None:
        return db
    return get_settings().db_path
