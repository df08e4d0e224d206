"""
유틸리티 패키지

타임존 처리 등 공통 유틸리티
"""

from core.utils.timezone import (
    KST,
    to_kst,
    now_kst,
    format_kst_iso,
    parse_ymd,
)

__all__ = [
    "KST",
    "to_kst",
    "now_kst",
    "format_kst_iso",
    "parse_ymd",
]
