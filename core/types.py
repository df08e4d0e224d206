"""
타입 정의 모듈

Enum 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class RunMode(str, Enum):
    """실행 모드 (운영 / 로컬 개발)"""

    PRODUCTION = "production"
    LOCAL = "local"


class TransactionKind(str, Enum):
    """거래 종류"""

    NORMAL = "normal"  # 500 / -500 / 1 / -1
    INIT = "init"  # 초기 잔액


class Granularity(str, Enum):
    """집계 단위 (버킷 폭)"""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


# 집계 단위 자동 선택을 뜻하는 요청 값
GRANULARITY_AUTO = "auto"
