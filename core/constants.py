"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → piggybank/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class Defaults:
    """기본값 상수"""

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 3000

    LOG_LEVEL: str = "INFO"
    TOKEN_EXPIRE_MINUTES: int = 60


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"
    CLI_LOGS_DIR: Path = LOGS_DIR / "cli"

    # 설정 파일
    SECRETS_FILE: Path = CONFIG_DIR / "secrets.yaml"

    # DB 파일
    PROD_DB: Path = DATA_DIR / "piggybank_prod.db"
    LOCAL_DB: Path = DATA_DIR / "piggybank_local.db"


class LedgerLimits:
    """원장 금액/메모 제약 (DB CHECK 제약과 동일한 값)"""

    # normal 거래에 허용되는 4가지 금액
    NORMAL_AMOUNTS: tuple[int, ...] = (500, -500, 1, -1)

    INIT_AMOUNT_MIN: int = 0
    INIT_AMOUNT_MAX: int = 10_000_000

    MEMO_MAX_LENGTH: int = 100

    # init 거래에서 memo가 없을 때 저장되는 값
    INIT_MEMO_DEFAULT: str = "initial balance"


class PageLimits:
    """거래 목록 페이지 크기"""

    DEFAULT: int = 50
    MAX: int = 200


class GranularityThresholds:
    """자동 집계 단위 선택 임계값 (양 끝 포함 일수)"""

    DAY_MAX_DAYS: int = 60
    WEEK_MAX_DAYS: int = 180
