"""
pytest 공통 fixture 정의

임시 디렉토리 / secrets.yaml / 스키마가 준비된 원장 DB
"""

import tempfile
from pathlib import Path

import pytest
import pytest_asyncio

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.schema import init_ledger_schema
from core.ledger.store import LedgerStore
from tests.helpers import FixedClock, kst


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_secrets_file(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성 (local 모드)"""
    secrets_content = """# 테스트용 secrets.yaml
mode: local

web:
  secret_key: "test_jwt_secret_key_xyz"
  token_expire_minutes: 30
"""
    secrets_path = temp_dir / "secrets.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_production(temp_dir: Path) -> Path:
    """테스트용 secrets.yaml 파일 생성 (production 모드)"""
    secrets_content = """mode: production

web:
  secret_key: "prod_jwt_secret_key_xyz"
"""
    secrets_path = temp_dir / "secrets_prod.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


@pytest.fixture
def temp_secrets_file_invalid_mode(temp_dir: Path) -> Path:
    """잘못된 모드의 secrets.yaml 파일 생성"""
    secrets_content = """mode: testnet

web:
  secret_key: "jwt_secret"
"""
    secrets_path = temp_dir / "secrets_invalid.yaml"
    secrets_path.write_text(secrets_content, encoding="utf-8")
    return secrets_path


# =========================================================================
# 원장 DB
# =========================================================================


@pytest.fixture
def clock() -> FixedClock:
    """2026-02-07 10:00 KST 고정 시계"""
    return FixedClock(kst(2026, 2, 7, 10))


@pytest_asyncio.fixture
async def db(tmp_path: Path) -> SQLiteAdapter:
    """스키마가 준비된 임시 원장 DB"""
    adapter = SQLiteAdapter(tmp_path / "ledger.db")
    await adapter.connect()
    await init_ledger_schema(adapter)
    yield adapter
    await adapter.close()


@pytest_asyncio.fixture
async def store(db: SQLiteAdapter, clock: FixedClock) -> LedgerStore:
    """고정 시계를 쓰는 LedgerStore"""
    return LedgerStore(db, clock=clock)


@pytest_asyncio.fixture
async def owner(store: LedgerStore) -> int:
    """테스트 계정 ID"""
    account = await store.create_account("owner@example.com", "hash")
    return account.id


@pytest_asyncio.fixture
async def other_owner(store: LedgerStore) -> int:
    """두 번째 테스트 계정 ID (소유자 격리 확인용)"""
    account = await store.create_account("other@example.com", "hash")
    return account.id
