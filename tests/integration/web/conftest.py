"""
Web API 테스트 fixture

ASGITransport로 앱을 직접 호출 (lifespan 미실행).
스키마와 계정은 공통 db/store/owner fixture가 같은 DB 파일에 준비한다.
"""

from pathlib import Path

import httpx
import pytest
import pytest_asyncio

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import Settings
from web.app import app
from web.dependencies import get_app_settings
from web.security import create_access_token


@pytest.fixture
def settings(temp_dir: Path, db: SQLiteAdapter) -> Settings:
    """테스트 DB를 가리키는 Settings"""
    secrets_path = temp_dir / "secrets.yaml"
    secrets_path.write_text(
        "mode: local\n"
        "web:\n"
        '  secret_key: "web_test_secret"\n'
        "  token_expire_minutes: 5\n"
        "database:\n"
        f"  path: '{db.db_path}'\n",
        encoding="utf-8",
    )
    Settings.reset()
    settings = Settings(secrets_path)
    yield settings
    Settings.reset()


@pytest.fixture
def auth_headers(settings: Settings, owner: int) -> dict[str, str]:
    """owner 계정의 Bearer 헤더"""
    token = create_access_token(owner, settings.web_secret_key, settings.token_expire_minutes)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def client(settings: Settings) -> httpx.AsyncClient:
    """테스트 HTTP 클라이언트"""
    app.dependency_overrides[get_app_settings] = lambda: settings
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()
