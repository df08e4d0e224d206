"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
DB 연결은 요청마다 열고 응답 후 닫는다 (전역 연결 없음).
"""

import logging
from typing import AsyncGenerator

import jwt
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import Settings, get_settings
from web.security import decode_access_token

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


def get_app_settings() -> Settings:
    """애플리케이션 설정 반환"""
    return get_settings()


async def get_db(
    settings: Settings = Depends(get_app_settings),
) -> AsyncGenerator[SQLiteAdapter, None]:
    """DB 세션 반환 (읽기 전용)

    집계, 목록, meta 조회용.
    """
    async with SQLiteAdapter(settings.db_path, readonly=True) as db:
        yield db


async def get_db_write(
    settings: Settings = Depends(get_app_settings),
) -> AsyncGenerator[SQLiteAdapter, None]:
    """DB 세션 반환 (쓰기 가능)

    거래 추가 시 사용.
    """
    async with SQLiteAdapter(settings.db_path, readonly=False) as db:
        yield db


def get_current_owner(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(get_app_settings),
) -> int:
    """Bearer 토큰에서 요청 계정 ID 추출

    Raises:
        HTTPException: 토큰 없음 / 검증 실패 시 401
    """
    if credentials is None:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return decode_access_token(credentials.credentials, settings.web_secret_key)
    except jwt.InvalidTokenError as e:
        logger.info(f"토큰 검증 실패: {e}")
        raise HTTPException(
            status_code=401,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
