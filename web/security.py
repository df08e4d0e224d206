"""
Bearer 토큰 (JWT, HS256)

토큰의 sub 클레임이 계정 ID. 발급은 로컬 개발용 issue_token 스크립트,
검증은 Web 의존성(get_current_owner)에서 사용.
"""

from datetime import datetime, timedelta, timezone

import jwt

ALGORITHM = "HS256"


def create_access_token(
    account_id: int,
    secret_key: str,
    expires_minutes: int,
    now: datetime | None = None,
) -> str:
    """계정 ID로 액세스 토큰 발급

    Args:
        account_id: 계정 ID (sub 클레임)
        secret_key: 서명 키 (secrets.yaml web.secret_key)
        expires_minutes: 유효 시간 (분)
        now: 발급 시각 (테스트용)

    Returns:
        인코딩된 JWT 문자열
    """
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "sub": str(account_id),
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=expires_minutes),
    }
    return jwt.encode(payload, secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str, secret_key: str) -> int:
    """액세스 토큰 검증 후 계정 ID 반환

    Raises:
        jwt.InvalidTokenError: 서명 불일치, 만료, sub 누락/형식 오류
    """
    payload = jwt.decode(
        token,
        secret_key,
        algorithms=[ALGORITHM],
        options={"require": ["sub", "exp"]},
    )
    try:
        account_id = int(payload["sub"])
    except (TypeError, ValueError) as e:
        raise jwt.InvalidTokenError("sub must be an account id") from e
    if account_id <= 0:
        raise jwt.InvalidTokenError("sub must be an account id")
    return account_id
