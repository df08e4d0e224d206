"""
원장 예외 → HTTP 응답 변환
"""

from fastapi import HTTPException

from core.ledger.errors import (
    ConstraintViolation,
    ForeignKeyViolation,
    LedgerError,
    ValidationError,
)


def to_http_exception(error: LedgerError) -> HTTPException:
    """원장 예외를 HTTPException으로 변환

    - ValidationError / ConstraintViolation: 400
    - ForeignKeyViolation: 404 (토큰의 계정이 삭제된 경우)
    """
    if isinstance(error, ForeignKeyViolation):
        return HTTPException(status_code=404, detail="account not found")
    if isinstance(error, (ValidationError, ConstraintViolation)):
        return HTTPException(status_code=400, detail=str(error))
    return HTTPException(status_code=500, detail="Internal Server Error")
