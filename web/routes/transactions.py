"""
거래 라우트

거래 추가 / 초기 잔액 등록 / 거래 목록 API.
occurred_at은 서버에서 부여하며 클라이언트가 보낼 수 없다.
"""

from fastapi import APIRouter, Depends, Query

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.errors import LedgerError
from web.dependencies import get_current_owner, get_db, get_db_write
from web.errors import to_http_exception
from web.models.requests import InitialBalanceRequest, TransactionCreateRequest
from web.models.responses import TransactionCreateResponse, TransactionListResponse
from web.services.ledger_service import LedgerService

router = APIRouter(prefix="/api", tags=["Transactions"])


@router.post(
    "/transactions",
    response_model=TransactionCreateResponse,
    status_code=201,
)
async def create_transaction(
    request: TransactionCreateRequest,
    owner: int = Depends(get_current_owner),
    db: SQLiteAdapter = Depends(get_db_write),
):
    """거래 추가

    amount는 500 / -500 / 1 / -1 중 하나.
    응답에 추가 직후 계정 총액 포함.
    """
    service = LedgerService(db)
    try:
        return await service.record_transaction(owner, request.amount, request.memo)
    except LedgerError as e:
        raise to_http_exception(e) from e


@router.post(
    "/initial-balance",
    response_model=TransactionCreateResponse,
    status_code=201,
)
async def create_initial_balance(
    request: InitialBalanceRequest,
    owner: int = Depends(get_current_owner),
    db: SQLiteAdapter = Depends(get_db_write),
):
    """초기 잔액 등록

    amount는 0 이상 10,000,000 이하.
    memo가 없으면 "initial balance"로 저장.
    """
    service = LedgerService(db)
    try:
        return await service.record_initial_balance(owner, request.amount, request.memo)
    except LedgerError as e:
        raise to_http_exception(e) from e


@router.get("/transactions", response_model=TransactionListResponse)
async def list_transactions(
    from_: str | None = Query(default=None, alias="from", description="YYYY-MM-DD"),
    to: str | None = Query(default=None, description="YYYY-MM-DD"),
    limit: str | None = Query(default=None, description="기본 50, 최대 200"),
    cursor: str | None = Query(default=None, description="이전 응답의 next_cursor"),
    owner: int = Depends(get_current_owner),
    db: SQLiteAdapter = Depends(get_db),
):
    """거래 목록 (최신순, cursor 페이지네이션)"""
    service = LedgerService(db)
    try:
        return await service.list_transactions(owner, from_, to, limit, cursor)
    except LedgerError as e:
        raise to_http_exception(e) from e
