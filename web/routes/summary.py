"""
기간 집계 라우트

GET /api/summary?from=YYYY-MM-DD&to=YYYY-MM-DD&granularity=auto|day|week|month
"""

from fastapi import APIRouter, Depends, Query

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.errors import LedgerError
from core.types import GRANULARITY_AUTO
from web.dependencies import get_current_owner, get_db
from web.errors import to_http_exception
from web.models.responses import SummaryResponse
from web.services.ledger_service import LedgerService

router = APIRouter(prefix="/api", tags=["Summary"])


@router.get("/summary", response_model=SummaryResponse)
async def get_summary(
    from_: str = Query(..., alias="from", description="YYYY-MM-DD"),
    to: str = Query(..., description="YYYY-MM-DD"),
    granularity: str = Query(default=GRANULARITY_AUTO, description="auto|day|week|month"),
    owner: int = Depends(get_current_owner),
    db: SQLiteAdapter = Depends(get_db),
):
    """기간 집계 (누적 잔액 시계열)

    granularity=auto면 기간 길이로 결정 (60일 이하 day, 180일 이하 week, 그 이상 month).
    """
    service = LedgerService(db)
    try:
        return await service.get_summary(owner, from_, to, granularity)
    except LedgerError as e:
        raise to_http_exception(e) from e
