"""
메타 정보 라우트

GET /api/meta - 가장 오래된 거래 날짜 (거래가 없으면 null)
"""

from fastapi import APIRouter, Depends

from adapters.db.sqlite_adapter import SQLiteAdapter
from web.dependencies import get_current_owner, get_db
from web.models.responses import MetaResponse
from web.services.ledger_service import LedgerService

router = APIRouter(prefix="/api", tags=["Meta"])


@router.get("/meta", response_model=MetaResponse)
async def get_meta(
    owner: int = Depends(get_current_owner),
    db: SQLiteAdapter = Depends(get_db),
):
    """가장 오래된 거래 날짜"""
    service = LedgerService(db)
    return await service.get_meta(owner)
