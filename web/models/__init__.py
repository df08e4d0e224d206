"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import (
    InitialBalanceRequest,
    TransactionCreateRequest,
)
from web.models.responses import (
    BucketResponse,
    MetaResponse,
    SummaryResponse,
    TransactionCreateResponse,
    TransactionItemResponse,
    TransactionListResponse,
    TransactionResponse,
)

__all__ = [
    # Requests
    "InitialBalanceRequest",
    "TransactionCreateRequest",
    # Responses
    "BucketResponse",
    "MetaResponse",
    "SummaryResponse",
    "TransactionCreateResponse",
    "TransactionItemResponse",
    "TransactionListResponse",
    "TransactionResponse",
]
