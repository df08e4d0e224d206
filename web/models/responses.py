"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화
"""

from pydantic import BaseModel, Field


class TransactionResponse(BaseModel):
    """추가된 거래"""

    id: int = Field(..., description="거래 ID")
    kind: str = Field(..., description="거래 종류 (normal/init)")
    occurred_at: str = Field(..., description="거래 시각 (+09:00)")
    amount: int = Field(..., description="금액")
    memo: str | None = Field(default=None, description="메모")
    recorded_at: str = Field(..., description="기록 시각 (+09:00)")


class TransactionCreateResponse(BaseModel):
    """거래 추가 응답 (추가 직후 총액 포함)"""

    transaction: TransactionResponse
    total: int = Field(..., description="추가 직후 계정 총액")


class BucketResponse(BaseModel):
    """집계 버킷"""

    date: str = Field(..., description="버킷 키 (YYYY-MM-DD)")
    delta: int = Field(..., description="버킷 내 증감")
    running_total: int = Field(..., description="버킷 끝 시점 누적 잔액")


class SummaryResponse(BaseModel):
    """기간 집계 응답

    거래가 없는 버킷은 포함하지 않는다.
    """

    grand_total: int = Field(..., description="전체 기간 총액")
    from_date: str = Field(..., serialization_alias="from", description="조회 시작 날짜")
    to_date: str = Field(..., serialization_alias="to", description="조회 종료 날짜")
    granularity: str = Field(..., description="적용된 집계 단위 (day/week/month)")
    buckets: list[BucketResponse] = Field(default_factory=list)


class TransactionItemResponse(BaseModel):
    """거래 목록 항목"""

    id: int
    occurred_at: str
    amount: int
    memo: str | None = None


class TransactionListResponse(BaseModel):
    """거래 목록 응답 (id 내림차순)"""

    items: list[TransactionItemResponse] = Field(default_factory=list)
    next_cursor: int | None = Field(
        default=None,
        description="다음 페이지 cursor (마지막 페이지면 null)",
    )


class MetaResponse(BaseModel):
    """계정 메타 정보"""

    min_date: str | None = Field(
        default=None,
        description="가장 오래된 거래 날짜 (거래가 없으면 null)",
    )
