"""
요청 스키마 (Pydantic)

Web API 요청 데이터 검증.
금액 규칙은 원장 저장소(및 DB 제약)에서 판단하고, 여기서는 형태만 본다.
"""

from typing import Any

from pydantic import BaseModel, Field, StrictInt, StrictStr, model_validator

# 서버에서 부여하는 필드 (클라이언트가 보내면 거부)
SERVER_ASSIGNED_FIELDS = ("ts", "occurred_at", "recorded_at")


class _EntryRequest(BaseModel):
    """거래 추가 요청 공통"""

    amount: StrictInt = Field(..., description="금액")
    memo: StrictStr | None = Field(default=None, description="메모 (선택)")

    @model_validator(mode="before")
    @classmethod
    def reject_server_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            for name in SERVER_ASSIGNED_FIELDS:
                if data.get(name) is not None:
                    raise ValueError(f"{name} is server-generated; do not send {name}")
        return data


class TransactionCreateRequest(_EntryRequest):
    """일반 거래 추가 요청 (500 / -500 / 1 / -1)"""

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"amount": 500, "memo": "저금"},
                {"amount": -1},
            ]
        }
    }


class InitialBalanceRequest(_EntryRequest):
    """초기 잔액 등록 요청 (0 이상 1천만 이하)

    memo가 없으면 "initial balance"로 저장.
    """

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"amount": 12000},
            ]
        }
    }
