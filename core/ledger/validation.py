"""
원장 입력 검증

DB CHECK 제약과 같은 규칙을 쓰기 전에 먼저 확인한다.
최종 판단은 DB 제약 (store에서 IntegrityError를 변환).
"""

from datetime import date

from core.constants import LedgerLimits
from core.ledger.errors import ConstraintViolation, ValidationError
from core.types import TransactionKind
from core.utils.timezone import parse_ymd


def _is_int(value: object) -> bool:
    # bool은 int의 하위 클래스이므로 제외
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_normal_amount(amount: object) -> bool:
    """normal 거래 금액 (500, -500, 1, -1)"""
    return _is_int(amount) and amount in LedgerLimits.NORMAL_AMOUNTS


def is_valid_init_amount(amount: object) -> bool:
    """init 거래 금액 (0 이상 1천만 이하 정수)"""
    return (
        _is_int(amount)
        and LedgerLimits.INIT_AMOUNT_MIN <= amount <= LedgerLimits.INIT_AMOUNT_MAX
    )


def validate_entry(
    kind: TransactionKind | str,
    amount: object,
    memo: object,
) -> TransactionKind:
    """거래 종류별 금액 규칙과 메모 길이 검증

    Args:
        kind: normal 또는 init
        amount: 금액
        memo: 메모 (None 허용)

    Returns:
        정규화된 TransactionKind

    Raises:
        ConstraintViolation: 규칙 위반
    """
    try:
        kind = TransactionKind(kind)
    except ValueError as e:
        raise ConstraintViolation(f"unknown transaction kind: {kind!r}") from e

    if kind == TransactionKind.NORMAL and not is_valid_normal_amount(amount):
        allowed = ", ".join(str(a) for a in LedgerLimits.NORMAL_AMOUNTS)
        raise ConstraintViolation(f"amount must be one of {allowed}")

    if kind == TransactionKind.INIT and not is_valid_init_amount(amount):
        raise ConstraintViolation(
            f"amount must be an integer between {LedgerLimits.INIT_AMOUNT_MIN} "
            f"and {LedgerLimits.INIT_AMOUNT_MAX}"
        )

    if memo is not None:
        if not isinstance(memo, str):
            raise ConstraintViolation("memo must be string")
        if len(memo) > LedgerLimits.MEMO_MAX_LENGTH:
            raise ConstraintViolation(
                f"memo must be at most {LedgerLimits.MEMO_MAX_LENGTH} characters"
            )

    return kind


def parse_date_param(value: str | date | None, name: str) -> date | None:
    """YYYY-MM-DD 조회 파라미터 변환

    Raises:
        ValidationError: 형식이 다르거나 존재하지 않는 날짜
    """
    if value is None or isinstance(value, date):
        return value
    try:
        return parse_ymd(value)
    except ValueError as e:
        raise ValidationError(f"{name} must be YYYY-MM-DD") from e


def date_upper_bound(end: date) -> str:
    """end 날짜를 포함하는 occurred_at 상한 (exclusive)

    저장 형식이 'YYYY-MM-DDT...'이므로 'T' 다음 문자인 'U'를 붙이면
    end 당일의 모든 시각보다 크고 다음 날보다 작다.

    Example:
        >>> date_upper_bound(date(2024, 1, 31))
        '2024-01-31U'
    """
    return f"{end.isoformat()}U"
