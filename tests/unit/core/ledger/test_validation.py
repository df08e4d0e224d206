"""
core/ledger/validation.py 테스트

금액/메모 규칙은 DB CHECK 제약과 같은 판단을 해야 한다.
"""

from datetime import date

import pytest

from core.ledger.errors import ConstraintViolation, ValidationError
from core.ledger.validation import (
    is_valid_init_amount,
    is_valid_normal_amount,
    date_upper_bound,
    parse_date_param,
    validate_entry,
)
from core.types import TransactionKind


class TestNormalAmount:
    """is_valid_normal_amount 테스트"""

    @pytest.mark.parametrize("amount", [500, -500, 1, -1])
    def test_allowed(self, amount: int) -> None:
        assert is_valid_normal_amount(amount) is True

    @pytest.mark.parametrize("amount", [0, 2, 499, 1000, -2, 500.0, "500", None, True])
    def test_rejected(self, amount: object) -> None:
        """4가지 정수 외에는 모두 거부 (bool, float, 문자열 포함)"""
        assert is_valid_normal_amount(amount) is False


class TestInitAmount:
    """is_valid_init_amount 테스트"""

    @pytest.mark.parametrize("amount", [0, 1, 12000, 10_000_000])
    def test_allowed(self, amount: int) -> None:
        assert is_valid_init_amount(amount) is True

    @pytest.mark.parametrize("amount", [-1, 10_000_001, 1.5, "100", None, False])
    def test_rejected(self, amount: object) -> None:
        assert is_valid_init_amount(amount) is False


class TestValidateEntry:
    """validate_entry 테스트"""

    def test_returns_kind(self) -> None:
        """문자열 kind를 TransactionKind로 정규화"""
        assert validate_entry("normal", 500, None) == TransactionKind.NORMAL
        assert validate_entry(TransactionKind.INIT, 0, "start") == TransactionKind.INIT

    def test_normal_amount_message(self) -> None:
        with pytest.raises(ConstraintViolation, match="amount must be one of 500, -500, 1, -1"):
            validate_entry(TransactionKind.NORMAL, 100, None)

    def test_init_out_of_range(self) -> None:
        with pytest.raises(ConstraintViolation, match="between 0 and 10000000"):
            validate_entry(TransactionKind.INIT, 10_000_001, None)

    def test_init_amount_rule_differs_from_normal(self) -> None:
        """init에서는 500이 아닌 금액도 허용, normal 금액 규칙은 적용하지 않음"""
        assert validate_entry(TransactionKind.INIT, 12345, None) == TransactionKind.INIT

    def test_memo_at_limit(self) -> None:
        """100자까지 허용"""
        assert validate_entry(TransactionKind.NORMAL, 1, "a" * 100) == TransactionKind.NORMAL

    def test_memo_too_long(self) -> None:
        with pytest.raises(ConstraintViolation, match="at most 100 characters"):
            validate_entry(TransactionKind.NORMAL, 1, "a" * 101)

    def test_memo_not_string(self) -> None:
        with pytest.raises(ConstraintViolation, match="memo must be string"):
            validate_entry(TransactionKind.NORMAL, 1, 123)

    def test_unknown_kind(self) -> None:
        with pytest.raises(ConstraintViolation, match="unknown transaction kind"):
            validate_entry("bonus", 500, None)


class TestParseDateParam:
    """parse_date_param 테스트"""

    def test_none_passthrough(self) -> None:
        assert parse_date_param(None, "from") is None

    def test_date_passthrough(self) -> None:
        assert parse_date_param(date(2024, 1, 1), "from") == date(2024, 1, 1)

    def test_string(self) -> None:
        assert parse_date_param("2024-01-31", "to") == date(2024, 1, 31)

    def test_invalid_names_parameter(self) -> None:
        """오류 메시지에 파라미터 이름 포함"""
        with pytest.raises(ValidationError, match="to must be YYYY-MM-DD"):
            parse_date_param("2024-1-31", "to")


class TestDateUpperBound:
    """date_upper_bound 테스트"""

    def test_includes_whole_end_day(self) -> None:
        bound = date_upper_bound(date(2024, 1, 31))

        assert "2024-01-31T00:00:00.000+09:00" < bound
        assert "2024-01-31T23:59:59.999+09:00" < bound
        assert "2024-02-01T00:00:00.000+09:00" > bound

    def test_last_calendar_date(self) -> None:
        """date 최댓값에서도 오류 없음"""
        assert date_upper_bound(date(9999, 12, 31)) == "9999-12-31U"
