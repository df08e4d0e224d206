"""
core/ledger/aggregation.py 단위 테스트

build_buckets 순수 함수 (DB 불필요)
"""

from datetime import date

from core.ledger.aggregation import build_buckets
from core.ledger.types import BucketRow
from core.types import Granularity


class TestBuildBuckets:
    """build_buckets 테스트"""

    def test_empty(self) -> None:
        """거래가 없으면 버킷도 없음"""
        assert build_buckets(1000, [], Granularity.DAY) == ()

    def test_daily_running_total(self) -> None:
        """running_total = opening + 누적 delta"""
        rows = build_buckets(
            1000,
            [(date(2024, 1, 1), 500), (date(2024, 1, 3), -1)],
            Granularity.DAY,
        )

        assert rows == (
            BucketRow(bucket=date(2024, 1, 1), delta=500, running_total=1500),
            BucketRow(bucket=date(2024, 1, 3), delta=-1, running_total=1499),
        )

    def test_no_zero_fill(self) -> None:
        """거래 없는 날짜(1/2)는 버킷을 만들지 않음"""
        rows = build_buckets(0, [(date(2024, 1, 1), 1), (date(2024, 1, 3), 1)], Granularity.DAY)

        assert [r.bucket for r in rows] == [date(2024, 1, 1), date(2024, 1, 3)]

    def test_weekly_groups_by_monday(self) -> None:
        """같은 주(월~일)는 하나의 버킷"""
        rows = build_buckets(
            0,
            [
                (date(2024, 1, 1), 500),  # 월
                (date(2024, 1, 3), -1),  # 수
                (date(2024, 1, 7), 1),  # 일
                (date(2024, 1, 8), 500),  # 다음 주 월
            ],
            Granularity.WEEK,
        )

        assert rows == (
            BucketRow(bucket=date(2024, 1, 1), delta=500, running_total=500),
            BucketRow(bucket=date(2024, 1, 8), delta=500, running_total=1000),
        )

    def test_monthly(self) -> None:
        rows = build_buckets(
            100,
            [(date(2024, 1, 31), 500), (date(2024, 2, 1), -500), (date(2024, 2, 29), 1)],
            Granularity.MONTH,
        )

        assert rows == (
            BucketRow(bucket=date(2024, 1, 1), delta=500, running_total=600),
            BucketRow(bucket=date(2024, 2, 1), delta=-499, running_total=101),
        )

    def test_input_order_irrelevant(self) -> None:
        """입력 순서와 무관하게 버킷 키 오름차순"""
        daily = [(date(2024, 3, 5), 1), (date(2024, 1, 5), 500), (date(2024, 2, 5), -1)]

        forward = build_buckets(0, daily, Granularity.MONTH)
        backward = build_buckets(0, list(reversed(daily)), Granularity.MONTH)

        assert forward == backward
        assert [r.bucket for r in forward] == sorted(r.bucket for r in forward)

    def test_last_running_total_is_opening_plus_sum(self) -> None:
        daily = [(date(2024, 1, d), amount) for d, amount in [(1, 500), (2, -500), (9, 1), (20, 500)]]

        rows = build_buckets(12000, daily, Granularity.WEEK)

        assert rows[-1].running_total == 12000 + sum(a for _, a in daily)
        assert sum(r.delta for r in rows) == sum(a for _, a in daily)
