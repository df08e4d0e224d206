"""GET /api/summary, GET /api/meta, GET /health 테스트"""

from datetime import date

import httpx
import pytest
import pytest_asyncio

from core.ledger.store import LedgerStore
from tests.helpers import init_entry, normal_entry


@pytest_asyncio.fixture
async def seeded(store: LedgerStore, owner: int) -> int:
    await store.import_entries(
        owner,
        [
            init_entry(date(2023, 12, 31), 1000),
            normal_entry(date(2024, 1, 1), 500),
            normal_entry(date(2024, 1, 3), -1),
            normal_entry(date(2024, 2, 10), 500),
        ],
    )
    return owner


class TestSummary:
    """GET /api/summary"""

    @pytest.mark.asyncio
    async def test_daily(self, client: httpx.AsyncClient, auth_headers: dict, seeded: int) -> None:
        response = await client.get(
            "/api/summary",
            params={"from": "2024-01-01", "to": "2024-01-31"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json() == {
            "grand_total": 1999,
            "from": "2024-01-01",
            "to": "2024-01-31",
            "granularity": "day",
            "buckets": [
                {"date": "2024-01-01", "delta": 500, "running_total": 1500},
                {"date": "2024-01-03", "delta": -1, "running_total": 1499},
            ],
        }

    @pytest.mark.asyncio
    async def test_explicit_week(
        self, client: httpx.AsyncClient, auth_headers: dict, seeded: int
    ) -> None:
        response = await client.get(
            "/api/summary",
            params={"from": "2024-01-01", "to": "2024-01-10", "granularity": "week"},
            headers=auth_headers,
        )

        body = response.json()
        assert body["granularity"] == "week"
        assert body["buckets"] == [{"date": "2024-01-01", "delta": 499, "running_total": 1499}]

    @pytest.mark.asyncio
    async def test_empty_period(
        self, client: httpx.AsyncClient, auth_headers: dict, seeded: int
    ) -> None:
        response = await client.get(
            "/api/summary",
            params={"from": "2025-01-01", "to": "2025-01-31"},
            headers=auth_headers,
        )

        assert response.json()["buckets"] == []
        assert response.json()["grand_total"] == 1999

    @pytest.mark.asyncio
    async def test_last_calendar_date_as_to(
        self, client: httpx.AsyncClient, auth_headers: dict, seeded: int
    ) -> None:
        response = await client.get(
            "/api/summary",
            params={"from": "2024-01-01", "to": "9999-12-31"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json()["granularity"] == "month"
        assert response.json()["buckets"][-1]["running_total"] == 1999

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "params",
        [
            {"to": "2024-01-31"},
            {"from": "2024-01-01"},
            {"from": "2024-02-01", "to": "2024-01-01"},
            {"from": "2024-01-01", "to": "2024-01-31", "granularity": "year"},
            {"from": "20240101", "to": "2024-01-31"},
        ],
    )
    async def test_bad_params(
        self, client: httpx.AsyncClient, auth_headers: dict, params: dict
    ) -> None:
        response = await client.get("/api/summary", params=params, headers=auth_headers)

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_unauthenticated(self, client: httpx.AsyncClient) -> None:
        response = await client.get(
            "/api/summary", params={"from": "2024-01-01", "to": "2024-01-31"}
        )

        assert response.status_code == 401


class TestMeta:
    """GET /api/meta"""

    @pytest.mark.asyncio
    async def test_no_transactions(self, client: httpx.AsyncClient, auth_headers: dict) -> None:
        response = await client.get("/api/meta", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"min_date": None}

    @pytest.mark.asyncio
    async def test_min_date(self, client: httpx.AsyncClient, auth_headers: dict, seeded: int) -> None:
        response = await client.get("/api/meta", headers=auth_headers)

        assert response.json() == {"min_date": "2023-12-31"}


class TestHealth:
    """GET /health"""

    @pytest.mark.asyncio
    async def test_health(self, client: httpx.AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
        assert response.json()["mode"] == "local"
