"""
Integration tests for the transaction endpoints.

These tests verify:
1. POST /transactions/parse - round-up of raw expenses
2. POST /transactions/validator - validation of enriched transactions
3. POST /transactions/filter - validation plus K-period tagging
4. Malformed bodies are rejected with the standard error format
"""

import pytest
from httpx import AsyncClient


# =============================================================================
# POST /transactions/parse Tests
# =============================================================================

class TestParseTransactions:
    """Tests for POST /transactions/parse endpoint."""

    @pytest.mark.asyncio
    async def test_parse_reference_batch(
        self,
        client: AsyncClient,
        api_prefix: str,
        raw_transactions: list[dict],
    ):
        response = await client.post(
            f"{api_prefix}/transactions/parse",
            json=raw_transactions[:4],
        )

        assert response.status_code == 200
        data = response.json()
        assert [t["ceiling"] for t in data] == [400, 700, 300, 500]
        assert [t["remnant"] for t in data] == [25, 80, 50, 20]
        assert data[0]["date"] == "2023-02-28 15:49:20"
        assert data[0]["amount"] == 375

    @pytest.mark.asyncio
    async def test_parse_keeps_negative_amounts(
        self,
        client: AsyncClient,
        api_prefix: str,
    ):
        response = await client.post(
            f"{api_prefix}/transactions/parse",
            json=[{"date": "2023-12-18 08:09:45", "amount": -10}],
        )

        assert response.status_code == 200
        data = response.json()
        assert data[0]["ceiling"] == 0
        assert data[0]["remnant"] == 10

    @pytest.mark.asyncio
    async def test_parse_missing_amount(
        self,
        client: AsyncClient,
        api_prefix: str,
    ):
        response = await client.post(
            f"{api_prefix}/transactions/parse",
            json=[{"date": "2023-12-18 08:09:45"}],
        )

        assert response.status_code == 200
        data = response.json()
        assert data[0]["ceiling"] is None
        assert data[0]["remnant"] is None

    @pytest.mark.asyncio
    async def test_parse_empty_list(
        self,
        client: AsyncClient,
        api_prefix: str,
    ):
        response = await client.post(f"{api_prefix}/transactions/parse", json=[])

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_parse_rejects_bad_timestamp(
        self,
        client: AsyncClient,
        api_prefix: str,
    ):
        response = await client.post(
            f"{api_prefix}/transactions/parse",
            json=[{"date": "28/02/2023", "amount": 375}],
        )

        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "INVALID_REQUEST"
        assert "request_id" in data


# =============================================================================
# POST /transactions/validator Tests
# =============================================================================

class TestValidateTransactions:
    """Tests for POST /transactions/validator endpoint."""

    @pytest.mark.asyncio
    async def test_validator_splits_batch(
        self,
        client: AsyncClient,
        api_prefix: str,
    ):
        response = await client.post(
            f"{api_prefix}/transactions/validator",
            json={
                "wage": 50000,
                "transactions": [
                    {"date": "2023-02-28 15:49:20", "amount": 375, "ceiling": 400, "remnant": 25},
                    {"date": "2023-02-28 15:49:20", "amount": 375, "ceiling": 400, "remnant": 25},
                    {"date": "2023-07-01 21:59:00", "amount": 620, "ceiling": 800, "remnant": 180},
                    {"date": "2023-12-18 08:09:45", "amount": -10, "ceiling": 0, "remnant": 10},
                ],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert len(data["validTransactions"]) == 1
        assert data["validTransactions"][0]["inKPeriod"] is False
        assert [t["message"] for t in data["invalidTransactions"]] == [
            "Duplicate transaction",
            "Ceiling mismatch",
            "Amount must be >= 0",
        ]

    @pytest.mark.asyncio
    async def test_validator_amount_above_wage(
        self,
        client: AsyncClient,
        api_prefix: str,
    ):
        response = await client.post(
            f"{api_prefix}/transactions/validator",
            json={
                "wage": 100,
                "transactions": [
                    {"date": "2023-02-28 15:49:20", "amount": 200, "ceiling": 200, "remnant": 0},
                ],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["validTransactions"] == []
        assert data["invalidTransactions"][0]["message"] == "Amount exceeds wage"

    @pytest.mark.asyncio
    async def test_validator_negative_wage(
        self,
        client: AsyncClient,
        api_prefix: str,
    ):
        response = await client.post(
            f"{api_prefix}/transactions/validator",
            json={
                "wage": -5,
                "transactions": [
                    {"date": "2023-02-28 15:49:20", "amount": 375, "ceiling": 400, "remnant": 25},
                ],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["validTransactions"] == []
        assert data["invalidTransactions"] == [
            {"date": None, "amount": -5.0, "message": "Wage must be >= 0"},
        ]

    @pytest.mark.asyncio
    async def test_validator_missing_wage_counts_as_zero(
        self,
        client: AsyncClient,
        api_prefix: str,
    ):
        response = await client.post(
            f"{api_prefix}/transactions/validator",
            json={
                "transactions": [
                    {"date": "2023-02-28 15:49:20", "amount": 375, "ceiling": 400, "remnant": 25},
                ],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["invalidTransactions"][0]["message"] == "Amount exceeds wage"

    @pytest.mark.asyncio
    async def test_validator_empty_body(
        self,
        client: AsyncClient,
        api_prefix: str,
    ):
        response = await client.post(f"{api_prefix}/transactions/validator", json={})

        assert response.status_code == 200
        assert response.json() == {"validTransactions": [], "invalidTransactions": []}


# =============================================================================
# POST /transactions/filter Tests
# =============================================================================

class TestFilterTransactions:
    """Tests for POST /transactions/filter endpoint."""

    @pytest.mark.asyncio
    async def test_filter_tags_k_periods(
        self,
        client: AsyncClient,
        api_prefix: str,
        raw_transactions: list[dict],
        reference_periods: dict,
    ):
        response = await client.post(
            f"{api_prefix}/transactions/filter",
            json={
                "wage": 50000,
                **reference_periods,
                "k": [{"start": "2023-03-01 00:00:00", "end": "2023-11-30 23:59:59"}],
                "transactions": raw_transactions,
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert [t["inKPeriod"] for t in data["validTransactions"]] == [
            False, True, True, False,
        ]
        assert [t["remnant"] for t in data["validTransactions"]] == [25, 80, 50, 20]
        assert len(data["invalidTransactions"]) == 1
        assert data["invalidTransactions"][0]["message"] == "Amount must be >= 0"

    @pytest.mark.asyncio
    async def test_filter_enforces_running_wage_cap(
        self,
        client: AsyncClient,
        api_prefix: str,
    ):
        response = await client.post(
            f"{api_prefix}/transactions/filter",
            json={
                "wage": 1000,
                "transactions": [
                    {"date": "2023-01-01 10:00:00", "amount": 600},
                    {"date": "2023-01-02 10:00:00", "amount": 500},
                    {"date": "2023-01-03 10:00:00", "amount": 400},
                ],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert [t["amount"] for t in data["validTransactions"]] == [600, 400]
        assert data["invalidTransactions"][0]["message"] == "Total exceeds wage"

    @pytest.mark.asyncio
    async def test_filter_reports_missing_fields(
        self,
        client: AsyncClient,
        api_prefix: str,
    ):
        response = await client.post(
            f"{api_prefix}/transactions/filter",
            json={
                "wage": 1000,
                "transactions": [
                    {"amount": 100},
                    {"date": "2023-01-02 10:00:00"},
                ],
            },
        )

        assert response.status_code == 200
        messages = [t["message"] for t in response.json()["invalidTransactions"]]
        assert messages == ["Date must not be null", "Amount must not be null"]

    @pytest.mark.asyncio
    async def test_filter_rejects_period_without_payload(
        self,
        client: AsyncClient,
        api_prefix: str,
    ):
        response = await client.post(
            f"{api_prefix}/transactions/filter",
            json={
                "wage": 1000,
                "q": [{"start": "2023-07-01 00:00:00", "end": "2023-07-31 23:59:59"}],
                "transactions": [],
            },
        )

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_REQUEST"


# =============================================================================
# Precision and Timestamp Tests
# =============================================================================

class TestTransactionPrecision:
    """Tests for exact decimal handling and local timestamps on the wire."""

    @pytest.mark.asyncio
    async def test_validator_keeps_amounts_beyond_float_precision(
        self,
        client: AsyncClient,
        api_prefix: str,
    ):
        """A consistent 20-digit transaction must not be rejected by float rounding."""
        response = await client.post(
            f"{api_prefix}/transactions/validator",
            json={
                "wage": 12345678901234567801,
                "transactions": [
                    {
                        "date": "2023-02-28 15:49:20",
                        "amount": 12345678901234567801,
                        "ceiling": 12345678901234567900,
                        "remnant": 99,
                    },
                ],
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["invalidTransactions"] == []
        assert len(data["validTransactions"]) == 1
        assert data["validTransactions"][0]["remnant"] == 99

    @pytest.mark.asyncio
    async def test_filter_rejects_offset_timestamp(
        self,
        client: AsyncClient,
        api_prefix: str,
    ):
        response = await client.post(
            f"{api_prefix}/transactions/filter",
            json={
                "wage": 1000,
                "k": [{"start": "2023-01-01 00:00:00", "end": "2023-12-31 23:59:59"}],
                "transactions": [{"date": "2023-02-28T15:49:20+05:30", "amount": 375}],
            },
        )

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_REQUEST"
