"""
Fixtures for integration tests.

Provides:
- Test client for FastAPI app
- Fixed performance probe so /performance is deterministic
- Request bodies shared across API tests
"""

from datetime import datetime
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from src.main import app
from src.core.dependencies import get_performance_probe
from src.domain.entities import PerformanceSnapshot
from src.domain.interfaces import PerformanceProbe


# =============================================================================
# Mock Probe
# =============================================================================

class FixedPerformanceProbe(PerformanceProbe):
    """Probe that always reports the same snapshot and counts calls."""

    def __init__(self, snapshot: PerformanceSnapshot):
        self._snapshot = snapshot
        self.call_count = 0

    def snapshot(self) -> PerformanceSnapshot:
        self.call_count += 1
        return self._snapshot


@pytest.fixture
def performance_probe() -> FixedPerformanceProbe:
    """A probe reporting 11m54.135s uptime, 25.11% memory and 16 threads."""
    return FixedPerformanceProbe(
        PerformanceSnapshot(
            uptime=datetime(1970, 1, 1, 0, 11, 54, 135000),
            memory_percent=25.114,
            threads=16,
        )
    )


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(
    performance_probe: FixedPerformanceProbe,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with the performance probe mocked.

    The savings engine itself is stateless and runs unmocked.
    """
    app.dependency_overrides[get_performance_probe] = lambda: performance_probe

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def api_prefix() -> str:
    return "/blackrock/challenge/v1"


# =============================================================================
# Request Fixtures
# =============================================================================

@pytest.fixture
def raw_transactions() -> list[dict]:
    """Reference expenses, including a negative one."""
    return [
        {"date": "2023-02-28 15:49:20", "amount": 375},
        {"date": "2023-07-01 21:59:00", "amount": 620},
        {"date": "2023-10-12 20:15:30", "amount": 250},
        {"date": "2023-12-17 08:09:45", "amount": 480},
        {"date": "2023-12-18 08:09:45", "amount": -10},
    ]


@pytest.fixture
def reference_periods() -> dict:
    """One Q, one P and two K periods."""
    return {
        "q": [
            {"fixed": 0, "start": "2023-07-01 00:00:00", "end": "2023-07-31 23:59:59"},
        ],
        "p": [
            {"extra": 25, "start": "2023-10-01 08:00:00", "end": "2023-12-31 19:59:59"},
        ],
        "k": [
            {"start": "2023-01-01 00:00:00", "end": "2023-12-31 23:59:59"},
            {"start": "2023-03-01 00:00:00", "end": "2023-11-30 23:59:59"},
        ],
    }


@pytest.fixture
def returns_request(raw_transactions: list[dict], reference_periods: dict) -> dict:
    """Request body for the reference investor (age 29, wage 50,000, inflation 5.5%)."""
    return {
        "age": 29,
        "wage": 50000,
        "inflation": 5.5,
        **reference_periods,
        "transactions": raw_transactions,
    }
