"""Pytest fixtures for payslip service tests."""

from __future__ import annotations

import copy
from dataclasses import replace
from typing import Any, AsyncGenerator, Callable

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from payslip_service.calculators.types import PayslipSubmission
from payslip_service.calculators.validation import validate_payslip
from payslip_service.models import Base

# Use in-memory SQLite for tests (with async support)
# For full Postgres features, use a test Postgres database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

SAMPLE_PAYLOAD: dict[str, Any] = {
    "employeeName": "Asha Rao",
    "employeeType": "Permanent",
    "employeeId": "ATS0012",
    "designation": "Software Engineer",
    "month": "04",
    "monthName": "April",
    "year": "2024",
    "dateJoining": "2021-01-15",
    "location": "Hyderabad",
    "daysInMonth": 30,
    "workingDays": 28,
    "arrearDays": 0,
    "lop": 2,
    "bankName": "State Bank of India",
    "accountNo": "123456789012",
    "pan": "ABCDE1234F",
    "providentFund": "APHYD12345678",
    "esic": "1234567890",
    "uan": "10012345678",
    "earnings": [{"component": "Basic", "amount": 30000}],
    "deductions": [{"component": "TDS", "amount": 2000}],
}


@pytest_asyncio.fixture
async def engine():
    """Create test database engine with a fresh schema."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for each test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def payslip_payload() -> dict[str, Any]:
    """A valid submission body; each test gets its own copy."""
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def make_submission(payslip_payload) -> Callable[..., PayslipSubmission]:
    """Build a validated submission, optionally overriding fields afterwards.

    Overrides are applied after validation so tests can reach the database
    with values the validator would reject.
    """

    def _make(payload_overrides: dict[str, Any] | None = None, **fields: Any):
        payload = {**payslip_payload, **(payload_overrides or {})}
        return replace(validate_payslip(payload), **fields)

    return _make
