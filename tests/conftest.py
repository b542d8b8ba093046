"""Shared pytest fixtures for request-state tests."""

from __future__ import annotations

import asyncio
from typing import Any
from unittest.mock import AsyncMock

import pytest


class Pending:
    """Awaitable the test settles by hand, for observing in-flight state."""

    def __init__(self) -> None:
        self._future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()

    def resolve(self, value: Any) -> None:
        self._future.set_result(value)

    def reject(self, error: Exception) -> None:
        self._future.set_exception(error)

    def __await__(self) -> Any:
        return self._future.__await__()


async def await_pending(pending: Pending) -> Any:
    """Operation that settles whenever the test settles ``pending``."""
    return await pending


@pytest.fixture
def make_pending() -> Any:
    """Factory for Pending awaitables bound to the running loop."""
    return Pending


@pytest.fixture
def pending_operation() -> Any:
    return await_pending


@pytest.fixture
def mock_operation() -> AsyncMock:
    """Mock async operation that resolves to a sample record."""
    mock = AsyncMock()
    mock.return_value = {"id": 1}
    return mock


@pytest.fixture
def failing_operation() -> AsyncMock:
    """Mock async operation that always raises."""
    mock = AsyncMock()
    mock.side_effect = RuntimeError("boom")
    return mock
