"""Shared test fixtures for conditional.

Provides an update-counting callback and helpers for building
awaitables whose completion the test controls.
"""

import asyncio

import pytest


class UpdateCounter:
    """Callable passed as ``on_update``; counts how often it fired."""

    def __init__(self) -> None:
        self.count = 0

    def __call__(self) -> None:
        self.count += 1


@pytest.fixture
def updates() -> UpdateCounter:
    return UpdateCounter()


@pytest.fixture
def future_factory():
    """Create unresolved futures on the running loop."""

    def _make() -> asyncio.Future:
        return asyncio.get_running_loop().create_future()

    return _make


@pytest.fixture
def later():
    """Coroutine function whose result arrives on the next loop iteration."""

    async def _later(value):
        await asyncio.sleep(0)
        return value

    return _later
