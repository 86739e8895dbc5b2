"""Shared test fixtures for rdfterm tests."""

from __future__ import annotations

from datetime import time, timedelta, timezone

import pytest


class ToTimeObject:
    """Stand-in for a third-party value exposing a to_time() conversion."""

    def __init__(self, result: object) -> None:
        self.result = result

    def to_time(self) -> object:
        return self.result

    def __str__(self) -> str:
        return "<to-time object>"


@pytest.fixture
def plus_two() -> timezone:
    """Fixed +02:00 zone."""
    return timezone(timedelta(hours=2))


@pytest.fixture
def minus_five() -> timezone:
    """Fixed -05:00 zone."""
    return timezone(timedelta(hours=-5))


@pytest.fixture
def to_time_object() -> type[ToTimeObject]:
    """Factory for objects converting to a time through to_time()."""
    return ToTimeObject


@pytest.fixture
def noon() -> time:
    return time(12, 0, 0)
