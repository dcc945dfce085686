"""Shared test fixtures for all test groups."""

from datetime import datetime

import pytest

from deploy_gates.core.config import get_settings
from deploy_gates.domain.gates import Comment, Gate, GateKey, GateState


def ts(value: str) -> datetime:
    """Parse an RFC 3339 timestamp into an aware datetime."""
    return datetime.fromisoformat(value)


@pytest.fixture
def gate_key():
    return GateKey(group="some-group", service="some-service", environment="some-environment")


@pytest.fixture
def some_gate(gate_key):
    """Open gate with two comments a year apart, newest loaded first."""
    return Gate.create(
        key=gate_key,
        state=GateState.OPEN,
        last_updated=ts("2023-04-12T22:10:57+02:00"),
        comments=[
            Comment(
                id="Comment2",
                message="Some other comment message",
                created=ts("2022-04-12T22:10:57+02:00"),
            ),
            Comment(
                id="Comment1",
                message="Some comment message",
                created=ts("2021-04-12T22:10:57+02:00"),
            ),
        ],
    )


@pytest.fixture
def clean_settings():
    """Clear the cached Settings before and after a test that tweaks env vars."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
