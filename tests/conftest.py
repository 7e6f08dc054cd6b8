"""Shared test fixtures."""

import pytest


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sample_payload():
    return {
        "name": "Python 3.8",
        "stats": {
            "ja": {"translated": {"percentage": 0.8732, "stringcount": 1000}},
            "fr": {"translated": {"percentage": 1.0}},
            "zh_CN": {"translated": {"percentage": 0.0}},
        },
    }


@pytest.fixture
def sample_body():
    return b'{"fr":"100.00%","ja":"87.32%","zh_CN":"0.00%"}'
