"""Pytest fixtures for zoneprof tests.

Sessions are driven by a `ManualSampler` and a fake clock, so no real timer
signal is ever armed by the tests.
"""

import pytest

from zoneprof.sampler import ManualSampler
from zoneprof.session import Session


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sampler():
    return ManualSampler()


@pytest.fixture
def session(sampler, clock):
    return Session(sampler=sampler, clock=clock)
