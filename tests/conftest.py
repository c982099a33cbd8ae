import random

import pytest

from ball_tracker.game import TrackingSession
from ball_tracker.ledger import Ledger
from ball_tracker.storage import JsonStore


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(tmp_path):
    return JsonStore(str(tmp_path / "profiles.json"))


@pytest.fixture
def ledger(store):
    store.claim(42)
    return Ledger.open(store, 42)


@pytest.fixture
def session(ledger, clock):
    return TrackingSession(ledger, clock=clock, rng=random.Random(7))
