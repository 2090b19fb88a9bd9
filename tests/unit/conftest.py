"""
Unit test fixtures.

All unit tests should be:
- Fast (< 100ms)
- Isolated (no files, no real analyzer)
- Deterministic (same result every time)
"""

import pytest

from errors import StorageError
from repositories import InMemoryResponseStorage
from scoring import Scorer, SentimentAnalyzer
from store import ResponseStore, ScoringCoordinator


class FakeAnalyzer(SentimentAnalyzer):
    """Word-list analyzer: sums the polarity of known words."""

    LEXICON = {
        "love": 0.8,
        "great": 0.5,
        "like": 0.2,
        "hate": -0.7,
        "awful": -0.9,
        "bugs": -0.3,
    }

    def __init__(self):
        self.calls = []
        self.error = None

    def analyze(self, text: str) -> float:
        self.calls.append(text)
        if self.error:
            raise self.error
        words = [w.strip(".,!?").lower() for w in text.split()]
        return sum(self.LEXICON.get(w, 0.0) for w in words)


class FlakyStorage(InMemoryResponseStorage):
    """In-memory storage that fails on demand."""

    def __init__(self):
        super().__init__()
        self.fail_fetch = False
        self.fail_insert = False
        self.fail_update = False
        self.fail_delete = False

    def fetch_all(self):
        if self.fail_fetch:
            raise StorageError("disk unavailable")
        return super().fetch_all()

    def insert(self, response):
        if self.fail_insert:
            raise StorageError("disk full")
        super().insert(response)

    def update(self, id, fields):
        if self.fail_update:
            raise StorageError("disk full")
        return super().update(id, fields)

    def delete(self, id):
        if self.fail_delete:
            raise StorageError("read-only")
        return super().delete(id)


@pytest.fixture
def analyzer():
    return FakeAnalyzer()


@pytest.fixture
def scorer(analyzer):
    return Scorer(analyzer=analyzer)


@pytest.fixture
def coordinator(scorer):
    return ScoringCoordinator(scorer=scorer)


@pytest.fixture
def storage():
    return FlakyStorage()


@pytest.fixture
def store(storage, coordinator, sample_texts):
    """Store over flaky in-memory storage, seeded with sample_texts when empty."""
    return ResponseStore(storage=storage, coordinator=coordinator, samples=sample_texts)


@pytest.fixture
def response_data():
    """Raw persisted record."""
    return {
        "id": "4f1c2d7e-8a9b-4c3d-9e0f-1a2b3c4d5e6f",
        "text": "I love the view from the ridge",
        "score": 0.8,
        "confidence": 0.8,
    }
