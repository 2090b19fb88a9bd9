"""
Scorer - turns text into a (score, confidence) pair.

Stateless apart from the analyzer it wraps, so the same text always
scores the same.
"""

import asyncio
import math
import threading
from typing import Optional

from errors import Cancelled, ScoringFailed
from models import SentimentResult
from .analyzers import SentimentAnalyzer, VaderAnalyzer

NEUTRAL = SentimentResult(score=0.0, confidence=0.0)


class Scorer:
    """Scores text with a pluggable analyzer."""

    def __init__(self, analyzer: Optional[SentimentAnalyzer] = None):
        self._analyzer = analyzer if analyzer is not None else VaderAnalyzer()

    @property
    def analyzer(self) -> SentimentAnalyzer:
        return self._analyzer

    def score(self, text: str) -> SentimentResult:
        """
        Score text synchronously.

        Empty text short-circuits to (0.0, 0.0). Confidence is the score's
        magnitude capped at 1.0; the analyzer supplies no separate signal.

        Raises:
            ScoringFailed: the analyzer raised or returned a non-number
        """
        if not text or not text.strip():
            return NEUTRAL

        try:
            raw = float(self._analyzer.analyze(text))
        except Exception as e:
            raise ScoringFailed(f"Analyzer failed: {e}") from e
        if math.isnan(raw):
            raise ScoringFailed("Analyzer returned NaN")

        score = max(-1.0, min(1.0, raw))
        return SentimentResult(score=score, confidence=min(1.0, abs(score)))

    async def score_async(
        self, text: str, cancel: Optional[threading.Event] = None
    ) -> SentimentResult:
        """
        Score text on a worker thread.

        Args:
            text: Text to score
            cancel: Teardown flag; if already set, nothing runs

        Raises:
            Cancelled: `cancel` was set before scoring started
            ScoringFailed: the analyzer raised
        """
        if cancel is not None and cancel.is_set():
            raise Cancelled("Scoring cancelled before start")
        return await asyncio.to_thread(self.score, text)


_default_scorer: Optional[Scorer] = None
_init_lock = threading.Lock()


def get_scorer() -> Scorer:
    """Get or create the shared default scorer."""
    global _default_scorer
    with _init_lock:
        if _default_scorer is None:
            _default_scorer = Scorer()
        return _default_scorer


def score(text: str) -> SentimentResult:
    """Score text with the default scorer."""
    return get_scorer().score(text)


async def score_async(text: str, cancel: Optional[threading.Event] = None) -> SentimentResult:
    """Score text with the default scorer without blocking the event loop."""
    return await get_scorer().score_async(text, cancel)
