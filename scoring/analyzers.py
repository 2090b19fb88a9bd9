"""
Sentiment analyzers - black boxes mapping text to a polarity in [-1, 1].

The scorer only relies on `analyze(text) -> float`; swap in any
implementation (a transformer pipeline, a remote-free lexicon, a test fake).
"""

from abc import ABC, abstractmethod

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer


class SentimentAnalyzer(ABC):
    """Interface for polarity analyzers."""

    @abstractmethod
    def analyze(self, text: str) -> float:
        """Return polarity, roughly in [-1, 1]. Positive is favorable."""
        pass


class VaderAnalyzer(SentimentAnalyzer):
    """Offline lexicon analyzer using VADER's compound score."""

    def __init__(self):
        self._analyzer = SentimentIntensityAnalyzer()

    def analyze(self, text: str) -> float:
        scores = self._analyzer.polarity_scores(text)
        return float(scores.get("compound", 0.0))
