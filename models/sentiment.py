"""
Sentiment buckets derived from a polarity score.
"""

from enum import Enum

from config import NEGATIVE_THRESHOLD, POSITIVE_THRESHOLD


class Sentiment(str, Enum):
    """Threshold-derived bucket of a score."""
    POSITIVE = "positive"
    MODERATE = "moderate"
    NEGATIVE = "negative"

    @classmethod
    def from_score(cls, score: float) -> "Sentiment":
        """Classify a score. Exactly +/-0.1 is moderate."""
        if score > POSITIVE_THRESHOLD:
            return cls.POSITIVE
        if score < NEGATIVE_THRESHOLD:
            return cls.NEGATIVE
        return cls.MODERATE

    @property
    def label(self) -> str:
        return self.value.capitalize()


# Chart order - do not derive from dict iteration
SENTIMENT_ORDER = (Sentiment.POSITIVE, Sentiment.MODERATE, Sentiment.NEGATIVE)


def classify(score: float) -> Sentiment:
    """Map a score to its sentiment bucket."""
    return Sentiment.from_score(score)
