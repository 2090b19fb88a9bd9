"""
Aggregate views over a snapshot of responses.

Everything here is a pure function: nothing holds state or mutates the
collection it is given.
"""

from typing import Iterable, Optional

from pydantic import BaseModel, Field

from models import Response, Sentiment, SENTIMENT_ORDER


def count_by_sentiment(responses: Iterable[Response]) -> dict[Sentiment, int]:
    """Count per sentiment. All three keys are always present."""
    counts = {sentiment: 0 for sentiment in SENTIMENT_ORDER}
    for response in responses:
        counts[response.sentiment] += 1
    return counts


def average_score(responses: Iterable[Response]) -> float:
    """Mean score, 0.0 for an empty collection."""
    scores = [r.score for r in responses]
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


def distribution(responses: Iterable[Response]) -> list[tuple[Sentiment, int]]:
    """(sentiment, count) pairs in chart order: positive, moderate, negative."""
    counts = count_by_sentiment(responses)
    return [(sentiment, counts[sentiment]) for sentiment in SENTIMENT_ORDER]


def filter_by_sentiment(
    responses: Iterable[Response], sentiment: Optional[Sentiment] = None
) -> list[Response]:
    """Responses in one bucket, or all of them when sentiment is None."""
    if sentiment is None:
        return list(responses)
    return [r for r in responses if r.sentiment == sentiment]


class SentimentShare(BaseModel):
    """One bar/slice of the summary chart."""
    sentiment: Sentiment
    count: int = 0
    percentage: float = 0.0


class SurveySummary(BaseModel):
    """Headline numbers for the summary screen."""
    total: int = 0
    average_score: float = 0.0
    shares: list[SentimentShare] = Field(default_factory=list)

    @property
    def overall(self) -> Sentiment:
        """Bucket of the average score."""
        return Sentiment.from_score(self.average_score)

    def to_dict(self) -> dict:
        """Export for display."""
        return {
            "total": self.total,
            "average_score": round(self.average_score, 4),
            "overall": self.overall.value,
            "distribution": {
                s.sentiment.value: {"count": s.count, "percentage": s.percentage}
                for s in self.shares
            },
        }


def summarize(responses: Iterable[Response]) -> SurveySummary:
    """Total, average and per-sentiment share of a collection."""
    snapshot = list(responses)
    total = len(snapshot)

    shares = []
    for sentiment, count in distribution(snapshot):
        percentage = round(count / total * 100, 1) if total else 0.0
        shares.append(SentimentShare(sentiment=sentiment, count=count, percentage=percentage))

    return SurveySummary(total=total, average_score=average_score(snapshot), shares=shares)
