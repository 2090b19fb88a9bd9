"""
Reporting - counts, averages and distributions over responses.
"""

from .aggregate import (
    SentimentShare,
    SurveySummary,
    average_score,
    count_by_sentiment,
    distribution,
    filter_by_sentiment,
    summarize,
)

__all__ = [
    "count_by_sentiment",
    "average_score",
    "distribution",
    "filter_by_sentiment",
    "summarize",
    "SentimentShare",
    "SurveySummary",
]
