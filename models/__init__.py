"""
Domain models - single source of truth for all entities.

Design principles:
- Every entity defined once
- Immutable records (edits replace, never patch)
- Derived values (sentiment) computed, never stored
- Backend-agnostic (repositories handle persistence)
"""

from .base import BaseEntity
from .sentiment import Sentiment, SENTIMENT_ORDER, classify
from .response import Response, SentimentResult
from .stats import ScoringStats

__all__ = [
    # Base
    "BaseEntity",
    # Sentiment
    "Sentiment",
    "SENTIMENT_ORDER",
    "classify",
    # Response
    "Response",
    "SentimentResult",
    # Stats
    "ScoringStats",
]
