"""
Scoring layer - text to sentiment score.

Usage:
    from scoring import score, Scorer

    result = score("What a trail!")       # default VADER-backed scorer
    scorer = Scorer(analyzer=MyAnalyzer()) # any object with analyze(text)
"""

from .analyzers import SentimentAnalyzer, VaderAnalyzer
from .scorer import Scorer, get_scorer, score, score_async

__all__ = [
    "SentimentAnalyzer",
    "VaderAnalyzer",
    "Scorer",
    "get_scorer",
    "score",
    "score_async",
]
