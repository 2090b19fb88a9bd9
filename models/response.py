"""
Response models - an opinion and the scorer's verdict on it.
"""

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from .base import BaseEntity
from .sentiment import Sentiment


class SentimentResult(BaseModel):
    """Output of a single scoring call."""
    model_config = ConfigDict(frozen=True)

    score: float = 0.0
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)


class Response(BaseEntity):
    """
    A single survey response.

    Persisted as exactly {id, text, score, confidence}. Sentiment is derived
    from score on every access and never stored.
    """
    id: UUID = Field(default_factory=uuid4)
    text: str
    score: float = 0.0
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)

    @classmethod
    def from_result(cls, text: str, result: SentimentResult, id: UUID = None) -> "Response":
        """Build a response from a scoring result, keeping `id` if given."""
        if id is None:
            return cls(text=text, score=result.score, confidence=result.confidence)
        return cls(id=id, text=text, score=result.score, confidence=result.confidence)

    @property
    def sentiment(self) -> Sentiment:
        return Sentiment.from_score(self.score)

    def to_record(self) -> dict:
        """Storage layout."""
        return self.model_dump(mode="json")
