"""
Error taxonomy for the survey core.

Cancelled is deliberately outside SurveyError: it is a normal early exit,
not a failure.
"""

from typing import Optional
from uuid import UUID


class Cancelled(Exception):
    """Scoring was cancelled before it completed."""


class SurveyError(Exception):
    """Base for all survey core failures."""


class ScoringFailed(SurveyError):
    """The sentiment analyzer raised while scoring a text."""


class StorageError(SurveyError):
    """A durable storage backend could not read or write."""


class PersistFailed(SurveyError):
    """
    Memory and durable storage could not be kept in agreement.

    When `response` is set, the record is in memory but not in storage.
    """

    def __init__(self, message: str, response=None):
        super().__init__(message)
        self.response = response


class NotFound(SurveyError):
    """No response with the given id."""

    def __init__(self, response_id: UUID, message: Optional[str] = None):
        super().__init__(message or f"Response not found: {response_id}")
        self.response_id = response_id
