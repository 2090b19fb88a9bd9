"""
Scoring statistics - tracked by the scoring coordinator.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class ScoringStats(BaseModel):
    """Counters for scoring calls made through a coordinator."""
    runs: int = 0
    successes: int = 0
    errors: int = 0
    cancelled: int = 0

    last_run: Optional[datetime] = None
    last_success: Optional[datetime] = None
    last_error: Optional[datetime] = None
    last_error_message: Optional[str] = None

    def record_run(self) -> None:
        """Record a scoring attempt."""
        self.runs += 1
        self.last_run = datetime.now()

    def record_success(self) -> None:
        self.successes += 1
        self.last_success = datetime.now()

    def record_error(self, message: str = None) -> None:
        """Record an analyzer failure."""
        self.errors += 1
        self.last_error = datetime.now()
        self.last_error_message = message

    def record_cancelled(self) -> None:
        self.cancelled += 1

    @property
    def success_rate(self) -> float:
        """Share of runs that produced a result."""
        if self.runs == 0:
            return 0.0
        return self.successes / self.runs

    def to_dict(self) -> dict:
        """Export for display."""
        return {
            "runs": self.runs,
            "successes": self.successes,
            "errors": self.errors,
            "cancelled": self.cancelled,
            "last_run": self.last_run.isoformat() if self.last_run else None,
            "last_error": self.last_error_message,
            "success_rate": self.success_rate,
        }
