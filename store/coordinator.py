"""
Scoring coordinator - sequences asynchronous scoring for the store.

Handles:
- Cancellation (one teardown flag shared by every in-flight call)
- Ordered bulk scoring (one text at a time, in list order)
- Serializing store mutations (asyncio lock)
- Stats tracking
"""

import asyncio
import threading
from typing import AsyncIterator, Iterable, Optional, Union

from errors import Cancelled, ScoringFailed
from models import ScoringStats, SentimentResult
from scoring import Scorer, get_scorer


class ScoringCoordinator:
    """Runs scoring calls off the event loop on behalf of a ResponseStore."""

    def __init__(self, scorer: Optional[Scorer] = None, name: str = "SCORER"):
        self.name = name
        self._scorer = scorer if scorer is not None else get_scorer()
        self._cancel = threading.Event()
        self._lock = asyncio.Lock()
        self.stats = ScoringStats()

    @property
    def scorer(self) -> Scorer:
        return self._scorer

    @property
    def lock(self) -> asyncio.Lock:
        """Held by the store while it mutates memory and storage."""
        return self._lock

    @property
    def is_cancelled(self) -> bool:
        return self._cancel.is_set()

    def cancel(self) -> None:
        """Cancel pending and in-flight scoring. Results already committed stay."""
        self._cancel.set()

    def reset(self) -> None:
        """Accept scoring calls again after cancel()."""
        self._cancel.clear()

    async def score(self, text: str) -> SentimentResult:
        """
        Score one text.

        The cancel flag is checked before the analyzer runs and again after it
        returns, so a result computed for a torn-down caller is discarded.

        Raises:
            Cancelled: cancel() was called before the result was delivered
            ScoringFailed: the analyzer raised
        """
        self.stats.record_run()
        try:
            result = await self._scorer.score_async(text, self._cancel)
        except Cancelled:
            self.stats.record_cancelled()
            raise
        except ScoringFailed as e:
            self.stats.record_error(str(e))
            raise

        if self._cancel.is_set():
            self.stats.record_cancelled()
            raise Cancelled("Scoring cancelled before result was delivered")

        self.stats.record_success()
        return result

    async def score_in_order(
        self, texts: Iterable[str]
    ) -> AsyncIterator[tuple[str, Union[SentimentResult, ScoringFailed]]]:
        """
        Score texts one after another, in order.

        Yields (text, result) pairs. A text that fails to score yields its
        ScoringFailed instead of a result so the caller can skip it. The next
        text is not started until the consumer has handled the previous one.

        Raises:
            Cancelled: cancel() was called; remaining texts are not scored
        """
        for text in texts:
            try:
                result = await self.score(text)
            except ScoringFailed as e:
                yield text, e
                continue
            yield text, result

    def get_stats(self) -> dict:
        """Stats as dict for display."""
        return {
            "name": self.name,
            "cancelled_flag": self.is_cancelled,
            **self.stats.to_dict(),
        }
