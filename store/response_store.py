"""
Response store - the single owner of survey responses.

Keeps an ordered in-memory collection (newest first) and writes every
mutation through to durable storage before reporting success.
"""

import asyncio
from typing import Callable, Iterable, Optional, Union
from uuid import UUID

from config import load_sample_responses
from errors import NotFound, PersistFailed, ScoringFailed, StorageError
from models import Response, Sentiment, SentimentResult
from reporting import filter_by_sentiment
from repositories import ResponseStorage, get_storage
from .coordinator import ScoringCoordinator

ResponseId = Union[UUID, str]


def _as_uuid(id: ResponseId) -> UUID:
    """Accept a UUID or its string form. Raises ValueError on garbage."""
    if isinstance(id, UUID):
        return id
    return UUID(str(id))


class ResponseStore:
    """
    Repository of survey responses.

    Handles:
    - Loading from storage (seeding sample texts when empty)
    - add / edit / delete with scoring and write-through persistence
    - Change notifications for collaborators ("loaded", "added", "edited", "deleted")

    One writer at a time: mutations hold the coordinator's lock.
    """

    def __init__(
        self,
        storage: Optional[ResponseStorage] = None,
        coordinator: Optional[ScoringCoordinator] = None,
        samples: Optional[Iterable[str]] = None,
    ):
        self._storage = storage if storage is not None else get_storage()
        self._coordinator = coordinator if coordinator is not None else ScoringCoordinator()
        self._samples = list(samples) if samples is not None else None
        self._responses: list[Response] = []
        self._callbacks: list[Callable] = []

    # === Read access ===

    @property
    def responses(self) -> tuple[Response, ...]:
        """Snapshot of the collection, newest first."""
        return tuple(self._responses)

    @property
    def coordinator(self) -> ScoringCoordinator:
        return self._coordinator

    def get(self, id: ResponseId) -> Optional[Response]:
        """Get response by id, None if absent."""
        try:
            key = _as_uuid(id)
        except ValueError:
            return None
        index = self._index_of(key)
        return self._responses[index] if index is not None else None

    def filtered(self, sentiment: Optional[Sentiment] = None) -> list[Response]:
        """Responses in the given bucket (all of them for None)."""
        return filter_by_sentiment(self._responses, sentiment)

    def __len__(self) -> int:
        return len(self._responses)

    # === Notifications ===

    def add_listener(self, callback: Callable) -> None:
        """Add callback(event_type, data) for collection changes."""
        self._callbacks.append(callback)

    def remove_listener(self, callback: Callable) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def notify(self, event_type: str, data: dict) -> None:
        """Notify all registered callbacks."""
        for cb in list(self._callbacks):
            try:
                cb(event_type, data)
            except Exception as e:
                print(f"[STORE] Listener error on '{event_type}': {e}")

    # === Lifecycle ===

    async def load_all(self) -> list[Response]:
        """
        Rebuild memory from storage, newest first.

        Seeds sample responses when storage is empty.

        Raises:
            PersistFailed: storage could not be read
        """
        try:
            records = await asyncio.to_thread(self._storage.fetch_all)
        except StorageError as e:
            print(f"[STORE] Failed to fetch responses: {e}")
            raise PersistFailed(f"Could not load responses: {e}") from e

        loaded = []
        seen = set()
        for record in reversed(records):
            if record.id in seen:
                print(f"[WARN] Duplicate response id in storage, skipping: {record.id}")
                continue
            seen.add(record.id)
            loaded.append(record)

        async with self._coordinator.lock:
            self._responses = loaded

        print(f"[STORE] Loaded {len(loaded)} responses from storage")
        self.notify("loaded", {"count": len(loaded)})

        if not loaded:
            await self.seed()

        return list(self._responses)

    async def seed(self, texts: Optional[Iterable[str]] = None) -> list[Response]:
        """
        Score and add texts one at a time, in order.

        The last text ends up first in the store. Texts that fail to score are
        skipped.

        Raises:
            Cancelled: the coordinator was cancelled; earlier texts stay committed
            PersistFailed: a record could not be written
        """
        if texts is None:
            texts = self._samples if self._samples is not None else load_sample_responses()
        texts = list(texts)

        print(f"[STORE] Seeding {len(texts)} sample responses")
        added = []
        async for text, result in self._coordinator.score_in_order(texts):
            if isinstance(result, ScoringFailed):
                print(f"[STORE] Failed to score sample '{text}': {result}")
                continue
            added.append(await self._commit_new(text, result))
        print(f"[STORE] Finished seeding ({len(added)}/{len(texts)} added)")
        return added

    def shutdown(self) -> None:
        """Cancel in-flight scoring. Nothing cancelled will be committed."""
        self._coordinator.cancel()

    # === Mutations ===

    async def add(self, text: str) -> Response:
        """
        Score text and store it as a new response at the front.

        Raises:
            Cancelled: scoring was cancelled; nothing was stored
            ScoringFailed: the analyzer failed; nothing was stored
            PersistFailed: in memory but not in storage (see .response)
        """
        try:
            result = await self._coordinator.score(text)
        except ScoringFailed as e:
            print(f"[STORE] Failed to score text: {e}")
            raise
        return await self._commit_new(text, result)

    async def edit(self, id: ResponseId, new_text: str) -> Response:
        """
        Re-score new_text and replace the response's text/score/confidence.

        The id is kept. The in-memory record is swapped in one assignment after
        storage has accepted the update.

        Raises:
            NotFound: no response with this id
            Cancelled: scoring was cancelled; nothing changed
            ScoringFailed: the analyzer failed; nothing changed
            PersistFailed: storage rejected the update; memory unchanged
        """
        try:
            key = _as_uuid(id)
        except ValueError:
            raise NotFound(id)
        if self._index_of(key) is None:
            raise NotFound(key)

        try:
            result = await self._coordinator.score(new_text)
        except ScoringFailed as e:
            print(f"[STORE] Failed to score edit for {key}: {e}")
            raise
        updated = Response.from_result(new_text, result, id=key)

        async with self._coordinator.lock:
            index = self._index_of(key)
            if index is None:
                raise NotFound(key)

            fields = {
                "text": updated.text,
                "score": updated.score,
                "confidence": updated.confidence,
            }
            try:
                found = await asyncio.to_thread(self._storage.update, key, fields)
            except StorageError as e:
                print(f"[STORE] Failed to update response {key}: {e}")
                raise PersistFailed(f"Could not update response {key}: {e}") from e
            if not found:
                raise PersistFailed(f"Response {key} is in memory but missing from storage")

            self._responses[index] = updated

        print(f"[STORE] Edited response {key} -> Score: {updated.score:.3f}, Sentiment: {updated.sentiment.value}")
        self.notify("edited", {"response": updated})
        return updated

    async def delete(self, id: ResponseId) -> None:
        """
        Remove a response from storage and memory.

        Absent ids are a no-op.

        Raises:
            PersistFailed: storage rejected the delete; memory unchanged
        """
        try:
            key = _as_uuid(id)
        except ValueError:
            return

        async with self._coordinator.lock:
            try:
                await asyncio.to_thread(self._storage.delete, key)
            except StorageError as e:
                print(f"[STORE] Failed to delete response {key}: {e}")
                raise PersistFailed(f"Could not delete response {key}: {e}") from e

            index = self._index_of(key)
            if index is None:
                return
            del self._responses[index]

        print(f"[STORE] Deleted response {key}")
        self.notify("deleted", {"id": key})

    # === Internals ===

    def _index_of(self, id: UUID) -> Optional[int]:
        for i, response in enumerate(self._responses):
            if response.id == id:
                return i
        return None

    async def _commit_new(self, text: str, result: SentimentResult) -> Response:
        """Insert at the front of memory, then persist."""
        response = Response.from_result(text, result)
        error = None

        async with self._coordinator.lock:
            self._responses.insert(0, response)
            try:
                await asyncio.to_thread(self._storage.insert, response)
            except StorageError as e:
                print(f"[STORE] Failed to save response {response.id}: {e}")
                error = e

        self.notify("added", {"response": response, "persisted": error is None})
        if error is not None:
            raise PersistFailed(
                f"Response {response.id} added in memory but not saved: {error}",
                response=response,
            ) from error

        print(
            f"[STORE] Added response - Text: '{text}' -> Score: {response.score:.3f}, "
            f"Sentiment: {response.sentiment.value}"
        )
        return response
