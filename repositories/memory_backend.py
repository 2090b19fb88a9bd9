"""
In-memory backend - nothing survives the process. Useful for tests and
for running the CLI against a throwaway store.
"""

import threading
from uuid import UUID

from models import Response
from .base import ResponseStorage, check_fields


class InMemoryResponseStorage(ResponseStorage):
    """Dict-backed response storage. Dicts keep insertion order."""

    def __init__(self):
        self._records: dict[UUID, Response] = {}
        self._lock = threading.Lock()

    def fetch_all(self) -> list[Response]:
        with self._lock:
            return list(self._records.values())

    def insert(self, response: Response) -> None:
        with self._lock:
            self._records[response.id] = response

    def update(self, id: UUID, fields: dict) -> bool:
        check_fields(fields)
        with self._lock:
            existing = self._records.get(id)
            if existing is None:
                return False
            self._records[id] = Response.model_validate({**existing.to_record(), **fields})
            return True

    def delete(self, id: UUID) -> bool:
        with self._lock:
            return self._records.pop(id, None) is not None
