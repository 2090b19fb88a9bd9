"""
JSON file backend - stores all responses in one JSON file.

File layout:
    {data_dir}/responses.json
        {"responses": [{"id": ..., "text": ..., "score": ..., "confidence": ...}, ...]}

Records are kept oldest first. Every write replaces the whole file
atomically (temp file + rename). Entries that fail validation are hidden
from readers but written back unchanged, so a mutation never erases them.
"""

import json
import threading
from pathlib import Path
from typing import Optional, Union
from uuid import UUID

from pydantic import ValidationError

from config import DATA_DIR, RESPONSES_FILE
from errors import StorageError
from models import Response
from .base import ResponseStorage, check_fields

# A parsed record, or the raw dict of one that failed validation
Entry = Union[Response, dict]


class WriteQueue:
    """Thread-safe write serialization."""

    def __init__(self):
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def write_json(self, path: Path, data: dict) -> None:
        """Atomic JSON write."""
        with self._lock:
            temp = path.with_suffix(".json.tmp")
            with open(temp, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
                f.flush()
            temp.replace(path)


class JsonResponseStorage(ResponseStorage):
    """JSON file implementation of response storage."""

    def __init__(self, data_dir: Optional[Path] = None):
        self._data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
        self._writes = WriteQueue()

    @property
    def path(self) -> Path:
        return self._data_dir / RESPONSES_FILE

    def _read(self) -> list[Entry]:
        path = self.path
        if not path.exists():
            return []

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StorageError(f"Corrupt {path.name}: {e}") from e
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Unexpected layout in {path.name}: top level is {type(data).__name__}, not an object")
        if not data:
            return []
        records = data.get("responses")
        if not isinstance(records, list):
            raise StorageError(f"Unexpected layout in {path.name}: 'responses' is not a list")

        entries: list[Entry] = []
        for index, record in enumerate(records):
            try:
                entries.append(Response.model_validate(record))
            except ValidationError as e:
                print(f"[WARN] Unreadable record {index} in {path.name} kept as-is: {e}")
                entries.append(record)
        return entries

    def _write(self, entries: list[Entry]) -> None:
        data = {
            "responses": [e.to_record() if isinstance(e, Response) else e for e in entries]
        }
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            self._writes.write_json(self.path, data)
        except OSError as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e

    @staticmethod
    def _index_of(entries: list[Entry], id: UUID) -> Optional[int]:
        for i, entry in enumerate(entries):
            if isinstance(entry, Response) and entry.id == id:
                return i
        return None

    def fetch_all(self) -> list[Response]:
        with self._writes.lock:
            return [e for e in self._read() if isinstance(e, Response)]

    def insert(self, response: Response) -> None:
        with self._writes.lock:
            entries = self._read()
            index = self._index_of(entries, response.id)
            if index is None:
                entries.append(response)
            else:
                entries[index] = response
            self._write(entries)

    def update(self, id: UUID, fields: dict) -> bool:
        check_fields(fields)
        with self._writes.lock:
            entries = self._read()
            index = self._index_of(entries, id)
            if index is None:
                return False
            entries[index] = Response.model_validate({**entries[index].to_record(), **fields})
            self._write(entries)
            return True

    def delete(self, id: UUID) -> bool:
        with self._writes.lock:
            entries = self._read()
            index = self._index_of(entries, id)
            if index is None:
                return False
            del entries[index]
            self._write(entries)
            return True
