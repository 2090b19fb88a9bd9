"""
Repository layer - abstracts persistence.

Usage:
    from repositories import get_storage

    storage = get_storage()  # Returns configured backend
    storage.insert(response)
    records = storage.fetch_all()

Backends are swappable via config (HIKING_SURVEY_BACKEND).
"""

from typing import Optional

from config import STORAGE_BACKEND
from .base import ResponseStorage
from .json_backend import JsonResponseStorage
from .memory_backend import InMemoryResponseStorage

_backend: str = STORAGE_BACKEND
_options: dict = {}
_instance: Optional[ResponseStorage] = None


def get_storage() -> ResponseStorage:
    """Get the configured storage instance."""
    global _instance

    if _instance is None:
        if _backend == "json":
            _instance = JsonResponseStorage(**_options)
        elif _backend == "memory":
            _instance = InMemoryResponseStorage()
        else:
            raise ValueError(f"Unknown backend: {_backend}")

    return _instance


def configure_backend(backend: str, **kwargs) -> None:
    """Configure the storage backend. kwargs go to the backend constructor."""
    global _backend, _options, _instance
    _backend = backend
    _options = kwargs
    _instance = None  # Force re-initialization


__all__ = [
    "get_storage",
    "configure_backend",
    "ResponseStorage",
    "JsonResponseStorage",
    "InMemoryResponseStorage",
]
