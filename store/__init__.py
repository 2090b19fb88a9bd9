"""
Store layer - owns survey responses and sequences their scoring.

Usage:
    from store import ResponseStore

    store = ResponseStore()          # configured storage backend
    await store.load_all()           # seeds sample responses if empty
    response = await store.add("Great trail today")
"""

from .coordinator import ScoringCoordinator
from .response_store import ResponseStore

__all__ = ["ResponseStore", "ScoringCoordinator"]
