"""
Root test configuration.

Test organization:
- unit/        Fast, isolated, no I/O, fake analyzer and in-memory storage
- integration/ Component boundaries, real JSON files in temp dirs, real VADER

Run specific levels:
    pytest tests/unit -v           # Fast feedback loop
    pytest tests/integration -v    # Before commit
    pytest tests -v                # Everything
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast isolated tests")
    config.addinivalue_line("markers", "integration: Component boundary tests")
    config.addinivalue_line("markers", "slow: Tests that take > 1s")


@pytest.fixture
def sample_texts():
    """Short seed list with one text per sentiment."""
    return [
        "I love this trail",
        "The trail is long",
        "I hate the mud",
    ]
