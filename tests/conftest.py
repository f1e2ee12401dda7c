"""
pytest configuration for terrors tests.

Adds src directory to Python path for imports and isolates tests from
TERRORS_* variables in the process environment.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    """Drop TERRORS_* variables so load_config() sees only what a test sets."""
    for var in (
        "TERRORS_CONFIG",
        "TERRORS_LOG_LEVEL",
        "TERRORS_LOG_VERBOSE",
        "TERRORS_MAX_MESSAGE_LENGTH",
    ):
        monkeypatch.delenv(var, raising=False)
