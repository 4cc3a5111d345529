"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_fretboard.core import generate_scale
from chuk_mcp_fretboard.engine import MusicTheoryEngine
from chuk_mcp_fretboard.models import Scale


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def engine() -> MusicTheoryEngine:
    """A fresh engine with empty state."""
    return MusicTheoryEngine()


@pytest.fixture
def c_ionian() -> Scale:
    """C Ionian (C major) scale."""
    return generate_scale("C", "Ionian")
