"""
Engine - the stateful layer the presentation layer talks to.

This module provides:
- MusicTheoryEngine: Scale, chord and fretboard operations
- StateHolder: Single-writer owner of the observable EngineState
"""

from chuk_mcp_fretboard.engine.engine import MusicTheoryEngine
from chuk_mcp_fretboard.engine.state import StateHolder, StateListener

__all__ = [
    "MusicTheoryEngine",
    "StateHolder",
    "StateListener",
]
