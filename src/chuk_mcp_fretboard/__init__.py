"""
CHUK Fretboard - scales, chords and fretboard positions over MCP.
"""

from chuk_mcp_fretboard.engine import MusicTheoryEngine, StateHolder

__version__ = "0.1.0"

__all__ = ["MusicTheoryEngine", "StateHolder", "__version__"]
