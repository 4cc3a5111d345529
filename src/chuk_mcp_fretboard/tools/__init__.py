"""
MCP tool implementations.

Tools are organized by domain:
- theory - Scales, chords in key, input validation, session state
- fretboard - Fretboard positions, diagrams and tunings
"""

from chuk_mcp_fretboard.tools.fretboard import register_fretboard_tools
from chuk_mcp_fretboard.tools.theory import register_theory_tools

__all__ = [
    "register_fretboard_tools",
    "register_theory_tools",
]
