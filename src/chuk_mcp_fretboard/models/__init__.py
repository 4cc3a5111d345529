"""
Pydantic models for the fretboard engine.

This module provides:
- Note: Pitch class name with a root role flag
- Interval: Distance of a scale note from the tonic
- Scale: Generated scale notes and intervals
- Chord: Diatonic triad
- NotePosition: Note placed at a string and fret
- Tuning: Named open-string pitches
- EngineState: Session state snapshot
"""

from chuk_mcp_fretboard.models.theory import (
    Chord,
    EngineState,
    Interval,
    Note,
    NotePosition,
    Scale,
    Tuning,
)

__all__ = [
    "Chord",
    "EngineState",
    "Interval",
    "Note",
    "NotePosition",
    "Scale",
    "Tuning",
]
