"""
Constants and enums for the fretboard engine.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class ChordType(str, Enum):
    """Chord classification reported alongside diatonic chords."""

    TRIAD = "triad"
    DIMINISHED = "diminished"


class ChordQualityName(str, Enum):
    """Display names of the diatonic triad qualities."""

    MAJOR = "Major"
    MINOR = "Minor"
    DIMINISHED = "Diminished"


# Harmonization table for a seven-note scale, by degree (0-6)
DIATONIC_QUALITIES: tuple[ChordQualityName, ...] = (
    ChordQualityName.MAJOR,
    ChordQualityName.MINOR,
    ChordQualityName.MINOR,
    ChordQualityName.MAJOR,
    ChordQualityName.MAJOR,
    ChordQualityName.MINOR,
    ChordQualityName.DIMINISHED,
)

# Roman numerals matching DIATONIC_QUALITIES
DIATONIC_NUMERALS: tuple[str, ...] = ("I", "ii", "iii", "IV", "V", "vi", "vii°")

# Open strings from lowest to highest physical string
STANDARD_TUNING: tuple[str, ...] = ("E", "A", "D", "G", "B", "E")

DEFAULT_MAX_FRET = 12

# Inlay positions drawn on the neck
FRET_MARKERS: tuple[int, ...] = (3, 5, 7, 9, 12, 15, 17, 19, 21, 24)
DOUBLE_DOT_FRET = 12

FretMarkerClass = Literal["single-dot", "double-dot"]

# Environment variable overriding the project tunings directory
TUNINGS_DIR_ENV = "CHUK_FRETBOARD_TUNINGS_DIR"


class ErrorMessages:
    """Standardized error messages."""

    INVALID_ROOT = "Invalid root note: {root}. Please use a valid note name."
    INVALID_NOTE = "Invalid note: {note}. Please use a valid note name."
    INVALID_SCALE_TYPE = "Invalid scale type: {scale_type}. Supported types: {supported}"
    NOT_HEPTATONIC = (
        "Cannot derive diatonic chords from '{scale}': expected 7 notes, got {count}."
    )
    INVALID_TUNING = "Invalid tuning: unknown open string note '{note}'."
    EMPTY_TUNING = "Invalid tuning: at least one string is required."
    INVALID_FRET_RANGE = "Invalid fret range: max fret must be 0 or greater, got {max_fret}."
    TUNING_NOT_FOUND = "Tuning '{name}' not found."
    NO_SCALE_SELECTED = "No scale selected. Generate one first."


class SuccessMessages:
    """Standardized success messages."""

    SCALE_GENERATED = "Generated {root} {scale_type} ({count} notes)."
    CHORDS_DERIVED = "Derived {count} chords in {root} {scale_type}."
