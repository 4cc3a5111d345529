"""
Core music-theory primitives.

These are pure functions and immutable values with no session state:
- PitchClass: The 12 chromatic pitch classes and note-name normalization
- ScalePattern: Step patterns defining the nine supported scale types
- generate_scale: Root + scale type -> Scale
- derive_chords: Seven-note scale -> diatonic triads
- map_positions: Pitch classes + tuning -> fretboard positions
- Fretboard: Display model of highlighted positions
"""

from chuk_mcp_fretboard.core.chord import derive_chords
from chuk_mcp_fretboard.core.errors import (
    InvalidFretRangeError,
    InvalidNoteError,
    InvalidRootError,
    InvalidScaleTypeError,
    InvalidTuningError,
    PreconditionViolationError,
    TheoryError,
)
from chuk_mcp_fretboard.core.fretboard import (
    Fretboard,
    map_positions,
    physical_string_index,
    positions_for_notes,
    positions_for_scale,
    presentation_string_number,
    resolve_tuning,
)
from chuk_mcp_fretboard.core.pitch import (
    ENHARMONIC_ALIASES,
    INTERVAL_NAMES,
    PitchClass,
    capitalize_note_name,
    interval_name,
)
from chuk_mcp_fretboard.core.scale import (
    SCALE_PATTERNS,
    ScalePattern,
    build_scale,
    generate_scale,
    get_pattern,
    list_scale_types,
    lookup_pattern,
)

__all__ = [
    # Pitch
    "PitchClass",
    "ENHARMONIC_ALIASES",
    "INTERVAL_NAMES",
    "capitalize_note_name",
    "interval_name",
    # Scale
    "SCALE_PATTERNS",
    "ScalePattern",
    "build_scale",
    "generate_scale",
    "get_pattern",
    "list_scale_types",
    "lookup_pattern",
    # Chord
    "derive_chords",
    # Fretboard
    "Fretboard",
    "map_positions",
    "physical_string_index",
    "positions_for_notes",
    "positions_for_scale",
    "presentation_string_number",
    "resolve_tuning",
    # Errors
    "TheoryError",
    "InvalidNoteError",
    "InvalidRootError",
    "InvalidScaleTypeError",
    "PreconditionViolationError",
    "InvalidTuningError",
    "InvalidFretRangeError",
]
