"""
Chord primitives - diatonic triads from stacked scale thirds.

Each degree of a seven-note scale gets a triad from the degrees at
offsets 0, +2 and +4, wrapping around the scale. Qualities come from the
major-scale harmonization table and are applied by position.
"""

from __future__ import annotations

from chuk_mcp_fretboard.constants import (
    DIATONIC_NUMERALS,
    DIATONIC_QUALITIES,
    ChordQualityName,
    ChordType,
    ErrorMessages,
)
from chuk_mcp_fretboard.models.theory import Chord, Note, Scale

from .errors import PreconditionViolationError

# Scale-degree offsets of root, third and fifth
TRIAD_OFFSETS: tuple[int, ...] = (0, 2, 4)


def _chord_note(note: Note, is_root: bool) -> Note:
    return note.model_copy(update={"is_root": is_root})


def build_triad(scale: Scale, degree_index: int) -> Chord:
    """
    Build the triad on one scale degree.

    Args:
        scale: A seven-note scale
        degree_index: Degree of the chord root, 0-6

    Returns:
        The diatonic Chord on that degree
    """
    size = len(scale.notes)
    quality = DIATONIC_QUALITIES[degree_index]
    notes = [
        _chord_note(scale.notes[(degree_index + offset) % size], is_root=offset == 0)
        for offset in TRIAD_OFFSETS
    ]
    chord_type = (
        ChordType.DIMINISHED if quality == ChordQualityName.DIMINISHED else ChordType.TRIAD
    )
    return Chord(
        name=f"{notes[0].name} {quality.value}",
        notes=notes,
        chord_type=chord_type,
        quality=quality,
        degree=degree_index + 1,
        numeral=DIATONIC_NUMERALS[degree_index],
    )


def derive_chords(scale: Scale) -> list[Chord]:
    """
    Get all diatonic chords for a scale.

    Args:
        scale: The scale to harmonize

    Returns:
        Seven chords, one per degree, tonic first

    Raises:
        PreconditionViolationError: the scale does not have exactly 7 notes
    """
    if not scale.is_heptatonic:
        raise PreconditionViolationError(
            ErrorMessages.NOT_HEPTATONIC.format(scale=scale, count=len(scale.notes))
        )
    return [build_triad(scale, index) for index in range(len(DIATONIC_QUALITIES))]
