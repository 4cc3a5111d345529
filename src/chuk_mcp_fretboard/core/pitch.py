"""
Pitch primitives - PitchClass, note-name normalization, interval names.

PitchClass represents the 12 chromatic pitches (octave-independent).
Only canonical sharp names and five flat aliases are accepted as input;
other accidentals (Cb, E#, double sharps) are rejected even though they
name a real pitch.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType

from .errors import InvalidRootError

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)
_FLAT_NAMES: tuple[str, ...] = (
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
)

# Flat spellings accepted as input, resolved to the sharp canonical name
ENHARMONIC_ALIASES = MappingProxyType(
    {
        "Db": "C#",
        "Eb": "D#",
        "Gb": "F#",
        "Ab": "G#",
        "Bb": "A#",
    }
)

INTERVAL_NAMES = MappingProxyType(
    {
        0: "Unison",
        1: "Minor Second",
        2: "Major Second",
        3: "Minor Third",
        4: "Major Third",
        5: "Perfect Fourth",
        6: "Tritone",
        7: "Perfect Fifth",
        8: "Minor Sixth",
        9: "Major Sixth",
        10: "Minor Seventh",
        11: "Major Seventh",
        12: "Octave",
    }
)


def capitalize_note_name(raw: str) -> str:
    """Trim and capitalize a note name: first letter upper, rest lower."""
    name = raw.strip()
    return name[:1].upper() + name[1:].lower()


def interval_name(semitones: int) -> str:
    """Name of an interval of 0-12 semitones."""
    if semitones not in INTERVAL_NAMES:
        raise ValueError(f"Interval must be 0-12 semitones, got {semitones}")
    return INTERVAL_NAMES[semitones]


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic equivalents share the same value (C# == Db == 1).

    Spelling is a display concern, handled at serialization.
    Internally, we use sharp names (Cs, Ds, etc.).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def semitones_to(self, other: PitchClass) -> int:
        """Ascending distance to another pitch class, 0-11."""
        return (other.value - self.value) % 12

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def normalize(cls, raw: str) -> PitchClass | None:
        """
        Resolve a user-supplied note name.

        Accepts the 12 sharp names and the flats Db, Eb, Gb, Ab, Bb in any
        letter case. Returns None for anything else.
        """
        name = capitalize_note_name(raw)
        name = ENHARMONIC_ALIASES.get(name, name)
        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))
        return None

    @classmethod
    def parse(cls, raw: str) -> PitchClass:
        """Like normalize, but raises InvalidRootError for unknown names."""
        pitch = cls.normalize(raw)
        if pitch is None:
            raise InvalidRootError(raw)
        return pitch

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Canonical sharp-preferred names in chromatic order."""
        return _SHARP_NAMES
