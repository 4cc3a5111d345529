"""
Scale primitives - ScalePattern registry and scale generation.

Scales are step patterns walked from a root. The registry is the single
source of truth for valid scale type names; lookup ignores case.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType

from chuk_mcp_fretboard.models.theory import Interval, Note, Scale

from .errors import InvalidScaleTypeError
from .pitch import PitchClass, interval_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScalePattern:
    """
    A scale defined by its step pattern.

    The steps are from one degree to the next (not cumulative).
    Ionian is: W W H W W W H (2 2 1 2 2 2 1 semitones)

    Immutable and hashable.
    """

    name: str
    steps: tuple[int, ...]

    def __post_init__(self) -> None:
        # Validate that steps sum to an octave (12 semitones)
        total = sum(self.steps)
        if total != 12:
            raise ValueError(f"Scale steps must sum to 12 semitones, got {total}")
        if any(step <= 0 for step in self.steps):
            raise ValueError(f"Scale steps must be positive, got {self.steps}")

    def __len__(self) -> int:
        return len(self.steps)

    def get_pitches(self, root: PitchClass) -> list[PitchClass]:
        """
        Get all pitch classes in this scale starting from root.

        The final step lands back on the octave; that landing pitch is
        dropped, so the result has len(steps) pitches.
        """
        pitches = [root]
        current = root
        for step in self.steps:
            current = current.transpose(step)
            pitches.append(current)
        return pitches[: len(self.steps)]

    def __str__(self) -> str:
        return self.name


_PATTERNS: tuple[ScalePattern, ...] = (
    ScalePattern("Ionian", (2, 2, 1, 2, 2, 2, 1)),
    ScalePattern("Dorian", (2, 1, 2, 2, 2, 1, 2)),
    ScalePattern("Phrygian", (1, 2, 2, 2, 1, 2, 2)),
    ScalePattern("Lydian", (2, 2, 2, 1, 2, 2, 1)),
    ScalePattern("Mixolydian", (2, 2, 1, 2, 2, 1, 2)),
    ScalePattern("Aeolian", (2, 1, 2, 2, 1, 2, 2)),
    ScalePattern("Locrian", (1, 2, 2, 1, 2, 2, 2)),
    ScalePattern("Pentatonic Major", (2, 2, 3, 2, 3)),
    ScalePattern("Pentatonic Minor", (3, 2, 2, 3, 2)),
)

# Keyed by lower-cased name for case-insensitive lookup
SCALE_PATTERNS = MappingProxyType({pattern.name.lower(): pattern for pattern in _PATTERNS})


def list_scale_types() -> list[str]:
    """Canonical scale type names in registry order."""
    return [pattern.name for pattern in _PATTERNS]


def lookup_pattern(type_name: str) -> ScalePattern | None:
    """Find a scale pattern by name, ignoring case. None if unknown."""
    return SCALE_PATTERNS.get(type_name.strip().lower())


def get_pattern(type_name: str) -> ScalePattern:
    """Find a scale pattern by name, raising InvalidScaleTypeError if unknown."""
    pattern = lookup_pattern(type_name)
    if pattern is None:
        raise InvalidScaleTypeError(type_name, list_scale_types())
    return pattern


def build_scale(root: PitchClass, pattern: ScalePattern) -> Scale:
    """
    Build a Scale from a resolved root and pattern.

    Args:
        root: The tonic pitch class
        pattern: The step pattern to walk

    Returns:
        Scale with the tonic flagged as root and one interval per note
    """
    notes: list[Note] = []
    intervals: list[Interval] = []
    for position, pitch in enumerate(pattern.get_pitches(root)):
        note = Note(name=pitch.spell(), is_root=position == 0)
        semitones = 0 if position == 0 else root.semitones_to(pitch)
        notes.append(note)
        intervals.append(Interval(name=interval_name(semitones), semitones=semitones, note=note))

    return Scale(
        root=Note(name=root.spell(), is_root=True),
        scale_type=pattern.name,
        notes=notes,
        intervals=intervals,
    )


def generate_scale(root: str, scale_type: str) -> Scale:
    """
    Generate a scale from user-supplied names.

    Args:
        root: Root note name (e.g. 'C', 'f#', 'Bb')
        scale_type: Scale type name (e.g. 'Ionian', 'pentatonic minor')

    Returns:
        The generated Scale

    Raises:
        InvalidRootError: root is not a supported note name
        InvalidScaleTypeError: scale_type is not in the registry
    """
    pitch = PitchClass.parse(root)
    pattern = get_pattern(scale_type)
    scale = build_scale(pitch, pattern)
    logger.debug("Generated %s: %s", scale, " ".join(scale.note_names))
    return scale
