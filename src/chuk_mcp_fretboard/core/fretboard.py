"""
Fretboard primitives - mapping pitch classes onto strings and frets.

Tunings list open strings from the lowest physical string to the highest.
Positions use presentation numbering, where string 1 is the highest
pitched string. presentation_string_number() is the only place that
converts between the two.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from chuk_mcp_fretboard.constants import (
    DEFAULT_MAX_FRET,
    DOUBLE_DOT_FRET,
    FRET_MARKERS,
    STANDARD_TUNING,
    FretMarkerClass,
)
from chuk_mcp_fretboard.models.theory import Note, NotePosition, Scale, Tuning

from .errors import InvalidFretRangeError, InvalidNoteError, InvalidTuningError
from .pitch import PitchClass

TuningLike = Tuning | Sequence[str]


def presentation_string_number(physical_index: int, string_count: int) -> int:
    """
    Convert a physical string index to its displayed string number.

    Physical index 0 is the lowest string; on a six-string guitar it is
    displayed as string 6, and physical index 5 (high E) as string 1.
    """
    return string_count - physical_index


def physical_string_index(string_number: int, string_count: int) -> int:
    """Inverse of presentation_string_number."""
    return string_count - string_number


def resolve_tuning(tuning: TuningLike | None = None) -> list[PitchClass]:
    """
    Resolve open-string names to pitch classes.

    Args:
        tuning: A Tuning, a list of note names (lowest string first), or
            None for standard tuning

    Returns:
        Open-string pitch classes, lowest string first

    Raises:
        InvalidTuningError: the tuning is empty or names an unknown note
    """
    if tuning is None:
        names: Sequence[str] = STANDARD_TUNING
    elif isinstance(tuning, Tuning):
        names = tuning.strings
    else:
        names = tuning

    if not names:
        raise InvalidTuningError()

    pitches = []
    for name in names:
        pitch = PitchClass.normalize(name)
        if pitch is None:
            raise InvalidTuningError(name)
        pitches.append(pitch)
    return pitches


def map_positions(
    targets: Mapping[PitchClass, bool],
    tuning: TuningLike | None = None,
    max_fret: int = DEFAULT_MAX_FRET,
) -> list[NotePosition]:
    """
    Find every string/fret position sounding one of the target pitches.

    Positions are grouped by physical string, lowest first, then ordered
    by ascending fret.

    Args:
        targets: Pitch classes to find, mapped to their root flag
        tuning: Open strings, lowest first (default: standard tuning)
        max_fret: Highest fret to include

    Returns:
        Matching positions
    """
    if max_fret < 0:
        raise InvalidFretRangeError(max_fret)

    open_strings = resolve_tuning(tuning)
    string_count = len(open_strings)
    positions: list[NotePosition] = []

    for physical_index, open_pitch in enumerate(open_strings):
        for fret in range(max_fret + 1):
            pitch = open_pitch.transpose(fret)
            if pitch not in targets:
                continue
            positions.append(
                NotePosition(
                    note=Note(name=pitch.spell(), is_root=targets[pitch]),
                    string=presentation_string_number(physical_index, string_count),
                    fret=fret,
                )
            )

    return positions


def positions_for_scale(
    scale: Scale,
    tuning: TuningLike | None = None,
    max_fret: int = DEFAULT_MAX_FRET,
) -> list[NotePosition]:
    """Positions of a scale's notes; only the scale root is flagged as root."""
    targets = {
        PitchClass.parse(note.name): note.name == scale.root.name for note in scale.notes
    }
    return map_positions(targets, tuning, max_fret)


def positions_for_notes(
    notes: Sequence[Note],
    tuning: TuningLike | None = None,
    max_fret: int = DEFAULT_MAX_FRET,
) -> list[NotePosition]:
    """
    Positions of an explicit note list, e.g. a chord.

    Each position takes its root flag from the first note with that name.
    """
    targets: dict[PitchClass, bool] = {}
    for note in notes:
        pitch = PitchClass.normalize(note.name)
        if pitch is None:
            raise InvalidNoteError(note.name)
        targets.setdefault(pitch, note.is_root)
    return map_positions(targets, tuning, max_fret)


class Fretboard:
    """
    Display model of a fretboard with highlighted notes.

    Holds what a renderer needs: the string and fret grid, the positions
    to highlight, fret markers, and accessible labels for each cell.
    """

    def __init__(
        self,
        tuning: TuningLike | None = None,
        max_frets: int = DEFAULT_MAX_FRET,
        show_fret_markers: bool = True,
    ):
        if max_frets < 0:
            raise InvalidFretRangeError(max_frets)
        self.open_strings = resolve_tuning(tuning)
        self.max_frets = max_frets
        self.show_fret_markers = show_fret_markers
        self._positions: dict[tuple[int, int], NotePosition] = {}

    @property
    def strings(self) -> list[int]:
        """Presentation string numbers, highest pitch first."""
        return list(range(1, len(self.open_strings) + 1))

    @property
    def frets(self) -> list[int]:
        return list(range(self.max_frets + 1))

    @property
    def positions(self) -> list[NotePosition]:
        return list(self._positions.values())

    def show_positions(self, positions: Sequence[NotePosition]) -> None:
        """Replace the highlighted positions."""
        self._positions = {(p.string, p.fret): p for p in positions}

    def show_scale(self, scale: Scale) -> list[NotePosition]:
        positions = positions_for_scale(scale, self._tuning_names(), self.max_frets)
        self.show_positions(positions)
        return positions

    def show_notes(self, notes: Sequence[Note]) -> list[NotePosition]:
        positions = positions_for_notes(notes, self._tuning_names(), self.max_frets)
        self.show_positions(positions)
        return positions

    def clear(self) -> None:
        self._positions = {}

    def note_at(self, string: int, fret: int) -> NotePosition | None:
        return self._positions.get((string, fret))

    def string_name(self, string: int) -> str:
        """Open-string note name for a presentation string number."""
        index = physical_string_index(string, len(self.open_strings))
        return self.open_strings[index].spell()

    def should_show_fret_marker(self, fret: int) -> bool:
        return self.show_fret_markers and fret in FRET_MARKERS

    def fret_marker_class(self, fret: int) -> FretMarkerClass:
        return "double-dot" if fret == DOUBLE_DOT_FRET else "single-dot"

    def note_class(self, position: NotePosition) -> str:
        return "note root-note" if position.note.is_root else "note scale-note"

    def aria_label(self, string: int, fret: int) -> str:
        """Accessible description of one cell of the grid."""
        position = self.note_at(string, fret)
        if position is None:
            return f"Empty position on string {string}, fret {fret}"
        open_suffix = " (Open)" if position.fret == 0 else ""
        string_name = self.string_name(position.string)
        return f"{position.note.name} on {string_name} string, {position.fret}{open_suffix} fret"

    def render_text(self) -> str:
        """
        Render a plain-text diagram, string 1 at the top.

        Root notes are bracketed; the nut is drawn as '||'.
        """
        lines = ["   " + f"{0:^5}" + "  " + " ".join(f"{fret:^5}" for fret in self.frets[1:])]

        for string in self.strings:
            cells = []
            for fret in self.frets:
                position = self.note_at(string, fret)
                label = ""
                if position is not None:
                    name = position.note.name
                    label = f"[{name}]" if position.note.is_root else name
                cells.append(f"{label:-^5}")
            name = self.string_name(string)
            lines.append(f"{name:<2} {cells[0]}||{'|'.join(cells[1:])}|")

        if self.show_fret_markers:
            markers = []
            for fret in self.frets[1:]:
                mark = ""
                if self.should_show_fret_marker(fret):
                    mark = "**" if self.fret_marker_class(fret) == "double-dot" else "*"
                markers.append(f"{mark:^5}")
            lines.append("   " + " " * 5 + "  " + " ".join(markers))

        return "\n".join(line.rstrip() for line in lines)

    def _tuning_names(self) -> list[str]:
        return [pitch.spell() for pitch in self.open_strings]
