"""
Theory models - the values passed between the engine and its callers.

Every model here is a frozen snapshot with tuple collections. State
changes build new instances.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_fretboard.constants import ChordQualityName, ChordType


class Note(BaseModel):
    """
    A named pitch in a particular context.

    is_root is a role flag relative to the scale or chord the note
    belongs to, not a property of the pitch itself.
    """

    name: str = Field(..., description="Canonical pitch class name (e.g. 'C#')")
    octave: int | None = Field(None, description="Optional octave number")
    is_root: bool = Field(False, alias="isRoot", description="Root of the enclosing context")

    model_config = {"frozen": True, "populate_by_name": True}


class Interval(BaseModel):
    """Distance of a scale note from the tonic."""

    name: str = Field(..., description="Interval name (e.g. 'Perfect Fifth')")
    semitones: int = Field(..., ge=0, le=12, description="Semitones above the tonic")
    note: Note = Field(..., description="The note at this interval")

    model_config = {"frozen": True}


class Scale(BaseModel):
    """
    A generated scale: tonic first, octave excluded.

    notes[0] is the only root note; intervals run parallel to notes.
    """

    root: Note = Field(..., description="Tonic of the scale")
    scale_type: str = Field("", alias="type", description="Canonical scale type name")
    notes: tuple[Note, ...] = Field(default_factory=tuple, description="Scale notes, tonic first")
    intervals: tuple[Interval, ...] = Field(
        default_factory=tuple, description="Interval per note"
    )

    model_config = {"frozen": True, "populate_by_name": True}

    @classmethod
    def empty(cls) -> Scale:
        """The value returned when scale generation fails."""
        return cls(root=Note(name="", is_root=False), scale_type="", notes=(), intervals=())

    @property
    def is_empty(self) -> bool:
        return not self.notes

    @property
    def note_names(self) -> list[str]:
        return [note.name for note in self.notes]

    @property
    def is_heptatonic(self) -> bool:
        return len(self.notes) == 7

    def __str__(self) -> str:
        if self.is_empty:
            return "(empty scale)"
        return f"{self.root.name} {self.scale_type}"


class Chord(BaseModel):
    """A triad built from stacked scale thirds."""

    name: str = Field(..., description="Display name, '<root> <quality>'")
    notes: tuple[Note, ...] = Field(..., description="Root, third and fifth")
    chord_type: ChordType = Field(ChordType.TRIAD, alias="type", description="Chord type")
    quality: ChordQualityName = Field(ChordQualityName.MAJOR, description="Triad quality")
    degree: int = Field(1, ge=1, le=7, description="Scale degree of the chord root")
    numeral: str = Field("", description="Roman numeral in the key")

    model_config = {"frozen": True, "populate_by_name": True}


class NotePosition(BaseModel):
    """
    A note placed on the fretboard.

    string uses presentation numbering: 1 is the highest-pitched string.
    """

    note: Note = Field(..., description="Note sounding at this position")
    string: int = Field(..., ge=1, description="String number, 1 = highest pitch")
    fret: int = Field(..., ge=0, description="Fret number, 0 = open string")

    model_config = {"frozen": True}


class Tuning(BaseModel):
    """A named set of open-string pitches, lowest physical string first."""

    name: str = Field(..., description="Tuning name")
    description: str = Field("", description="Human-readable description")
    strings: tuple[str, ...] = Field(
        ..., min_length=1, description="Open strings, low to high"
    )

    model_config = {"frozen": True}

    @property
    def string_count(self) -> int:
        return len(self.strings)


class EngineState(BaseModel):
    """
    Session state observed by the presentation layer.

    Replaced wholesale on every update so readers always see a consistent
    snapshot.
    """

    selected_scale: Scale = Field(default_factory=Scale.empty, description="Last generated scale")
    chords_in_key: tuple[Chord, ...] = Field(
        default_factory=tuple, description="Last derived chords"
    )
    error: str | None = Field(None, description="Last validation error, if any")

    model_config = {"frozen": True}
