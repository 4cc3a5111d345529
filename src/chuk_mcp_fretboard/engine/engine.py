"""
Music theory engine - the API consumed by the presentation layer.

Wraps the pure core functions and records results and validation errors
in a StateHolder. Validation failures never raise out of the engine: the
message goes into state.error and an empty value is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from chuk_mcp_fretboard.constants import DEFAULT_MAX_FRET
from chuk_mcp_fretboard.core import (
    PitchClass,
    TheoryError,
    derive_chords,
    generate_scale,
    get_pattern,
    positions_for_notes,
    positions_for_scale,
)
from chuk_mcp_fretboard.core.fretboard import TuningLike
from chuk_mcp_fretboard.models.theory import Chord, EngineState, Note, NotePosition, Scale

from .state import StateHolder, StateListener

logger = logging.getLogger(__name__)


class MusicTheoryEngine:
    """
    Scale, chord and fretboard operations with observable session state.

    One engine owns one StateHolder. Pass the engine (or its holder) to
    whatever needs to observe the state.
    """

    def __init__(self, state: StateHolder | None = None):
        """
        Initialize the engine.

        Args:
            state: State holder to write to (default: a new empty one)
        """
        self._state = state or StateHolder()

    @property
    def state(self) -> EngineState:
        """Current state snapshot."""
        return self._state.snapshot()

    @property
    def state_holder(self) -> StateHolder:
        return self._state

    def observe_state(self, listener: StateListener) -> Callable[[], None]:
        """
        Subscribe to state snapshots.

        The listener receives the current state immediately.

        Returns:
            Function that removes the listener
        """
        return self._state.subscribe(listener)

    def validate(self, root: str, scale_type: str) -> bool:
        """
        Check a root note and scale type.

        Both are checked. Each failure writes its message to state.error,
        so when both fail the scale type message is the one kept. A fully
        valid pair clears the error.

        Args:
            root: Root note name
            scale_type: Scale type name

        Returns:
            True if both are valid
        """
        errors = self._validation_errors(root, scale_type)
        for error in errors:
            self._record_error(error)
        if not errors:
            self._state.replace(error=None)
        return not errors

    def generate_scale(self, root: str, scale_type: str) -> Scale:
        """
        Generate a scale and make it the selected scale.

        Args:
            root: Root note name (case-insensitive; Db/Eb/Gb/Ab/Bb accepted)
            scale_type: Scale type name (case-insensitive)

        Returns:
            The Scale, or Scale.empty() if the input is invalid
        """
        errors = self._validation_errors(root, scale_type)
        if errors:
            for error in errors:
                self._record_error(error)
            return Scale.empty()

        # Selection and error clearing are published as one snapshot
        scale = generate_scale(root, scale_type)
        self._state.replace(selected_scale=scale, error=None)
        return scale

    def derive_chords(self, scale: Scale) -> list[Chord]:
        """
        Derive the diatonic chords of a scale and store them as chords in key.

        Args:
            scale: A seven-note scale

        Returns:
            Seven chords, or an empty list if the scale is not heptatonic
        """
        try:
            chords = derive_chords(scale)
        except TheoryError as e:
            self._record_error(e)
            return []

        self._state.replace(chords_in_key=tuple(chords), error=None)
        return chords

    def map_positions(
        self,
        scale_or_notes: Scale | Sequence[Note],
        tuning: TuningLike | None = None,
        max_fret: int = DEFAULT_MAX_FRET,
    ) -> list[NotePosition]:
        """
        Find fretboard positions for a scale or an explicit list of notes.

        For a scale, positions matching the scale root are flagged as root.
        For a note list, each position keeps its note's own root flag.

        Args:
            scale_or_notes: Scale or notes to place
            tuning: Open strings, lowest first (default: standard tuning)
            max_fret: Highest fret to include

        Returns:
            Positions grouped by string (lowest first), then by fret,
            or an empty list if the tuning or fret range is invalid
        """
        try:
            if isinstance(scale_or_notes, Scale):
                return positions_for_scale(scale_or_notes, tuning, max_fret)
            return positions_for_notes(scale_or_notes, tuning, max_fret)
        except TheoryError as e:
            self._record_error(e)
            return []

    def reset(self) -> None:
        """Clear the selected scale, chords and error."""
        self._state.reset()

    def _validation_errors(self, root: str, scale_type: str) -> list[TheoryError]:
        """Check root then scale type, collecting every failure in order."""
        errors: list[TheoryError] = []
        try:
            PitchClass.parse(root)
        except TheoryError as e:
            errors.append(e)
        try:
            get_pattern(scale_type)
        except TheoryError as e:
            errors.append(e)
        return errors

    def _record_error(self, error: TheoryError) -> None:
        logger.info("Validation failed: %s", error)
        self._state.replace(error=str(error))
