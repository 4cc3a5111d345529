"""
Tests for the music theory engine and its state holder.

Tests cover:
- StateHolder snapshots, replacement and subscriptions
- MusicTheoryEngine validation and error recording
- Scale generation, chord derivation and position mapping through the engine
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from chuk_mcp_fretboard.core import derive_chords, generate_scale
from chuk_mcp_fretboard.engine import MusicTheoryEngine, StateHolder
from chuk_mcp_fretboard.models import EngineState, Note, Scale


class TestStateHolder:
    """Tests for StateHolder."""

    def test_initial_state_is_empty(self) -> None:
        """A new holder starts with the empty state."""
        state = StateHolder().snapshot()
        assert state.selected_scale.is_empty
        assert state.chords_in_key == ()
        assert state.error is None

    def test_replace_builds_new_snapshot(self) -> None:
        """Replacing fields leaves earlier snapshots untouched."""
        holder = StateHolder()
        before = holder.snapshot()
        after = holder.replace(error="boom")
        assert before.error is None
        assert after.error == "boom"
        assert holder.snapshot() is after

    def test_subscribe_receives_current_then_updates(self) -> None:
        """Subscribers get the current snapshot immediately."""
        holder = StateHolder()
        received: list[EngineState] = []
        holder.subscribe(received.append)
        holder.replace(error="first")
        holder.replace(error=None)
        assert [s.error for s in received] == [None, "first", None]

    def test_unsubscribe(self) -> None:
        """Unsubscribed listeners stop receiving snapshots."""
        holder = StateHolder()
        received: list[EngineState] = []
        unsubscribe = holder.subscribe(received.append)
        unsubscribe()
        holder.replace(error="ignored")
        assert len(received) == 1
        assert holder.subscriber_count == 0

    def test_failing_listener_does_not_block_others(self) -> None:
        """An exception in one listener is logged and delivery continues."""
        holder = StateHolder()
        received: list[EngineState] = []

        def broken(state: EngineState) -> None:
            raise RuntimeError("listener failure")

        holder.subscribe(broken)
        holder.subscribe(received.append)
        holder.replace(error="still delivered")
        assert received[-1].error == "still delivered"

    def test_reset(self) -> None:
        """Reset restores the empty state."""
        holder = StateHolder()
        holder.replace(error="boom")
        assert holder.reset() == EngineState()

    def test_stored_values_are_detached(self) -> None:
        """Changing the list passed to replace does not change the state."""
        holder = StateHolder()
        chords = derive_chords(generate_scale("C", "Ionian"))
        snapshot = holder.replace(chords_in_key=chords)
        chords.clear()
        assert len(snapshot.chords_in_key) == 7
        assert isinstance(holder.snapshot().chords_in_key, tuple)

    def test_engine_results_cannot_change_state(self) -> None:
        """Values returned by the engine cannot alter its current snapshot."""
        engine = MusicTheoryEngine()
        scale = engine.generate_scale("C", "Ionian")
        chords = engine.derive_chords(scale)
        snapshot = engine.state

        chords.clear()
        with pytest.raises(AttributeError):
            scale.notes.pop()
        with pytest.raises(AttributeError):
            snapshot.chords_in_key[0].notes.append(scale.notes[0])

        assert len(engine.state.chords_in_key) == 7
        assert len(engine.state.selected_scale.notes) == 7
        assert engine.state is snapshot

    def test_listeners_see_writes_in_order(self) -> None:
        """With concurrent writers every listener ends on the current state."""
        holder = StateHolder()
        received: list[EngineState] = []
        holder.subscribe(received.append)

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda i: holder.replace(error=str(i)), range(200)))

        assert len(received) == 201
        assert received[-1] is holder.snapshot()


class TestValidate:
    """Tests for engine input validation."""

    def test_valid_inputs(self, engine: MusicTheoryEngine) -> None:
        """Supported roots and types validate."""
        assert engine.validate("C", "Ionian") is True
        assert engine.validate("F#", "Aeolian") is True
        assert engine.validate("Gb", "Pentatonic Minor") is True

    def test_invalid_roots(self, engine: MusicTheoryEngine) -> None:
        """Unknown and unsupported roots fail."""
        assert engine.validate("H", "Ionian") is False
        assert engine.validate("Cb", "Ionian") is False

    def test_invalid_types(self, engine: MusicTheoryEngine) -> None:
        """Unknown and empty scale types fail."""
        assert engine.validate("C", "InvalidType") is False
        assert engine.validate("C", "") is False

    def test_root_error_message(self, engine: MusicTheoryEngine) -> None:
        """A bad root sets the root error."""
        engine.validate("H", "Ionian")
        assert "Invalid root note" in engine.state.error

    def test_type_error_lists_supported(self, engine: MusicTheoryEngine) -> None:
        """A bad type lists the supported types."""
        engine.validate("C", "Bebop")
        assert engine.state.error.startswith("Invalid scale type: Bebop")
        assert "Pentatonic Minor" in engine.state.error

    def test_last_failure_wins(self, engine: MusicTheoryEngine) -> None:
        """When both fail, the scale type message is kept."""
        engine.validate("H", "Bebop")
        assert engine.state.error.startswith("Invalid scale type")

    def test_both_failures_are_published(self, engine: MusicTheoryEngine) -> None:
        """Observers see the root failure before it is overwritten."""
        errors: list[str | None] = []
        engine.observe_state(lambda state: errors.append(state.error))
        engine.validate("H", "Bebop")
        assert "Invalid root note" in errors[1]
        assert "Invalid scale type" in errors[2]

    def test_valid_call_clears_error(self, engine: MusicTheoryEngine) -> None:
        """Re-validating with good input clears the previous error."""
        engine.validate("H", "Ionian")
        assert engine.validate("C", "Ionian") is True
        assert engine.state.error is None


class TestGenerateScale:
    """Tests for engine scale generation."""

    def test_updates_selected_scale(self, engine: MusicTheoryEngine) -> None:
        """Successful generation selects the scale."""
        scale = engine.generate_scale("C", "Ionian")
        assert engine.state.selected_scale == scale
        assert engine.state.selected_scale.root.name == "C"
        assert engine.state.selected_scale.scale_type == "Ionian"

    def test_invalid_root_returns_empty(self, engine: MusicTheoryEngine) -> None:
        """An invalid root gives the empty scale and an error."""
        scale = engine.generate_scale("H", "Ionian")
        assert scale == Scale.empty()
        assert "Invalid root note" in engine.state.error

    def test_failure_keeps_previous_selection(self, engine: MusicTheoryEngine) -> None:
        """A failed call does not discard the selected scale."""
        good = engine.generate_scale("D", "Dorian")
        engine.generate_scale("C", "Nope")
        assert engine.state.selected_scale == good

    def test_success_clears_error(self, engine: MusicTheoryEngine) -> None:
        """A good call after a bad one clears the error."""
        engine.validate("H", "Ionian")
        engine.generate_scale("C", "Ionian")
        assert engine.state.error is None

    def test_case_insensitive(self, engine: MusicTheoryEngine) -> None:
        """Lower-case input yields the identical scale."""
        assert engine.generate_scale("c", "ionian") == engine.generate_scale("C", "Ionian")

    def test_enharmonic_root(self, engine: MusicTheoryEngine) -> None:
        """Gb is accepted and spelled as F#."""
        scale = engine.generate_scale("Gb", "Ionian")
        assert scale.root.name == "F#"
        assert len(scale.notes) == 7

    def test_success_publishes_one_snapshot(self, engine: MusicTheoryEngine) -> None:
        """Observers see the new scale and the cleared error together."""
        engine.validate("H", "Ionian")
        received: list[EngineState] = []
        engine.observe_state(received.append)
        engine.generate_scale("D", "Dorian")
        assert len(received) == 2
        assert received[-1].error is None
        assert received[-1].selected_scale.root.name == "D"

    def test_generation_keeps_chords(self, engine: MusicTheoryEngine) -> None:
        """Selecting a new scale leaves the derived chords in place."""
        engine.derive_chords(engine.generate_scale("C", "Ionian"))
        engine.generate_scale("A", "Aeolian")
        assert engine.state.chords_in_key[0].name == "C Major"


class TestDeriveChords:
    """Tests for engine chord derivation."""

    def test_updates_chords_in_key(self, engine: MusicTheoryEngine) -> None:
        """Derived chords are stored in state."""
        chords = engine.derive_chords(engine.generate_scale("C", "Ionian"))
        assert len(chords) == 7
        assert list(engine.state.chords_in_key) == chords
        assert engine.state.chords_in_key[0].name == "C Major"

    def test_pentatonic_sets_error(self, engine: MusicTheoryEngine) -> None:
        """Five-note scales produce no chords and an error."""
        chords = engine.derive_chords(engine.generate_scale("A", "Pentatonic Minor"))
        assert chords == []
        assert "expected 7 notes" in engine.state.error

    def test_success_clears_error(self, engine: MusicTheoryEngine) -> None:
        """A successful derivation clears an earlier error."""
        engine.validate("H", "Ionian")
        engine.derive_chords(engine.generate_scale("G", "Mixolydian"))
        assert engine.state.error is None


class TestMapPositions:
    """Tests for engine position mapping."""

    def test_scale(self, engine: MusicTheoryEngine) -> None:
        """Scale positions with the standard tuning by default."""
        positions = engine.map_positions(engine.generate_scale("C", "Ionian"))
        assert any(
            p.string == 5 and p.fret == 3 and p.note.name == "C" and p.note.is_root
            for p in positions
        )
        assert all(p.note.name == "C" for p in positions if p.note.is_root)

    def test_notes(self, engine: MusicTheoryEngine) -> None:
        """Note-list positions keep the notes' own root flags."""
        notes = [Note(name="C", is_root=True), Note(name="E"), Note(name="G")]
        positions = engine.map_positions(notes, ["D", "A", "D", "G", "B", "E"], max_fret=3)
        assert [(p.string, p.fret, p.note.name, p.note.is_root) for p in positions] == [
            (6, 2, "E", False),
            (5, 3, "C", True),
            (4, 2, "E", False),
            (3, 0, "G", False),
            (2, 1, "C", True),
            (1, 0, "E", False),
            (1, 3, "G", False),
        ]

    def test_chord_positions(self, engine: MusicTheoryEngine) -> None:
        """A derived chord highlights its own root."""
        chords = engine.derive_chords(engine.generate_scale("C", "Ionian"))
        positions = engine.map_positions(chords[4].notes, max_fret=3)
        roots = {p.note.name for p in positions if p.note.is_root}
        assert roots == {"G"}

    def test_invalid_tuning(self, engine: MusicTheoryEngine) -> None:
        """An unknown open string gives no positions and an error."""
        positions = engine.map_positions(engine.generate_scale("C", "Ionian"), ["E", "H"])
        assert positions == []
        assert "Invalid tuning" in engine.state.error

    def test_invalid_note_in_list(self, engine: MusicTheoryEngine) -> None:
        """A bad name in a note list is reported as a note, not a root."""
        positions = engine.map_positions([Note(name="C", is_root=True), Note(name="H")])
        assert positions == []
        assert engine.state.error.startswith("Invalid note: H")

    def test_negative_max_fret(self, engine: MusicTheoryEngine) -> None:
        """A negative fret range gives no positions and an error."""
        positions = engine.map_positions(engine.generate_scale("C", "Ionian"), max_fret=-2)
        assert positions == []
        assert "Invalid fret range" in engine.state.error

    def test_does_not_touch_state(self, engine: MusicTheoryEngine) -> None:
        """Successful mapping leaves state unchanged."""
        scale = engine.generate_scale("E", "Phrygian")
        before = engine.state
        engine.map_positions(scale)
        assert engine.state is before


class TestConcurrency:
    """Tests for concurrent callers."""

    def test_concurrent_generation_leaves_consistent_state(self) -> None:
        """Concurrent writers never leave a partially updated state."""
        engine = MusicTheoryEngine()
        roots = ["C", "D", "E", "F", "G", "A", "B"] * 20

        with ThreadPoolExecutor(max_workers=8) as pool:
            scales = list(pool.map(lambda root: engine.generate_scale(root, "Ionian"), roots))

        state = engine.state
        assert state.error is None
        assert state.selected_scale in scales
        assert len(state.selected_scale.notes) == 7


@pytest.mark.parametrize("root", ["C", "c", "Bb", "f#"])
def test_engine_reset(root: str) -> None:
    """Reset clears everything the engine recorded."""
    engine = MusicTheoryEngine()
    engine.derive_chords(engine.generate_scale(root, "Ionian"))
    engine.reset()
    assert engine.state == EngineState()
