#!/usr/bin/env python3
"""
Example: Explore a key on the fretboard.

This demonstrates the engine end to end - generate a scale, harmonize it,
and draw the scale and one of its chords on the neck.

Usage:
    python examples/explore_fretboard.py
    python examples/explore_fretboard.py G Mixolydian drop-d
"""

import sys

from chuk_mcp_fretboard.core import Fretboard
from chuk_mcp_fretboard.engine import MusicTheoryEngine
from chuk_mcp_fretboard.models import EngineState
from chuk_mcp_fretboard.tunings import TuningLoader


def main() -> None:
    """Print a scale, its chords and two fretboard diagrams."""
    root = sys.argv[1] if len(sys.argv) > 1 else "C"
    scale_type = sys.argv[2] if len(sys.argv) > 2 else "Ionian"
    tuning_name = sys.argv[3] if len(sys.argv) > 3 else "standard"

    engine = MusicTheoryEngine()

    def report_error(state: EngineState) -> None:
        if state.error:
            print(f"Error: {state.error}")

    engine.observe_state(report_error)

    tuning = TuningLoader().get_tuning(tuning_name)
    if tuning is None:
        print(f"Unknown tuning: {tuning_name}")
        return

    scale = engine.generate_scale(root, scale_type)
    if scale.is_empty:
        return

    print(f"{scale} ({tuning.name} tuning)")
    for interval in scale.intervals:
        print(f"  {interval.note.name:<3} {interval.name}")

    board = Fretboard(tuning)
    board.show_scale(scale)
    print()
    print(board.render_text())

    chords = engine.derive_chords(scale)
    if not chords:
        return

    print("\nChords in key:")
    for chord in chords:
        notes = " ".join(note.name for note in chord.notes)
        print(f"  {chord.numeral:<5} {chord.name:<15} {notes}")

    # Show the dominant chord
    board.show_notes(chords[4].notes)
    print(f"\n{chords[4].name}")
    print(board.render_text())


if __name__ == "__main__":
    main()
