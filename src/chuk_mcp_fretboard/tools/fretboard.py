"""
Fretboard tools - MCP tools for placing notes on the neck.

Tools for finding fretboard positions, rendering diagrams and
browsing the tuning library.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_fretboard.constants import DEFAULT_MAX_FRET, ErrorMessages
from chuk_mcp_fretboard.core import Fretboard, TheoryError, capitalize_note_name
from chuk_mcp_fretboard.engine import MusicTheoryEngine
from chuk_mcp_fretboard.models.theory import Note, Scale, Tuning
from chuk_mcp_fretboard.tunings import TuningLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_fretboard_tools(
    mcp: ChukMCPServer,
    engine: MusicTheoryEngine,
    loader: TuningLoader,
) -> dict[str, Any]:
    """
    Register fretboard and tuning tools with the MCP server.

    Args:
        mcp: The MCP server instance
        engine: The music theory engine
        loader: The tuning loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def resolve_tuning_arg(tuning: str | None, strings: list[str] | None) -> Tuning | list[str]:
        """Explicit strings win over a named tuning; default is standard."""
        if strings:
            return strings
        name = tuning or "standard"
        found = loader.get_tuning(name)
        if found is None:
            raise ValueError(ErrorMessages.TUNING_NOT_FOUND.format(name=name))
        return found

    def resolve_target(
        root: str | None,
        scale_type: str | None,
        notes: list[str] | None,
        root_note: str | None,
    ) -> Scale | list[Note]:
        """
        Build the scale or note list to place.

        Explicit notes take precedence. The first note is the root unless
        root_note names another one.
        """
        if notes:
            root_name = capitalize_note_name(root_note) if root_note else None
            return [
                Note(
                    name=capitalize_note_name(name),
                    is_root=(
                        capitalize_note_name(name) == root_name
                        if root_name is not None
                        else index == 0
                    ),
                )
                for index, name in enumerate(notes)
            ]
        if root is not None or scale_type is not None:
            scale = engine.generate_scale(root or "", scale_type or "")
            if scale.is_empty:
                raise ValueError(engine.state.error)
            return scale
        scale = engine.state.selected_scale
        if scale.is_empty:
            raise ValueError(ErrorMessages.NO_SCALE_SELECTED)
        return scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_fretboard_positions(
        root: str | None = None,
        scale_type: str | None = None,
        notes: list[str] | None = None,
        root_note: str | None = None,
        tuning: str | None = None,
        strings: list[str] | None = None,
        max_fret: int = DEFAULT_MAX_FRET,
    ) -> str:
        """
        Find every position of a scale or set of notes on the fretboard.

        Pass either root + scale_type, an explicit list of notes (e.g. a
        chord), or nothing to use the currently selected scale. String 1 is
        the highest-pitched string.

        Args:
            root: Optional scale root
            scale_type: Optional scale type
            notes: Optional explicit note names (flats Db/Eb/Gb/Ab/Bb accepted)
            root_note: Which of the notes is the root (default: the first)
            tuning: Named tuning from the library (default: 'standard')
            strings: Explicit open strings, lowest first (overrides tuning)
            max_fret: Highest fret to include (default: 12)

        Returns:
            JSON string with positions ordered by string (lowest first), then fret

        Example:
            music_fretboard_positions(notes=["C", "E", "G"], tuning="drop-d")
        """
        try:
            target = resolve_target(root, scale_type, notes, root_note)
            tuning_value = resolve_tuning_arg(tuning, strings)
            before = engine.state
            positions = engine.map_positions(target, tuning_value, max_fret)
            # map_positions only replaces state when it records an error
            if engine.state is not before and engine.state.error:
                return json.dumps({"status": "error", "message": engine.state.error})

            return json.dumps(
                {
                    "status": "success",
                    "positions": [p.model_dump(mode="json", by_alias=True) for p in positions],
                    "count": len(positions),
                }
            )
        except Exception as e:
            logger.exception("Failed to map fretboard positions")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_fretboard_positions"] = music_fretboard_positions

    @mcp.tool  # type: ignore[arg-type]
    async def music_render_fretboard(
        root: str | None = None,
        scale_type: str | None = None,
        notes: list[str] | None = None,
        root_note: str | None = None,
        tuning: str | None = None,
        strings: list[str] | None = None,
        max_fret: int = DEFAULT_MAX_FRET,
        show_fret_markers: bool = True,
    ) -> str:
        """
        Render a scale or set of notes as a text fretboard diagram.

        Takes the same arguments as music_fretboard_positions. Root notes
        are drawn in brackets.

        Args:
            root: Optional scale root
            scale_type: Optional scale type
            notes: Optional explicit note names
            root_note: Which of the notes is the root (default: the first)
            tuning: Named tuning from the library (default: 'standard')
            strings: Explicit open strings, lowest first (overrides tuning)
            max_fret: Highest fret to draw (default: 12)
            show_fret_markers: Draw inlay markers under the neck

        Returns:
            JSON string with the diagram text

        Example:
            music_render_fretboard(root="E", scale_type="Pentatonic Minor")
        """
        try:
            target = resolve_target(root, scale_type, notes, root_note)
            board = Fretboard(
                resolve_tuning_arg(tuning, strings),
                max_frets=max_fret,
                show_fret_markers=show_fret_markers,
            )
            if isinstance(target, Scale):
                board.show_scale(target)
            else:
                board.show_notes(target)

            return json.dumps(
                {
                    "status": "success",
                    "diagram": board.render_text(),
                    "count": len(board.positions),
                }
            )
        except TheoryError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to render fretboard")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_render_fretboard"] = music_render_fretboard

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_tunings() -> str:
        """
        List available tunings.

        Returns tunings from the library and the project directory.

        Returns:
            JSON string with tuning summaries

        Example:
            music_list_tunings()
        """
        try:
            tunings = loader.list_tunings()
            return json.dumps(
                {
                    "status": "success",
                    "tunings": [
                        {
                            "name": t.name,
                            "description": t.description,
                            "strings": t.strings,
                        }
                        for t in tunings
                    ],
                    "count": len(tunings),
                }
            )
        except Exception as e:
            logger.exception("Failed to list tunings")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_list_tunings"] = music_list_tunings

    @mcp.tool  # type: ignore[arg-type]
    async def music_describe_tuning(name: str) -> str:
        """
        Get details of a tuning.

        Args:
            name: Tuning name (e.g., 'standard', 'drop-d', 'dadgad')

        Returns:
            JSON string with the open strings, highest string first as string 1

        Example:
            music_describe_tuning(name="drop-d")
        """
        try:
            tuning = loader.get_tuning(name)
            if tuning is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.TUNING_NOT_FOUND.format(name=name)}
                )

            board = Fretboard(tuning, max_frets=0)
            return json.dumps(
                {
                    "status": "success",
                    "tuning": {
                        "name": tuning.name,
                        "description": tuning.description,
                        "strings": tuning.strings,
                        "string_count": tuning.string_count,
                        "string_names": {
                            str(string): board.string_name(string) for string in board.strings
                        },
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to describe tuning")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_describe_tuning"] = music_describe_tuning

    return tools
