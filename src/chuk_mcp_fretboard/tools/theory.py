"""
Theory tools - MCP tools for scales, chords and session state.

Tools for generating scales, deriving chords in a key and validating input.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_fretboard.constants import ErrorMessages, SuccessMessages
from chuk_mcp_fretboard.core import list_scale_types
from chuk_mcp_fretboard.engine import MusicTheoryEngine

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_theory_tools(
    mcp: ChukMCPServer,
    engine: MusicTheoryEngine,
) -> dict[str, Any]:
    """
    Register scale and chord tools with the MCP server.

    Args:
        mcp: The MCP server instance
        engine: The music theory engine

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_generate_scale(root: str, scale_type: str) -> str:
        """
        Generate a scale and make it the selected scale.

        Root names are case-insensitive; the flats Db, Eb, Gb, Ab and Bb are
        accepted and spelled with sharps in the result.

        Args:
            root: Root note (e.g., 'C', 'F#', 'Bb')
            scale_type: Scale type (e.g., 'Ionian', 'Dorian', 'Pentatonic Minor')

        Returns:
            JSON string with the scale notes and intervals

        Example:
            music_generate_scale(root="A", scale_type="Aeolian")
        """
        try:
            scale = engine.generate_scale(root, scale_type)
            if scale.is_empty:
                return json.dumps({"status": "error", "message": engine.state.error})

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.SCALE_GENERATED.format(
                        root=scale.root.name,
                        scale_type=scale.scale_type,
                        count=len(scale.notes),
                    ),
                    "scale": scale.model_dump(mode="json", by_alias=True),
                }
            )
        except Exception as e:
            logger.exception("Failed to generate scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_generate_scale"] = music_generate_scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_get_chords_in_key(
        root: str | None = None,
        scale_type: str | None = None,
    ) -> str:
        """
        Get the diatonic triads of a seven-note scale.

        Uses the given root and scale type, or the currently selected scale
        when both are omitted.

        Args:
            root: Optional root note
            scale_type: Optional scale type

        Returns:
            JSON string with seven chords

        Example:
            music_get_chords_in_key(root="G", scale_type="Ionian")
        """
        try:
            if root is not None or scale_type is not None:
                scale = engine.generate_scale(root or "", scale_type or "")
                if scale.is_empty:
                    return json.dumps({"status": "error", "message": engine.state.error})
            else:
                scale = engine.state.selected_scale
                if scale.is_empty:
                    return json.dumps(
                        {"status": "error", "message": ErrorMessages.NO_SCALE_SELECTED}
                    )

            chords = engine.derive_chords(scale)
            if not chords:
                return json.dumps({"status": "error", "message": engine.state.error})

            return json.dumps(
                {
                    "status": "success",
                    "key": str(scale),
                    "message": SuccessMessages.CHORDS_DERIVED.format(
                        count=len(chords),
                        root=scale.root.name,
                        scale_type=scale.scale_type,
                    ),
                    "chords": [chord.model_dump(mode="json", by_alias=True) for chord in chords],
                }
            )
        except Exception as e:
            logger.exception("Failed to derive chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_get_chords_in_key"] = music_get_chords_in_key

    @mcp.tool  # type: ignore[arg-type]
    async def music_validate_input(root: str, scale_type: str) -> str:
        """
        Check whether a root note and scale type are supported.

        Args:
            root: Root note
            scale_type: Scale type

        Returns:
            JSON string with a 'valid' flag and the error, if any

        Example:
            music_validate_input(root="Cb", scale_type="Ionian")
        """
        try:
            valid = engine.validate(root, scale_type)
            return json.dumps(
                {
                    "status": "success",
                    "valid": valid,
                    "error": engine.state.error,
                }
            )
        except Exception as e:
            logger.exception("Failed to validate input")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_validate_input"] = music_validate_input

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_scale_types() -> str:
        """
        List the supported scale types.

        Returns:
            JSON string with scale type names

        Example:
            music_list_scale_types()
        """
        try:
            scale_types = list_scale_types()
            return json.dumps(
                {
                    "status": "success",
                    "scale_types": scale_types,
                    "count": len(scale_types),
                }
            )
        except Exception as e:
            logger.exception("Failed to list scale types")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_list_scale_types"] = music_list_scale_types

    @mcp.tool  # type: ignore[arg-type]
    async def music_get_state() -> str:
        """
        Get the current session state.

        Returns:
            JSON string with the selected scale, chords in key and last error

        Example:
            music_get_state()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "state": engine.state.model_dump(mode="json", by_alias=True),
                }
            )
        except Exception as e:
            logger.exception("Failed to get state")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_get_state"] = music_get_state

    return tools
