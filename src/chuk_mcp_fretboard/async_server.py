#!/usr/bin/env python3
"""
Async Fretboard MCP Server using chuk-mcp-server

This server provides MCP tools for exploring scales and chords on a
guitar fretboard. One engine holds the session state shared by all tools.

The server provides tools for:
- Generating scales from a root and scale type
- Deriving the diatonic chords of a key
- Mapping scales and chords onto strings and frets for any tuning
- Rendering text fretboard diagrams
- Browsing the tuning library
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_fretboard.constants import TUNINGS_DIR_ENV
from chuk_mcp_fretboard.engine import MusicTheoryEngine
from chuk_mcp_fretboard.tools import register_fretboard_tools, register_theory_tools
from chuk_mcp_fretboard.tunings import TuningLoader

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-fretboard")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
TUNINGS_DIR = Path(os.environ.get(TUNINGS_DIR_ENV, BASE_PATH / "tunings"))
TUNINGS_LIBRARY_PATH = Path(__file__).parent / "tunings" / "library"

# Create engine and loaders
engine = MusicTheoryEngine()
tuning_loader = TuningLoader(
    library_path=TUNINGS_LIBRARY_PATH,
    project_path=TUNINGS_DIR,
)

# Register all tools
theory_tools = register_theory_tools(mcp, engine)
fretboard_tools = register_fretboard_tools(mcp, engine, tuning_loader)

# Export tool functions for direct access
music_generate_scale = theory_tools["music_generate_scale"]
music_get_chords_in_key = theory_tools["music_get_chords_in_key"]
music_validate_input = theory_tools["music_validate_input"]
music_list_scale_types = theory_tools["music_list_scale_types"]
music_get_state = theory_tools["music_get_state"]

music_fretboard_positions = fretboard_tools["music_fretboard_positions"]
music_render_fretboard = fretboard_tools["music_render_fretboard"]
music_list_tunings = fretboard_tools["music_list_tunings"]
music_describe_tuning = fretboard_tools["music_describe_tuning"]

logger.info("CHUK Fretboard MCP Server initialized")
logger.info(f"  Tunings library: {TUNINGS_LIBRARY_PATH}")
logger.info(f"  Project tunings dir: {TUNINGS_DIR}")
