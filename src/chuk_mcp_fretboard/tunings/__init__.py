"""
Tuning library - named open-string sets for the fretboard mapper.

Built-in tunings ship as YAML; a project can add or override them.
"""

from chuk_mcp_fretboard.tunings.loader import TuningLoader

__all__ = ["TuningLoader"]
