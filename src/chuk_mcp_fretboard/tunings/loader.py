"""
Tuning loader - discovers and loads named tunings.

Tunings can come from:
1. Built-in library (shipped with package)
2. Project tunings (user's project/tunings directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_fretboard.core import TheoryError, resolve_tuning
from chuk_mcp_fretboard.models.theory import Tuning

logger = logging.getLogger(__name__)


class TuningLoader:
    """
    Discovers and loads tuning definitions.

    Tunings are loaded from YAML files in the library and project directories.
    Project tunings override library tunings with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the tuning loader.

        Args:
            library_path: Path to built-in tuning library
            project_path: Path to project tunings directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, Tuning] = {}

    def list_tunings(self) -> list[Tuning]:
        """
        List all available tunings, sorted by name.

        Project tunings take precedence over library tunings.
        """
        tunings: dict[str, Tuning] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                tuning = self._load_tuning_file(path)
                if tuning:
                    tunings[tuning.name] = tuning

        return [tunings[name] for name in sorted(tunings)]

    def get_tuning(self, name: str) -> Tuning | None:
        """
        Get a tuning by name.

        Args:
            name: Tuning name as declared in its file (the file stem if unset)

        Returns:
            Tuning if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for tuning in self.list_tunings():
            if tuning.name == name:
                self._cache[name] = tuning
                return tuning

        return None

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library tuning to the project for customization.

        Args:
            name: Tuning name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(f"Tuning already exists in project: {name}")

        dest_file.write_text(library_file.read_text())

        # Invalidate cache
        self._cache.pop(name, None)

        return dest_file

    def clear_cache(self) -> None:
        """Clear the tuning cache."""
        self._cache.clear()

    def _load_tuning_file(self, path: Path) -> Tuning | None:
        """Load a tuning from a YAML file, or None if the file is invalid."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse_tuning(data, default_name=path.stem)
        except (OSError, yaml.YAMLError, TheoryError, ValueError) as e:
            logger.warning("Skipping invalid tuning file %s: %s", path, e)
            return None

    def _parse_tuning(self, data: dict[str, Any], default_name: str) -> Tuning:
        """Parse a tuning from YAML data, normalizing string names."""
        if not isinstance(data, dict):
            raise ValueError("Tuning file must contain a mapping")

        strings = [str(name) for name in data.get("strings") or []]
        pitches = resolve_tuning(strings)

        return Tuning(
            name=data.get("name", default_name),
            description=data.get("description", ""),
            strings=[pitch.spell() for pitch in pitches],
        )
