"""
Tests for the tuning library.

Tests cover:
- Tuning model
- TuningLoader discovery, loading and project overrides
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chuk_mcp_fretboard.models import Tuning
from chuk_mcp_fretboard.tunings import TuningLoader


class TestTuningModel:
    """Tests for Tuning model."""

    def test_string_count(self):
        """String count follows the open strings."""
        tuning = Tuning(name="bass", strings=["E", "A", "D", "G"])
        assert tuning.string_count == 4
        assert tuning.description == ""

    def test_requires_strings(self):
        """A tuning needs at least one string."""
        with pytest.raises(ValidationError):
            Tuning(name="empty", strings=[])


class TestTuningLoader:
    """Tests for TuningLoader."""

    def test_list_library_tunings(self):
        """Built-in tunings are listed by name."""
        names = [t.name for t in TuningLoader().list_tunings()]
        assert names == [
            "bass-standard",
            "dadgad",
            "drop-d",
            "eb-standard",
            "open-g",
            "seven-string",
            "standard",
        ]

    def test_get_standard(self):
        """Standard tuning is E A D G B E."""
        tuning = TuningLoader().get_tuning("standard")
        assert tuning is not None
        assert tuning.strings == ("E", "A", "D", "G", "B", "E")

    def test_flats_are_normalized(self):
        """Flat open strings are stored with sharp spelling."""
        tuning = TuningLoader().get_tuning("eb-standard")
        assert tuning.strings == ("D#", "G#", "C#", "F#", "A#", "D#")

    def test_missing_tuning(self):
        """Unknown names return None."""
        assert TuningLoader().get_tuning("nonexistent") is None

    def test_cache(self):
        """Loaded tunings are cached until cleared."""
        loader = TuningLoader()
        first = loader.get_tuning("drop-d")
        assert loader.get_tuning("drop-d") is first
        loader.clear_cache()
        assert loader.get_tuning("drop-d") is not first

    def test_project_overrides_library(self, temp_dir: Path):
        """Project tunings replace library tunings with the same name."""
        (temp_dir / "standard.yaml").write_text(
            "name: standard\ndescription: Custom\nstrings: [F, A#, D#, G#, C, F]\n"
        )
        loader = TuningLoader(project_path=temp_dir)
        tuning = loader.get_tuning("standard")
        assert tuning.description == "Custom"
        listed = {t.name: t for t in loader.list_tunings()}
        assert listed["standard"].strings[0] == "F"

    def test_invalid_file_skipped(self, temp_dir: Path):
        """Files with unknown notes are skipped."""
        (temp_dir / "broken.yaml").write_text("name: broken\nstrings: [E, H]\n")
        (temp_dir / "garbage.yaml").write_text("- just\n- a list\n")
        loader = TuningLoader(project_path=temp_dir)
        assert loader.get_tuning("broken") is None
        names = {t.name for t in loader.list_tunings()}
        assert "broken" not in names
        assert "standard" in names

    def test_lookup_by_declared_name(self, temp_dir: Path):
        """Tunings are fetched by the name they declare, not their file name."""
        (temp_dir / "my_file.yaml").write_text("name: nashville\nstrings: [E, A, D, G, B, E]\n")
        loader = TuningLoader(project_path=temp_dir)
        assert "nashville" in {t.name for t in loader.list_tunings()}
        assert loader.get_tuning("nashville").name == "nashville"
        assert loader.get_tuning("my_file") is None

    def test_override_from_other_file_name(self, temp_dir: Path):
        """A project file overrides a library tuning through its declared name."""
        (temp_dir / "custom.yaml").write_text(
            "name: standard\ndescription: Custom\nstrings: [D, G, C, F, A, D]\n"
        )
        tuning = TuningLoader(project_path=temp_dir).get_tuning("standard")
        assert tuning.description == "Custom"
        assert tuning.strings[0] == "D"

    def test_strings_are_immutable(self):
        """Cached tunings cannot be changed through their strings."""
        tuning = TuningLoader().get_tuning("standard")
        with pytest.raises(AttributeError):
            tuning.strings.append("A")

    def test_name_defaults_to_file_stem(self, temp_dir: Path):
        """A file without a name uses its stem."""
        (temp_dir / "open-d.yaml").write_text("strings: [D, A, D, F#, A, D]\n")
        tuning = TuningLoader(project_path=temp_dir).get_tuning("open-d")
        assert tuning.name == "open-d"

    def test_copy_to_project(self, temp_dir: Path):
        """Library tunings can be copied into the project."""
        project = temp_dir / "tunings"
        loader = TuningLoader(project_path=project)
        dest = loader.copy_to_project("dadgad")
        assert dest == project / "dadgad.yaml"
        assert dest.exists()

        with pytest.raises(ValueError, match="already exists"):
            loader.copy_to_project("dadgad")

    def test_copy_missing(self, temp_dir: Path):
        """Copying an unknown tuning returns None."""
        assert TuningLoader(project_path=temp_dir).copy_to_project("nope") is None

    def test_copy_without_project_path(self):
        """Copying needs a project path."""
        with pytest.raises(ValueError, match="No project path"):
            TuningLoader().copy_to_project("standard")
