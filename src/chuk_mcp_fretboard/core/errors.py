"""
Error taxonomy for the music-theory core.

All errors are recoverable validation failures. The core raises them;
the engine records the message in its state and returns an empty value.
"""

from __future__ import annotations

from chuk_mcp_fretboard.constants import ErrorMessages


class TheoryError(ValueError):
    """Base class for music-theory validation errors."""


class InvalidRootError(TheoryError):
    """Root name does not resolve to a canonical pitch class."""

    def __init__(self, root: str):
        self.root = root
        super().__init__(ErrorMessages.INVALID_ROOT.format(root=root))


class InvalidNoteError(TheoryError):
    """A note in an explicit note list does not resolve to a pitch class."""

    def __init__(self, note: str):
        self.note = note
        super().__init__(ErrorMessages.INVALID_NOTE.format(note=note))


class InvalidScaleTypeError(TheoryError):
    """Scale type name is not in the pattern registry."""

    def __init__(self, scale_type: str, supported: list[str]):
        self.scale_type = scale_type
        self.supported = supported
        super().__init__(
            ErrorMessages.INVALID_SCALE_TYPE.format(
                scale_type=scale_type, supported=", ".join(supported)
            )
        )


class PreconditionViolationError(TheoryError):
    """An operation was applied to input it is not defined for."""


class InvalidTuningError(TheoryError):
    """A tuning contains an open-string name that is not a pitch class."""

    def __init__(self, note: str | None = None):
        self.note = note
        if note is None:
            message = ErrorMessages.EMPTY_TUNING
        else:
            message = ErrorMessages.INVALID_TUNING.format(note=note)
        super().__init__(message)


class InvalidFretRangeError(TheoryError):
    """Requested fret range is negative."""

    def __init__(self, max_fret: int):
        self.max_fret = max_fret
        super().__init__(ErrorMessages.INVALID_FRET_RANGE.format(max_fret=max_fret))
