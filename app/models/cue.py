"""Subtitle cue model."""

from typing import NamedTuple


class Cue(NamedTuple):
    """A single timed subtitle entry parsed from an SBV document.

    ``lines`` holds the raw cue text lines in document order, unescaped.
    """

    start: str
    end: str
    lines: tuple[str, ...]

    def __repr__(self) -> str:
        return f"Cue(time={self.start} --> {self.end}, lines={len(self.lines)})"
