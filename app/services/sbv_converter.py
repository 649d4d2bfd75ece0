"""SBV subtitle parser and WebVTT writer.

SBV blocks look like::

    0:00:00.000,0:00:02.000
    Hello world

Parsing is best-effort: lines that should be time lines but are not are
dropped and parsing continues, so any input string converts without error.
"""

import enum
import logging
import re
from collections.abc import Iterable
from typing import Pattern

from app.models.cue import Cue
from app.services.italics import build_phrase_pattern, italicize_line, trim
from app.services.timestamp import normalize_timestamp

logger = logging.getLogger(__name__)

VTT_HEADER = "WEBVTT"

# Requires text on both sides of the first comma
_TIME_LINE_RE = re.compile(r"^(.+?),(.+)$")


class ParserState(enum.Enum):
    """States of the SBV line scanner."""

    SEEKING_TIME_LINE = "seeking_time_line"
    COLLECTING_CUE_LINES = "collecting_cue_lines"
    SKIPPING_SEPARATOR = "skipping_separator"


def _split_lines(text: str) -> list[str]:
    text = text.removeprefix("\ufeff")
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def _is_blank(line: str) -> bool:
    return not trim(line)


def parse_time_line(line: str) -> tuple[str, str] | None:
    """Parse an SBV ``start,end`` time line.

    Args:
        line: Trimmed, non-blank line

    Returns:
        Normalized (start, end) pair, or None if the line has no usable comma
    """
    match = _TIME_LINE_RE.match(line)
    if not match:
        return None
    return normalize_timestamp(trim(match.group(1))), normalize_timestamp(
        trim(match.group(2))
    )


def parse_sbv(content: str) -> list[Cue]:
    """Parse SBV content into cues.

    Args:
        content: Raw SBV document

    Returns:
        Cues in document order
    """
    lines = _split_lines(content)
    cues: list[Cue] = []

    state = ParserState.SEEKING_TIME_LINE
    start = end = ""
    cue_lines: list[str] = []
    i = 0

    while i < len(lines):
        line = lines[i]

        if state is ParserState.SEEKING_TIME_LINE:
            if _is_blank(line):
                i += 1
                continue

            times = parse_time_line(trim(line))
            if times is None:
                logger.debug("Skipping malformed time line %d: %r", i + 1, line)
                i += 1
                continue

            start, end = times
            cue_lines = []
            state = ParserState.COLLECTING_CUE_LINES
            i += 1

        elif state is ParserState.COLLECTING_CUE_LINES:
            if _is_blank(line):
                cues.append(Cue(start, end, tuple(cue_lines)))
                state = ParserState.SKIPPING_SEPARATOR
                continue

            cue_lines.append(line)
            i += 1

        elif state is ParserState.SKIPPING_SEPARATOR:
            if not _is_blank(line):
                state = ParserState.SEEKING_TIME_LINE
                continue
            i += 1

    # Input ended while the last cue was still open
    if state is ParserState.COLLECTING_CUE_LINES:
        cues.append(Cue(start, end, tuple(cue_lines)))

    return cues


def render_vtt(cues: Iterable[Cue], pattern: Pattern[str] | None = None) -> str:
    """Serialize cues as a WebVTT document.

    Each cue line is escaped and italicized independently.

    Args:
        cues: Parsed cues
        pattern: Phrase pattern from build_phrase_pattern, or None

    Returns:
        WebVTT text ending in exactly one newline
    """
    blocks = [f"{VTT_HEADER}\n\n"]
    for cue in cues:
        text = "\n".join(italicize_line(line, pattern) for line in cue.lines)
        blocks.append(f"{cue.start} --> {cue.end}\n{text}\n\n")

    return "".join(blocks).rstrip() + "\n"


def sbv_to_vtt(content: str, phrases: list[str] | None = None) -> str:
    """Convert an SBV document to WebVTT, italicizing the given phrases.

    Args:
        content: Raw SBV document
        phrases: Phrases to italicize (see parse_phrase_list)

    Returns:
        WebVTT document
    """
    pattern = build_phrase_pattern(phrases or [])
    cues = parse_sbv(content)
    logger.debug("Parsed %d cues, %d italic phrases", len(cues), len(phrases or []))
    return render_vtt(cues, pattern)
