"""Phrase-aware italicization of subtitle text.

Builds a single case-insensitive pattern from a list of phrases and wraps
whole-word/whole-phrase matches in ``<i>`` markup. All text, including the
matched phrases, is HTML-escaped so cue text can never inject markup of its
own.
"""

import re
from typing import Pattern

# A boundary is anything that is not a Unicode letter or digit
_BOUNDARY = r"[\W_]"

# Whitespace plus the byte order mark, which str.strip() leaves in place
_TRIM_RE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")

_HTML_ESCAPES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#039;",
    }
)


def trim(text: str) -> str:
    """Strip surrounding whitespace and byte order marks."""
    return _TRIM_RE.sub("", text)


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` for safe inclusion in cue text."""
    return text.translate(_HTML_ESCAPES)


def parse_phrase_list(text: str | None) -> list[str]:
    """Split newline-delimited phrases, trimming each and dropping blank lines.

    Args:
        text: Raw phrase list, one phrase per line

    Returns:
        Phrases in input order
    """
    if not text:
        return []

    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    return [trim(line) for line in lines if trim(line)]


def _phrase_to_regex(phrase: str) -> str:
    # Any whitespace run inside a phrase matches one or more whitespace characters
    return r"\s+".join(re.escape(word) for word in phrase.split())


def build_phrase_pattern(phrases: list[str]) -> Pattern[str] | None:
    """Compile phrases into one boundary-aware, case-insensitive pattern.

    Longer phrases are tried first so ``New York City`` wins over ``York``.
    Length is counted in code points, so a phrase with emoji or other
    astral characters ranks by its character count, not its UTF-16 length.
    Equal-length phrases keep their input order.

    Group 1 captures the leading boundary (empty at the start of the line),
    which is consumed by the match. Group 2 is the phrase itself. The
    trailing boundary is a lookahead so adjacent phrases separated by a
    single character can both match.

    Args:
        phrases: Trimmed, non-empty phrases

    Returns:
        Compiled pattern, or None when there is nothing to match
    """
    if not phrases:
        return None

    ordered = sorted(phrases, key=len, reverse=True)
    alternation = "|".join(_phrase_to_regex(phrase) for phrase in ordered)

    return re.compile(
        rf"(^|{_BOUNDARY})({alternation})(?=$|{_BOUNDARY})",
        re.IGNORECASE,
    )


def italicize_line(line: str, pattern: Pattern[str] | None) -> str:
    """Escape a cue line and wrap every phrase match in ``<i>`` markup.

    Args:
        line: Raw, unescaped cue text line
        pattern: Pattern from build_phrase_pattern, or None

    Returns:
        HTML-safe line with italics markup around matched phrases
    """
    if pattern is None:
        return escape_html(line)

    parts = []
    last_end = 0
    for match in pattern.finditer(line):
        boundary, phrase = match.group(1), match.group(2)
        parts.append(escape_html(line[last_end : match.start()]))
        parts.append(escape_html(boundary))
        parts.append(f"<i>{escape_html(phrase)}</i>")
        last_end = match.end()

    parts.append(escape_html(line[last_end:]))
    return "".join(parts)
