"""Download filename sanitization."""

import re

_UNSAFE_CHARS_RE = re.compile(r"[^\w.\-() ]+", re.ASCII)


def sanitize_filename(name: str | None, default: str = "captions.vtt") -> str:
    """Make a caller-supplied name safe for a Content-Disposition header.

    Runs of characters other than ASCII word characters, ``.``, ``-``,
    parentheses and spaces become ``_``. The result always ends in ``.vtt``.

    Args:
        name: Requested output name
        default: Name used when nothing usable remains

    Returns:
        Sanitized filename
    """
    cleaned = _UNSAFE_CHARS_RE.sub("_", name or "").strip()
    if not cleaned:
        return default
    if cleaned.lower().endswith(".vtt"):
        return cleaned
    return f"{cleaned}.vtt"
