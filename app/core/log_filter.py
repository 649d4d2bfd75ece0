"""Logging filter for redacting credentials from log messages."""

import logging
import re
from typing import Pattern


class SensitiveDataFilter(logging.Filter):
    """Filter to redact credentials from log messages.

    Redacts:
    - The service API key (``API_KEY=...`` assignments)
    - ``X-API-Key`` and ``Authorization`` header values
    - Bearer tokens
    - Long key/token/secret values in ``key=value`` form
    """

    REDACTED = "***REDACTED***"

    def __init__(self):
        """Initialize filter with redaction patterns."""
        super().__init__()

        # Header patterns must run before the generic ones
        self.patterns: list[tuple[Pattern, str]] = [
            (
                re.compile(r"(Authorization):\s+(Bearer\s+)?([^\s,]+)", re.IGNORECASE),
                rf"\1: {self.REDACTED}",
            ),
            (
                re.compile(r"(X-API-Key):\s*([^\s,]+)", re.IGNORECASE),
                rf"\1: {self.REDACTED}",
            ),
            (
                re.compile(r"\b(API_KEY)=([^\s,\)]+)", re.IGNORECASE),
                rf"\1={self.REDACTED}",
            ),
            (
                re.compile(
                    r"(api[_-]?key|apikey|token|secret|password)['\"]?\s*[:=]\s*['\"]?"
                    r"([A-Za-z0-9_\-\.]{20,})",
                    re.IGNORECASE,
                ),
                rf"\1={self.REDACTED}",
            ),
            (
                re.compile(r"\bBearer\s+([A-Za-z0-9_\-\.=]+)", re.IGNORECASE),
                f"Bearer {self.REDACTED}",
            ),
        ]

    def filter(self, record: logging.LogRecord) -> bool:
        """Redact the record in place.

        Args:
            record: Log record to filter

        Returns:
            True (the record is always emitted)
        """
        if record.msg:
            record.msg = self.redact(str(record.msg))

        # Args used in % formatting
        if record.args:
            if isinstance(record.args, dict):
                record.args = {k: self._redact_value(v) for k, v in record.args.items()}
            elif isinstance(record.args, tuple):
                record.args = tuple(self._redact_value(arg) for arg in record.args)

        if record.exc_text:
            record.exc_text = self.redact(record.exc_text)

        return True

    def _redact_value(self, value):
        # Non-strings keep their type so %d and friends still format
        if isinstance(value, str):
            return self.redact(value)
        return value

    def redact(self, text: str) -> str:
        """Apply every redaction pattern to text."""
        for pattern, replacement in self.patterns:
            text = pattern.sub(replacement, text)
        return text
