"""Character-level validation for path tokens.

This module defines which characters may appear in a word (a single path
segment) and in a full file name, and provides the stripping routine that
every external assignment passes through. No filesystem I/O is performed.

Key functions:
- valid_word_char / valid_filename_char: per-character predicates
- is_valid: check a whole string against a predicate
- strip_invalid: remove rejected characters, honouring the debug level
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from pathlex import config

logger = logging.getLogger("pathlex.sanitize")

SEPARATOR = "/"

CharPredicate = Callable[[str], bool]


class PathInputError(ValueError):
    """Raised when input contains invalid characters under strict debug policy."""


def valid_filename_char(c: str) -> bool:
    """Return True if ``c`` may appear anywhere in a file name."""
    return not c.isspace() and c not in "\"'"


def valid_word_char(c: str) -> bool:
    """Return True if ``c`` may appear in a single word (no separators or braces)."""
    return valid_filename_char(c) and c not in "/;{}"


def is_valid(text: str, valid: CharPredicate) -> bool:
    return all(valid(c) for c in text)


def strip_invalid(
    text: str,
    valid: CharPredicate,
    *,
    type_name: str = "string",
    debug: Optional[int] = None,
) -> str:
    """Remove characters rejected by ``valid`` from ``text``.

    Args:
        text: Raw input text
        valid: Character predicate for the target type
        type_name: Name used in diagnostics (e.g. 'word', 'fileName')
        debug: Debug level; defaults to ``config.settings.debug``

    Returns:
        The text with all rejected characters removed

    Raises:
        PathInputError: If the text is invalid and the debug level is above 1

    Debug levels:
        0: strip silently
        1: strip and log a warning
        2+: refuse to strip and raise instead
    """
    if not isinstance(text, str):
        raise TypeError(f"{type_name} must be built from a string, got {type(text).__name__}")

    if is_valid(text, valid):
        return text

    level = config.settings.debug if debug is None else debug

    if level > 1:
        raise PathInputError(f"invalid characters in {type_name}: {text!r}")

    stripped = "".join(c for c in text if valid(c))

    if level:
        logger.warning("stripped invalid characters from %s: %r => %r", type_name, text, stripped)

    return stripped


__all__ = [
    "SEPARATOR",
    "PathInputError",
    "valid_filename_char",
    "valid_word_char",
    "is_valid",
    "strip_invalid",
]
