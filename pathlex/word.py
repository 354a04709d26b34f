"""Validated word token: a single path segment free of invalid characters."""

from __future__ import annotations

from pathlex.sanitize import strip_invalid, valid_word_char


class Word(str):
    """Immutable string guaranteed to contain only valid word characters.

    Raw text is sanitized on construction. Pass ``strip=False`` only when the
    text is already known to be valid (for example, a slice of another word).
    """

    __slots__ = ()

    type_name = "word"
    null: "Word"

    def __new__(cls, value: str = "", strip: bool = True) -> "Word":
        if isinstance(value, Word):
            return str.__new__(cls, value)
        if strip:
            value = strip_invalid(value, valid_word_char, type_name=cls.type_name)
        return str.__new__(cls, value)

    @staticmethod
    def valid(c: str) -> bool:
        return valid_word_char(c)

    def __repr__(self) -> str:
        return f"Word({str.__repr__(self)})"


Word.null = Word()
