"""Lexical path-string type.

``FileName`` holds a ``/``-delimited path as text. It never touches the
filesystem: normalization, decomposition and joining are pure string
operations. Raw text is sanitized on every assignment (see
``pathlex.sanitize``); words and other file names are trusted as-is.

Decomposition results are only canonical after ``clean()``.
"""

from __future__ import annotations

import functools
from typing import Iterable, List, Optional, Sequence, Union

from pathlex.sanitize import SEPARATOR, strip_invalid, valid_filename_char
from pathlex.word import Word

Source = Union[str, "FileName", Sequence[str]]


def _rfind_separator(buf: List[str], end: int) -> Optional[int]:
    """Index of the last separator at or before ``end``, or None."""
    for i in range(end, -1, -1):
        if buf[i] == SEPARATOR:
            return i
    return None


def clean_text(text: str) -> str:
    """Return the canonical lexical form of ``text``.

    * repeated separators collapse:  /abc////def -> /abc/def
    * '.' segments drop:             /abc/def/./ghi/. -> /abc/def/ghi
    * '..' climbs one segment:       /abc/def/../ghi/jkl/nmo/.. -> /abc/ghi/jkl
    * a trailing separator drops unless the result is the root alone

    Nothing before the first separator can be climbed into. A '..' with no
    parent to remove is kept literally: abc/../def/ghi/../jkl -> abc/../def/jkl
    """
    # the top separator; '..' may never resolve above it
    top = text.find(SEPARATOR)

    if top < 0:
        return text

    buf = list(text)
    max_len = len(buf)
    prev = SEPARATOR
    n_char = top + 1
    src = n_char

    while src < max_len:
        c = buf[src]
        src += 1

        if prev == SEPARATOR:
            if c == SEPARATOR:
                continue

            if c == ".":
                # trailing '/.'
                if src >= max_len:
                    continue

                c1 = buf[src]

                # '/./'
                if c1 == SEPARATOR:
                    src += 1
                    continue

                # '/..' or '/../'
                if c1 == "." and (src + 1 >= max_len or buf[src + 1] == SEPARATOR):
                    # needs at least '/x/' already written
                    parent = _rfind_separator(buf, n_char - 2) if n_char > 2 else None
                    if parent is not None and parent >= top:
                        n_char = parent + 1
                        src += 2
                        continue

                    # unresolvable, e.g. 'abc/../../': keep it and raise the floor
                    # past it so a later '..' cannot treat it as a parent
                    top = n_char + 2

        buf[n_char] = prev = c
        n_char += 1

    if n_char > 1 and buf[n_char - 1] == SEPARATOR:
        n_char -= 1

    return "".join(buf[:n_char])


@functools.total_ordering
class FileName:
    """A sanitized, slash-delimited path string.

    Args:
        value: Raw text (sanitized), a ``Word`` or ``FileName`` (trusted),
            or a sequence of segments joined left to right
    """

    __slots__ = ("_text", "_frozen")

    type_name = "fileName"
    null: "FileName"

    def __init__(self, value: Source = "") -> None:
        self._frozen = False
        self._text = ""
        self.assign(value)

    @classmethod
    def from_components(cls, segments: Iterable[str]) -> "FileName":
        """Build a path by folding the join operator over ``segments``."""
        result = cls()
        for segment in segments:
            result = join(result, segment)
        return result

    def assign(self, value: Source) -> "FileName":
        """Replace the content, sanitizing anything that is not already trusted."""
        if self._frozen:
            raise TypeError("cannot assign to the shared null FileName")

        if isinstance(value, FileName):
            text = value._text
        elif isinstance(value, Word):
            text = str(value)
        elif isinstance(value, str):
            text = strip_invalid(value, valid_filename_char, type_name=self.type_name)
        elif isinstance(value, (list, tuple)):
            text = self.from_components(value)._text
        else:
            raise TypeError(f"cannot build a FileName from {type(value).__name__}")

        self._text = text
        return self

    # Normalization

    def clean(self) -> bool:
        """Canonicalize in place. Returns True if the content changed."""
        text = clean_text(self._text)
        if text == self._text:
            return False
        self._text = text
        return True

    def cleaned(self) -> "FileName":
        """Return a canonical copy, leaving this instance untouched."""
        copy = FileName(self)
        copy.clean()
        return copy

    # Decomposition

    def is_absolute(self) -> bool:
        return self._text.startswith(SEPARATOR)

    def name(self) -> Word:
        """Part after the last separator.

        input        name()
        "foo"        "foo"
        "/foo"       "foo"
        "foo/bar"    "bar"
        "/foo/bar"   "bar"
        "/foo/bar/"  ""
        """
        i = self._text.rfind(SEPARATOR)
        if i < 0:
            return Word(self._text)
        return Word(self._text[i + 1:])

    def path(self) -> "FileName":
        """Part before the last separator.

        input        path()
        "foo"        "."
        "/foo"       "/"
        "foo/bar"    "foo"
        "/foo/bar"   "/foo"
        "/foo/bar/"  "/foo/bar"
        """
        i = self._text.rfind(SEPARATOR)
        if i < 0:
            return FileName(".")
        if i == 0:
            return FileName(SEPARATOR)
        return FileName(self._text[:i])

    def _ext_index(self) -> Optional[int]:
        # the last '.' counts only if no separator follows it and it is not leading
        i = max(self._text.rfind("."), self._text.rfind(SEPARATOR))
        if i <= 0 or self._text[i] == SEPARATOR:
            return None
        return i

    def has_ext(self) -> bool:
        return self._ext_index() is not None

    def less_ext(self) -> "FileName":
        """The path without its extension, or an unchanged copy if there is none."""
        i = self._ext_index()
        if i is None:
            return FileName(self)
        return FileName(self._text[:i])

    def ext(self) -> Word:
        """The extension (part after the last qualifying '.'), or the empty word."""
        i = self._ext_index()
        if i is None:
            return Word.null
        return Word(self._text[i + 1:])

    def components(self, delimiter: str = SEPARATOR) -> List[Word]:
        """Split on ``delimiter``, dropping empty fields.

        Joining the result does not necessarily reproduce the original text:
        "/foo/bar/" gives ["foo", "bar"].
        """
        return [Word(part) for part in self._text.split(delimiter) if part]

    def component(self, index: int, delimiter: str = SEPARATOR) -> Word:
        parts = self.components(delimiter)
        if index < 0 or index >= len(parts):
            raise IndexError(
                f"component index {index} out of range for {len(parts)} components of {self._text!r}"
            )
        return parts[index]

    # Composition

    def __truediv__(self, other: object) -> "FileName":
        if not isinstance(other, str) and not isinstance(other, FileName):
            return NotImplemented
        return join(self, other)

    def __rtruediv__(self, other: object) -> "FileName":
        if not isinstance(other, str):
            return NotImplemented
        return join(other, self)

    # String semantics

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"FileName({self._text!r})"

    def __len__(self) -> int:
        return len(self._text)

    def __hash__(self) -> int:
        return hash(self._text)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FileName):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, FileName):
            return self._text < other._text
        if isinstance(other, str):
            return self._text < other
        return NotImplemented


def join(a: Union[str, FileName], b: Union[str, FileName]) -> FileName:
    """Join two paths with a single separator; empty operands are dropped.

    No separator suppression is attempted: "a/" / "b" gives "a//b" until cleaned.
    """
    for operand in (a, b):
        if not isinstance(operand, (str, FileName)):
            raise TypeError(f"cannot join {type(operand).__name__} to a FileName")

    left = str(a)
    right = str(b)

    if left:
        if right:
            return FileName(left + SEPARATOR + right)
        return FileName(a)

    if right:
        return FileName(b)

    return FileName()


FileName.null = FileName()
FileName.null._frozen = True

__all__ = ["FileName", "clean_text", "join"]
