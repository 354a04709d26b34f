"""Structured report of a path's canonical form and its parts.

Used by the ``describe`` CLI command to emit one JSON document per path.
"""

from __future__ import annotations

from typing import List, Union

from pydantic import BaseModel, Field

from pathlex.filename import FileName


class PathParts(BaseModel):
    """Decomposition of a cleaned path."""

    text: str = Field(description="Path as given (after sanitization)")
    canonical: str = Field(description="Result of clean()")
    changed: bool = Field(description="Whether clean() altered the text")
    absolute: bool = Field(description="Path starts with the root separator")
    name: str = Field(description="Part after the last separator")
    path: str = Field(description="Part before the last separator")
    ext: str = Field(default="", description="Extension without the dot")
    less_ext: str = Field(description="Path without its extension")
    components: List[str] = Field(default_factory=list, description="Non-empty segments")


def describe(value: Union[str, FileName]) -> PathParts:
    original = FileName(value)
    canonical = original.cleaned()

    return PathParts(
        text=str(original),
        canonical=str(canonical),
        changed=canonical != original,
        absolute=canonical.is_absolute(),
        name=str(canonical.name()),
        path=str(canonical.path()),
        ext=str(canonical.ext()),
        less_ext=str(canonical.less_ext()),
        components=[str(part) for part in canonical.components()],
    )


__all__ = ["PathParts", "describe"]
