"""pathlex: lexical, filesystem-agnostic path strings."""

from .filename import FileName, clean_text, join
from .sanitize import PathInputError
from .word import Word

__all__ = ["FileName", "Word", "PathInputError", "clean_text", "join"]
