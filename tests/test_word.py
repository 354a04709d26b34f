"""Tests for the Word token type."""

from pathlex import Word


class TestWord:
    def test_plain_word(self):
        assert Word("mesh") == "mesh"
        assert isinstance(Word("mesh"), str)

    def test_strips_invalid_characters(self):
        assert Word("a/b;c") == "abc"
        assert Word("{x} y") == "xy"
        assert Word("it's \"quoted\"") == "itsquoted"

    def test_trusted_construction_skips_sanitizing(self):
        assert Word("x y", strip=False) == "x y"

    def test_word_from_word(self):
        w = Word("abc")
        assert Word(w) == w
        assert type(Word(w)) is Word

    def test_null(self):
        assert Word.null == ""

    def test_valid(self):
        assert Word.valid("a")
        assert Word.valid(".")
        assert not Word.valid("/")
        assert not Word.valid(" ")
        assert not Word.valid("}")

    def test_repr(self):
        assert repr(Word("abc")) == "Word('abc')"
