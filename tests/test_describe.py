"""Tests for the pydantic decomposition report."""

import json

from pathlex import FileName
from pathlex.describe import PathParts, describe


class TestDescribe:
    def test_describes_canonical_form(self):
        parts = describe("/abc/def/../ghi/x.txt/")
        assert isinstance(parts, PathParts)
        assert parts.text == "/abc/def/../ghi/x.txt/"
        assert parts.canonical == "/abc/ghi/x.txt"
        assert parts.changed is True
        assert parts.absolute is True
        assert parts.name == "x.txt"
        assert parts.path == "/abc/ghi"
        assert parts.ext == "txt"
        assert parts.less_ext == "/abc/ghi/x"
        assert parts.components == ["abc", "ghi", "x.txt"]

    def test_unchanged_relative_path(self):
        parts = describe(FileName("foo"))
        assert parts.changed is False
        assert parts.absolute is False
        assert parts.path == "."
        assert parts.ext == ""
        assert parts.components == ["foo"]

    def test_does_not_mutate_input(self):
        fn = FileName("a//b")
        describe(fn)
        assert fn == "a//b"

    def test_json_round_trip(self):
        payload = json.loads(describe("a/b.c").model_dump_json())
        assert payload["canonical"] == "a/b.c"
        assert payload["ext"] == "c"
        assert payload["components"] == ["a", "b.c"]
