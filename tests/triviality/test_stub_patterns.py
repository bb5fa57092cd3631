"""Tests for the versioned stub-pattern table."""

from healthcast.triviality import STUB_PATTERNS, STUB_PATTERNS_VERSION, find_stub_pattern


class TestStubPatternTable:
    def test_table_is_versioned(self):
        assert STUB_PATTERNS_VERSION == "1"

    def test_names_are_unique(self):
        names = [p.name for p in STUB_PATTERNS]
        assert len(names) == len(set(names))

    def test_patterns_match_whole_text_only(self):
        assert find_stub_pattern("export {};").name == "empty-export"
        assert find_stub_pattern("export {};\nexport const a = 1;") is None

    def test_todo_is_case_insensitive(self):
        assert find_stub_pattern("// todo later").name == "lone-todo"

    def test_typed_empty_object(self):
        text = "const settings: Settings = {};\nexport { settings };"
        assert find_stub_pattern(text).name == "empty-object-export"

    def test_mismatched_export_name(self):
        assert find_stub_pattern("const a = {};\nexport default b;") is None

    def test_empty_class_export(self):
        assert find_stub_pattern("export default class Page {}").name == "empty-default-export"

    def test_real_code_matches_nothing(self):
        text = "export default function Page() {\n  return <main />;\n}"
        assert find_stub_pattern(text) is None
