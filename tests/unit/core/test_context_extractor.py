"""Unit tests for breadcrumb extraction."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from scopechunk.core.chunking.context_extractor import (
    ContextExtractor,
    format_context,
    should_include_in_context,
)

CLASS_SOURCE = """\
class Calculator:
    total = 0

    def add(self, x):
        self.total += x
        return self.total

    def sub(self, x):
        self.total -= x
        return self.total
"""

TS_SOURCE = """\
class Greeter {
  greet(name: string) {
    return "hi " + name;
  }
}
"""


@dataclass
class FakeNode:
    """Minimal stand-in for a tree-sitter node."""

    type: str
    start_row: int
    end_row: int
    start_byte: int = 0
    end_byte: int = 0
    children: list["FakeNode"] = field(default_factory=list)

    @property
    def start_point(self) -> tuple[int, int]:
        return (self.start_row, 0)

    @property
    def end_point(self) -> tuple[int, int]:
        return (self.end_row, 0)


def _extractor(language_registry, filename: str, source: str, marker: str):
    tree = language_registry.parse(Path(filename), source)
    return tree.root_node, ContextExtractor(source.encode("utf-8"), marker)


class TestFormatContext:
    """Tests for format_context."""

    def test_empty_path_renders_nothing(self) -> None:
        assert format_context([]) == ""

    def test_entries_joined_with_trailing_newline(self) -> None:
        assert format_context(["# class A:\n#", "# def f():\n#"]) == (
            "# class A:\n#\n# def f():\n#\n"
        )


class TestShouldIncludeInContext:
    """Tests for declaration detection."""

    @pytest.mark.parametrize(
        "node_type",
        [
            "function_definition",
            "class_definition",
            "class_declaration",
            "method_declaration",
            "function_item",
            "function_expression",
            "lexical_declaration",
        ],
    )
    def test_declaration_types_match(self, node_type: str) -> None:
        assert should_include_in_context(FakeNode(node_type, 0, 0))

    @pytest.mark.parametrize("node_type", ["block", "identifier", "module", "call"])
    def test_other_types_do_not_match(self, node_type: str) -> None:
        assert not should_include_in_context(FakeNode(node_type, 0, 0))


class TestPythonExtraction:
    """Tests against the Python grammar."""

    def test_nested_method_collects_class_then_method(self, language_registry) -> None:
        """Headers come out outer to inner."""
        root, extractor = _extractor(language_registry, "calc.py", CLASS_SOURCE, "#")

        assert extractor.extract(root, 4) == ["# class Calculator:\n#", "# def add(self, x):\n#"]

    def test_captured_headers_are_not_repeated(self, language_registry) -> None:
        """A second row in the same method gets no breadcrumb."""
        root, extractor = _extractor(language_registry, "calc.py", CLASS_SOURCE, "#")
        extractor.extract(root, 4)

        assert extractor.extract(root, 5) == []

    def test_later_sibling_is_captured_without_parent(self, language_registry) -> None:
        """The class header is not re-emitted for the next method."""
        root, extractor = _extractor(language_registry, "calc.py", CLASS_SOURCE, "#")
        extractor.extract(root, 4)

        assert extractor.extract(root, 8) == ["# def sub(self, x):\n#"]

    def test_cursor_moves_to_header_end(self, language_registry) -> None:
        """The cursor lands on the row where the captured body begins."""
        root, extractor = _extractor(language_registry, "calc.py", CLASS_SOURCE, "#")

        extractor.extract(root, 4)
        assert extractor.last_context_row == 4
        extractor.extract(root, 8)
        assert extractor.last_context_row == 8

    def test_row_outside_declarations(self, language_registry) -> None:
        """Top-level code has no breadcrumb."""
        source = "x = 1\ny = 2\n"
        root, extractor = _extractor(language_registry, "flat.py", source, "#")

        assert extractor.extract(root, 1) == []
        assert extractor.last_context_row == -1

    def test_non_ascii_header(self, language_registry) -> None:
        """Byte offsets are resolved against the UTF-8 encoded source."""
        source = "def café(x):\n    return x\n"
        root, extractor = _extractor(language_registry, "cafe.py", source, "#")

        assert extractor.extract(root, 1) == ["# def café(x):\n#"]


class TestTypeScriptExtraction:
    """Tests against the TypeScript grammar."""

    def test_class_and_method_headers(self, language_registry) -> None:
        """Braced bodies start on the header row, so headers are one line."""
        root, extractor = _extractor(language_registry, "greeter.ts", TS_SOURCE, "//")

        assert extractor.extract(root, 2) == ["// class Greeter", "// greet(name: string)"]

    def test_declaration_without_body_uses_whole_node(self, language_registry) -> None:
        """A declaration with no body child is rendered in full."""
        source = "const limit = 10;\n"
        root, extractor = _extractor(language_registry, "limit.ts", source, "//")

        assert extractor.extract(root, 0) == ["// const limit = 10;"]


class TestTraversal:
    """Tests for traversal order and the cursor using hand-built trees."""

    def test_non_covering_nodes_are_pruned(self) -> None:
        """Declarations that do not span the row are ignored."""
        source = b"fn a\nfn b\n"
        first = FakeNode("function_item", 0, 0, 0, 4)
        second = FakeNode("function_item", 1, 1, 5, 9)
        root = FakeNode("source_file", 0, 1, 0, 10, [first, second])
        extractor = ContextExtractor(source, "//")

        assert extractor.extract(root, 1) == ["// fn b"]

    def test_declaration_at_cursor_is_skipped(self) -> None:
        """Only declarations starting strictly after the cursor qualify."""
        source = b"fn a\n"
        node = FakeNode("function_item", 0, 0, 0, 4)
        root = FakeNode("source_file", 0, 0, 0, 5, [node])
        extractor = ContextExtractor(source, "//")
        extractor.last_context_row = 0

        assert extractor.extract(root, 0) == []

    def test_multiline_header_marks_every_line(self) -> None:
        """Each line of a multi-line signature gets the marker."""
        source = b"fn a(\n  x\n) {\n}\n"
        body = FakeNode("block", 2, 3, 12, 14)
        node = FakeNode("function_item", 0, 3, 0, 14, [body])
        root = FakeNode("source_file", 0, 3, 0, 15, [node])
        extractor = ContextExtractor(source, "//")

        assert extractor.extract(root, 3) == ["// fn a(\n//   x\n// )"]
        assert extractor.last_context_row == 2
