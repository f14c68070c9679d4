"""Parser registry port for obtaining syntax trees.

The chunker only reads trees; their construction and caching belong to the
registry implementation.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol


class SyntaxNode(Protocol):
    """Read-only view of a syntax tree node.

    Matches the surface of tree_sitter.Node used by the context extractor.
    Points are (row, column) pairs, both 0-indexed.
    """

    @property
    def type(self) -> str: ...

    @property
    def start_byte(self) -> int: ...

    @property
    def end_byte(self) -> int: ...

    @property
    def start_point(self) -> tuple[int, int]: ...

    @property
    def end_point(self) -> tuple[int, int]: ...

    @property
    def children(self) -> Sequence["SyntaxNode"]: ...


class SyntaxTree(Protocol):
    """A parsed file."""

    @property
    def root_node(self) -> SyntaxNode: ...


class ParserRegistry(Protocol):
    """Port resolving a file path to a parsed syntax tree."""

    @property
    def supported_extensions(self) -> set[str]:
        """Return the lowercase extensions (without dot) that can be parsed."""
        ...

    def parse(self, path: Path, contents: str) -> SyntaxTree | None:
        """Parse file contents with the grammar selected by the path's extension.

        Args:
            path: File path; only its extension is used.
            contents: Full source text.

        Returns:
            Parsed tree, or None if no grammar handles the extension.
        """
        ...
