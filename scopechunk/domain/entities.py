"""Domain entities for context-aware chunking.

Pure dataclasses with no dependencies on parsing or tokenization
infrastructure. Both are immutable once created.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LineRecord:
    """A single source line paired with its token count.

    Derived once per file before packing starts.

    Attributes:
        line: Line text without its trailing newline.
        token_count: Number of tokenizer units in the line.
    """

    line: str
    token_count: int


@dataclass(frozen=True)
class Chunk:
    """A packed run of source lines, prefixed with its breadcrumb.

    Attributes:
        content: Rendered breadcrumb followed by the packed lines.
        start_line: First line covered by the chunk (1-indexed).
        end_line: Last line covered by the chunk (1-indexed, inclusive).
    """

    content: str
    start_line: int
    end_line: int

    @property
    def line_count(self) -> int:
        """Number of source lines spanned by this chunk."""
        return self.end_line - self.start_line + 1
