"""Chunk output formatting for the CLI.

Both formatters take the chunks of one or more files and a tokenizer used to
report each chunk's rendered size against the budget.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import click

from scopechunk.domain.entities import Chunk
from scopechunk.ports.tokenizers import Tokenizer


@dataclass(frozen=True)
class FileChunks:
    """Chunks produced for a single file.

    Attributes:
        path: File the chunks were produced from.
        chunks: Chunks in file order.
    """

    path: Path
    chunks: list[Chunk]


class JsonChunkFormatter:
    """Handles JSON serialization of chunks.

    Args:
        tokenizer: Tokenizer used to report per-chunk token counts.
    """

    def __init__(self, tokenizer: Tokenizer) -> None:
        self._tokenizer = tokenizer

    def serialize(self, results: list[FileChunks]) -> list[dict[str, Any]]:
        """Convert chunk results into JSON-compatible dictionaries."""
        return [
            {
                "path": str(result.path),
                "start_line": chunk.start_line,
                "end_line": chunk.end_line,
                "tokens": self._tokenizer.count_tokens(chunk.content),
                "content": chunk.content,
            }
            for result in results
            for chunk in result.chunks
        ]

    def format_output(self, results: list[FileChunks]) -> str:
        """Format chunk results as a JSON string."""
        return json.dumps(self.serialize(results), indent=2)


class TextChunkFormatter:
    """Renders chunks as a readable listing.

    Each chunk gets a header line ``path:start-end (N tokens)`` followed by
    its content.

    Args:
        tokenizer: Tokenizer used to report per-chunk token counts.
        color: Whether to style headers with ANSI colors.
    """

    def __init__(self, tokenizer: Tokenizer, color: bool = False) -> None:
        self._tokenizer = tokenizer
        self._color = color

    def format_header(self, path: Path, chunk: Chunk) -> str:
        """Format the header line for a chunk."""
        location = f"{path}:{chunk.start_line}-{chunk.end_line}"
        tokens = f"({self._tokenizer.count_tokens(chunk.content)} tokens)"
        if self._color:
            location = click.style(location, fg="magenta", bold=True)
            tokens = click.style(tokens, dim=True)
        return f"{location} {tokens}"

    def format_output(self, results: list[FileChunks]) -> str:
        """Format chunk results as text."""
        blocks = []
        for result in results:
            for chunk in result.chunks:
                blocks.append(f"{self.format_header(result.path, chunk)}\n{chunk.content}")
        return "\n".join(blocks)
