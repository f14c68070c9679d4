"""Chunker port for context-aware chunking strategies.

Chunkers take file content and lazily produce token-bounded chunks.
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol

from scopechunk.domain.entities import Chunk


class Chunker(Protocol):
    """Port for chunking strategies."""

    def chunk_file(
        self, path: Path, contents: str, max_chunk_size: int
    ) -> Iterator[Chunk]:
        """Chunk file content into token-bounded units.

        Args:
            path: File path, used to select the parser and comment marker.
            contents: File content as string.
            max_chunk_size: Token budget per chunk.

        Returns:
            Lazy iterator over chunks in file order. Empty when the file is
            blank or cannot be parsed.
        """
        ...
