"""Chunking use case - applies the file-level skip/fail policy.

The chunker itself yields nothing for unsupported files and lets tokenizer
or parser failures propagate. This use case turns both outcomes into a
response the caller can report without aborting a multi-file run.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from scopechunk.domain.entities import Chunk
from scopechunk.domain.exceptions import InvalidBudgetError
from scopechunk.ports.chunkers import Chunker
from scopechunk.ports.parsers import ParserRegistry

logger = logging.getLogger(__name__)


@dataclass
class ChunkFileRequest:
    """Request to chunk a file.

    Attributes:
        path: File path (selects parser and comment marker).
        content: File content as string.
        max_chunk_size: Token budget per chunk.
    """

    path: Path
    content: str
    max_chunk_size: int


@dataclass
class ChunkFileResponse:
    """Response from chunking operation.

    Attributes:
        chunks: Chunks in file order.
        skipped: Whether the file was skipped as unsupported.
        success: Whether chunking succeeded.
        error: Warning or error message, if any.
    """

    chunks: list[Chunk]
    skipped: bool = False
    success: bool = True
    error: str | None = None

    @classmethod
    def create_success(cls, *, chunks: list[Chunk]) -> "ChunkFileResponse":
        """Create a success response with chunks."""
        return cls(chunks=chunks)

    @classmethod
    def create_skipped(cls, message: str) -> "ChunkFileResponse":
        """Create a response for a file that has no parser.

        Args:
            message: Warning describing why the file was skipped.

        Returns:
            ChunkFileResponse with skipped=True and no chunks.
        """
        return cls(chunks=[], skipped=True, success=True, error=message)

    @classmethod
    def create_error(cls, message: str) -> "ChunkFileResponse":
        """Create an error response.

        Args:
            message: Error message describing what went wrong.

        Returns:
            ChunkFileResponse with success=False and empty chunks.
        """
        return cls(chunks=[], skipped=False, success=False, error=message)


class ChunkFileUseCase:
    """Use case for chunking one file with a caller-friendly outcome.

    Args:
        chunker: Context-aware chunker.
        parser_registry: Registry used by the chunker, consulted to report skips.
    """

    def __init__(self, chunker: Chunker, parser_registry: ParserRegistry) -> None:
        self.chunker = chunker
        self.parser_registry = parser_registry

    def is_supported(self, path: Path) -> bool:
        """Check whether a file has a registered parser."""
        return path.suffix.lower().lstrip(".") in self.parser_registry.supported_extensions

    def execute(self, request: ChunkFileRequest) -> ChunkFileResponse:
        """Chunk a file and collect the results.

        Args:
            request: Chunking request with file content and budget.

        Returns:
            Response with chunks, a skip marker, or an error message.

        Raises:
            InvalidBudgetError: If the budget is not positive.
        """
        if request.max_chunk_size <= 0:
            raise InvalidBudgetError(request.max_chunk_size)

        if not request.content.strip():
            return ChunkFileResponse.create_success(chunks=[])

        if not self.is_supported(request.path):
            return ChunkFileResponse.create_skipped(
                f"No parser available for {request.path}"
            )

        try:
            chunks = list(
                self.chunker.chunk_file(
                    request.path, request.content, request.max_chunk_size
                )
            )
        except Exception as e:
            logger.error("Failed to chunk %s: %s", request.path, e)
            return ChunkFileResponse.create_error(f"Failed to chunk {request.path}: {e}")

        logger.debug("Chunked %s into %d chunks", request.path, len(chunks))
        return ChunkFileResponse.create_success(chunks=chunks)
