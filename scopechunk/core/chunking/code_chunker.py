"""Token-budgeted chunker with syntax-aware breadcrumbs.

Packs a file's lines into chunks that fit a token budget. Whenever a chunk
boundary is crossed, the declarations enclosing the next chunk's first line
are looked up in the syntax tree and prefixed to that chunk as comments, so
the chunk still reads as part of its function or class when retrieved on its
own.
"""

import logging
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from scopechunk.core.chunking.comment_syntax import comment_marker_for_path
from scopechunk.core.chunking.context_extractor import ContextExtractor, format_context
from scopechunk.domain.entities import Chunk, LineRecord
from scopechunk.domain.exceptions import InvalidBudgetError
from scopechunk.ports.parsers import ParserRegistry
from scopechunk.ports.tokenizers import Tokenizer

logger = logging.getLogger(__name__)

# Tokens held back from the budget when deciding to close a chunk.
BUDGET_MARGIN = 5


class CodeChunker:
    """Context-aware chunker implementing the Chunker port.

    Args:
        parser_registry: Resolves a path to a syntax tree.
        tokenizer: Counts tokens for lines and breadcrumbs.
        token_workers: Threads used to count all lines of a file up front.
    """

    def __init__(
        self,
        parser_registry: ParserRegistry,
        tokenizer: Tokenizer,
        token_workers: int = 8,
    ) -> None:
        if token_workers <= 0:
            raise ValueError("token_workers must be positive")
        self._parser_registry = parser_registry
        self._tokenizer = tokenizer
        self._token_workers = token_workers

    def count_lines(self, lines: list[str]) -> list[LineRecord]:
        """Count tokens for every line as one concurrent batch.

        Args:
            lines: Source lines.

        Returns:
            LineRecords in the same order as lines.
        """
        workers = min(self._token_workers, max(len(lines), 1))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            counts = list(executor.map(self._tokenizer.count_tokens, lines))
        return [LineRecord(line=line, token_count=count) for line, count in zip(lines, counts)]

    def chunk_file(
        self, path: Path, contents: str, max_chunk_size: int
    ) -> Iterator[Chunk]:
        """Lazily chunk a file.

        Nothing is parsed or counted until the first chunk is requested.
        Tokenizer and parser errors propagate out of the iterator.

        Args:
            path: File path; selects the parser and comment marker.
            contents: Full source text.
            max_chunk_size: Token budget per chunk.

        Returns:
            Iterator over chunks in file order.

        Raises:
            InvalidBudgetError: If max_chunk_size is not positive.
        """
        if max_chunk_size <= 0:
            raise InvalidBudgetError(max_chunk_size)
        return self._generate_chunks(Path(path), contents, max_chunk_size)

    def _generate_chunks(
        self, path: Path, contents: str, max_chunk_size: int
    ) -> Iterator[Chunk]:
        if not contents.strip():
            return

        tree = self._parser_registry.parse(path, contents)
        if tree is None:
            logger.warning("Failed to load parser for file %s", path)
            return

        lines = contents.split("\n")
        line_records = self.count_lines(lines)
        extractor = ContextExtractor(contents.encode("utf-8"), comment_marker_for_path(path))
        limit = max_chunk_size - BUDGET_MARGIN

        start_line = 1
        current_content = ""
        chunk_tokens = 0
        context_path: list[str] = []

        for i, record in enumerate(line_records):
            context_string = format_context(context_path)
            context_tokens = self._tokenizer.count_tokens(context_string)
            if chunk_tokens + record.token_count + context_tokens > limit:
                # Nothing packed yet means the previous lines were all dropped;
                # keep start_line so the next chunk still covers them.
                if current_content:
                    yield Chunk(
                        content=context_string + current_content,
                        start_line=start_line,
                        end_line=i,
                    )
                    start_line = i + 1
                    current_content = ""
                    chunk_tokens = 0
                context_path = extractor.extract(tree.root_node, i)

            # A line that alone meets the budget can never fit; drop it.
            if record.token_count < max_chunk_size:
                current_content += f"{record.line}\n"
                chunk_tokens += record.token_count + 1

        if current_content.strip():
            yield Chunk(
                content=format_context(context_path) + current_content,
                start_line=start_line,
                end_line=len(lines),
            )
