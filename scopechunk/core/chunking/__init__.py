"""Context-aware chunking.

Components:
- CodeChunker: Token-budgeted packing loop (main entry point)
- ContextExtractor: Breadcrumb lookup in the syntax tree
- ChunkFileUseCase: File-level skip/error policy around the chunker
"""

from scopechunk.core.chunking.chunk_usecase import (
    ChunkFileRequest,
    ChunkFileResponse,
    ChunkFileUseCase,
)
from scopechunk.core.chunking.code_chunker import BUDGET_MARGIN, CodeChunker
from scopechunk.core.chunking.context_extractor import ContextExtractor, format_context

__all__ = [
    "BUDGET_MARGIN",
    "ChunkFileRequest",
    "ChunkFileResponse",
    "ChunkFileUseCase",
    "CodeChunker",
    "ContextExtractor",
    "format_context",
]
