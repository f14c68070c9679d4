"""Presentation layer for CLI output formatting.

Components:
- JsonChunkFormatter: JSON serialization
- TextChunkFormatter: Human-readable chunk listing
"""

from scopechunk.core.presentation.formatters import (
    FileChunks,
    JsonChunkFormatter,
    TextChunkFormatter,
)

__all__ = [
    "FileChunks",
    "JsonChunkFormatter",
    "TextChunkFormatter",
]
