"""Factory classes for use case and adapter instantiation.

This module centralizes the creation of the chunker and its collaborators,
keeping the CLI layer free from direct adapter imports.

The factories use lazy imports to avoid loading tree-sitter grammars and
tiktoken until they're actually needed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scopechunk.adapters.parsers.language_registry import LanguageRegistry
    from scopechunk.core.chunking.chunk_usecase import ChunkFileUseCase
    from scopechunk.domain.config import ScopechunkConfig
    from scopechunk.ports.config import ConfigProvider
    from scopechunk.ports.tokenizers import Tokenizer


class ConfigFactory:
    """Factory for creating configuration-related instances."""

    def create_config_provider(self) -> ConfigProvider:
        """Create a TomlConfigProvider instance.

        Returns:
            TomlConfigProvider instance.
        """
        from scopechunk.adapters.config.toml_config_provider import TomlConfigProvider

        return TomlConfigProvider()


class ChunkerFactory:
    """Factory for creating the chunking pipeline.

    Args:
        config: ScopechunkConfig with chunking and tokenizer settings.
    """

    def __init__(self, config: ScopechunkConfig) -> None:
        self._config = config

    def create_tokenizer(self) -> Tokenizer:
        """Create the tokenizer selected by configuration."""
        from scopechunk.adapters.tokenizers.tiktoken_tokenizer import TiktokenTokenizer

        return TiktokenTokenizer(self._config.tokenizer.encoding)

    def create_parser_registry(self) -> LanguageRegistry:
        """Create the tree-sitter parser registry."""
        from scopechunk.adapters.parsers.language_registry import LanguageRegistry

        return LanguageRegistry()

    def create_chunk_usecase(
        self,
        tokenizer: Tokenizer | None = None,
        parser_registry: LanguageRegistry | None = None,
    ) -> ChunkFileUseCase:
        """Create a ChunkFileUseCase wired to a CodeChunker.

        Args:
            tokenizer: Tokenizer to share with the caller, created if omitted.
            parser_registry: Registry to share with the caller, created if omitted.

        Returns:
            Configured ChunkFileUseCase.
        """
        from scopechunk.core.chunking.chunk_usecase import ChunkFileUseCase
        from scopechunk.core.chunking.code_chunker import CodeChunker

        tokenizer = tokenizer or self.create_tokenizer()
        parser_registry = parser_registry or self.create_parser_registry()
        chunker = CodeChunker(
            parser_registry=parser_registry,
            tokenizer=tokenizer,
            token_workers=self._config.chunking.token_workers,
        )
        return ChunkFileUseCase(chunker=chunker, parser_registry=parser_registry)
