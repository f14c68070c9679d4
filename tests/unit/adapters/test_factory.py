"""Tests for adapter factories."""

from scopechunk.adapters.config.toml_config_provider import TomlConfigProvider
from scopechunk.adapters.factory import ChunkerFactory, ConfigFactory
from scopechunk.adapters.parsers.language_registry import LanguageRegistry
from scopechunk.adapters.tokenizers.tiktoken_tokenizer import TiktokenTokenizer
from scopechunk.core.chunking import ChunkFileUseCase, CodeChunker
from scopechunk.domain.config import ChunkingConfig, ScopechunkConfig, TokenizerConfig


def test_create_config_provider() -> None:
    """Test ConfigFactory creates a TOML provider."""
    assert isinstance(ConfigFactory().create_config_provider(), TomlConfigProvider)


def test_create_tokenizer_uses_configured_encoding() -> None:
    """Test the tokenizer picks up the configured encoding name."""
    config = ScopechunkConfig(tokenizer=TokenizerConfig(encoding="o200k_base"))

    tokenizer = ChunkerFactory(config).create_tokenizer()

    assert isinstance(tokenizer, TiktokenTokenizer)
    assert tokenizer.name == "o200k_base"


def test_create_parser_registry() -> None:
    """Test the factory creates a language registry."""
    registry = ChunkerFactory(ScopechunkConfig.default()).create_parser_registry()
    assert isinstance(registry, LanguageRegistry)


def test_create_chunk_usecase_shares_collaborators(word_tokenizer, language_registry) -> None:
    """Test passed-in collaborators are wired into the chunker."""
    config = ScopechunkConfig(chunking=ChunkingConfig(token_workers=3))

    use_case = ChunkerFactory(config).create_chunk_usecase(
        tokenizer=word_tokenizer, parser_registry=language_registry
    )

    assert isinstance(use_case, ChunkFileUseCase)
    assert isinstance(use_case.chunker, CodeChunker)
    assert use_case.parser_registry is language_registry
    assert use_case.chunker._tokenizer is word_tokenizer
    assert use_case.chunker._token_workers == 3


def test_create_chunk_usecase_builds_defaults() -> None:
    """Test missing collaborators are created from config."""
    use_case = ChunkerFactory(ScopechunkConfig.default()).create_chunk_usecase()

    assert isinstance(use_case.parser_registry, LanguageRegistry)
    assert isinstance(use_case.chunker._tokenizer, TiktokenTokenizer)
