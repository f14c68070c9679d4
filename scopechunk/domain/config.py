"""Config domain models for scopechunk.

Configuration is stored in .scopechunk/config.toml (and optionally a global
config.toml) and represents user preferences for chunking and tokenization.
This module defines the domain models that represent validated configuration
state.
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any


@dataclass(frozen=True)
class ChunkingConfig:
    """Configuration for chunking behavior.

    Attributes:
        max_chunk_size: Token budget for a single rendered chunk.
        token_workers: Worker threads used to pre-count line tokens.

    Raises:
        ValueError: If max_chunk_size or token_workers is not positive.
    """

    max_chunk_size: int = 512
    token_workers: int = 8

    def __post_init__(self) -> None:
        """Validate chunking config after initialization."""
        if self.max_chunk_size <= 0:
            raise ValueError(
                f"max_chunk_size must be positive, got {self.max_chunk_size}"
            )
        if self.token_workers <= 0:
            raise ValueError(
                f"token_workers must be positive, got {self.token_workers}"
            )


@dataclass(frozen=True)
class TokenizerConfig:
    """Configuration for token counting.

    Attributes:
        encoding: tiktoken encoding name (e.g., "cl100k_base", "o200k_base").

    Raises:
        ValueError: If encoding is blank.
    """

    encoding: str = "cl100k_base"

    def __post_init__(self) -> None:
        """Validate tokenizer config after initialization."""
        if not isinstance(self.encoding, str) or not self.encoding.strip():
            raise ValueError("encoding must not be empty")


def _merge_section(section: Any, data: Any) -> Any:
    """Return a copy of a config section with known keys from data applied."""
    if not isinstance(data, dict):
        return section
    known = {f.name for f in fields(section)}
    overrides = {key: value for key, value in data.items() if key in known}
    if not overrides:
        return section
    return replace(section, **overrides)


@dataclass(frozen=True)
class ScopechunkConfig:
    """Complete scopechunk configuration.

    Attributes:
        chunking: Chunking configuration
        tokenizer: Tokenizer configuration
    """

    chunking: ChunkingConfig = field(default_factory=ChunkingConfig)
    tokenizer: TokenizerConfig = field(default_factory=TokenizerConfig)

    @staticmethod
    def default() -> "ScopechunkConfig":
        """Create a config with all default values."""
        return ScopechunkConfig(
            chunking=ChunkingConfig(),
            tokenizer=TokenizerConfig(),
        )

    @staticmethod
    def from_partial(base: "ScopechunkConfig", data: dict[str, Any]) -> "ScopechunkConfig":
        """Overlay raw TOML data onto an existing config.

        Keys present in data replace the matching fields of base; unknown
        sections and keys are ignored. Each merged section is re-validated.

        Args:
            base: Config supplying values for anything not in data.
            data: Parsed TOML data keyed by section name.

        Returns:
            New ScopechunkConfig with overrides applied.

        Raises:
            ValueError: If an overridden value fails validation.
        """
        return ScopechunkConfig(
            chunking=_merge_section(base.chunking, data.get("chunking")),
            tokenizer=_merge_section(base.tokenizer, data.get("tokenizer")),
        )
