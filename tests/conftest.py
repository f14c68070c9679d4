"""Pytest configuration and shared fixtures."""

from pathlib import Path
from unittest.mock import patch

import pytest

from scopechunk.adapters.parsers.language_registry import LanguageRegistry

# ============================================================================
# Tokenizers
# ============================================================================
# Chunk boundaries depend on token counts. Tests use a whitespace word counter
# so expected boundaries can be worked out by hand and no encoding file has to
# be downloaded.


class WordTokenizer:
    """Tokenizer that counts whitespace-separated words."""

    name = "words"

    def __init__(self) -> None:
        self.calls: list[str] = []

    def count_tokens(self, text: str) -> int:
        self.calls.append(text)
        return len(text.split())


@pytest.fixture
def word_tokenizer() -> WordTokenizer:
    """Create a fresh word-counting tokenizer."""
    return WordTokenizer()


@pytest.fixture(scope="session")
def language_registry() -> LanguageRegistry:
    """Shared tree-sitter registry (parsers are cached per language)."""
    return LanguageRegistry()


# ============================================================================
# Config isolation
# ============================================================================


@pytest.fixture
def no_global_config(tmp_path: Path):
    """Point the global config path at a file that does not exist.

    Tests asserting default values use this so the user's own
    ~/.config/scopechunk/config.toml cannot leak in.
    """
    nonexistent_global = tmp_path / "nonexistent_global" / "config.toml"
    with (
        patch(
            "scopechunk.adapters.config.toml_config_provider.get_global_config_path",
            return_value=nonexistent_global,
        ),
        patch(
            "scopechunk.shared.config_io.get_global_config_path",
            return_value=nonexistent_global,
        ),
    ):
        yield nonexistent_global
