"""Tokenizer port for measuring text against a token budget."""

from typing import Protocol


class Tokenizer(Protocol):
    """Protocol for token counters.

    Implementations must tolerate concurrent independent calls, since the
    chunker counts every line of a file in parallel before packing.
    """

    @property
    def name(self) -> str:
        """Tokenizer name (e.g., 'cl100k_base')."""
        ...

    def count_tokens(self, text: str) -> int:
        """Count the tokens in a string.

        Args:
            text: Text to measure. May be empty.

        Returns:
            Non-negative token count.
        """
        ...
