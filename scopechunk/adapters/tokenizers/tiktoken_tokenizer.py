"""tiktoken adapter for the Tokenizer port.

Counts tokens with a BPE encoding such as cl100k_base, the family used by
OpenAI embedding models.
"""

import logging
import threading
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

# Lazy import - only load when actually needed
if TYPE_CHECKING:
    from tiktoken import Encoding


class TiktokenTokenizer:
    """Tokenizer backed by a tiktoken encoding.

    The encoding is loaded on first use; tiktoken may need to download the
    BPE ranks the first time a given encoding is requested. Encoding objects
    are safe to share between threads once loaded.
    """

    DEFAULT_ENCODING = "cl100k_base"

    def __init__(self, encoding_name: str = DEFAULT_ENCODING) -> None:
        """Initialize the tokenizer.

        Args:
            encoding_name: tiktoken encoding name.
        """
        self._encoding_name = encoding_name
        self._encoding: Encoding | None = None
        self._load_lock = threading.Lock()

    @property
    def name(self) -> str:
        """Encoding name."""
        return self._encoding_name

    def _ensure_encoding_loaded(self) -> "Encoding":
        """Lazy-load the encoding on first use.

        Returns:
            Loaded tiktoken Encoding.

        Raises:
            RuntimeError: If the encoding cannot be loaded.
        """
        if self._encoding is None:
            with self._load_lock:
                if self._encoding is None:
                    import tiktoken

                    try:
                        self._encoding = tiktoken.get_encoding(self._encoding_name)
                    except Exception as e:
                        raise RuntimeError(
                            f"Failed to load tiktoken encoding {self._encoding_name}: {e}"
                        ) from e
                    logger.debug("Loaded tiktoken encoding %s", self._encoding_name)
        return self._encoding

    def count_tokens(self, text: str) -> int:
        """Count the tokens in a string.

        Special-token markers in source code are counted as ordinary text.

        Args:
            text: Text to measure.

        Returns:
            Number of tokens (0 for the empty string).
        """
        if not text:
            return 0
        encoding = self._ensure_encoding_loaded()
        return len(encoding.encode(text, disallowed_special=()))
