"""Unit tests for TiktokenTokenizer.

The encoding is replaced with a fake so no BPE ranks are downloaded.
"""

import threading
from unittest.mock import patch

import pytest

from scopechunk.adapters.tokenizers.tiktoken_tokenizer import TiktokenTokenizer


class FakeEncoding:
    """Encodes one token per character and records the calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []

    def encode(self, text: str, disallowed_special=None) -> list[int]:
        self.calls.append((text, disallowed_special))
        return [ord(c) for c in text]


@pytest.fixture
def fake_encoding() -> FakeEncoding:
    return FakeEncoding()


def test_default_encoding_name() -> None:
    """Test the default encoding is cl100k_base."""
    assert TiktokenTokenizer().name == "cl100k_base"


def test_encoding_is_not_loaded_on_init() -> None:
    """Test construction does not touch tiktoken."""
    with patch("tiktoken.get_encoding") as get_encoding:
        TiktokenTokenizer("o200k_base")
    get_encoding.assert_not_called()


def test_count_tokens_uses_encoding(fake_encoding: FakeEncoding) -> None:
    """Test counts come from the encoding's output length."""
    with patch("tiktoken.get_encoding", return_value=fake_encoding) as get_encoding:
        tokenizer = TiktokenTokenizer("o200k_base")
        assert tokenizer.count_tokens("abc") == 3
        assert tokenizer.count_tokens("hello") == 5

    get_encoding.assert_called_once_with("o200k_base")


def test_special_tokens_are_plain_text(fake_encoding: FakeEncoding) -> None:
    """Test special-token markers in source are not rejected."""
    tokenizer = TiktokenTokenizer()
    tokenizer._encoding = fake_encoding

    tokenizer.count_tokens("<|endoftext|>")

    assert fake_encoding.calls == [("<|endoftext|>", ())]


def test_empty_string_is_zero_without_loading() -> None:
    """Test the empty string short-circuits before loading."""
    with patch("tiktoken.get_encoding") as get_encoding:
        assert TiktokenTokenizer().count_tokens("") == 0
    get_encoding.assert_not_called()


def test_load_failure_raises_runtime_error() -> None:
    """Test encoding load errors are wrapped with the encoding name."""
    with patch("tiktoken.get_encoding", side_effect=ValueError("Unknown encoding")):
        tokenizer = TiktokenTokenizer("bogus")
        with pytest.raises(RuntimeError, match="bogus") as exc_info:
            tokenizer.count_tokens("x")

    assert isinstance(exc_info.value.__cause__, ValueError)


def test_encoding_is_loaded_once(fake_encoding: FakeEncoding) -> None:
    """Test the encoding is fetched once across repeated counts."""
    with patch("tiktoken.get_encoding", return_value=fake_encoding) as get_encoding:
        tokenizer = TiktokenTokenizer()
        tokenizer.count_tokens("x")
        tokenizer.count_tokens("y")
        tokenizer.count_tokens("z")

    get_encoding.assert_called_once()


def test_concurrent_first_use_loads_once(fake_encoding: FakeEncoding) -> None:
    """Test racing threads share a single loaded encoding."""
    with patch("tiktoken.get_encoding", return_value=fake_encoding) as get_encoding:
        tokenizer = TiktokenTokenizer()
        results: list[int] = []
        threads = [
            threading.Thread(target=lambda: results.append(tokenizer.count_tokens("abcd")))
            for _ in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

    assert results == [4] * 8
    get_encoding.assert_called_once()
