"""Domain exceptions for scopechunk.

These exceptions represent rule violations in the chunking domain.
They should be caught at the application boundary (CLI) and converted
to user-facing error messages.
"""


class ScopechunkDomainError(Exception):
    """Base exception for all domain errors.

    Attributes:
        message: User-facing error message.
        hint: Optional actionable suggestion.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class InvalidBudgetError(ScopechunkDomainError, ValueError):
    """Raised when a token budget is not a positive integer."""

    def __init__(self, max_chunk_size: int) -> None:
        super().__init__(
            f"max_chunk_size must be positive, got {max_chunk_size}",
            hint="Pass --max-tokens with a positive value or fix [chunking] in config.toml",
        )
        self.max_chunk_size = max_chunk_size
