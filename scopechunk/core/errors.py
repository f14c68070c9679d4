"""CLI error handling with actionable hints.

Provides consistent error formatting and common error factory functions
for all scopechunk CLI commands.
"""

from typing import NoReturn

import click


class ScopechunkCliError(click.ClickException):
    """CLI error with actionable hint for users.

    Attributes:
        message: The primary error message.
        hint: Optional actionable suggestion for the user.

    Example:
        raise ScopechunkCliError(
            "No chunkable files found",
            hint="Pass a file with a supported extension",
        )
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def format_message(self) -> str:
        """Format the error message with hint if present."""
        msg = self.message
        if self.hint:
            msg += f"\nHint: {self.hint}"
        return msg


def no_files_error() -> NoReturn:
    """Raise error when no supported files were found under the given paths.

    Raises:
        ScopechunkCliError: Always raises with a hint listing where to look.
    """
    raise ScopechunkCliError(
        "No supported source files found",
        hint="Run 'scopechunk languages' to see the supported extensions",
    )


def config_exists_error(path: str) -> NoReturn:
    """Raise error when a config file would be overwritten.

    Args:
        path: The config file that already exists.

    Raises:
        ScopechunkCliError: Always raises with a --force hint.
    """
    raise ScopechunkCliError(
        f"Config file already exists: {path}",
        hint="Use --force to overwrite it",
    )
