"""Comment markers used to render breadcrumbs.

Maps a file extension to the marker prefixed onto every breadcrumb line so
the breadcrumb reads as a comment in the chunk's own language.
"""

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Final

DEFAULT_COMMENT_MARKER: Final[str] = "//"

# Keys are lowercase extensions without the dot. Block-comment markers are
# used verbatim as a line prefix.
COMMENT_SYNTAX: Final[Mapping[str, str]] = MappingProxyType(
    {
        # C/C++
        "c": "//",
        "h": "//",
        "cpp": "//",
        "hpp": "//",
        "cc": "//",
        "cxx": "//",
        "hxx": "//",
        "cp": "//",
        "hh": "//",
        "inc": "//",
        "ccm": "//",
        "c++m": "//",
        "cppm": "//",
        "cxxm": "//",
        # C#
        "cs": "//",
        # CSS
        "css": "/* */",
        # PHP
        "php": "//",
        "phtml": "//",
        "php3": "//",
        "php4": "//",
        "php5": "//",
        "php7": "//",
        "phps": "//",
        "php-s": "//",
        # Shell
        "bash": "#",
        "sh": "#",
        # JavaScript/TypeScript
        "json": "//",
        "ts": "//",
        "mts": "//",
        "cts": "//",
        "tsx": "//",
        "js": "//",
        "jsx": "//",
        "mjs": "//",
        "cjs": "//",
        "vue": "<!-- -->",
        # Elm
        "elm": "--",
        # Python
        "py": "#",
        "pyw": "#",
        "pyi": "#",
        # Emacs Lisp
        "el": ";;",
        "emacs": ";;",
        # Elixir
        "ex": "#",
        "exs": "#",
        "eex": "<!-- -->",
        "heex": "<!-- -->",
        "leex": "<!-- -->",
        # Go
        "go": "//",
        # HTML
        "html": "<!-- -->",
        "htm": "<!-- -->",
        # Java/JVM
        "java": "//",
        "kt": "//",
        "scala": "//",
        # Lua
        "lua": "--",
        # OCaml
        "ocaml": "(* *)",
        "ml": "(* *)",
        "mli": "(* *)",
        # CodeQL
        "ql": "//",
        # ReScript
        "res": "//",
        "resi": "//",
        # Ruby
        "rb": "#",
        "erb": "#",
        # Rust
        "rs": "//",
        "rdl": "//",
        # TOML
        "toml": "#",
        # Solidity
        "sol": "//",
        # Julia
        "jl": "#",
        # Swift
        "swift": "//",
    }
)


def get_comment_marker(extension: str) -> str:
    """Get the comment marker for a file extension.

    Args:
        extension: File extension, with or without the leading dot.

    Returns:
        Comment marker (e.g., "#", "//"). Defaults to "//".
    """
    return COMMENT_SYNTAX.get(extension.lower().lstrip("."), DEFAULT_COMMENT_MARKER)


def comment_marker_for_path(path: Path) -> str:
    """Get the comment marker for a file path's extension."""
    return get_comment_marker(path.suffix)
