"""Configuration I/O utilities for reading and writing TOML config files.

This module reads raw TOML config data and renders ScopechunkConfig as TOML.
Merging raw data into a config is done by ScopechunkConfig.from_partial.
"""

import os
import platform
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from scopechunk.domain.config import ScopechunkConfig

LOCAL_CONFIG_DIR = ".scopechunk"
CONFIG_FILENAME = "config.toml"


def get_global_config_path() -> Path:
    """Get the path to the global config file.

    The location is platform-dependent:
    - Linux/macOS: $XDG_CONFIG_HOME/scopechunk/config.toml or ~/.config/scopechunk/config.toml
    - Windows: %APPDATA%/scopechunk/config.toml

    Returns:
        Path to the global config file (may not exist)
    """
    if platform.system() == "Windows":
        appdata = os.environ.get("APPDATA", "")
        if appdata:
            return Path(appdata) / "scopechunk" / CONFIG_FILENAME
        return Path.home() / ".config" / "scopechunk" / CONFIG_FILENAME
    xdg_config = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg_config:
        return Path(xdg_config) / "scopechunk" / CONFIG_FILENAME
    return Path.home() / ".config" / "scopechunk" / CONFIG_FILENAME


def get_local_config_dir(project_root: Path) -> Path:
    """Get the project-local config directory (.scopechunk)."""
    return project_root / LOCAL_CONFIG_DIR


def load_config_data(path: Path) -> dict[str, Any]:
    """Load raw TOML data from a config file.

    Args:
        path: Path to config.toml file

    Returns:
        Dictionary with parsed TOML data

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is malformed
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in config file: {e}") from e


def config_to_data(config: ScopechunkConfig) -> dict[str, Any]:
    """Convert a ScopechunkConfig into TOML-ready section dictionaries."""
    return {
        "chunking": {
            "max_chunk_size": config.chunking.max_chunk_size,
            "token_workers": config.chunking.token_workers,
        },
        "tokenizer": {
            "encoding": config.tokenizer.encoding,
        },
    }


def dump_config(config: ScopechunkConfig) -> str:
    """Render a configuration as TOML text."""
    return tomli_w.dumps(config_to_data(config))


def create_default_config_file(path: Path) -> None:
    """Create a default config.toml file with sensible defaults and comments.

    Args:
        path: Destination path for config.toml
    """
    # We use a template string to preserve comments and formatting
    template = """\
# scopechunk configuration
# Created by: scopechunk config init

[chunking]
# Token budget for one chunk, breadcrumb included
max_chunk_size = 512

# Threads used to count line tokens before packing
token_workers = 8

[tokenizer]
# tiktoken encoding used to count tokens
# Options: cl100k_base, o200k_base, p50k_base
encoding = "cl100k_base"
"""

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write(template)
