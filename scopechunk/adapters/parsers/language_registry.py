"""Registry for tree-sitter language configurations.

Provides centralized configuration and lazy initialization for supported
languages, and implements the ParserRegistry port.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tree_sitter_c
import tree_sitter_c_sharp
import tree_sitter_cpp
import tree_sitter_go
import tree_sitter_java
import tree_sitter_python
import tree_sitter_ruby
import tree_sitter_rust
import tree_sitter_typescript
from tree_sitter import Language, Parser, Tree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LanguageConfig:
    """Configuration for a tree-sitter supported language.

    Attributes:
        name: Canonical language name (e.g., "python", "typescript").
        module: tree-sitter module containing language parser.
        module_func: Function name to call on module to get language.
        extensions: Lowercase file extensions without the dot (e.g., ["py", "pyi"]).
    """

    name: str
    module: Any
    module_func: str
    extensions: tuple[str, ...]


class LanguageRegistry:
    """Registry of tree-sitter grammars keyed by file extension.

    Provides:
    - Single source of truth for language configurations
    - Lazy initialization of parsers (load on first use)
    - Lookup by extension or canonical name
    """

    _CONFIGS = (
        LanguageConfig(
            name="python",
            module=tree_sitter_python,
            module_func="language",
            extensions=("py", "pyw", "pyi"),
        ),
        LanguageConfig(
            name="typescript",
            module=tree_sitter_typescript,
            module_func="language_typescript",
            extensions=("ts", "mts", "cts"),
        ),
        LanguageConfig(
            name="tsx",
            module=tree_sitter_typescript,
            module_func="language_tsx",
            extensions=("tsx", "jsx"),
        ),
        LanguageConfig(
            name="javascript",
            module=tree_sitter_typescript,
            module_func="language_typescript",
            extensions=("js", "mjs", "cjs"),
        ),
        LanguageConfig(
            name="go",
            module=tree_sitter_go,
            module_func="language",
            extensions=("go",),
        ),
        LanguageConfig(
            name="rust",
            module=tree_sitter_rust,
            module_func="language",
            extensions=("rs",),
        ),
        LanguageConfig(
            name="java",
            module=tree_sitter_java,
            module_func="language",
            extensions=("java",),
        ),
        LanguageConfig(
            name="c",
            module=tree_sitter_c,
            module_func="language",
            extensions=("c", "h"),
        ),
        LanguageConfig(
            name="cpp",
            module=tree_sitter_cpp,
            module_func="language",
            extensions=("cpp", "hpp", "cc", "cxx", "hxx", "hh", "cp", "inc", "ccm", "c++m", "cppm", "cxxm"),
        ),
        LanguageConfig(
            name="csharp",
            module=tree_sitter_c_sharp,
            module_func="language",
            extensions=("cs",),
        ),
        LanguageConfig(
            name="ruby",
            module=tree_sitter_ruby,
            module_func="language",
            extensions=("rb",),
        ),
    )

    def __init__(self) -> None:
        """Initialize the language registry."""
        self._by_name: dict[str, LanguageConfig] = {cfg.name: cfg for cfg in self._CONFIGS}
        self._by_extension: dict[str, LanguageConfig] = {}
        for cfg in self._CONFIGS:
            for extension in cfg.extensions:
                self._by_extension[extension] = cfg

        # Lazy initialization caches
        self._language_cache: dict[str, Language] = {}
        self._parser_cache: dict[str, Parser] = {}

    @property
    def supported_extensions(self) -> set[str]:
        """Return set of all supported file extensions (lowercase, no dot)."""
        return set(self._by_extension.keys())

    def get_by_extension(self, extension: str) -> LanguageConfig | None:
        """Get language config by file extension.

        Args:
            extension: File extension with or without the leading dot.

        Returns:
            LanguageConfig if found, None otherwise.
        """
        return self._by_extension.get(extension.lower().lstrip("."))

    def get_by_name(self, name: str) -> LanguageConfig | None:
        """Get language config by canonical name.

        Args:
            name: Canonical language name (e.g., "python", "typescript").

        Returns:
            LanguageConfig if found, None otherwise.
        """
        return self._by_name.get(name)

    def get_language(self, name: str) -> Language | None:
        """Get tree-sitter Language object for a language (lazy initialization).

        Args:
            name: Canonical language name.

        Returns:
            Language object if found, None otherwise.
        """
        if name in self._language_cache:
            return self._language_cache[name]

        config = self.get_by_name(name)
        if not config:
            return None

        lang_func = getattr(config.module, config.module_func)
        language = Language(lang_func())
        self._language_cache[name] = language
        return language

    def get_parser(self, name: str) -> Parser | None:
        """Get tree-sitter Parser for a language (lazy initialization).

        Args:
            name: Canonical language name.

        Returns:
            Parser object if found, None otherwise.
        """
        if name in self._parser_cache:
            return self._parser_cache[name]

        language = self.get_language(name)
        if not language:
            return None

        parser = Parser(language)
        self._parser_cache[name] = parser
        logger.debug("Initialized tree-sitter parser for %s", name)
        return parser

    def get_parser_for_path(self, path: Path) -> Parser | None:
        """Get the parser selected by a file path's extension.

        Args:
            path: File path.

        Returns:
            Parser if the extension is supported, None otherwise.
        """
        config = self.get_by_extension(path.suffix)
        if not config:
            return None
        return self.get_parser(config.name)

    def parse(self, path: Path, contents: str) -> Tree | None:
        """Parse file contents using the grammar for the path's extension.

        Args:
            path: File path; only its extension is used.
            contents: Full source text.

        Returns:
            Parsed tree, or None if no grammar handles the extension.
        """
        parser = self.get_parser_for_path(path)
        if parser is None:
            return None
        return parser.parse(contents.encode("utf-8"))
