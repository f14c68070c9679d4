"""scopechunk CLI entrypoint.

Command-line interface for context-aware source chunking.
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from scopechunk.domain.config import ScopechunkConfig

from scopechunk.core.errors import (
    ScopechunkCliError,
    config_exists_error,
    no_files_error,
)
from scopechunk.domain.exceptions import ScopechunkDomainError
from scopechunk.shared import config_io
from scopechunk.version import __version__

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def handle_cli_errors(command_name: str):
    """Decorator to handle common CLI errors.

    ScopechunkCliError exceptions are re-raised to use their built-in
    formatting; domain errors keep their hint; anything else is wrapped with
    a generic hint, printing a traceback in verbose mode.

    Args:
        command_name: Name of the command for error messages.

    Returns:
        Decorated function with error handling.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (ScopechunkCliError, click.exceptions.Exit):
                raise
            except ScopechunkDomainError as e:
                raise ScopechunkCliError(e.message, hint=e.hint) from e
            except ValueError as e:
                raise ScopechunkCliError(
                    str(e),
                    hint="Check the command options and config.toml values",
                ) from e
            except Exception as e:
                ctx = click.get_current_context()
                if ctx.obj.get("verbose", False):
                    import traceback

                    traceback.print_exc()
                raise ScopechunkCliError(
                    f"Unexpected error in {command_name}: {e}",
                    hint="Run with --verbose for more details",
                ) from e

        return wrapper

    return decorator


def _load_config(project_root: Path) -> ScopechunkConfig:
    """Load merged global and local configuration for a project root."""
    from scopechunk.adapters.factory import ConfigFactory

    config_dir = config_io.get_local_config_dir(project_root)
    return ConfigFactory().create_config_provider().load(config_dir)


def _collect_files(paths: tuple[str, ...], supported: set[str]) -> list[Path]:
    """Expand CLI paths into files.

    Directories are walked for files with a supported extension. Files named
    explicitly are always returned so unsupported ones can be reported.
    """
    files: list[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            files.extend(
                sorted(
                    p
                    for p in path.rglob("*")
                    if p.is_file() and p.suffix.lower().lstrip(".") in supported
                )
            )
        else:
            files.append(path)
    return files


@click.group()
@click.version_option(version=__version__, prog_name="scopechunk")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress non-essential output.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """scopechunk - Context-aware source chunking.

    Splits source files into token-bounded chunks, each prefixed with the
    signatures of its enclosing functions and classes.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format=LOG_FORMAT)


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option(
    "--max-tokens",
    "-m",
    type=int,
    default=None,
    help="Token budget per chunk (default: from config, 512).",
)
@click.option(
    "--encoding",
    type=str,
    default=None,
    help="tiktoken encoding used to count tokens (default: from config).",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output chunks as JSON.",
)
@click.pass_context
@handle_cli_errors("chunk")
def chunk(
    ctx: click.Context,
    paths: tuple[str, ...],
    max_tokens: int | None,
    encoding: str | None,
    json_output: bool,
) -> None:
    """Chunk source files into token-bounded, context-prefixed pieces.

    PATHS may be files or directories; directories are searched recursively
    for supported source files.
    """
    from scopechunk.adapters.factory import ChunkerFactory
    from scopechunk.core.chunking.chunk_usecase import ChunkFileRequest
    from scopechunk.core.presentation import (
        FileChunks,
        JsonChunkFormatter,
        TextChunkFormatter,
    )
    from scopechunk.domain.config import ScopechunkConfig

    quiet = ctx.obj.get("quiet", False)

    app_config = _load_config(Path.cwd())
    overrides: dict[str, dict[str, object]] = {}
    if max_tokens is not None:
        overrides["chunking"] = {"max_chunk_size": max_tokens}
    if encoding is not None:
        overrides["tokenizer"] = {"encoding": encoding}
    app_config = ScopechunkConfig.from_partial(app_config, overrides)

    factory = ChunkerFactory(app_config)
    tokenizer = factory.create_tokenizer()
    registry = factory.create_parser_registry()
    use_case = factory.create_chunk_usecase(tokenizer=tokenizer, parser_registry=registry)

    files = _collect_files(paths, registry.supported_extensions)
    if not files:
        no_files_error()

    results: list[FileChunks] = []
    failures = 0
    for path in files:
        content = path.read_text(encoding="utf-8", errors="replace")
        response = use_case.execute(
            ChunkFileRequest(
                path=path,
                content=content,
                max_chunk_size=app_config.chunking.max_chunk_size,
            )
        )
        if response.skipped:
            if not quiet:
                click.echo(f"Warning: skipped {path}: {response.error}", err=True)
            continue
        if not response.success:
            failures += 1
            click.echo(f"Error: {response.error}", err=True)
            continue
        results.append(FileChunks(path=path, chunks=response.chunks))

    if json_output:
        click.echo(JsonChunkFormatter(tokenizer).format_output(results))
    else:
        output = TextChunkFormatter(tokenizer, color=True).format_output(results)
        if output:
            click.echo(output)

    if failures:
        ctx.exit(1)


@cli.command()
def languages() -> None:
    """List supported file extensions and their breadcrumb comment marker."""
    from scopechunk.adapters.parsers.language_registry import LanguageRegistry
    from scopechunk.core.chunking.comment_syntax import get_comment_marker

    registry = LanguageRegistry()
    for extension in sorted(registry.supported_extensions):
        language = registry.get_by_extension(extension)
        click.echo(f".{extension:<6} {language.name:<12} {get_comment_marker(extension)}")


@cli.group()
def config() -> None:
    """Inspect and create configuration files."""


@config.command("show")
@click.pass_context
@handle_cli_errors("config show")
def config_show(ctx: click.Context) -> None:
    """Show config file locations and the effective configuration."""
    global_path = config_io.get_global_config_path()
    local_path = config_io.get_local_config_dir(Path.cwd()) / config_io.CONFIG_FILENAME

    global_state = "exists" if global_path.exists() else "not found"
    local_state = "exists" if local_path.exists() else "not found"
    click.echo(f"Global config: {global_path} ({global_state})")
    click.echo(f"Local config: {local_path} ({local_state})")
    click.echo("")
    click.echo(config_io.dump_config(_load_config(Path.cwd())).rstrip())


@config.command("init")
@click.option(
    "--global",
    "global_",
    is_flag=True,
    help="Create the global config instead of the project config.",
)
@click.option(
    "--force",
    "-f",
    is_flag=True,
    help="Overwrite an existing config file.",
)
@click.pass_context
@handle_cli_errors("config init")
def config_init(ctx: click.Context, global_: bool, force: bool) -> None:
    """Create a config.toml populated with defaults."""
    if global_:
        path = config_io.get_global_config_path()
    else:
        path = config_io.get_local_config_dir(Path.cwd()) / config_io.CONFIG_FILENAME

    if path.exists() and not force:
        config_exists_error(str(path))

    config_io.create_default_config_file(path)
    if not ctx.obj.get("quiet", False):
        click.echo(f"Created config at {path}")


def main() -> None:
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
