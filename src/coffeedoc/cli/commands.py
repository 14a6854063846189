"""Click CLI commands for coffeedoc.

This module implements the command-line interface using Click, providing
commands for documenting syntax tree files, inspecting the result and
managing configuration.
"""

from __future__ import annotations

import json
import logging
import sys
import time
from pathlib import Path

import click
import structlog
from click.core import ParameterSource

from coffeedoc import __version__
from coffeedoc.cli.ui import CoffeedocUI, configure_ui, get_ui
from coffeedoc.core.documenter import ModuleDocumenter
from coffeedoc.core.models import ModuleDoc
from coffeedoc.core.nodes import MalformedNodeError
from coffeedoc.utils.config import CoffeedocConfig, create_default_config, load_config
from coffeedoc.utils.file_ops import FileOperations

logger = structlog.get_logger(__name__)


def configure_logging(level: int, log_format: str = "console") -> None:
    """Configure structlog for CLI use.

    Log output goes to stderr so that stdout only carries documentation.

    Args:
        level: Minimum stdlib logging level to emit
        log_format: "json" or "console"
    """
    renderer: structlog.types.Processor
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def _log_level(config: CoffeedocConfig, verbose: bool, quiet: bool) -> int:
    if quiet or config.quiet:
        return logging.ERROR
    if verbose or config.verbose:
        return logging.DEBUG
    return logging.getLevelName(config.log_level)


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),  # type: ignore[type-var]
    help="Path to configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Quiet mode")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Path | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """coffeedoc - documentation extraction for CoffeeScript modules.

    Reads syntax trees written by the CoffeeScript parser and turns them
    into documentation models (module docstring, classes, functions) as JSON.
    """
    if quiet:
        log_level = logging.ERROR
    elif verbose:
        log_level = logging.DEBUG
    else:
        log_level = logging.WARNING

    configure_logging(log_level)
    logger.debug("logging_configured", level=logging.getLevelName(log_level))

    ui = configure_ui(verbose=verbose, quiet=quiet)

    ctx.ensure_object(dict)
    ctx.obj["ui"] = ui
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


def _collect_files(
    paths: tuple[Path, ...],
    config: CoffeedocConfig,
    file_ops: FileOperations,
) -> list[tuple[Path, Path]]:
    """Return (file, root) pairs, each file once, in discovery order."""
    files: list[tuple[Path, Path]] = []
    seen: set[Path] = set()
    for path in paths:
        if path.is_file():
            root = path.parent
            candidates = [path]
        else:
            root = path.resolve()
            candidates = file_ops.find_ast_files(
                path,
                config.file_pattern,
                config.exclude_patterns,
            )
        for candidate in candidates:
            resolved = candidate.resolve()
            if resolved in seen:
                continue
            seen.add(resolved)
            files.append((candidate, root))
    return files


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))  # type: ignore[type-var]
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),  # type: ignore[type-var]
    help="Write one documentation file per module here instead of stdout",
)
@click.option("--indent", type=click.IntRange(0, 8), help="JSON indentation (0 for compact)")
@click.option("--overwrite", is_flag=True, help="Overwrite existing output files")
@click.option("--fail-fast", is_flag=True, help="Stop at the first module that fails")
@click.option("--dry-run", is_flag=True, help="Document modules without writing files")
@click.pass_context
def document(
    ctx: click.Context,
    paths: tuple[Path, ...],
    output_dir: Path | None,
    indent: int | None,
    overwrite: bool,
    fail_fast: bool,
    dry_run: bool,
) -> None:
    """Document syntax tree files.

    PATHS can be one or more JSON syntax tree files or directories. Directories
    are searched for files matching the configured pattern.

    Examples:
        coffeedoc document build/ast/module.json
        coffeedoc document build/ast/ --output-dir docs/api
    """
    ui: CoffeedocUI = ctx.obj["ui"]
    config_path: Path | None = ctx.obj["config_path"]

    overrides: dict[str, object] = {
        "output_dir": output_dir,
        "json_indent": indent,
    }
    if ctx.get_parameter_source("overwrite") == ParameterSource.COMMANDLINE:
        overrides["overwrite"] = overwrite
    if ctx.get_parameter_source("fail_fast") == ParameterSource.COMMANDLINE:
        overrides["fail_fast"] = fail_fast

    try:
        config = load_config(config_path, **overrides)
    except (ValueError, FileNotFoundError) as e:
        ui.print_error(f"Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(
        _log_level(config, ctx.obj["verbose"], ctx.obj["quiet"]),
        config.log_format,
    )
    logger.debug(
        "configuration_loaded",
        config_path=str(config_path) if config_path else "default",
        overrides=[k for k, v in overrides.items() if v is not None],
    )

    if ctx.obj["verbose"]:
        ui.display_config(config.model_dump())

    file_ops = FileOperations(dry_run=dry_run)
    files = _collect_files(paths, config, file_ops)

    if not files:
        ui.print_warning("No syntax tree files found")
        sys.exit(0)

    if ctx.obj["verbose"]:
        ui.display_file_list([file_path for file_path, _ in files])

    documenter = ModuleDocumenter()
    start_time = time.time()
    docs: dict[str, ModuleDoc] = {}
    written: dict[Path, Path] = {}
    total_errors = 0

    for file_path, root in files:
        ui.print_debug(f"Documenting {file_path}")
        try:
            doc = file_ops.document_file(file_path, documenter)
            if config.output_dir is not None:
                output_path = file_ops.output_path_for(
                    file_path, config.output_dir, config.output_suffix, root=root
                )
                if output_path in written:
                    raise FileExistsError(
                        f"Output file {output_path} is already used by {written[output_path]}"
                    )
                file_ops.write_doc(
                    doc,
                    output_path,
                    indent=config.json_indent,
                    overwrite=config.overwrite,
                )
                written[output_path] = file_path
                ui.print_success(f"{file_path} -> {output_path}")
            docs[str(file_path)] = doc

        except (ValueError, OSError) as e:
            total_errors += 1
            kind = "Malformed syntax tree" if isinstance(e, MalformedNodeError) else "Error"
            ui.print_error(f"{kind} in {file_path}: {e}")
            logger.error("file_documentation_failed", file=str(file_path), error=str(e))
            if config.fail_fast:
                sys.exit(1)

    if config.output_dir is None and docs:
        payload = {path: doc.model_dump() for path, doc in docs.items()}
        click.echo(json.dumps(payload, indent=config.json_indent or None))

    ui.display_statistics(
        total_files=len(files),
        documented_count=len(docs),
        class_count=sum(len(doc.classes) for doc in docs.values()),
        function_count=sum(len(doc.functions) for doc in docs.values()),
        error_count=total_errors,
        duration_seconds=time.time() - start_time,
    )

    if total_errors:
        sys.exit(1)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))  # type: ignore[type-var]
@click.option("--docstrings", "-d", is_flag=True, help="Show docstrings")
@click.pass_context
def inspect(ctx: click.Context, path: Path, docstrings: bool) -> None:
    """Show the documentation of a syntax tree file as a tree."""
    ui: CoffeedocUI = ctx.obj["ui"]

    try:
        doc = FileOperations().document_file(path)
    except (ValueError, OSError) as e:
        ui.print_error(f"Cannot document {path}: {e}")
        logger.error("inspect_failed", file=str(path), error=str(e))
        sys.exit(1)

    ui.display_module_tree(doc, title=path.name, show_docstrings=docstrings)


@cli.command()
@click.argument("output", type=click.Path(path_type=Path), default="coffeedoc.toml")  # type: ignore[type-var]
def init(output: Path) -> None:
    """Initialize a new coffeedoc configuration file.

    Creates a default configuration file with common settings.
    """
    ui = get_ui()

    try:
        create_default_config(output)
        ui.print_success(f"Created configuration file: {output}")
        ui.print_info("Edit the file to customize settings for your project")

    except FileExistsError:
        ui.print_error(f"Configuration file already exists: {output}")
        sys.exit(1)

    except OSError as e:
        ui.print_error(f"Failed to create configuration: {e}")
        sys.exit(1)


def main() -> None:
    """Entry point for the CLI."""
    try:
        cli(obj={})
    except KeyboardInterrupt:
        ui = get_ui()
        ui.print_warning("Interrupted by user")
        sys.exit(130)
