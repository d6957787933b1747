# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Command line interface.

Exit codes:
    0  success
    1  a file would be reformatted under ``--check``, or a file error occurred
    2  configuration error
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from typing_extensions import Annotated

from returns.unsafe import unsafe_perform_io
from returns.result import Failure, Result, safe

from .cli_helpers import unified_diff, version_callback
from .error_handler import ErrorContext, ErrorHandler
from .errors import ConfigError, ThriftfmtError
from .file_ops import discover_thrift_files, read_text, write_text
from .formatter import ThriftFormatter
from .formatting_options_model import CollectionStyle, FormattingOptions, TrailingComma
from .logging_setup import setup_loggers
from .settings import ThriftfmtSettings

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2

app = typer.Typer(
    name="thriftfmt",
    help="Thrift IDL Formatter - aligns fields, enums and constants",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
    pretty_exceptions_enable=False,
)


@app.callback(invoke_without_command=False)
def main_callback(
    version: Annotated[Optional[bool], typer.Option("--version", "-v", callback=version_callback, is_eager=True, help="Show version and exit")] = None
) -> None:
    """Thrift IDL Formatter."""


@safe
def _load_options(config: Optional[Path], overrides: Dict[str, Any]) -> FormattingOptions:
    if config is not None and not config.exists():
        raise FileNotFoundError(f"Configuration file not found: {config}")
    options = FormattingOptions.load_from_path_or_default(config)
    return options.model_copy(update=overrides) if overrides else options


def _options_or_exit(config: Optional[Path], overrides: Dict[str, Any]) -> FormattingOptions:
    result: Result[FormattingOptions, ConfigError] = _load_options(config, overrides).alt(
        lambda exc: ConfigError(message=str(exc), config_file=config)
    )
    if isinstance(result, Failure):
        print(f"Configuration error: {result.failure().message}", file=sys.stderr)
        raise typer.Exit(EXIT_CONFIG)
    return result.unwrap()


def _collect_overrides(
    trailing_comma: Optional[TrailingComma],
    indent_size: Optional[int],
    max_line_length: Optional[int],
    collection_style: Optional[CollectionStyle],
    tabs: bool,
) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if trailing_comma is not None:
        overrides["trailing_comma"] = trailing_comma
    if indent_size is not None:
        overrides["indent_size"] = indent_size
    if max_line_length is not None:
        overrides["max_line_length"] = max_line_length
    if collection_style is not None:
        overrides["collection_style"] = collection_style
    if tabs:
        overrides["insert_spaces"] = False
    return overrides


def _report(error: ThriftfmtError, handler: ErrorHandler, path: Path, operation: str) -> None:
    print(f"Error: {error.message}", file=sys.stderr)
    handler.handle_error(error, ErrorContext(component="cli", operation=operation, file_path=path))


@app.command(name="format")
def format_command(
    paths: Annotated[List[Path], typer.Argument(help="Thrift files or directories to format")],
    check: Annotated[bool, typer.Option("--check", help="Exit with code 1 if any files need formatting")] = False,
    write: Annotated[bool, typer.Option("--write", help="Apply changes to files")] = False,
    diff: Annotated[bool, typer.Option("--diff", help="Show unified diffs of changes")] = False,
    config: Annotated[Optional[Path], typer.Option("--config", help="Formatting options JSON file")] = None,
    trailing_comma: Annotated[Optional[TrailingComma], typer.Option("--trailing-comma", help="Field terminator policy")] = None,
    indent_size: Annotated[Optional[int], typer.Option("--indent-size", min=1, help="Spaces per indent level")] = None,
    max_line_length: Annotated[Optional[int], typer.Option("--max-line-length", min=1, help="Line length for collection-style auto")] = None,
    collection_style: Annotated[Optional[CollectionStyle], typer.Option("--collection-style", help="Const collection layout")] = None,
    tabs: Annotated[bool, typer.Option("--tabs", help="Indent with tabs")] = False,
    log_path: Annotated[Optional[Path], typer.Option("--log-path", help="Path to JSON Lines log file")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level")] = None,
) -> None:
    """Format Thrift IDL files."""
    settings = ThriftfmtSettings()
    sink = setup_loggers(log_path or settings.log_path, log_level or settings.log_level)
    options = _options_or_exit(
        config or settings.config_file,
        _collect_overrides(trailing_comma, indent_size, max_line_length, collection_style, tabs),
    )
    handler = ErrorHandler(sink=sink)
    formatter = ThriftFormatter(error_handler=handler)

    files = discover_thrift_files(paths)
    show_diff = diff or (not write and not check and len(files) > 1)
    exit_code = EXIT_OK
    changed_count = 0

    for path in files:
        read = unsafe_perform_io(read_text(path))
        if isinstance(read, Failure):
            _report(read.failure(), handler, path, "read")
            exit_code = EXIT_FAILED
            continue
        content = read.unwrap()

        formatted_result = formatter.format_result(content, options)
        if isinstance(formatted_result, Failure):
            _report(formatted_result.failure(), handler, path, "format")
            exit_code = EXIT_FAILED
            continue
        formatted = formatted_result.unwrap()
        changed = formatted != content

        if changed:
            changed_count += 1
            if sink is not None:
                sink.append_notes(str(path), ["reformatted" if write else "needs formatting"])
        if show_diff and changed:
            typer.echo(unified_diff(content, formatted, str(path)), nl=False)
        if write and changed:
            written = unsafe_perform_io(write_text(path, formatted))
            if isinstance(written, Failure):
                _report(written.failure(), handler, path, "write")
                exit_code = EXIT_FAILED
                continue
        if check and changed:
            print(f"would reformat {path}", file=sys.stderr)
            exit_code = EXIT_FAILED
        if not (write or check or show_diff):
            typer.echo(formatted, nl=False)

    if write or check:
        print(f"{changed_count} of {len(files)} file(s) {'reformatted' if write else 'need formatting'}",
              file=sys.stderr)
    if sink is not None:
        sink.close()
    if exit_code != EXIT_OK:
        raise typer.Exit(exit_code)


@app.command(name="range")
def range_command(
    file: Annotated[Path, typer.Argument(help="Thrift file")],
    start: Annotated[int, typer.Option("--start", min=0, help="First line of the range (0-based)")],
    end: Annotated[int, typer.Option("--end", min=0, help="Last line of the range (0-based, inclusive)")],
    config: Annotated[Optional[Path], typer.Option("--config", help="Formatting options JSON file")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level")] = None,
) -> None:
    """Print the formatted text of a line range of FILE."""
    settings = ThriftfmtSettings()
    sink = setup_loggers(settings.log_path, log_level or settings.log_level)
    options = _options_or_exit(config or settings.config_file, {})
    handler = ErrorHandler(sink=sink)

    read = unsafe_perform_io(read_text(file))
    if isinstance(read, Failure):
        _report(read.failure(), handler, file, "read")
        raise typer.Exit(EXIT_FAILED)

    formatted = ThriftFormatter(error_handler=handler).format_range(read.unwrap(), start, end, options)
    typer.echo(formatted)
    if sink is not None:
        sink.close()


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
