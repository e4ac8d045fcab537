"""CLI entry point: loctok [PATH] [OPTIONS]."""

import dataclasses
import json
import time
from pathlib import Path
from typing import List, Optional

import click
import typer
from rich.console import Console

from cli import __version__
from cli.progress import TerminalProgress
from cli.render import build_json_report, print_language_table, print_tree
from config.app_settings import OUTPUT_FORMATS, AppSettings
from core.copy_output import build_copy_output, collect_filtered_texts
from core.encoders import get_encoder
from core.logging_config import flush_logs, log_debug, set_debug_mode
from core.tokenization.batch import (
    count_tokens_in_path,
    count_tokens_in_text_for_encoding,
    validate_root,
)
from core.tokenization.errors import ScanError
from core.tokenization.types import ScanOptions
from services.clipboard_utils import copy_to_clipboard
from services.settings_manager import load_app_settings

app = typer.Typer(
    name="loctok",
    help="Count LOC (lines of code) & TOK (LLM tokens), fast.",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"loctok {__version__}")
        raise typer.Exit()


def resolve_scan_options(
    settings: AppSettings,
    encoding: Optional[str] = None,
    hidden: Optional[bool] = None,
    ext: Optional[str] = None,
    exclude: Optional[List[str]] = None,
    default_ignores: Optional[bool] = None,
) -> ScanOptions:
    """ScanOptions tu settings, CLI flags (khac None) override."""
    options = settings.to_scan_options()
    overrides = {}
    if encoding is not None:
        overrides["encoding"] = encoding
    if hidden is not None:
        overrides["include_hidden"] = hidden
    if ext is not None:
        overrides["include_exts"] = ScanOptions.parse_extensions(ext)
    if exclude:
        overrides["excluded_patterns"] = options.excluded_patterns + tuple(exclude)
    if default_ignores is not None:
        overrides["use_default_ignores"] = default_ignores
    return dataclasses.replace(options, **overrides)


def _run_copy(path: Path, options: ScanOptions) -> None:
    get_encoder(options.encoding)
    validate_root(path)

    rel_and_texts = collect_filtered_texts(path, options)
    output = build_copy_output(rel_and_texts)
    tokens = count_tokens_in_text_for_encoding(output, options.encoding)

    ok, message = copy_to_clipboard(output)
    if not ok:
        err_console.print(f"[red]Error:[/red] {message}")
        raise typer.Exit(1)
    console.print(
        f"{message}: {len(rel_and_texts)} files, {tokens:,} tokens ({options.encoding})",
        highlight=False,
    )


@app.command()
def main(
    path: Path = typer.Argument(
        Path("."),
        help="Root path to scan (defaults to current directory)",
    ),
    encoding: Optional[str] = typer.Option(
        None,
        "--encoding",
        help="Encoding to use (cl100k_base, o200k_base, p50k_base, p50k_edit, r50k_base)",
    ),
    hidden: Optional[bool] = typer.Option(
        None,
        "--hidden/--no-hidden",
        help="Include hidden files (dotfiles)",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        help="Output format: table | json | tree",
        click_type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    ),
    ext: Optional[str] = typer.Option(
        None,
        "--ext",
        help='Comma-separated list of file extensions to include (e.g. "rs,py,js")',
    ),
    exclude: Optional[List[str]] = typer.Option(
        None,
        "--exclude",
        help="Extra gitignore-style pattern to skip (repeatable)",
    ),
    default_ignores: Optional[bool] = typer.Option(
        None,
        "--default-ignores/--no-default-ignores",
        help="Skip common dependency/build directories and lock files",
    ),
    progress: Optional[bool] = typer.Option(
        None,
        "--progress/--no-progress",
        help="Show progress while scanning (stderr)",
    ),
    copy: bool = typer.Option(
        False,
        "--copy",
        help="Copy a tree + numbered contents bundle of all scanned files to the clipboard",
    ),
    jobs: Optional[int] = typer.Option(
        None,
        "-j",
        "--jobs",
        help="Worker threads (default: auto-detect)",
        min=1,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Count non-empty lines and BPE tokens under [bold]PATH[/bold], grouped by language.
    """
    if verbose:
        set_debug_mode(True)

    settings = load_app_settings()
    options = resolve_scan_options(settings, encoding, hidden, ext, exclude, default_ignores)
    fmt = (output_format or settings.output_format).lower()
    show_progress = settings.show_progress if progress is None else progress
    log_debug(f"[CLI] path={path} format={fmt} options={options}")

    try:
        if copy:
            _run_copy(path, options)
            return

        display = TerminalProgress() if show_progress else None
        started = time.perf_counter()
        try:
            result = count_tokens_in_path(path, options, progress=display, max_workers=jobs)
        finally:
            if display is not None:
                display.clear()
        elapsed = time.perf_counter() - started

        if fmt == "json":
            typer.echo(json.dumps(build_json_report(path, options.encoding, result), indent=2))
        elif fmt == "tree":
            print_tree(console, path, result, elapsed)
        else:
            print_language_table(console, result, elapsed)
    except ScanError as e:
        err_console.print(f"[red]Error:[/red] {e}", highlight=False)
        raise typer.Exit(1)
    finally:
        flush_logs()


def run() -> None:
    """Console script entry point."""
    app()
