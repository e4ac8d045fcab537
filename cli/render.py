"""
Render ket qua scan cho CLI: table theo ngon ngu, JSON report, tree map.
"""

from pathlib import Path
from typing import Any, Dict, List

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from config.encoding_config import get_encoding_config
from core.language_utils import aggregate_by_language
from core.tokenization.types import CountResult, LanguageSummary
from core.tree_map_generator import build_count_tree, render_count_tree


def format_number(value: int) -> str:
    """1234567 -> "1,234,567"."""
    return f"{value:,}"


def format_elapsed(elapsed: float, file_count: int) -> str:
    """Dong tom tat thoi gian scan va toc do (files/s)."""
    rate = file_count / elapsed if elapsed > 0 else 0.0
    return f"{elapsed:.2f}s ({rate:.2f} files/s)"


def build_language_table(summaries: List[LanguageSummary]) -> Table:
    """
    Bang Language | lines of code | token count voi dong "SUM:" o cuoi.
    """
    table = Table(box=box.ROUNDED)
    table.add_column("Language")
    table.add_column("lines of code", justify="right")
    table.add_column("token count", justify="right")

    for summary in summaries:
        table.add_row(
            summary.language,
            format_number(summary.lines),
            format_number(summary.tokens),
        )

    table.add_section()
    table.add_row(
        "SUM:",
        format_number(sum(s.lines for s in summaries)),
        format_number(sum(s.tokens for s in summaries)),
    )
    return table


def build_json_report(
    path: Path, encoding: str, result: CountResult
) -> Dict[str, Any]:
    """
    JSON report: path, encoding, token_number, models, total, files, by_language.

    token_number / models la None neu encoding khong co trong ENCODING_CONFIGS.
    """
    config = get_encoding_config(encoding)
    return {
        "path": str(path),
        "encoding": encoding,
        "token_number": config.token_number if config else None,
        "models": list(config.models) if config else None,
        "total": result.total,
        "files": [
            {"path": str(f.path), "tokens": f.tokens, "lines": f.lines}
            for f in result.files
        ],
        "by_language": [
            {"language": s.language, "lines": s.lines, "tokens": s.tokens}
            for s in aggregate_by_language(result.files)
        ],
    }


def print_language_table(console: Console, result: CountResult, elapsed: float) -> None:
    console.print(format_elapsed(elapsed, len(result.files)), highlight=False)
    console.print()
    console.print(build_language_table(aggregate_by_language(result.files)))


def print_tree(console: Console, root: Path, result: CountResult, elapsed: float) -> None:
    console.print(format_elapsed(elapsed, len(result.files)), highlight=False)
    console.print()

    lines = render_count_tree(build_count_tree(root, result.files))
    header, rule, rows = lines[0], lines[1], lines[2:]
    console.print(Text(header, style="bold"))
    console.print(rule, markup=False, highlight=False)
    for row in rows:
        console.print(Text(row), soft_wrap=True)
