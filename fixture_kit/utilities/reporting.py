"""
Rich-based rendering of fill and verification reports.

Turns the result objects into tables for a terminal, typically from a failing
test or an interactive session.
"""

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.results import FillResult, VerificationReport

COLORS = {
    "header": "#00d4ff",
    "success": "#00d26a",
    "error": "#ff6b6b",
    "muted": "#6c757d",
}

_MAX_VALUE_WIDTH = 40


def _short(value: Any) -> str:
    text = repr(value)
    if len(text) > _MAX_VALUE_WIDTH:
        text = text[: _MAX_VALUE_WIDTH - 3] + "..."
    return escape(text)


def build_fill_table(result: FillResult[Any]) -> Table:
    """Build a table listing the fields a fill had to skip."""
    type_name = type(result.instance).__name__
    table = Table(title=f"Fill of {type_name}", header_style=f"bold {COLORS['header']}")
    table.add_column("Field")
    table.add_column("Declared in", style=COLORS["muted"])
    table.add_column("Reason")

    for skip in result.skipped_fields:
        table.add_row(skip.field_name, skip.declaring_type, escape(skip.reason))
    if not result.has_skips():
        table.caption = "every field was assigned"
    return table


def build_verification_table(report: VerificationReport) -> Table:
    """Build a table with one row per accessor comparison and skipped field."""
    table = Table(
        title=f"Accessors of {report.type_name}", header_style=f"bold {COLORS['header']}"
    )
    table.add_column("Field")
    table.add_column("Method")
    table.add_column("Set")
    table.add_column("Got")
    table.add_column("Status")

    for record in report.comparisons:
        status = (
            f"[{COLORS['success']}]ok[/]" if record.matched else f"[{COLORS['error']}]mismatch[/]"
        )
        table.add_row(
            record.field_name,
            record.method_name,
            _short(record.expected),
            _short(record.actual),
            status,
        )
    for skip in report.skipped_fields:
        reason = f"[{COLORS['muted']}]{escape(skip.reason)}[/]"
        table.add_row(skip.field_name, "-", "-", "-", reason)
    return table


def render_fill_report(result: FillResult[Any], console: Console | None = None) -> Table:
    """Print the skipped fields of a fill and return the table."""
    table = build_fill_table(result)
    (console or Console()).print(table)
    return table


def render_verification_report(
    report: VerificationReport, console: Console | None = None
) -> Table:
    """Print an accessor verification report and return the table."""
    table = build_verification_table(report)
    (console or Console()).print(table)
    return table
