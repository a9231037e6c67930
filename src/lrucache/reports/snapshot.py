"""Snapshot report

Renders cache contents as Markdown through a Jinja2 template. Only reads a
snapshot; the cache never prints anything itself.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from lrucache.config import DEFAULT_MAX_VALUE_WIDTH, DEFAULT_REPORT_TITLE
from lrucache.models import CacheSnapshot


def _get_template_env() -> Environment:
    template_dir = Path(__file__).parent / "templates"
    return Environment(
        loader=FileSystemLoader(template_dir),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def format_table(
    data: list[dict[str, Any]],
    columns: list[str] | None = None,
    max_width: int = DEFAULT_MAX_VALUE_WIDTH,
) -> str:
    """Format rows as a Markdown table

    Args:
        data: table rows
        columns: column names to show, defaults to the keys of the first row
        max_width: cell values are cut to this many characters

    Returns:
        Markdown table string
    """
    if not data:
        return "_no data_\n"

    cols = columns or list(data[0].keys())
    header = "| " + " | ".join(cols) + " |"
    separator = "|" + "|".join("---" for _ in cols) + "|"
    rows = []
    for row in data:
        values = [str(row.get(c, ""))[:max_width] for c in cols]
        rows.append("| " + " | ".join(values) + " |")

    return "\n".join([header, separator, *rows]) + "\n"


def render_snapshot(
    snapshot: CacheSnapshot,
    title: str | None = None,
    max_width: int = DEFAULT_MAX_VALUE_WIDTH,
) -> str:
    """Render a snapshot as Markdown, least recently used entry first"""
    template = _get_template_env().get_template("snapshot.md.j2")
    return template.render(
        title=title or DEFAULT_REPORT_TITLE,
        snapshot=snapshot,
        rows=snapshot.to_rows(),
        max_width=max_width,
        format_table=format_table,
    )
