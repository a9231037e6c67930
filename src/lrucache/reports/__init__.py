"""Report rendering"""

from lrucache.reports.snapshot import format_table, render_snapshot

__all__ = ["format_table", "render_snapshot"]
