"""Report rendering."""

from .renderer import format_received_at, render_html, render_markdown, short_sender

__all__ = ["format_received_at", "render_html", "render_markdown", "short_sender"]
