"""
Pipeline orchestration for the morning briefing digest.

Steps:
1. Load the briefing JSON (raw payload or stored envelope)
2. Normalize the newsletter list
3. Select takeaways
4. Render HTML and/or Markdown
"""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console

from .config import AppConfig
from .core.takeaways import select_takeaways
from .core.types import NewsletterRecord, Takeaway
from .input.briefing_parser import parse_executive_summary, parse_newsletters, unwrap_briefing
from .logging_utils import log_event, setup_logging
from .output.renderer import render_html, render_markdown


def load_newsletters(input_path: Path) -> tuple[list[NewsletterRecord], str | None]:
    """Read a briefing file and return its newsletters and executive summary."""
    with open(input_path, encoding="utf-8") as f:
        data = json.load(f)
    briefing = unwrap_briefing(data)
    return parse_newsletters(briefing), parse_executive_summary(briefing)


def run_pipeline(
    input_path: Path,
    output_dir: Path,
    cfg: AppConfig,
    console: Console | None = None,
) -> Path:
    """Build the digest report for one briefing file.

    Args:
        input_path: Path to the briefing JSON file
        output_dir: Directory for the report and run log
        cfg: Application configuration
        console: Rich console for the summary line (creates default if None)

    Returns:
        Path to the main report file (HTML, or Markdown when format is "markdown")

    Raises:
        ValueError: If the briefing is malformed or the output format is unknown
    """
    if cfg.output.format not in ("html", "markdown"):
        raise ValueError(f"Unknown output format: {cfg.output.format}")

    output_dir.mkdir(parents=True, exist_ok=True)
    logger = setup_logging(cfg.logging, output_dir)
    log_event(
        logger,
        "Pipeline start",
        event="pipeline_start",
        input=str(input_path),
        output=str(output_dir),
    )

    newsletters, executive_summary = load_newsletters(input_path)
    takeaways = select_takeaways(newsletters, max_takeaways=cfg.takeaways.max_takeaways)
    log_event(
        logger,
        "Takeaways selected",
        event="takeaways_selected",
        newsletters=len(newsletters),
        takeaways=len(takeaways),
        topics=[takeaway.title for takeaway in takeaways],
    )

    render_args = dict(
        takeaways=takeaways,
        newsletters=newsletters,
        title=cfg.output.title,
        executive_summary=executive_summary,
        newsletter_limit=cfg.output.newsletter_limit,
    )
    md_path = output_dir / "digest.md"
    if cfg.output.format == "markdown":
        report_path = md_path
        render_markdown(output_path=md_path, **render_args)
    else:
        report_path = output_dir / "digest.html"
        render_html(output_path=report_path, **render_args)
        if cfg.output.include_markdown:
            render_markdown(output_path=md_path, **render_args)

    log_event(
        logger,
        "Pipeline complete",
        event="pipeline_complete",
        output=str(report_path),
        total=len(newsletters),
    )
    _render_summary(takeaways, console or Console())
    return report_path


def _render_summary(takeaways: list[Takeaway], console: Console) -> None:
    if not takeaways:
        console.print("[yellow]No takeaways selected[/yellow]")
        return
    for takeaway in takeaways:
        console.print(
            f"[bold]{takeaway.title}[/bold]: {len(takeaway.bullets)} bullets, "
            f"{len(takeaway.sources)} sources"
        )
