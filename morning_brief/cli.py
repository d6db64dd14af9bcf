"""
Command-line interface for the morning briefing digest.

Uses Typer for option parsing and Rich for console output. Loads a .env
file, if present, before reading configuration.
"""

from __future__ import annotations

from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from .config import load_config
from .core.takeaways import select_takeaways
from .output.renderer import short_sender
from .runner import load_newsletters, run_pipeline

app = typer.Typer(add_completion=False)
console = Console()


@app.command()
def run(
    input: Path = typer.Option(..., "--input", "-i", exists=True, readable=True),
    output: Path = typer.Option(Path("out"), "--output", "-o"),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    max_takeaways: int | None = typer.Option(
        None, "--max-takeaways", min=1, help="Maximum number of takeaways."
    ),
    output_format: str | None = typer.Option(
        None, "--format", help="Report format: html or markdown."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """Render the digest report for a briefing JSON file."""
    load_dotenv()
    cfg = load_config(str(config) if config else None)

    if max_takeaways is not None:
        cfg.takeaways.max_takeaways = max_takeaways
    if output_format:
        cfg.output.format = output_format
    if log_level:
        cfg.logging.level = log_level
    if log_file is not None:
        cfg.logging.file = log_file

    report_path = run_pipeline(input, output, cfg, console=console)
    console.print(f"Report generated: {report_path}")


@app.command()
def takeaways(
    input: Path = typer.Option(..., "--input", "-i", exists=True, readable=True),
    max_takeaways: int = typer.Option(3, "--max-takeaways", min=1),
):
    """Print the takeaways for a briefing JSON file without writing files."""
    newsletters, _ = load_newsletters(input)
    selected = select_takeaways(newsletters, max_takeaways=max_takeaways)
    if not selected:
        console.print("No takeaways.")
        return
    for takeaway in selected:
        console.print(f"[bold]{escape(takeaway.title)}[/bold]")
        for bullet in takeaway.bullets:
            console.print(f"  • {escape(bullet)}")
        sources = ", ".join(short_sender(source.sender) for source in takeaway.sources)
        console.print(f"  [dim]Sources: {escape(sources)}[/dim]")
        console.print()


if __name__ == "__main__":
    app()
