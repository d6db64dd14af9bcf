"""Tests for the pipeline runner and CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from morning_brief.cli import app
from morning_brief.config import AppConfig
from morning_brief.runner import load_newsletters, run_pipeline

from conftest import AI_TEXT, MARKETS_TEXT


def _write_briefing(tmp_path: Path, envelope: bool = False) -> Path:
    briefing = {
        "executiveSummary": "Quiet open expected.",
        "newsletters": [
            {"subject": "The AI Brief", "sender": "AI Brief <hi@ai.example>", "body": AI_TEXT},
            {"title": "Market Wrap", "from": "Desk <desk@mw.example>", "text": f"<p>{MARKETS_TEXT}</p>"},
        ],
    }
    payload = {"storedAt": "2026-10-19T11:00:00Z", "data": briefing} if envelope else briefing
    path = tmp_path / "briefing.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def _quiet_config() -> AppConfig:
    cfg = AppConfig()
    cfg.logging.console = False
    return cfg


def test_load_newsletters_from_envelope(tmp_path: Path):
    newsletters, summary = load_newsletters(_write_briefing(tmp_path, envelope=True))
    assert [n.subject for n in newsletters] == ["The AI Brief", "Market Wrap"]
    assert summary == "Quiet open expected."


def test_run_pipeline_writes_html_and_log(tmp_path: Path):
    input_path = _write_briefing(tmp_path)
    output_dir = tmp_path / "out"

    report = run_pipeline(input_path, output_dir, _quiet_config(), console=Console(quiet=True))

    assert report == output_dir / "digest.html"
    html = report.read_text(encoding="utf-8")
    assert "Markets / macro" in html
    assert "AI / models" in html
    assert "Quiet open expected." in html
    events = [json.loads(line)["event"] for line in (output_dir / "run.jsonl").read_text().splitlines()]
    assert events == ["pipeline_start", "takeaways_selected", "pipeline_complete"]


def test_run_pipeline_markdown_format(tmp_path: Path):
    cfg = _quiet_config()
    cfg.output.format = "markdown"
    cfg.logging.file = False

    report = run_pipeline(_write_briefing(tmp_path), tmp_path / "out", cfg, console=Console(quiet=True))

    assert report.name == "digest.md"
    assert "## Takeaways" in report.read_text(encoding="utf-8")
    assert not (tmp_path / "out" / "digest.html").exists()


def test_run_pipeline_include_markdown(tmp_path: Path):
    cfg = _quiet_config()
    cfg.output.include_markdown = True

    run_pipeline(_write_briefing(tmp_path), tmp_path / "out", cfg, console=Console(quiet=True))

    assert (tmp_path / "out" / "digest.html").exists()
    assert (tmp_path / "out" / "digest.md").exists()


def test_run_pipeline_rejects_unknown_format(tmp_path: Path):
    cfg = _quiet_config()
    cfg.output.format = "pdf"
    with pytest.raises(ValueError):
        run_pipeline(_write_briefing(tmp_path), tmp_path / "out", cfg)


def test_cli_takeaways_prints_topics(tmp_path: Path):
    result = CliRunner().invoke(app, ["takeaways", "-i", str(_write_briefing(tmp_path))])
    assert result.exit_code == 0
    assert "Markets / macro" in result.output
    assert "AI / models" in result.output


def test_cli_run_generates_report(tmp_path: Path):
    output_dir = tmp_path / "out"
    result = CliRunner().invoke(
        app,
        [
            "run",
            "-i",
            str(_write_briefing(tmp_path)),
            "-o",
            str(output_dir),
            "--max-takeaways",
            "1",
            "--no-log-file",
        ],
    )
    assert result.exit_code == 0, result.output
    html = (output_dir / "digest.html").read_text(encoding="utf-8")
    assert "Markets / macro" in html
    assert "<h3>AI / models</h3>" not in html
