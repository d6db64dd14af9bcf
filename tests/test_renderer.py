from pathlib import Path

from morning_brief.core.types import NewsletterRecord, Takeaway
from morning_brief.output.renderer import (
    format_received_at,
    render_html,
    render_markdown,
    short_sender,
)


def _sample_newsletter(**overrides) -> NewsletterRecord:
    fields = dict(
        subject="Morning Brew",
        sender="Morning Brew <crew@morningbrew.com>",
        summary="Markets were mixed.",
        url="https://mail.example.com/brew",
        received_at="2026-10-19T08:05:00Z",
    )
    fields.update(overrides)
    return NewsletterRecord(**fields)


def test_short_sender():
    assert short_sender("Morning Brew <crew@morningbrew.com>") == "Morning Brew"
    assert short_sender("<crew@morningbrew.com>") == "<crew@morningbrew.com>"
    assert short_sender(None) == "Unknown sender"


def test_format_received_at():
    assert format_received_at("2026-10-19T08:05:00Z") == "Oct 19, 8:05 AM"
    assert format_received_at("2026-10-19T20:30:00+00:00") == "Oct 19, 8:30 PM"
    assert format_received_at("Mon, 19 Oct 2026 08:05:00 -0000") == "Oct 19, 8:05 AM"
    assert format_received_at("Mon, 19 Oct 2026 17:45:00 +0200") == "Oct 19, 5:45 PM"
    assert format_received_at("yesterday") == "Recent"
    assert format_received_at(None) == "Recent"


def test_render_html_escapes_and_links_sources(tmp_path: Path) -> None:
    output_path = tmp_path / "digest.html"
    newsletter = _sample_newsletter()
    takeaways = [
        Takeaway(
            title="Markets / macro",
            bullets=["Yields <fell> sharply."],
            sources=[newsletter],
        )
    ]

    render_html(
        takeaways=takeaways,
        newsletters=[newsletter],
        output_path=output_path,
        title="Morning Edition",
        executive_summary="Calm <b>day</b>",
    )
    html = output_path.read_text(encoding="utf-8")

    assert "<h3>Markets / macro</h3>" in html
    assert "Yields &lt;fell&gt; sharply." in html
    assert "Calm &lt;b&gt;day&lt;/b&gt;" in html
    assert '<a href="https://mail.example.com/brew"' in html
    assert "Oct 19, 8:05 AM" in html


def test_render_html_empty_states(tmp_path: Path) -> None:
    output_path = tmp_path / "empty.html"
    render_html(takeaways=[], newsletters=[], output_path=output_path, title="Morning Edition")
    html = output_path.read_text(encoding="utf-8")

    assert "No takeaways yet." in html
    assert "No newsletters yet." in html


def test_render_markdown_limits_digest(tmp_path: Path) -> None:
    output_path = tmp_path / "digest.md"
    newsletters = [_sample_newsletter(subject=f"Issue {i}", url=None) for i in range(12)]
    takeaways = [Takeaway(title="AI / models", bullets=["One.", "Two."], sources=newsletters[:2])]

    render_markdown(
        takeaways=takeaways,
        newsletters=newsletters,
        output_path=output_path,
        title="Morning Edition",
        newsletter_limit=10,
    )
    text = output_path.read_text(encoding="utf-8")

    assert "# Morning Edition" in text
    assert "### AI / models" in text
    assert "- Sources: Issue 0, Issue 1" in text
    assert "Total: 12" in text
    assert "Issue 9" in text
    assert "Issue 10" not in text
