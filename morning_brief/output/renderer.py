"""
Digest rendering for HTML and Markdown output.

HTML is produced from a Jinja2 template with autoescaping; Markdown is
assembled line by line. Both show the selected takeaways followed by the
most recent newsletters.
"""

from __future__ import annotations

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..core.types import NewsletterRecord, Takeaway


def short_sender(sender: str | None) -> str:
    """Return the display-name part of a sender address.

    Examples:
        >>> short_sender("Morning Brew <crew@morningbrew.com>")
        "Morning Brew"
        >>> short_sender(None)
        "Unknown sender"
    """
    if not sender:
        return "Unknown sender"
    name = sender.split("<")[0].strip()
    return name or sender


def format_received_at(value: str | None) -> str:
    """Format an ISO 8601 or RFC 2822 timestamp as e.g. "Oct 19, 8:05 AM".

    Returns "Recent" when the value is missing or unparseable.
    """
    if not value:
        return "Recent"
    raw = value.strip()
    if raw.endswith("Z"):
        raw = f"{raw[:-1]}+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        try:
            parsed = parsedate_to_datetime(value.strip())
        except (TypeError, ValueError):
            return "Recent"
    hour = parsed.hour % 12 or 12
    return f"{parsed:%b} {parsed.day}, {hour}:{parsed:%M} {parsed:%p}"


def _digest_items(newsletters: list[NewsletterRecord], limit: int) -> list[dict]:
    return [
        {
            "newsletter": newsletter,
            "sender": short_sender(newsletter.sender),
            "received": format_received_at(newsletter.received_at),
        }
        for newsletter in newsletters[:limit]
    ]


def render_html(
    takeaways: list[Takeaway],
    newsletters: list[NewsletterRecord],
    output_path: Path,
    title: str,
    executive_summary: str | None = None,
    newsletter_limit: int = 10,
) -> None:
    """Render takeaways and the newsletter digest as an HTML page.

    Args:
        takeaways: Selected takeaways, in display order
        newsletters: All newsletters of the briefing
        output_path: Path where the HTML file will be written
        title: Page title
        executive_summary: Optional lead paragraph
        newsletter_limit: Maximum number of newsletters listed in the digest
    """
    env = Environment(
        loader=FileSystemLoader(str(Path(__file__).parent / "templates")),
        autoescape=select_autoescape(["html"]),
    )
    env.filters["short_sender"] = short_sender
    template = env.get_template("digest.html")

    html = template.render(
        title=title,
        generated_at=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC"),
        executive_summary=executive_summary,
        takeaways=takeaways,
        digest=_digest_items(newsletters, newsletter_limit),
        total=len(newsletters),
    )
    output_path.write_text(html, encoding="utf-8")


def render_markdown(
    takeaways: list[Takeaway],
    newsletters: list[NewsletterRecord],
    output_path: Path,
    title: str,
    executive_summary: str | None = None,
    newsletter_limit: int = 10,
) -> None:
    lines = [f"# {title}", ""]
    if executive_summary:
        lines.extend([executive_summary, ""])

    lines.extend(["## Takeaways", ""])
    if not takeaways:
        lines.extend(["No takeaways yet.", ""])
    for takeaway in takeaways:
        lines.append(f"### {takeaway.title}")
        for bullet in takeaway.bullets:
            lines.append(f"- {bullet}")
        sources = ", ".join(
            f"[{source.subject}]({source.url})" if source.url else source.subject
            for source in takeaway.sources
        )
        lines.append(f"- Sources: {sources}")
        lines.append("")

    lines.extend(["## Newsletter Digest", "", f"Total: {len(newsletters)}", ""])
    for item in _digest_items(newsletters, newsletter_limit):
        newsletter = item["newsletter"]
        heading = (
            f"[{newsletter.subject}]({newsletter.url})" if newsletter.url else newsletter.subject
        )
        lines.append(f"- **{heading}** ({item['sender']}, {item['received']})")
        if newsletter.summary:
            lines.append(f"  {newsletter.summary}")

    output_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
