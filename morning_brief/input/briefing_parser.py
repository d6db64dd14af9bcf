"""Parser for morning briefing JSON payloads.

Briefings are produced by an upstream automation and their shape drifts
between versions, so newsletter fields are looked up across several
aliases. The stored envelope written by the ingestion endpoint is also
accepted:

    {
        "storedAt": "2026-10-19T11:02:41.118Z",
        "data": {
            "executiveSummary": "...",
            "newsletters": [
                {
                    "subject": "The Daily Upside",
                    "from": "The Daily Upside <team@thedailyupside.com>",
                    "body": "<p>...</p>",
                    "gmailUrl": "https://mail.google.com/...",
                    "receivedAt": "2026-10-19T10:15:00Z"
                }
            ]
        }
    }
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.types import NewsletterRecord

logger = logging.getLogger(__name__)

NEWSLETTER_KEYS = (
    "newsletters",
    "newsletterDigest",
    "newsletter_digest",
    "newsletterHighlights",
    "newsletter_highlights",
)

SUBJECT_KEYS = ("subject", "title", "headline", "name")
SENDER_KEYS = ("sender", "from", "author", "source")
SUMMARY_KEYS = ("summary", "snippet", "blurb", "description", "abstract")
BODY_KEYS = (
    "body",
    "text",
    "plainText",
    "plain_text",
    "content",
    "emailBody",
    "email_body",
    "message",
    "html",
)
URL_KEYS = ("url", "gmailUrl", "gmail_url", "link")
RECEIVED_KEYS = ("receivedAt", "received_at", "date", "when")


def unwrap_briefing(data: Any) -> dict[str, Any]:
    """Return the briefing object from a raw payload or stored envelope.

    Raises:
        ValueError: If the payload is not a JSON object
    """
    if not isinstance(data, dict):
        raise ValueError("Invalid briefing format: expected a JSON object")
    if "storedAt" in data and "data" in data:
        inner = data["data"]
        if not isinstance(inner, dict):
            raise ValueError("Invalid briefing format: 'data' is not a JSON object")
        return inner
    return data


def as_text(value: Any) -> str | None:
    """Coerce a string or list of strings to text; anything else is None."""
    if isinstance(value, str):
        return value
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return " ".join(value)
    return None


def _first_present(item: dict[str, Any], keys: tuple[str, ...]) -> Any:
    # An explicit null falls through to the next alias.
    for key in keys:
        value = item.get(key)
        if value is not None:
            return value
    return None


def _optional_text(item: dict[str, Any], keys: tuple[str, ...]) -> str | None:
    text = as_text(_first_present(item, keys))
    return text if text else None


def _newsletter_items(briefing: dict[str, Any]) -> list[Any]:
    raw = _first_present(briefing, NEWSLETTER_KEYS)
    if isinstance(raw, list):
        return raw
    if isinstance(raw, dict) and isinstance(raw.get("items"), list):
        return raw["items"]
    return []


def parse_newsletters(briefing: dict[str, Any]) -> list[NewsletterRecord]:
    """Normalize the newsletter list of a briefing into NewsletterRecords.

    Bare strings become subject-only records. Items that are neither
    strings nor objects are skipped with a warning.

    Args:
        briefing: The unwrapped briefing object

    Returns:
        Newsletter records in payload order
    """
    records: list[NewsletterRecord] = []
    for index, item in enumerate(_newsletter_items(briefing)):
        if isinstance(item, str):
            records.append(NewsletterRecord(subject=item))
            continue
        if not isinstance(item, dict):
            logger.warning(f"Skipping newsletter {index}: unsupported item type {type(item).__name__}")
            continue

        records.append(
            NewsletterRecord(
                subject=as_text(_first_present(item, SUBJECT_KEYS)) or "(no subject)",
                sender=_optional_text(item, SENDER_KEYS),
                summary=_optional_text(item, SUMMARY_KEYS),
                body=_optional_text(item, BODY_KEYS),
                url=_optional_text(item, URL_KEYS),
                received_at=_optional_text(item, RECEIVED_KEYS),
            )
        )
    return records


def parse_executive_summary(briefing: dict[str, Any]) -> str | None:
    for key in ("executiveSummary", "executive_summary", "summary"):
        text = as_text(briefing.get(key))
        if text:
            return text
    return None
