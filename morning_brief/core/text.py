"""
Newsletter text cleanup and sentence splitting.

Bodies arrive as plain text or HTML. They are flattened to text,
whitespace-normalized, and cut at the first footer boilerplate marker
so that unsubscribe blocks and ads never become takeaway candidates.
"""

from __future__ import annotations

import re

from .types import NewsletterRecord

FOOTER_MARKERS = (
    "unsubscribe",
    "manage preferences",
    "update your preferences",
    "view in browser",
    "privacy policy",
    "terms of service",
    "sponsored",
    "advertisement",
)

_TAG_RE = re.compile(r"<[^>]+>")
_SCRIPT_RE = re.compile(r"<script[\s\S]*?</script>", re.IGNORECASE)
_STYLE_RE = re.compile(r"<style[\s\S]*?</style>", re.IGNORECASE)
_BR_RE = re.compile(r"<\s*br\s*/?>", re.IGNORECASE)
_BLOCK_CLOSE_RE = re.compile(r"<\s*/(p|div|li|tr|h1|h2|h3)\s*>", re.IGNORECASE)

# Order matters: "&amp;lt;" decodes all the way to "<".
_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)

_SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+(?=[A-Z0-9“\"(])")


def strip_html(text: str) -> str:
    """Flatten HTML markup to text, keeping block boundaries as newlines."""
    text = _SCRIPT_RE.sub(" ", text)
    text = _STYLE_RE.sub(" ", text)
    text = _BR_RE.sub("\n", text)
    text = _BLOCK_CLOSE_RE.sub("\n", text)
    text = _TAG_RE.sub(" ", text)
    for entity, replacement in _ENTITIES:
        text = text.replace(entity, replacement)
    return text


def clean_text(text: str) -> str:
    """Normalize line endings and collapse redundant whitespace."""
    text = text.replace("\r\n", "\n")
    text = re.sub(r"[\t ]+\n", "\n", text)
    text = re.sub(r"\n{3,}", "\n\n", text)
    text = re.sub(r"\s{3,}", " ", text)
    return text.strip()


def get_body_text(newsletter: NewsletterRecord) -> str | None:
    """Return the cleaned body of a newsletter, or None if nothing usable remains.

    The body is preferred over the summary. HTML is stripped when the text
    contains anything tag-like, and everything from the earliest footer
    marker onwards is dropped.

    Args:
        newsletter: The newsletter to read

    Returns:
        Cleaned text, or None when the newsletter has no usable content
    """
    raw = (newsletter.body or newsletter.summary or "").strip()
    if not raw:
        return None

    text = clean_text(strip_html(raw) if _TAG_RE.search(raw) else raw)
    if not text:
        return None

    lower = text.lower()
    cut = len(text)
    for marker in FOOTER_MARKERS:
        idx = lower.find(marker)
        if idx != -1:
            cut = min(cut, idx)

    trimmed = clean_text(text[:cut])
    return trimmed or None


def split_sentences(text: str) -> list[str]:
    """Split text into sentences on terminal punctuation.

    A boundary is punctuation followed by whitespace and then an uppercase
    letter, digit, opening quote or parenthesis. Abbreviations such as
    "U.S. Treasury" are split too; callers rely on this granularity.
    """
    cleaned = re.sub(r"\s+", " ", text).strip()
    if not cleaned:
        return []
    parts = _SENTENCE_BOUNDARY_RE.split(cleaned)
    return [part.strip() for part in parts if part.strip()]


def dedupe_strings(items: list[str]) -> list[str]:
    """Drop case-insensitive duplicates, keeping the first occurrence."""
    seen: set[str] = set()
    kept: list[str] = []
    for item in items:
        key = item.lower()
        if key in seen:
            continue
        seen.add(key)
        kept.append(item)
    return kept
