"""
Core data types for the newsletter takeaway engine.

This module defines the data structures shared by every stage:
- NewsletterRecord: One pre-normalized newsletter message
- TopicRule: A static keyword rule used to classify passages
- TopicMatch: The winning rule for a passage plus its score
- Chunk: A scored candidate passage tied to its source newsletter
- Takeaway: The synthesized output unit (title, bullets, sources)
"""

from __future__ import annotations

from dataclasses import dataclass, field
import re


@dataclass(frozen=True)
class NewsletterRecord:
    """A single newsletter message as supplied by the ingestion layer.

    Attributes:
        subject: Subject line of the message
        sender: Optional sender string, e.g. "Morning Brew <crew@morningbrew.com>"
        summary: Optional short summary, used when body is missing
        body: Optional full body, may contain HTML markup
        url: Optional link to the message, used as the source key
        received_at: Optional ISO 8601 timestamp string
    """
    subject: str
    sender: str | None = None
    summary: str | None = None
    body: str | None = None
    url: str | None = None
    received_at: str | None = None

    @property
    def source_key(self) -> str:
        return (self.url or self.subject).lower()


@dataclass(frozen=True)
class TopicRule:
    """A keyword rule for topic classification.

    Each pattern that matches a passage at least once adds `weight`
    to the rule's score for that passage.
    """
    id: str
    label: str
    weight: int
    patterns: tuple[re.Pattern[str], ...] = ()


@dataclass(frozen=True)
class TopicMatch:
    rule: TopicRule
    score: int

    @property
    def topic_id(self) -> str:
        return self.rule.id

    @property
    def topic_label(self) -> str:
        return self.rule.label


@dataclass(eq=False)
class Chunk:
    """A candidate passage considered for a takeaway.

    Chunks compare by identity: the same passage appearing in two
    newsletters yields two distinct candidates.
    """
    newsletter: NewsletterRecord
    text: str
    score: int
    topic_id: str
    topic_label: str


@dataclass
class Takeaway:
    """One topic summary with supporting bullets and source newsletters."""
    title: str
    bullets: list[str] = field(default_factory=list)
    sources: list[NewsletterRecord] = field(default_factory=list)
