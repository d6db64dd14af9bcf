"""Shared newsletter fixtures."""

from __future__ import annotations

import pytest

from morning_brief.core.types import NewsletterRecord

AI_TEXT = (
    "OpenAI released a new GPT model with agent capabilities for enterprise customers, "
    "prompting early founder excitement in the startup community during this funding round. "
    "The product also added pricing tiers."
)

MARKETS_TEXT = (
    "The Fed held rates steady while inflation cooled, sending Treasury yields lower and "
    "lifting stocks across the broader market index as earnings season approached for the "
    "largest banks."
)

SECURITY_TEXT = (
    "A critical vulnerability tracked as CVE-2024-3094 let attackers bypass encryption checks. "
    "The breach exposed customer privacy data before the security patch shipped."
)


@pytest.fixture
def ai_newsletter() -> NewsletterRecord:
    return NewsletterRecord(
        subject="The AI Brief",
        sender="AI Brief <hello@aibrief.example>",
        body=AI_TEXT,
        url="https://mail.example.com/ai",
    )


@pytest.fixture
def markets_newsletter() -> NewsletterRecord:
    return NewsletterRecord(
        subject="Market Wrap",
        sender="Market Wrap <desk@marketwrap.example>",
        body=MARKETS_TEXT,
        url="https://mail.example.com/markets",
    )


@pytest.fixture
def security_newsletter() -> NewsletterRecord:
    return NewsletterRecord(
        subject="Patch Tuesday",
        sender="Risky Biz <news@risky.example>",
        body=SECURITY_TEXT,
        url="https://mail.example.com/security",
    )
