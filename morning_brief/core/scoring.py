"""Desirability scoring for candidate passages."""

from __future__ import annotations

import re
from typing import Sequence

from .topics import TOPIC_RULES, classify
from .types import TopicRule

_DIGITS_RE = re.compile(r"\d{2,}", re.ASCII)
_MONEY_RE = re.compile(r"[$%]")
_FISCAL_RE = re.compile(r"\b(q[1-4]|fy\d{2,4})\b", re.IGNORECASE | re.ASCII)


def score_chunk(text: str, rules: Sequence[TopicRule] = TOPIC_RULES) -> int:
    """Score a passage by topic relevance, specificity and length.

    Starts from the topic classification score, adds a point each for
    numbers, money/percent signs and fiscal periods, subtracts for
    boilerplate words, and favors passages of 220-900 characters.
    """
    lower = text.lower()
    score = classify(text, rules).score

    if _DIGITS_RE.search(text):
        score += 1
    if _MONEY_RE.search(text):
        score += 1
    if _FISCAL_RE.search(text):
        score += 1

    if "unsubscribe" in lower:
        score -= 4
    if "sponsored" in lower:
        score -= 2
    if "advertisement" in lower:
        score -= 2

    length = len(text)
    if 220 <= length <= 900:
        score += 2
    if length < 140:
        score -= 2
    if length > 1400:
        score -= 2

    return score
