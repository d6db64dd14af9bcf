"""
Keyword-based topic classification.

Each rule scores a passage as weight x number of its patterns that match
at least once. The highest score wins; ties go to the rule listed first.
Word boundaries are ASCII-only, so keywords still match when glued to
accented or CJK characters.
"""

from __future__ import annotations

import re
from typing import Sequence

from .types import TopicMatch, TopicRule


def _rule(id: str, label: str, weight: int, patterns: list[str]) -> TopicRule:
    return TopicRule(
        id=id,
        label=label,
        weight=weight,
        patterns=tuple(re.compile(p, re.IGNORECASE | re.ASCII) for p in patterns),
    )


TOPIC_RULES: tuple[TopicRule, ...] = (
    _rule(
        "ai",
        "AI / models",
        4,
        [
            r"\bopenai\b",
            r"\banthropic\b",
            r"\bgpt-?\d*\b",
            r"\bllm\b",
            r"\btransformer\b",
            r"\brag\b",
            r"\bagents?\b",
            r"\bmodel\b",
            r"\bfine-?tune\b",
            r"\bgemini\b",
            r"\bclaude\b",
        ],
    ),
    _rule(
        "startups",
        "Startups / product",
        3,
        [
            r"\bstartup\b",
            r"\bfounder\b",
            r"\bseed\b",
            r"\bseries [a-e]\b",
            r"\bvc\b",
            r"\bventure\b",
            r"\bproduct\b",
            r"\bpmf\b",
            r"\bgtm\b",
            r"\bpricing\b",
        ],
    ),
    _rule(
        "markets",
        "Markets / macro",
        3,
        [
            r"\bfed\b",
            r"\brates?\b",
            r"\binflation\b",
            r"\btreasur(y|ies)\b",
            r"\bearnings\b",
            r"\bstocks?\b",
            r"\bmarkets?\b",
            r"\bindex\b",
            r"\bgdp\b",
        ],
    ),
    _rule(
        "bigtech",
        "Big tech",
        2,
        [
            r"\bapple\b",
            r"\bgoogle\b",
            r"\bmicrosoft\b",
            r"\bmeta\b",
            r"\bamazon\b",
            r"\baws\b",
            r"\bnvidia\b",
            r"\btesla\b",
        ],
    ),
    _rule(
        "security",
        "Security / privacy",
        2,
        [
            r"\bsecurity\b",
            r"\bvulnerability\b",
            r"\bcve-\d+",
            r"\bbreach\b",
            r"\bprivacy\b",
            r"\bencrypt\w*\b",
        ],
    ),
)

OTHER_TOPIC = TopicRule(id="other", label="Other", weight=0)


def score_rule(rule: TopicRule, text: str) -> int:
    return sum(rule.weight for pattern in rule.patterns if pattern.search(text))


def classify(text: str, rules: Sequence[TopicRule] = TOPIC_RULES) -> TopicMatch:
    """Pick the best-matching topic rule for a passage.

    The first rule is the initial leader even when it scores 0, so a
    passage that matches nothing is still assigned the first rule.
    OTHER_TOPIC is only returned for an empty rule table.

    Args:
        text: Passage to classify
        rules: Ordered rule table

    Returns:
        TopicMatch with the winning rule and its score
    """
    best: TopicMatch | None = None
    for rule in rules:
        score = score_rule(rule, text)
        if best is None or score > best.score:
            best = TopicMatch(rule=rule, score=score)
    return best or TopicMatch(rule=OTHER_TOPIC, score=0)
