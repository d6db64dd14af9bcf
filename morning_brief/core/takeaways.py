"""
Newsletter takeaway selection.

Pipeline for a set of newsletters:
1. Clean each body and split it into passages of at least MIN_CHUNK_CHARS
2. Classify and score every passage
3. Keep the best passage per topic ("topic leaders"), ordered by score
4. Backfill from the overall ranking when fewer than two topics exist
5. For each pick, gather passages from up to two distinct newsletters
   of that topic and turn their opening sentences into bullets

The selection is greedy and deterministic: ties keep encounter order.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .chunks import MIN_CHUNK_CHARS, split_into_chunks
from .scoring import score_chunk
from .text import clean_text, dedupe_strings, get_body_text, split_sentences
from .topics import TOPIC_RULES, classify
from .types import Chunk, NewsletterRecord, Takeaway, TopicRule

logger = logging.getLogger(__name__)

MAX_SOURCES_PER_TAKEAWAY = 2
SENTENCES_PER_CHUNK = 2
MAX_BULLETS = 5
MIN_DISTINCT_TOPICS = 2


def collect_candidates(
    newsletters: Sequence[NewsletterRecord],
    rules: Sequence[TopicRule] = TOPIC_RULES,
) -> list[Chunk]:
    """Split every newsletter into scored, topic-tagged candidate chunks."""
    candidates: list[Chunk] = []
    for newsletter in newsletters:
        body = get_body_text(newsletter)
        if not body:
            continue

        passages = [clean_text(passage) for passage in split_into_chunks(body)]
        for passage in passages:
            if len(passage) < MIN_CHUNK_CHARS:
                continue
            match = classify(passage, rules)
            candidates.append(
                Chunk(
                    newsletter=newsletter,
                    text=passage,
                    score=score_chunk(passage, rules),
                    topic_id=match.topic_id,
                    topic_label=match.topic_label,
                )
            )
    return candidates


def _by_score(chunks: list[Chunk]) -> list[Chunk]:
    return sorted(chunks, key=lambda chunk: chunk.score, reverse=True)


def _pick_leaders(
    candidates: list[Chunk],
    by_topic: dict[str, list[Chunk]],
    max_takeaways: int,
) -> list[Chunk]:
    leaders = _by_score([group[0] for group in by_topic.values()])
    picked = leaders[:max_takeaways]

    if len(picked) < MIN_DISTINCT_TOPICS:
        remaining = [chunk for chunk in _by_score(candidates) if chunk not in picked]
        target = min(MIN_DISTINCT_TOPICS, max_takeaways)
        for chunk in remaining:
            if len(picked) >= target:
                break
            picked.append(chunk)

    return picked


def _choose_sources(group: list[Chunk]) -> list[Chunk]:
    chosen: list[Chunk] = []
    seen: set[str] = set()
    for chunk in group:
        key = chunk.newsletter.source_key
        if key in seen:
            continue
        seen.add(key)
        chosen.append(chunk)
        if len(chosen) >= MAX_SOURCES_PER_TAKEAWAY:
            break
    return chosen


def build_bullets(chosen: list[Chunk]) -> list[str]:
    sentences: list[str] = []
    for chunk in chosen:
        sentences.extend(split_sentences(chunk.text)[:SENTENCES_PER_CHUNK])
    return dedupe_strings(sentences)[:MAX_BULLETS]


def select_takeaways(
    newsletters: Sequence[NewsletterRecord],
    max_takeaways: int = 3,
    rules: Sequence[TopicRule] = TOPIC_RULES,
) -> list[Takeaway]:
    """Select a small, topic-diverse set of takeaways from newsletters.

    Args:
        newsletters: Newsletters to summarize, in display order
        max_takeaways: Upper bound on the number of takeaways
        rules: Topic rule table used for classification and scoring

    Returns:
        Takeaways ordered by their leading chunk's score. Empty when no
        newsletter yields a passage long enough to consider.
    """
    candidates = collect_candidates(newsletters, rules)
    if not candidates:
        logger.debug("No takeaway candidates from %d newsletters", len(newsletters))
        return []

    by_topic: dict[str, list[Chunk]] = {}
    for chunk in candidates:
        by_topic.setdefault(chunk.topic_id, []).append(chunk)
    by_topic = {topic_id: _by_score(group) for topic_id, group in by_topic.items()}

    picked = _pick_leaders(candidates, by_topic, max_takeaways)
    logger.debug(
        "Picked %d takeaways from %d candidates across %d topics",
        len(picked),
        len(candidates),
        len(by_topic),
    )

    takeaways: list[Takeaway] = []
    for pick in picked:
        chosen = _choose_sources(by_topic.get(pick.topic_id, [pick]))
        bullets = build_bullets(chosen)
        takeaways.append(
            Takeaway(
                title=pick.topic_label,
                bullets=bullets or [pick.text],
                sources=[chunk.newsletter for chunk in chosen],
            )
        )
    return takeaways
