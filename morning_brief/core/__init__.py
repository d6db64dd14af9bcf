"""
Newsletter takeaway engine.

Pure, synchronous functions that turn newsletter records into a short
list of topic takeaways. No I/O happens in this package.
"""

from .types import Chunk, NewsletterRecord, Takeaway, TopicMatch, TopicRule
from .text import clean_text, get_body_text, split_sentences, strip_html
from .chunks import MIN_CHUNK_CHARS, split_into_chunks
from .topics import OTHER_TOPIC, TOPIC_RULES, classify
from .scoring import score_chunk
from .takeaways import collect_candidates, select_takeaways

__all__ = [
    "Chunk",
    "NewsletterRecord",
    "Takeaway",
    "TopicMatch",
    "TopicRule",
    "clean_text",
    "get_body_text",
    "split_sentences",
    "strip_html",
    "MIN_CHUNK_CHARS",
    "split_into_chunks",
    "OTHER_TOPIC",
    "TOPIC_RULES",
    "classify",
    "score_chunk",
    "collect_candidates",
    "select_takeaways",
]
