"""Split cleaned newsletter text into candidate passages."""

from __future__ import annotations

import re

MIN_CHUNK_CHARS = 120

_BLOCK_SPLIT_RE = re.compile(r"\n{2,}")
_BULLET_RE = re.compile(r"^[-*•]\s+")


def split_into_chunks(text: str) -> list[str]:
    """Split text on blank lines, merging bullet lists into one passage.

    A block with two or more bullet lines (``-``, ``*`` or ``•``) becomes a
    single chunk made of its bullet lines joined by spaces; any non-bullet
    lines in such a block are dropped. Other blocks are kept whole.
    """
    blocks = [
        block.strip()
        for block in _BLOCK_SPLIT_RE.split(text.replace("\r\n", "\n"))
        if block.strip()
    ]

    chunks: list[str] = []
    for block in blocks:
        lines = [line.strip() for line in block.split("\n") if line.strip()]
        bullet_lines = [line for line in lines if _BULLET_RE.match(line)]
        if len(bullet_lines) >= 2:
            merged = " ".join(_BULLET_RE.sub("", line, count=1) for line in bullet_lines)
            chunks.append(merged.strip())
            continue
        chunks.append(block)

    return chunks
