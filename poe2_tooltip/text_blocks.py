"""
Text normalization and block segmentation for pasted tooltips.

The game separates tooltip sections with a row of dashes:

    Rarity: Rare
    Crimson Jewel
    Viridian Jewel
    --------
    +10 to Strength (implicit)

Each section becomes a block: a list of trimmed, non-blank lines.
"""

from __future__ import annotations

from typing import List, Optional

from poe2_tooltip.constants import BLOCK_SEPARATOR_RE

Block = List[str]


def normalize_text(text: Optional[str]) -> str:
    """Canonicalize line endings to '\\n' and trim outer whitespace."""
    if not text:
        return ""
    return text.replace("\r\n", "\n").replace("\r", "\n").strip()


def split_lines(segment: str) -> Block:
    """Trimmed, non-blank lines of one segment."""
    return [line.strip() for line in segment.split("\n") if line.strip()]


def split_blocks(normalized: str) -> List[Block]:
    """
    Split normalized text into blocks on separator lines.

    Segments that hold no text are dropped; the returned list is what all
    positional logic indexes into.
    """
    blocks: List[Block] = []
    for segment in BLOCK_SEPARATOR_RE.split(normalized):
        lines = split_lines(segment)
        if lines:
            blocks.append(lines)
    return blocks
