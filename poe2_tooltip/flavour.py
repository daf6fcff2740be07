"""
Flavour text detection.

Flavour text has no marker of its own. It is recognised by position: the
block directly above an anchor block (jewel instructions, flask instructions
or "Corrupted", tried in that order) is flavour if it reads like narrative
rather than stats.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Sequence, Tuple

from poe2_tooltip.anchors import (
    BlockPredicate,
    find_block_index,
    is_corrupted_block,
    is_flask_instruction_block,
    is_jewel_instruction_block,
)
from poe2_tooltip.constants import (
    CORRUPTED_LINE,
    EM_DASH,
    MOD_KEYWORDS,
    QUOTE_CHARACTERS,
    SYSTEM_LINE_PREFIXES,
)
from poe2_tooltip.line_shapes import is_property_line, looks_like_tagged_line
from poe2_tooltip.text_blocks import Block

logger = logging.getLogger(__name__)

# First anchor whose preceding block passes wins
FLAVOUR_ANCHORS: Tuple[Tuple[str, BlockPredicate], ...] = (
    ("jewel", is_jewel_instruction_block),
    ("flask", is_flask_instruction_block),
    ("corrupted", is_corrupted_block),
)

# "- Atziri, Queen of the Vaal" counts, "-10 to Strength" does not
ATTRIBUTION_RE = re.compile(r"^- [A-Za-z]")
ASCII_DIGIT_RE = re.compile(r"[0-9]")
MOD_KEYWORD_RE = re.compile(
    r"\b(" + "|".join(re.escape(k) for k in MOD_KEYWORDS) + r")\b", re.IGNORECASE
)


def looks_like_system_line(line: str) -> bool:
    lower = line.lower()
    return (
        lower.startswith(SYSTEM_LINE_PREFIXES)
        or lower == CORRUPTED_LINE.lower()
        or is_property_line(line)
    )


def block_has_any_quote(lines: Block) -> bool:
    # Joined so a quotation spanning several lines still counts
    joined = "\n".join(lines)
    return any(quote in joined for quote in QUOTE_CHARACTERS)


def is_attribution_line(line: str) -> bool:
    s = line.strip()
    if s.startswith(EM_DASH):
        return True
    return ATTRIBUTION_RE.match(s) is not None


def looks_like_mod_line(line: str) -> bool:
    s = line.strip()
    if not s:
        return False
    if ASCII_DIGIT_RE.search(s) or "%" in s:
        return True
    return MOD_KEYWORD_RE.search(s) is not None


def is_likely_flavour_block(lines: Block) -> bool:
    """
    Decide whether a candidate block is narrative flavour text.

    Only ever asked about the single block above an anchor. Stat, system
    and tagged lines reject; quotes or an attribution accept; anything
    left is accepted unless it reads like a modifier.
    """
    if not lines:
        return False

    if any(looks_like_system_line(line) for line in lines):
        return False
    if any(looks_like_tagged_line(line) for line in lines):
        return False

    if block_has_any_quote(lines):
        return True
    if any(is_attribution_line(line) for line in lines):
        return True

    if any(looks_like_mod_line(line) for line in lines):
        return False

    return True


def find_flavour_block_index(blocks: Sequence[Block]) -> Optional[int]:
    """Index of the one block to treat as flavour text, or None."""
    for anchor_name, predicate in FLAVOUR_ANCHORS:
        anchor_index = find_block_index(blocks, predicate)
        if anchor_index is None or anchor_index == 0:
            continue
        if is_likely_flavour_block(blocks[anchor_index - 1]):
            logger.debug(
                f"Flavour block {anchor_index - 1} found above {anchor_name} anchor"
            )
            return anchor_index - 1
    return None
