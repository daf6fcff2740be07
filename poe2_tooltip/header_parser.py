"""
Header parsing: item class, rarity, name and base type.

The header is the first block of the tooltip:

    Item Class: Jewels
    Rarity: Rare
    Crimson Jewel
    Viridian Jewel

Every line is optional; lines are consumed positionally with a cursor.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from poe2_tooltip.constants import (
    ITEM_CLASS_NORMALIZATION,
    ITEM_CLASS_PREFIX,
    RARITY_PREFIX,
)
from poe2_tooltip.models import Rarity

RARITY_VALUE_RE = re.compile(r"^Rarity:\s*", re.IGNORECASE)

ITEM_CLASS_WORD_RES = [
    (re.compile(rf"\b{re.escape(plural)}\b"), singular)
    for plural, singular in ITEM_CLASS_NORMALIZATION.items()
]

# First substring match wins
RARITY_KEYWORDS = (
    ("normal", Rarity.NORMAL),
    ("magic", Rarity.MAGIC),
    ("rare", Rarity.RARE),
    ("unique", Rarity.UNIQUE),
    ("gem", Rarity.GEM),
    ("currency", Rarity.CURRENCY),
    ("quest", Rarity.QUEST),
)


@dataclass(frozen=True)
class ItemHeader:
    item_class: Optional[str] = None
    rarity: Rarity = Rarity.UNKNOWN
    name: Optional[str] = None
    base_type: Optional[str] = None


def normalize_rarity(line: str) -> Rarity:
    """Map a 'Rarity: X' line (or bare value) to a Rarity."""
    value = RARITY_VALUE_RE.sub("", line, count=1).lower()
    for keyword, rarity in RARITY_KEYWORDS:
        if keyword in value:
            return rarity
    return Rarity.UNKNOWN


def normalize_item_class(value: str) -> str:
    """Singularize the plural item classes the game prints ('Jewels' -> 'Jewel')."""
    for pattern, singular in ITEM_CLASS_WORD_RES:
        value = pattern.sub(singular, value)
    return value.strip()


def parse_header(lines: List[str]) -> ItemHeader:
    item_class: Optional[str] = None
    rarity = Rarity.UNKNOWN
    i = 0

    if i < len(lines) and lines[i].lower().startswith(ITEM_CLASS_PREFIX.lower()):
        item_class = normalize_item_class(lines[i][len(ITEM_CLASS_PREFIX):].strip())
        i += 1

    if i < len(lines) and lines[i].lower().startswith(RARITY_PREFIX.lower()):
        rarity = normalize_rarity(lines[i])
        i += 1

    # Name, then base type; either may be missing
    name = lines[i] if i < len(lines) else None
    base_type = lines[i + 1] if i + 1 < len(lines) else None

    return ItemHeader(
        item_class=item_class,
        rarity=rarity,
        name=name,
        base_type=base_type,
    )
