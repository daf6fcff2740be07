"""
Data model for parsed PoE2 item tooltips.

ParsedItem is the record handed to the presentation layer. It is frozen and
its sequence fields are tuples, so a returned record cannot be mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class Rarity(str, Enum):
    """Item rarity as shown on the "Rarity:" header line."""

    NORMAL = "Normal"
    MAGIC = "Magic"
    RARE = "Rare"
    UNIQUE = "Unique"
    GEM = "Gem"
    CURRENCY = "Currency"
    QUEST = "Quest"
    UNKNOWN = "Unknown"


class KnownTag(str, Enum):
    """Trailing parenthetical marker that routes a modifier line."""

    IMPLICIT = "implicit"
    ENCHANT = "enchant"
    RUNE = "rune"
    DESECRATED = "desecrated"
    MUTATED = "mutated"
    NONE = "none"


class Category(str, Enum):
    """Semantic category a tooltip line is classified into."""

    PROPERTY = "property"
    LIMIT = "limit"
    REQUIREMENT = "requirement"
    SOCKET = "socket"
    GRANTED_SKILL = "granted_skill"
    IMPLICIT = "implicit"
    ENCHANT = "enchant"
    RUNE = "rune"
    DESECRATED = "desecrated"
    MUTATED = "mutated"
    MOD = "mod"
    FOOTER_FLAG = "footer_flag"
    FLAVOUR = "flavour"
    ITEM_LEVEL = "item_level"


# Category -> ParsedItem field for the append-only sequences
SEQUENCE_FIELDS: Dict[Category, str] = {
    Category.PROPERTY: "properties",
    Category.LIMIT: "limits",
    Category.GRANTED_SKILL: "granted_skills",
    Category.IMPLICIT: "implicits",
    Category.ENCHANT: "enchants",
    Category.RUNE: "runes",
    Category.MOD: "mods",
    Category.DESECRATED: "desecrated",
    Category.MUTATED: "mutated",
    Category.FOOTER_FLAG: "footer_flags",
    Category.FLAVOUR: "flavour_text",
}

# Category -> ParsedItem field for single consolidated strings (last one wins)
SCALAR_FIELDS: Dict[Category, str] = {
    Category.REQUIREMENT: "requirements",
    Category.SOCKET: "sockets",
}

# Order in which a renderer lays out the body sections
SECTION_ORDER: Tuple[Category, ...] = (
    Category.PROPERTY,
    Category.LIMIT,
    Category.REQUIREMENT,
    Category.SOCKET,
    Category.IMPLICIT,
    Category.ENCHANT,
    Category.RUNE,
    Category.GRANTED_SKILL,
    Category.MOD,
    Category.DESECRATED,
    Category.MUTATED,
    Category.FOOTER_FLAG,
    Category.FLAVOUR,
)


@dataclass(frozen=True)
class ParsedItem:
    """Structured record produced from one pasted tooltip."""

    raw: str

    # Header / meta
    rarity: Rarity = Rarity.UNKNOWN
    item_class: Optional[str] = None
    item_level: Optional[int] = None
    name: Optional[str] = None
    base_type: Optional[str] = None

    # Single consolidated strings
    requirements: Optional[str] = None
    sockets: Optional[str] = None

    # Append-only sequences, in source order
    limits: Tuple[str, ...] = ()
    properties: Tuple[str, ...] = ()
    granted_skills: Tuple[str, ...] = ()
    implicits: Tuple[str, ...] = ()
    enchants: Tuple[str, ...] = ()
    runes: Tuple[str, ...] = ()
    mods: Tuple[str, ...] = ()
    desecrated: Tuple[str, ...] = ()
    mutated: Tuple[str, ...] = ()
    footer_flags: Tuple[str, ...] = ()
    flavour_text: Tuple[str, ...] = ()

    @classmethod
    def empty(cls, raw: str = "") -> "ParsedItem":
        """Record for input that holds nothing to parse."""
        return cls(raw=raw)

    @property
    def is_corrupted(self) -> bool:
        return "Corrupted" in self.footer_flags

    def get_display_name(self) -> str:
        """
        Human-friendly name for UI rows.

        - 'Name (Base Type)' if both present and different
        - name if present, else base_type
        - Fallback: 'Unknown Item'
        """
        name = (self.name or "").strip()
        base_type = (self.base_type or "").strip()

        if name and base_type and name != base_type:
            return f"{name} ({base_type})"
        if name:
            return name
        if base_type:
            return base_type
        return "Unknown Item"

    def sections(self) -> List[Tuple[Category, Tuple[str, ...]]]:
        """
        Non-empty body sections in rendering order.

        Scalar fields (requirements, sockets) are returned as one-line
        sections so callers can treat every section the same way.
        """
        result: List[Tuple[Category, Tuple[str, ...]]] = []
        for category in SECTION_ORDER:
            if category in SCALAR_FIELDS:
                value = getattr(self, SCALAR_FIELDS[category])
                lines: Tuple[str, ...] = (value,) if value else ()
            else:
                lines = getattr(self, SEQUENCE_FIELDS[category])
            if lines:
                result.append((category, lines))
        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary for serialization or testing."""
        return {
            "item_class": self.item_class,
            "item_level": self.item_level,
            "rarity": self.rarity.value,
            "name": self.name,
            "base_type": self.base_type,
            "limits": list(self.limits),
            "properties": list(self.properties),
            "granted_skills": list(self.granted_skills),
            "requirements": self.requirements,
            "sockets": self.sockets,
            "implicits": list(self.implicits),
            "enchants": list(self.enchants),
            "runes": list(self.runes),
            "mods": list(self.mods),
            "desecrated": list(self.desecrated),
            "mutated": list(self.mutated),
            "footer_flags": list(self.footer_flags),
            "flavour_text": list(self.flavour_text),
            "raw": self.raw,
        }
