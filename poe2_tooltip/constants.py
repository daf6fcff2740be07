"""
Fixed tables used by the PoE2 tooltip parser.

Centralizes the prefixes, keywords and marker names the classifier keys on,
so the heuristics can be read (and tuned) in one place.
"""

import re

# =============================================================================
# Segmentation
# =============================================================================

# A line of 4+ dashes standing alone between two newlines
BLOCK_SEPARATOR_RE = re.compile(r"\n-{4,}\n")


# =============================================================================
# Header
# =============================================================================

ITEM_CLASS_PREFIX = "Item Class:"
RARITY_PREFIX = "Rarity:"

# Plural item classes as copied from the game -> singular form
ITEM_CLASS_NORMALIZATION = {
    "Armours": "Armour",
    "Jewels": "Jewel",
}


# =============================================================================
# Field lines
# =============================================================================

GRANTS_SKILL_PREFIX = "Grants Skill:"
LIMITED_TO_PREFIX = "Limited to:"
ITEM_LEVEL_PREFIX = "Item Level:"
REQUIRES_PREFIX = "Requires:"
SOCKETS_PREFIX = "Sockets:"
CORRUPTED_LINE = "Corrupted"

# Lower-cased prefixes of property lines ("quality" covers "Quality: +20%")
PROPERTY_PREFIXES = (
    "quality",
    "physical damage:",
    "elemental damage:",
    "armour:",
    "evasion rating:",
    "energy shield:",
    "block chance:",
)

# Lower-cased prefixes that mark a line as system/stat text, never flavour
SYSTEM_LINE_PREFIXES = (
    "requires:",
    "sockets:",
    "item level:",
    "rarity:",
    "item class:",
    "limited to:",
)


# =============================================================================
# Trailing tag markers
# =============================================================================

# Tags that route a line to its own category
ROUTING_TAGS = ("implicit", "enchant", "rune", "desecrated", "mutated")

# Tags that are stripped from line ends ("augmented" carries no routing)
STRIPPABLE_TAGS = ("augmented",) + ROUTING_TAGS


# =============================================================================
# Anchor blocks
# =============================================================================

JEWEL_INSTRUCTION_PHRASES = (
    "place into an allocated jewel socket",
    "passive skill tree",
)

FLASK_INSTRUCTION_PHRASES = (
    "right click to drink",
    "can only hold charges",
    "refill at wells",
)


# =============================================================================
# Flavour heuristics
# =============================================================================

QUOTE_CHARACTERS = ('"', "“", "”")

EM_DASH = "—"

# Stat/verb terms that make a block read like modifiers (whole words,
# case-insensitive). "to" is not one of them.
MOD_KEYWORDS = (
    "adds",
    "increased",
    "reduced",
    "more",
    "less",
    "chance",
    "resistance",
    "damage",
    "armour",
    "evasion",
    "energy shield",
    "gain",
    "cannot",
    "skills",
    "modifiers",
    "maximum",
    "minimum",
)
