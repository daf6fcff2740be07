"""
PoE2 Tooltip Package.

Turns item text copied from Path of Exile 2 into a structured record.

Public API:
- parse_item_text: Parse tooltip text with a default parser
- ItemParser: Parser with options (per-line trace logging)
- ParsedItem: Frozen parse result
- Rarity, KnownTag, Category: Enumerations used by ParsedItem
- ParsedItemSchema: Pydantic schema for JSON consumers

Example:
    from poe2_tooltip import parse_item_text
    item = parse_item_text(clipboard_text)
    print(item.get_display_name(), item.mods)
"""
from poe2_tooltip.item_parser import ItemParser, parse_item_text
from poe2_tooltip.models import Category, KnownTag, ParsedItem, Rarity
from poe2_tooltip.schemas import ParsedItemSchema

__all__ = [
    "parse_item_text",
    "ItemParser",
    "ParsedItem",
    "Rarity",
    "KnownTag",
    "Category",
    "ParsedItemSchema",
]
