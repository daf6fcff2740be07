"""
poe2_tooltip.schemas - Pydantic schema for handing parsed items to renderers.

ParsedItem is an internal frozen dataclass; this schema is the validated,
JSON-serializable shape a presentation layer consumes.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from poe2_tooltip.models import ParsedItem, Rarity


class ParsedItemSchema(BaseModel):
    """Parsed PoE2 item tooltip."""

    model_config = ConfigDict(frozen=True)

    item_class: Optional[str] = Field(
        None, description="Item class, singularized", examples=["Jewel"]
    )
    item_level: Optional[int] = Field(None, description="Item level", examples=[82])
    rarity: Rarity = Field(
        default=Rarity.UNKNOWN, description="Item rarity", examples=["Rare"]
    )
    name: Optional[str] = Field(None, description="Item name", examples=["Crimson Jewel"])
    base_type: Optional[str] = Field(
        None, description="Base item type", examples=["Viridian Jewel"]
    )

    limits: list[str] = Field(
        default_factory=list, description="'Limited to:' lines", examples=[["Limited to: 1"]]
    )
    properties: list[str] = Field(
        default_factory=list, description="Property lines (quality, defences, damage)"
    )
    granted_skills: list[str] = Field(
        default_factory=list,
        description="Granted skill lines",
        examples=[["Grants Skill: Level 11 Fireball"]],
    )
    requirements: Optional[str] = Field(
        None, description="Requirements line without prefix", examples=["Level 60, 155 Str"]
    )
    sockets: Optional[str] = Field(None, description="Socket line without prefix", examples=["S S"])

    implicits: list[str] = Field(default_factory=list, description="Implicit modifiers")
    enchants: list[str] = Field(default_factory=list, description="Enchant modifiers")
    runes: list[str] = Field(default_factory=list, description="Modifiers granted by socketed runes")
    mods: list[str] = Field(default_factory=list, description="Explicit modifiers")
    desecrated: list[str] = Field(default_factory=list, description="Desecrated modifiers")
    mutated: list[str] = Field(default_factory=list, description="Mutated modifiers")

    footer_flags: list[str] = Field(
        default_factory=list, description="Footer flags", examples=[["Corrupted"]]
    )
    flavour_text: list[str] = Field(default_factory=list, description="Flavour text lines")

    raw: str = Field("", description="Normalized tooltip text")

    @classmethod
    def from_parsed_item(cls, item: ParsedItem) -> "ParsedItemSchema":
        return cls.model_validate(item.to_dict())
