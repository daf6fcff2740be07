"""
Diagnostic tests over real-world PoE2 tooltip samples.
Run this to test various item formats and see what lands where.
"""
from __future__ import annotations

import pytest

from poe2_tooltip import ItemParser, Rarity

# Real-world samples that should work
REAL_WORLD_SAMPLES = {
    "currency": """Item Class: Stackable Currency
Rarity: Currency
Orb of Alchemy
--------
Stack Size: 7/20
--------
Upgrades a normal item to a rare item with 4 random modifiers
--------
Right click this item then left click a normal item to apply it.""",

    "unique_jewel": """Item Class: Jewels
Rarity: Unique
Controlled Metamorphosis
Diamond
--------
Limited to: 1
--------
Item Level: 81
--------
Passives in Radius can be Allocated without being connected to your tree
--------
“Change is the only constant.”
--------
Place into an allocated Jewel Socket on the Passive Skill Tree. Right click to remove from the Socket.""",

    "rare_wand": """Item Class: Wands
Rarity: Rare
Doom Song
Volatile Wand
--------
Requires: Level 65, 107 Int
--------
Item Level: 79
--------
Grants Skill: Level 19 Volatile Dead
--------
+3 to Level of all Chaos Spell Skills
42% increased Spell Damage
+103 to maximum Mana (desecrated)""",

    "unique_flask": """Item Class: Life Flasks
Rarity: Unique
Melting Maelstrom
Ultimate Life Flask
--------
Quality: +20% (augmented)
Recovers 1200 Life over 4 Seconds
Consumes 15 of 75 Charges on use
--------
Requires: Level 50
--------
Item Level: 80
--------
Recover all Mana when Used
--------
Chaos has a way of finding order.
--------
Right click to drink. Can only hold charges while in belt. Refill at Wells or by killing monsters.""",

    "magic_boots": """Item Class: Boots
Rarity: Magic
Runner's Lattice Sandals of the Ox
--------
Evasion Rating: 154
Energy Shield: 48
--------
Requires: Level 45, 40 Dex, 40 Int
--------
Sockets: S
--------
Item Level: 60
--------
+12% to Cold Resistance (rune)
--------
25% increased Movement Speed
+14 to Strength""",
}


@pytest.mark.parametrize("item_type,text", REAL_WORLD_SAMPLES.items())
def test_real_world_items(item_type, text):
    """Real-world tooltips parse into a named item with a known rarity"""
    parser = ItemParser()
    result = parser.parse(text)

    assert result.rarity is not Rarity.UNKNOWN, f"{item_type}: rarity not recognised"
    display = result.get_display_name()
    assert display != "Unknown Item", f"{item_type} parsed but display name is Unknown"
    assert result.raw == text.strip()

    print(f"\n{item_type}:")
    for category, lines in result.sections():
        print(f"  [{category.value}] {list(lines)}")


def test_currency_text_lands_in_mods():
    result = ItemParser().parse(REAL_WORLD_SAMPLES["currency"])

    assert result.name == "Orb of Alchemy"
    assert result.base_type is None
    assert result.mods == (
        "Stack Size: 7/20",
        "Upgrades a normal item to a rare item with 4 random modifiers",
        "Right click this item then left click a normal item to apply it.",
    )
    assert result.flavour_text == ()


def test_unique_jewel_curly_quote_flavour():
    result = ItemParser().parse(REAL_WORLD_SAMPLES["unique_jewel"])

    assert result.item_class == "Jewel"
    assert result.limits == ("Limited to: 1",)
    assert result.item_level == 81
    assert result.flavour_text == ("“Change is the only constant.”",)
    assert result.mods == (
        "Passives in Radius can be Allocated without being connected to your tree",
    )


def test_rare_wand_granted_skill_and_desecrated():
    result = ItemParser().parse(REAL_WORLD_SAMPLES["rare_wand"])

    assert result.item_class == "Wands"
    assert result.requirements == "Level 65, 107 Int"
    assert result.granted_skills == ("Grants Skill: Level 19 Volatile Dead",)
    assert result.desecrated == ("+103 to maximum Mana",)
    assert result.mods == (
        "+3 to Level of all Chaos Spell Skills",
        "42% increased Spell Damage",
    )


def test_unique_flask_flavour_and_instructions():
    result = ItemParser().parse(REAL_WORLD_SAMPLES["unique_flask"])

    assert result.properties == ("Quality: +20%",)
    assert "Recovers 1200 Life over 4 Seconds" in result.mods
    assert result.flavour_text == ("Chaos has a way of finding order.",)
    assert not any("Right click" in mod for mod in result.mods)


def test_magic_boots_without_base_type_line():
    result = ItemParser().parse(REAL_WORLD_SAMPLES["magic_boots"])

    assert result.rarity == Rarity.MAGIC
    assert result.name == "Runner's Lattice Sandals of the Ox"
    assert result.base_type is None
    assert result.properties == ("Evasion Rating: 154", "Energy Shield: 48")
    assert result.sockets == "S"
    assert result.runes == ("+12% to Cold Resistance",)
    assert result.mods == ("25% increased Movement Speed", "+14 to Strength")


def test_malformed_input_still_returns_record():
    """Parser degrades instead of failing on malformed input"""
    parser = ItemParser()

    result = parser.parse("Just some random text\nNo rarity here")
    assert result.rarity == Rarity.UNKNOWN
    assert result.name == "Just some random text"
    assert result.base_type == "No rarity here"

    result = parser.parse("Rarity: Unique")
    assert result.rarity == Rarity.UNIQUE
    assert result.name is None
