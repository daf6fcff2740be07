"""
Rule-by-rule tests for the line classifier.
"""
from __future__ import annotations

import pytest

from poe2_tooltip.line_classifier import (
    LINE_RULES,
    ClassifiedLine,
    classify_line,
    match_line_rule,
)
from poe2_tooltip.models import Category

pytestmark = pytest.mark.unit


def test_rule_order():
    assert [rule.name for rule in LINE_RULES] == [
        "granted_skill",
        "corrupted",
        "limited_to",
        "item_level",
        "requires",
        "sockets",
        "property",
        "modifier",
    ]


# -------------------------
# Rule 1: granted skills
# -------------------------


@pytest.mark.parametrize(
    "line,expected",
    [
        ("Grants Skill: Level 11 Fireball", "Grants Skill: Level 11 Fireball"),
        ("Grants Skill:   Fireball", "Grants Skill: Fireball"),
        ("grants skill:Fireball", "Grants Skill: Fireball"),
        ("Grants Skill: Fireball (implicit)", "Grants Skill: Fireball (implicit)"),
    ],
)
def test_granted_skill(line, expected):
    assert classify_line(line) == ClassifiedLine(Category.GRANTED_SKILL, expected)


# -------------------------
# Rule 2: Corrupted
# -------------------------


def test_corrupted_flag():
    assert classify_line("Corrupted") == ClassifiedLine(Category.FOOTER_FLAG, "Corrupted")


def test_corrupted_is_case_sensitive():
    assert classify_line("CORRUPTED") == ClassifiedLine(Category.MOD, "CORRUPTED")


# -------------------------
# Rule 3: limits
# -------------------------


@pytest.mark.parametrize(
    "line,expected",
    [
        ("Limited to: 1", "Limited to: 1"),
        ("LIMITED TO:2", "Limited to: 2"),
        ("Limited to: 1 Historic", "Limited to: 1 Historic"),
        ("Limited to: 1 (augmented)", "Limited to: 1"),
    ],
)
def test_limit(line, expected):
    assert classify_line(line) == ClassifiedLine(Category.LIMIT, expected)


def test_limit_without_value_falls_through_to_mods():
    assert classify_line("Limited to:") == ClassifiedLine(Category.MOD, "Limited to:")


# -------------------------
# Rule 4: item level
# -------------------------


def test_item_level():
    classified = classify_line("Item Level: 84")

    assert classified.category is Category.ITEM_LEVEL
    assert classified.value == 84


def test_item_level_parses_leading_integer():
    assert classify_line("item level: 75 (something)").value == 75


@pytest.mark.parametrize("line", ["Item Level: unknown", "Item Level:", "Item Level: ?5"])
def test_unparsable_item_level_is_consumed_and_dropped(line):
    rule, classified = match_line_rule(line)

    assert rule.name == "item_level"
    assert classified is None


# -------------------------
# Rules 5 and 6: requirements and sockets
# -------------------------


def test_requirements():
    assert classify_line("Requires: Level 60, 155 Str (augmented)") == ClassifiedLine(
        Category.REQUIREMENT, "Level 60, 155 Str"
    )


def test_requirements_prefix_case_insensitive():
    assert classify_line("REQUIRES: Level 5") == ClassifiedLine(Category.REQUIREMENT, "Level 5")


def test_sockets():
    assert classify_line("Sockets: S S S") == ClassifiedLine(Category.SOCKET, "S S S")


# -------------------------
# Rule 7: properties
# -------------------------


def test_property_marker_stripped():
    assert classify_line("Armour: 582 (augmented)") == ClassifiedLine(Category.PROPERTY, "Armour: 582")


def test_property_wins_over_routing_tag():
    assert classify_line("Energy Shield: 40 (implicit)") == ClassifiedLine(
        Category.PROPERTY, "Energy Shield: 40"
    )


# -------------------------
# Rule 8: tagged modifiers and the mods fallback
# -------------------------


@pytest.mark.parametrize(
    "line,category,text",
    [
        ("+10 to Strength (implicit)", Category.IMPLICIT, "+10 to Strength"),
        ("+1 to Level of all Skills (Enchant)", Category.ENCHANT, "+1 to Level of all Skills"),
        ("+12% to Cold Resistance (rune)", Category.RUNE, "+12% to Cold Resistance"),
        ("18% increased Stun Threshold (desecrated)", Category.DESECRATED, "18% increased Stun Threshold"),
        ("+1 to Level of all Spell Skills (mutated)", Category.MUTATED, "+1 to Level of all Spell Skills"),
        ("+30 to Intelligence (augmented)", Category.MOD, "+30 to Intelligence"),
        ("44% increased Armour (crafted)", Category.MOD, "44% increased Armour (crafted)"),
        ("Stack Size: 7/20", Category.MOD, "Stack Size: 7/20"),
    ],
)
def test_tagged_modifier_routing(line, category, text):
    rule, classified = match_line_rule(line)

    assert rule.name == "modifier"
    assert classified == ClassifiedLine(category, text)
