"""
Line classification for tooltip body lines.

Each line is run through LINE_RULES in order; the first rule whose matcher
accepts the line handles it and nothing else sees that line. The final
rule accepts everything, so every line lands somewhere (modifiers being
the fallback).

A handler returns None when the line is consumed but yields nothing,
e.g. an "Item Level:" line without a number.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, NamedTuple, Optional, Tuple

from poe2_tooltip.constants import (
    CORRUPTED_LINE,
    GRANTS_SKILL_PREFIX,
    ITEM_LEVEL_PREFIX,
    LIMITED_TO_PREFIX,
    REQUIRES_PREFIX,
    SOCKETS_PREFIX,
)
from poe2_tooltip.line_shapes import (
    is_property_line,
    strip_trailing_tag,
    trailing_known_tag,
)
from poe2_tooltip.models import Category, KnownTag

GRANTS_SKILL_RE = re.compile(r"^Grants Skill:\s*", re.IGNORECASE)
LIMITED_TO_RE = re.compile(r"^Limited to:\s*(.+)$", re.IGNORECASE)
LEADING_INT_RE = re.compile(r"^[+-]?[0-9]+")

TAG_CATEGORIES = {
    KnownTag.IMPLICIT: Category.IMPLICIT,
    KnownTag.ENCHANT: Category.ENCHANT,
    KnownTag.RUNE: Category.RUNE,
    KnownTag.DESECRATED: Category.DESECRATED,
    KnownTag.MUTATED: Category.MUTATED,
}


@dataclass(frozen=True)
class ClassifiedLine:
    """Outcome of classifying one line."""

    category: Category
    text: str
    # Set only for Category.ITEM_LEVEL
    value: Optional[int] = None


class LineRule(NamedTuple):
    name: str
    matches: Callable[[str], bool]
    handle: Callable[[str], Optional[ClassifiedLine]]


def _starts_with(prefix: str) -> Callable[[str], bool]:
    lowered = prefix.lower()
    return lambda line: line.lower().startswith(lowered)


def _remainder(line: str, prefix: str) -> str:
    return line[len(prefix):].strip()


# ----------------------------------------------------------------------
# Handlers
# ----------------------------------------------------------------------


def _granted_skill(line: str) -> ClassifiedLine:
    text = GRANTS_SKILL_RE.sub(f"{GRANTS_SKILL_PREFIX} ", line, count=1).strip()
    return ClassifiedLine(Category.GRANTED_SKILL, text)


def _footer_flag(line: str) -> ClassifiedLine:
    return ClassifiedLine(Category.FOOTER_FLAG, CORRUPTED_LINE)


def _limit(line: str) -> ClassifiedLine:
    m = LIMITED_TO_RE.match(line)
    # matches() guarantees m
    value = strip_trailing_tag(m.group(1).strip())
    return ClassifiedLine(Category.LIMIT, f"{LIMITED_TO_PREFIX} {value}")


def _item_level(line: str) -> Optional[ClassifiedLine]:
    remainder = _remainder(line, ITEM_LEVEL_PREFIX)
    m = LEADING_INT_RE.match(remainder)
    if not m:
        return None
    return ClassifiedLine(Category.ITEM_LEVEL, remainder, value=int(m.group(0)))


def _requirements(line: str) -> ClassifiedLine:
    return ClassifiedLine(
        Category.REQUIREMENT, strip_trailing_tag(_remainder(line, REQUIRES_PREFIX))
    )


def _sockets(line: str) -> ClassifiedLine:
    return ClassifiedLine(
        Category.SOCKET, strip_trailing_tag(_remainder(line, SOCKETS_PREFIX))
    )


def _property(line: str) -> ClassifiedLine:
    return ClassifiedLine(Category.PROPERTY, strip_trailing_tag(line))


def _tagged_modifier(line: str) -> ClassifiedLine:
    category = TAG_CATEGORIES.get(trailing_known_tag(line), Category.MOD)
    return ClassifiedLine(category, strip_trailing_tag(line))


LINE_RULES: Tuple[LineRule, ...] = (
    LineRule("granted_skill", lambda line: GRANTS_SKILL_RE.match(line) is not None, _granted_skill),
    LineRule("corrupted", lambda line: line == CORRUPTED_LINE, _footer_flag),
    LineRule("limited_to", lambda line: LIMITED_TO_RE.match(line) is not None, _limit),
    LineRule("item_level", _starts_with(ITEM_LEVEL_PREFIX), _item_level),
    LineRule("requires", _starts_with(REQUIRES_PREFIX), _requirements),
    LineRule("sockets", _starts_with(SOCKETS_PREFIX), _sockets),
    LineRule("property", is_property_line, _property),
    LineRule("modifier", lambda line: True, _tagged_modifier),
)


def match_line_rule(line: str) -> Tuple[LineRule, Optional[ClassifiedLine]]:
    """First rule accepting the line, together with its result."""
    for rule in LINE_RULES:
        if rule.matches(line):
            return rule, rule.handle(line)
    # Unreachable: the last rule accepts every line
    raise AssertionError(f"No line rule matched {line!r}")


def classify_line(line: str) -> Optional[ClassifiedLine]:
    _, classified = match_line_rule(line)
    return classified
