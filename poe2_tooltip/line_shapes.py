"""
String predicates shared by the line classifier and the flavour heuristics.
"""

from __future__ import annotations

import re

from poe2_tooltip.constants import PROPERTY_PREFIXES, ROUTING_TAGS, STRIPPABLE_TAGS
from poe2_tooltip.models import KnownTag

# Precompiled: these run once per line
KNOWN_TAG_RE = re.compile(
    r"\((" + "|".join(ROUTING_TAGS) + r")\)\s*$", re.IGNORECASE
)
STRIPPABLE_TAG_RE = re.compile(
    r"\s*\((" + "|".join(STRIPPABLE_TAGS) + r")\)\s*$", re.IGNORECASE
)


def is_property_line(line: str) -> bool:
    """'Quality: +20%', 'Armour: 120', 'Block Chance: 25%' ..."""
    return line.lower().startswith(PROPERTY_PREFIXES)


def trailing_known_tag(line: str) -> KnownTag:
    """Routing tag of a line ending in e.g. '(implicit)', else KnownTag.NONE."""
    m = KNOWN_TAG_RE.search(line)
    if m:
        return KnownTag(m.group(1).lower())
    return KnownTag.NONE


def strip_trailing_tag(line: str) -> str:
    """
    Remove a trailing marker such as '(augmented)' or '(rune)'.

    The marker goes together with the whitespace before it, and trailing
    whitespace left behind is trimmed.
    """
    return STRIPPABLE_TAG_RE.sub("", line, count=1).rstrip()


def looks_like_tagged_line(line: str) -> bool:
    return STRIPPABLE_TAG_RE.search(line) is not None
