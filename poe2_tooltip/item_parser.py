"""
Item text parser for PoE2 item tooltips.

Parses tooltip text copied from Path of Exile 2 into a structured
ParsedItem object.

Supports:
- Item class / rarity / name / base type
- Item level, requirements, sockets, limits
- Properties (quality, damage, defences, block chance)
- Implicit, enchant, rune, desecrated and mutated mods
- Explicit mods
- Granted skills
- Corrupted footer flag
- Flavour text (found by position, above jewel/flask/corrupted anchors)

Parsing never fails: malformed text yields a mostly-empty record.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional

from poe2_tooltip.anchors import is_instruction_block
from poe2_tooltip.flavour import find_flavour_block_index
from poe2_tooltip.header_parser import ItemHeader, parse_header
from poe2_tooltip.line_classifier import ClassifiedLine, match_line_rule
from poe2_tooltip.models import (
    SCALAR_FIELDS,
    SEQUENCE_FIELDS,
    Category,
    ParsedItem,
)
from poe2_tooltip.text_blocks import Block, normalize_text, split_blocks

if TYPE_CHECKING:
    from poe2_tooltip.config import Config

logger = logging.getLogger(__name__)


class ResultAssembler:
    """
    Collects classified lines for one parse and builds the ParsedItem.

    Sequences only ever grow by appends in scan order; requirements,
    sockets and item level are overwritten by later occurrences.
    """

    def __init__(self, raw: str, header: ItemHeader) -> None:
        self._raw = raw
        self._header = header
        self._sequences: Dict[Category, List[str]] = {
            category: [] for category in SEQUENCE_FIELDS
        }
        self._scalars: Dict[Category, Optional[str]] = {
            category: None for category in SCALAR_FIELDS
        }
        self._item_level: Optional[int] = None

    def add(self, classified: ClassifiedLine) -> None:
        category = classified.category
        if category is Category.ITEM_LEVEL:
            self._item_level = classified.value
        elif category in SCALAR_FIELDS:
            self._scalars[category] = classified.text
        else:
            self._sequences[category].append(classified.text)

    def add_flavour(self, lines: Iterable[str]) -> None:
        # Verbatim, no tag stripping
        self._sequences[Category.FLAVOUR].extend(lines)

    def build(self) -> ParsedItem:
        fields = {
            SEQUENCE_FIELDS[category]: tuple(lines)
            for category, lines in self._sequences.items()
        }
        fields.update(
            {SCALAR_FIELDS[category]: value for category, value in self._scalars.items()}
        )
        return ParsedItem(
            raw=self._raw,
            rarity=self._header.rarity,
            item_class=self._header.item_class,
            item_level=self._item_level,
            name=self._header.name,
            base_type=self._header.base_type,
            **fields,
        )


# ----------------------------------------------------------------------
# Parser Implementation
# ----------------------------------------------------------------------


class ItemParser:
    """
    Full item parser for PoE2 tooltip text.

    Stateless apart from its options; one instance may be shared freely
    between threads.
    """

    def __init__(self, trace: bool = False) -> None:
        """
        Args:
            trace: Log the rule and category chosen for every line (DEBUG).
        """
        self.trace = trace

    @classmethod
    def from_config(cls, config: "Config") -> "ItemParser":
        return cls(trace=config.trace_classification)

    def parse(self, text: Optional[str]) -> ParsedItem:
        """
        Parse a single item from raw tooltip text.

        Always returns a ParsedItem; ``raw`` holds the normalized input.
        """
        raw = normalize_text(text)
        if not raw:
            return ParsedItem.empty(raw)

        try:
            return self._parse_normalized(raw)
        except Exception as e:
            # Degrade to the empty record; callers never see an exception
            logger.warning(f"Item parse failed: {e}", exc_info=True)
            return ParsedItem.empty(raw)

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _parse_normalized(self, raw: str) -> ParsedItem:
        blocks = split_blocks(raw)
        if not blocks:
            return ParsedItem.empty(raw)

        header = parse_header(blocks[0])
        body = blocks[1:]
        logger.debug(f"Tooltip has {len(body)} body block(s) after the header")

        flavour_index = find_flavour_block_index(body)
        assembler = ResultAssembler(raw, header)

        for index, lines in enumerate(body):
            # Instruction blocks carry no item data (they only anchor flavour)
            if is_instruction_block(lines):
                continue

            if index == flavour_index:
                assembler.add_flavour(lines)
                continue

            self._classify_block(lines, assembler)

        item = assembler.build()
        logger.debug(
            f"Parsed {item.rarity.value} item '{item.get_display_name()}': "
            f"{len(item.mods)} mod(s), {len(item.implicits)} implicit(s), "
            f"{len(item.flavour_text)} flavour line(s)"
        )
        return item

    def _classify_block(self, lines: Block, assembler: ResultAssembler) -> None:
        for line in lines:
            rule, classified = match_line_rule(line)
            if self.trace:
                category = classified.category.value if classified else "dropped"
                logger.debug(f"[{rule.name}] {category}: {line!r}")
            if classified is not None:
                assembler.add(classified)


def parse_item_text(text: Optional[str]) -> ParsedItem:
    """Parse tooltip text with a default parser."""
    return ItemParser().parse(text)
