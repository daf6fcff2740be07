"""
Anchor block detection.

Three fixed block shapes mark structural boundaries in a tooltip:

- jewel instructions ("Place into an allocated Jewel Socket on the Passive Skill Tree...")
- flask instructions ("Right click to drink. Can only hold charges while in belt. Refill at Wells...")
- a lone "Corrupted" line

Instruction blocks carry no item data. All three are used to locate the
flavour text block, which sits directly above one of them.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from poe2_tooltip.constants import (
    CORRUPTED_LINE,
    FLASK_INSTRUCTION_PHRASES,
    JEWEL_INSTRUCTION_PHRASES,
)
from poe2_tooltip.text_blocks import Block

BlockPredicate = Callable[[Block], bool]


def _block_text(lines: Block) -> str:
    return " ".join(lines).lower()


def is_jewel_instruction_block(lines: Block) -> bool:
    text = _block_text(lines)
    return all(phrase in text for phrase in JEWEL_INSTRUCTION_PHRASES)


def is_flask_instruction_block(lines: Block) -> bool:
    text = _block_text(lines)
    return all(phrase in text for phrase in FLASK_INSTRUCTION_PHRASES)


def is_instruction_block(lines: Block) -> bool:
    """Blocks that are skipped entirely during line classification."""
    return is_jewel_instruction_block(lines) or is_flask_instruction_block(lines)


def is_corrupted_block(lines: Block) -> bool:
    return any(line == CORRUPTED_LINE for line in lines)


def find_block_index(blocks: Sequence[Block], predicate: BlockPredicate) -> Optional[int]:
    """Index of the first block matching predicate, or None."""
    for index, lines in enumerate(blocks):
        if predicate(lines):
            return index
    return None
