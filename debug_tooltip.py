"""
Tooltip diagnostic tool to help debug parser issues.

Feed it the text of an item copied from PoE2 and it shows you:
1. The normalized text the parser works on
2. Where every line ended up (section by section)
3. Which block, if any, was taken as flavour text

Usage:
    python debug_tooltip.py item.txt
    python debug_tooltip.py < item.txt
    python debug_tooltip.py item.txt --json
    python debug_tooltip.py item.txt --trace   # log the rule chosen per line
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from poe2_tooltip.config import Config
from poe2_tooltip.item_parser import ItemParser
from poe2_tooltip.logging_setup import setup_logging
from poe2_tooltip.models import ParsedItem
from poe2_tooltip.schemas import ParsedItemSchema

logger = logging.getLogger(__name__)

RULE = "=" * 80


def format_report(item: ParsedItem) -> str:
    """Human-readable breakdown of a parsed item."""
    lines: List[str] = [RULE, "PARSER RESULT", RULE]
    lines.append(f"  Rarity: {item.rarity.value}")
    lines.append(f"  Display Name: {item.get_display_name()}")
    if item.item_class:
        lines.append(f"  Item Class: {item.item_class}")
    if item.item_level is not None:
        lines.append(f"  Item Level: {item.item_level}")

    sections = item.sections()
    if not sections:
        lines.append("")
        lines.append("(no body sections found)")

    for category, section_lines in sections:
        lines.append("")
        lines.append(f"[{category.value}]")
        lines.extend(f"  {line}" for line in section_lines)

    lines.append(RULE)
    return "\n".join(lines)


def _read_input(path: Optional[Path]) -> str:
    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def main(argv: Optional[List[str]] = None) -> int:
    arg_parser = argparse.ArgumentParser(description="Show how a PoE2 tooltip is parsed")
    arg_parser.add_argument("file", nargs="?", type=Path, help="Tooltip text file (default: stdin)")
    arg_parser.add_argument("--json", action="store_true", help="Print the parsed item as JSON")
    arg_parser.add_argument("--config", type=Path, help="Config JSON file")
    arg_parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    arg_parser.add_argument("--trace", action="store_true", help="Log the rule chosen for every line")
    args = arg_parser.parse_args(argv)

    config = Config(config_file=args.config)
    trace = args.trace or config.trace_classification
    setup_logging(
        debug=args.debug or trace or config.debug_logging,
        log_to_file=config.log_to_file,
        max_bytes=config.log_max_bytes,
        backup_count=config.log_backup_count,
    )

    try:
        text = _read_input(args.file)
    except OSError as e:
        logger.error(f"Could not read tooltip text: {e}")
        return 1

    item = ItemParser(trace=trace).parse(text)

    if args.json:
        print(ParsedItemSchema.from_parsed_item(item).model_dump_json(indent=2))
    else:
        print(format_report(item))
    return 0


if __name__ == "__main__":
    sys.exit(main())
