# poe2_tooltip/logging_setup.py
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


def setup_logging(
    debug: bool = False,
    log_to_file: bool = True,
    log_dir: Optional[Path] = None,
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
) -> None:
    """
    Configure logging for the tooltip tools.

    - Logs to ~/.poe2_tooltip/parser.log (rotating, max ~1 MB, 3 backups)
      unless log_to_file is False
    - Also logs to console (stderr) for interactive runs

    The library itself never calls this; only entry points do.
    """
    level = logging.DEBUG if debug else logging.INFO

    # Root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers (useful if re-running in dev/REPL)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    log_file: Optional[Path] = None
    if log_to_file:
        log_dir = log_dir or Path.home() / ".poe2_tooltip"
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "parser.log"

        # File handler with rotation
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_fmt = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
        )
        file_handler.setFormatter(file_fmt)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

    # Console handler (simple readable format)
    console_handler = logging.StreamHandler()
    console_fmt = logging.Formatter("[%(levelname)s] %(name)s - %(message)s")
    console_handler.setFormatter(console_fmt)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    root_logger.debug("Logging initialized")
    if log_file is not None:
        root_logger.debug(f"Log file: {log_file}")
