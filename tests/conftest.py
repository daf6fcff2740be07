import faulthandler
import logging
import sys
from pathlib import Path

import pytest

from poe2_tooltip.item_parser import ItemParser


@pytest.fixture(autouse=True)
def restore_root_logging():
    """
    Restore root logger handlers/level after each test.

    setup_logging() replaces the root handlers; without this, handlers
    pointing at a tmp_path log file would leak into later tests.
    """
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level

    yield

    for handler in list(root_logger.handlers):
        if handler not in handlers:
            handler.close()
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def parser():
    return ItemParser()


@pytest.fixture
def tooltip():
    """Join tooltip sections with the game's separator line."""

    def _build(*sections: str) -> str:
        return "\n--------\n".join(sections)

    return _build


def pytest_collection_modifyitems(config, items):
    """Assign tier markers based on test location."""
    for item in items:
        path = Path(str(item.fspath)).as_posix()

        if "/tests/unit/" in path:
            item.add_marker(pytest.mark.unit)
        else:
            item.add_marker(pytest.mark.integration)


def pytest_sessionstart(session):  # pragma: no cover - test harness init
    """Enable faulthandler for the entire test run to aid diagnosing hangs."""
    faulthandler.enable(file=sys.stderr, all_threads=True)
