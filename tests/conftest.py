"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from advance.board import Board  # noqa: E402
from advance.config import Config, set_config  # noqa: E402


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against default settings, not the user's config file."""
    config = Config()
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture
def board_from():
    """
    Build a board from a {(row, col): icon} mapping.

    Units are created in row-major order, like a board file.
    """
    def _build(placements):
        rows = [["."] * Board.SIZE for _ in range(Board.SIZE)]
        for (row, col), icon in placements.items():
            rows[row][col] = icon
        return Board.from_text("\n".join("".join(r) for r in rows))
    return _build


@pytest.fixture
def walled_leader_text():
    """A white leader on (4,4) walled in except for the empty cell (3,4)."""
    return "\n".join([
        ".........",
        ".........",
        ".........",
        "...#.#...",
        "...#G#...",
        "...###...",
        ".........",
        ".........",
        ".........",
    ]) + "\n"
