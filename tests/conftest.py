"""
pytest configuration and fixtures
"""

import sys
from pathlib import Path

import pytest

# Repository root holds the flat modules and the Streamlit script
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

APP_PATH = PROJECT_ROOT / "app.py"


@pytest.fixture
def app_path():
    """Path to the Streamlit script."""
    return str(APP_PATH)


@pytest.fixture
def probability_grid():
    """Carrier probabilities spanning [0, 1] including both ends."""
    return [i / 20 for i in range(21)]
