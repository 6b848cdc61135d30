"""
Pytest fixtures for daylight overlap tests.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sunoverlap.calculator import DaylightOverlapCalculator
from sunoverlap.types import GeoPoint, Location


# ============================================================================
# Locations
# ============================================================================


@pytest.fixture
def london() -> Location:
    """London Heathrow area, UTC+0 (BST in summer)."""
    return Location(GeoPoint(51.5, 0.0), timezone="Europe/London", name="London")


@pytest.fixture
def dubai() -> Location:
    """Dubai, UTC+4, no DST."""
    return Location(GeoPoint(25.25, 55.37), timezone="Asia/Dubai", name="Dubai")


@pytest.fixture
def sydney() -> Location:
    """Sydney, UTC+10 (AEDT +11 in southern summer)."""
    return Location(GeoPoint(-33.87, 151.21), timezone="Australia/Sydney", name="Sydney")


@pytest.fixture
def svalbard() -> Location:
    """Longyearbyen, well inside the Arctic circle."""
    return Location(GeoPoint(78.0, 15.0), timezone="Arctic/Longyearbyen", name="Longyearbyen")


@pytest.fixture
def calculator() -> DaylightOverlapCalculator:
    return DaylightOverlapCalculator()
