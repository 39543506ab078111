"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import Mock

import pytest

from hexpicker.models import Color, PickerData
from hexpicker.protocols import PickerHost


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def black_data():
    """Default data record: black, hue 0."""
    return PickerData()


@pytest.fixture
def orchid():
    """#cc85c5, the color used for output text examples."""
    return Color.from_hex("#cc85c5")


@pytest.fixture
def host():
    """A mock picker host recording redraw/refresh requests."""
    return Mock(spec=PickerHost)
