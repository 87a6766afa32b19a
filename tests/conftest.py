"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import Mock

import pytest

from colorstate.models import Color, ColorBounds, ColorState, PickerConfig
from colorstate.services import ColorPickerService


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def red_state():
    """Opaque pure red."""
    return ColorState.from_color(Color(r=255, g=0, b=0, a=255))


@pytest.fixture
def blue_state():
    """Opaque pure blue (hue 240)."""
    return ColorState.from_color(Color(r=0, g=0, b=255, a=255))


@pytest.fixture
def gray_state_hue_200():
    """Mid gray that remembers a hue of 200 degrees."""
    return ColorState(red=0.5, green=0.5, blue=0.5, alpha=1.0, hue=200.0, saturation=0.0, value=0.5)


@pytest.fixture
def picker_config():
    """Default picker config."""
    return PickerConfig()


@pytest.fixture
def narrow_hue_config():
    """Config restricting hue to 10-20 degrees."""
    return PickerConfig(bounds=ColorBounds(min_hue=10, max_hue=20))


@pytest.fixture
def picker_service(picker_config):
    """Picker service starting on opaque red."""
    service = ColorPickerService(Color(r=255, g=0, b=0), picker_config)
    yield service
    service.dispose()


@pytest.fixture
def observer():
    """Mock color observer."""
    return Mock(spec=["on_color_event"])
