"""Pytest fixtures for color ruler tests."""

import pytest

from color_ruler.config import Config


@pytest.fixture
def default_config(tmp_path):
    """Provide default Config instance without reading user config."""
    # Use non-existent path to force Config to use built-in defaults
    nonexistent = tmp_path / "nonexistent.conf"
    return Config(nonexistent)


@pytest.fixture
def temp_config_file(tmp_path):
    """Create temporary config file."""
    config_path = tmp_path / "color_ruler.conf"
    config_content = """[colors]
palette = #ff0000,#00ff00,#0000ff
interpolation = basis_closed

[ruler]
base = 3
"""
    config_path.write_text(config_content)
    return config_path


@pytest.fixture
def custom_config(temp_config_file):
    """Provide Config instance with custom settings."""
    return Config(temp_config_file)


@pytest.fixture
def scale_recorder():
    """Interpolator that records every scale it is called with."""
    class Recorder:
        def __init__(self):
            self.calls = []

        def __call__(self, scale):
            self.calls.append(scale)
            return f"color@{scale}"

    return Recorder()
