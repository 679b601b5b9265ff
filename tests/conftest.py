"""
Pytest configuration and fixtures for the word cloud tests.
"""

import os
import sys
import tempfile

import pytest

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from config import OUTPUT_CONFIG


@pytest.fixture
def temp_output_file():
    """Fixture that provides a temporary output file path and cleans it up after test."""
    with tempfile.NamedTemporaryFile(suffix=".png", delete=False) as tmp_file:
        output_path = tmp_file.name

    yield output_path

    # Cleanup
    if os.path.exists(output_path):
        os.unlink(output_path)


@pytest.fixture(autouse=True)
def restore_output_config():
    """The CLI's --quiet flag edits OUTPUT_CONFIG in place; undo it after each test."""
    saved = dict(OUTPUT_CONFIG)
    yield
    OUTPUT_CONFIG.clear()
    OUTPUT_CONFIG.update(saved)


@pytest.fixture
def box_measurer():
    """Font-free measurer: 0.6em per character wide, 1.2em tall."""

    def measure(word, font, pixel_size):
        return len(word) * pixel_size * 0.6, pixel_size * 1.2

    return measure


@pytest.fixture
def sample_text():
    return (
        "Clouds drift over the mountains. The mountain cloud hides the valley, "
        "and rivers run through the valley toward the sea. Rivers carve the "
        "mountain; clouds feed the rivers. A river, a cloud, a mountain: the "
        "valley remembers every cloud and every river. Sea spray, sea salt, "
        "sea wind. Forests cover the mountains and forest paths wander."
    )


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line(
        "markers", "quality: marks tests as quality assurance tests"
    )
    config.addinivalue_line("markers", "cli: marks tests as CLI functionality tests")
