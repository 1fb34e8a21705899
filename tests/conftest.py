"""
Pytest configuration and shared fixtures.
"""

import random
import sys
from pathlib import Path

import pytest

# Make the package importable without installing it
sys.path.insert(0, str(Path(__file__).parent.parent))

from casecraft.core import TextTransformer
from casecraft.storage import PreferenceStore
from tests.fixtures import SAMPLE_PARAGRAPH, SAMPLE_LIST, SAMPLE_MARKDOWN, SAMPLE_CONTACTS


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")
    config.addinivalue_line("markers", "integration: mark as integration test")
    config.addinivalue_line("markers", "randomized: exercises the randomized effects")


# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture
def engine():
    """Create a default, lenient engine."""
    return TextTransformer()


@pytest.fixture
def seeded_engine():
    """Create an engine whose random effects are reproducible."""
    return TextTransformer(seed=1234)


@pytest.fixture
def strict_engine():
    """Create an engine that rejects unknown transform ids."""
    return TextTransformer(strict=True)


@pytest.fixture
def rng():
    """Provide a seeded random source."""
    return random.Random(42)


# ============================================================================
# Storage Fixtures
# ============================================================================


@pytest.fixture
def prefs_path(tmp_path):
    """Path of a preference file inside a temporary directory."""
    return tmp_path / "prefs" / "preferences.json"


@pytest.fixture
def prefs(prefs_path):
    """Create a preference store backed by a temporary file."""
    return PreferenceStore(str(prefs_path))


# ============================================================================
# Content Fixtures
# ============================================================================


@pytest.fixture
def paragraph():
    return SAMPLE_PARAGRAPH


@pytest.fixture
def fruit_list():
    return SAMPLE_LIST


@pytest.fixture
def markdown_text():
    return SAMPLE_MARKDOWN


@pytest.fixture
def contacts_text():
    return SAMPLE_CONTACTS


@pytest.fixture
def temp_text_file(tmp_path, fruit_list):
    """Create a temporary UTF-8 input file."""
    file_path = tmp_path / "input.txt"
    file_path.write_text(fruit_list, encoding="utf-8")
    return file_path
